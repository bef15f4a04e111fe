# peoplebook/database/core/main.py
from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, List

from sqlalchemy import Column, MetaData, Table, create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from peoplebook.common.settings import Settings, get_settings

_settings = get_settings()

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

_serviceobject_first = ("id", "date_created", "last_updated", "data_origin", "meta_data")


class Base(DeclarativeBase):
    metadata = MetaData(
        schema=_settings.db_schema,
        naming_convention=NAMING_CONVENTION,
    )

    @classmethod
    def __table_cls__(cls, *args, **kw):
        """Reorder columns so ServiceObject fields come first."""
        if not args:
            return Table(*args, **kw)

        # (name, metadata, *columns_and_constraints)
        name, metadata, *rest = args
        cols: List[Column] = [x for x in rest if isinstance(x, Column)]
        others = [x for x in rest if not isinstance(x, Column)]

        priority = {n: i for i, n in enumerate(_serviceobject_first)}
        original_index = {c: i for i, c in enumerate(cols)}
        cols.sort(key=lambda c: (priority.get(c.name, 10_000), original_index[c]))

        return Table(name, metadata, *(cols + others), **kw)


def build_engine(settings: Settings, url: str | None = None) -> Engine:
    """
    Create an Engine for `url` (defaults to settings.database_url).
    Pool sizing only applies to server databases; SQLite uses its own pools.
    """
    url = url or settings.database_url
    backend = make_url(url).get_backend_name()

    kwargs: Dict[str, Any] = {"echo": settings.db.echo, "future": True}
    if backend != "sqlite":
        kwargs.update(
            pool_size=settings.db.pool_size,
            max_overflow=settings.db.max_overflow,
            pool_pre_ping=settings.db.pool_pre_ping,
            pool_recycle=settings.db.pool_recycle,
        )
    engine = create_engine(url, **kwargs)

    # App schema first, then public (so extensions remain visible)
    if backend == "postgresql" and settings.db_schema:
        schema = settings.db_schema

        @event.listens_for(engine, "connect")
        def _set_search_path(dbapi_conn, _):
            with dbapi_conn.cursor() as cur:
                cur.execute(f'SET search_path TO "{schema}", public')

    return engine


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    return build_engine(get_settings())


@lru_cache(maxsize=1)
def get_sessionmaker() -> sessionmaker:
    return sessionmaker(bind=get_engine(), expire_on_commit=False, future=True, autoflush=False)

