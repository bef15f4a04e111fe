# tests/conftest.py
from __future__ import annotations

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from peoplebook.common.settings import get_settings
from peoplebook.database.models import Base  # <-- imports models/metadata


def _postgres_url():
    from testcontainers.postgres import PostgresContainer

    cfg = get_settings()
    with PostgresContainer(cfg.test_db_image) as pg:
        # testcontainers hands out a psycopg2 URL; we ship psycopg (v3)
        yield pg.get_connection_url().replace("psycopg2", "psycopg")


@pytest.fixture(scope="session")
def db_engine() -> Engine:
    """
    SQLite in memory by default; a throwaway Postgres when USE_TESTCONTAINERS=true.
    Tables come straight from the models (no Alembic).
    """
    cfg = get_settings()
    container = None
    if cfg.use_testcontainers:
        container = _postgres_url()
        engine = create_engine(next(container), future=True)
        if cfg.db_schema:
            with engine.begin() as conn:
                conn.execute(text(f'create schema if not exists "{cfg.db_schema}"'))
    else:
        engine = create_engine(
            "sqlite+pysqlite:///:memory:",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            future=True,
        )

    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()
        if container is not None:
            container.close()
