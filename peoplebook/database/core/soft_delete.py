# peoplebook/database/core/soft_delete.py
from __future__ import annotations

from sqlalchemy import Boolean, event, false
from sqlalchemy.orm import Mapped, ORMExecuteState, Session, declared_attr, mapped_column, with_loader_criteria

INCLUDE_DELETED = "include_deleted"


class SoftDeleteMixin:
    """
    Rows are never removed; `deleted` is flipped instead.
    ORM selects against subclasses skip deleted rows unless the statement
    carries `execution_options(include_deleted=True)`.
    """
    __abstract__ = True

    @declared_attr
    def deleted(cls) -> Mapped[bool]:
        return mapped_column(Boolean, nullable=False, default=False, server_default=false())

    def mark_deleted(self) -> None:
        self.deleted = True


@event.listens_for(Session, "do_orm_execute")
def _filter_deleted(execute_state: ORMExecuteState) -> None:
    if (
        execute_state.is_select
        and not execute_state.is_column_load
        and not execute_state.is_relationship_load
        and not execute_state.execution_options.get(INCLUDE_DELETED, False)
    ):
        execute_state.statement = execute_state.statement.options(
            with_loader_criteria(
                SoftDeleteMixin,
                lambda cls: cls.deleted.is_(False),
                include_aliases=True,
            )
        )
