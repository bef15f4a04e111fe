# peoplebook/database/seed/loader.py
from __future__ import annotations

from importlib import resources
from typing import List

from sqlalchemy import func, select, text
from sqlalchemy.orm import Session

from peoplebook.common.logging import get_logger
from peoplebook.database.core.soft_delete import INCLUDE_DELETED
from peoplebook.database.models.person import Person

log = get_logger(__name__)

SEED_FILE = "data.sql"


def read_seed_statements(filename: str = SEED_FILE) -> List[str]:
    """One statement per `;`; blank chunks and `--` comment lines are dropped."""
    raw = resources.files("peoplebook.database.seed").joinpath(filename).read_text(encoding="utf-8")
    lines = [ln for ln in raw.splitlines() if not ln.strip().startswith("--")]
    return [s.strip() for s in "\n".join(lines).split(";") if s.strip()]


def load_seed_data(session: Session, *, only_if_empty: bool = True) -> int:
    """
    Execute the packaged seed statements in the caller's transaction.
    Returns the number of statements executed (0 when skipped).
    """
    if only_if_empty:
        count_stmt = select(func.count()).select_from(Person).execution_options(**{INCLUDE_DELETED: True})
        if session.execute(count_stmt).scalar_one():
            log.info("person table not empty; seed skipped")
            return 0

    statements = read_seed_statements()
    for stmt in statements:
        session.execute(text(stmt))

    # explicit ids leave the serial sequence behind on Postgres
    if session.get_bind().dialect.name == "postgresql":
        session.execute(text(
            "SELECT setval(pg_get_serial_sequence('person', 'id'), (SELECT MAX(id) FROM person))"
        ))

    log.info("seeded %d person rows", len(statements))
    return len(statements)
