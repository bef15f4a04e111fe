# tests/database/conftest.py
from __future__ import annotations

import pytest
from sqlalchemy.orm import Session

from peoplebook.database.seed.loader import load_seed_data


@pytest.fixture()
def db(db_engine) -> Session:
    """
    Per-test SQLAlchemy Session bound to a transaction (rolled back after each test).
    Uses the engine provided by the top-level conftest.
    """
    connection = db_engine.connect()
    trans = connection.begin()

    session = Session(bind=connection, future=True)
    try:
        yield session
    finally:
        session.close()
        trans.rollback()
        connection.close()


@pytest.fixture()
def seeded(db) -> Session:
    """Session with the five data.sql rows loaded."""
    load_seed_data(db)
    return db
