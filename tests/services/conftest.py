# tests/services/conftest.py
from __future__ import annotations

import pytest
from sqlalchemy.orm import Session
from starlette.testclient import TestClient

from peoplebook.database.seed.loader import load_seed_data
from peoplebook.services.api.app import create_app
from peoplebook.services.api.deps import transactional_session


@pytest.fixture()
def session(db_engine) -> Session:
    """Seeded Session on an outer transaction that is rolled back after the test."""
    conn = db_engine.connect()
    trans = conn.begin()
    session = Session(bind=conn, future=True)
    load_seed_data(session)
    try:
        yield session
    finally:
        session.close()
        trans.rollback()
        conn.close()


@pytest.fixture()
def api_client(session):
    """
    A TestClient whose FastAPI dependency `transactional_session` is overridden
    to yield the test Session. All API calls in one test share it (so POST -> GET
    works), and everything is rolled back at the end of the test.
    """
    app = create_app()

    def _override():
        yield session

    app.dependency_overrides[transactional_session] = _override

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
