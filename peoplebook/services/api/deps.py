# peoplebook/services/api/deps.py
from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from peoplebook.database.core.main import get_sessionmaker
from peoplebook.services.people.service import PersonService


def get_db() -> Generator[Session, None, None]:
    db = get_sessionmaker()()
    try:
        yield db
    finally:
        db.close()


def transactional_session(db: Session = Depends(get_db)) -> Generator[Session, None, None]:
    """
    Request-scoped transaction. Any repo/service using this session
    participates in the same transaction.

    Usage in routers:
      def endpoint(session: Session = Depends(transactional_session)):
          ...
    """
    # COMMIT on normal exit, ROLLBACK if an exception bubbles out.
    with db.begin():
        yield db


def get_person_service(db: Session = Depends(transactional_session)) -> PersonService:
    return PersonService(db)
