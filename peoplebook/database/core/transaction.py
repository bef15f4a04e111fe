# peoplebook/database/core/transaction.py
from contextlib import contextmanager

from sqlalchemy.orm import Session


@contextmanager
def transactional(db: Session):
    """COMMIT on normal exit, ROLLBACK if an exception bubbles out."""
    with db.begin():
        yield db
