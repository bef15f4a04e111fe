# peoplebook/database/repos/person_repo.py
from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select, text
from sqlalchemy.orm import Session

from peoplebook.database.core.soft_delete import INCLUDE_DELETED
from peoplebook.database.models.person import Person as DBPerson

# Native SQL; the soft-delete loader criteria is bypassed explicitly.
_DELETED_PEOPLE_SQL = "select * from person where deleted = true order by id"


class SqlAlchemyPersonRepo:
    def __init__(self, session: Session) -> None:
        self.db = session

    # -------- CRUD --------

    def get(self, person_id: int) -> Optional[DBPerson]:
        stmt = select(DBPerson).where(DBPerson.id == person_id)
        return self.db.execute(stmt).scalars().first()

    def find_all(self) -> List[DBPerson]:
        stmt = select(DBPerson).order_by(DBPerson.id.asc())
        return list(self.db.execute(stmt).scalars().all())

    def save(self, person: DBPerson) -> DBPerson:
        """Insert when the row has no id yet, otherwise merge onto the stored row (soft-deleted included)."""
        if person.id is None:
            self.db.add(person)
        else:
            # load the target into the identity map, deleted or not, so merge updates it
            self.db.get(DBPerson, person.id, execution_options={INCLUDE_DELETED: True})
            person = self.db.merge(person)
        self.db.flush()
        return person

    # -------- Queries --------

    def find_by_name(self, name: str) -> List[DBPerson]:
        stmt = select(DBPerson).where(DBPerson.name == name).order_by(DBPerson.id.asc())
        return list(self.db.execute(stmt).scalars().all())

    def find_by_month_of_birthday(self, month: int) -> List[DBPerson]:
        stmt = (
            select(DBPerson)
            .where(DBPerson.month_of_birthday == month)
            .order_by(DBPerson.id.asc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def find_people_deleted(self) -> List[DBPerson]:
        stmt = (
            select(DBPerson)
            .from_statement(text(_DELETED_PEOPLE_SQL))
            .execution_options(**{INCLUDE_DELETED: True})
        )
        return list(self.db.execute(stmt).scalars().all())
