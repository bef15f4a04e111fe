# peoplebook/services/people/service.py
from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from peoplebook.common.logging import get_logger
from peoplebook.database.models.person import Person
from peoplebook.database.repos.person_repo import SqlAlchemyPersonRepo
from peoplebook.services.people.errors import MSG_ID_NOT_FOUND, MSG_NAME_MISMATCH, PersonServiceError
from peoplebook.services.schemas.person import PersonDto

log = get_logger(__name__)


class PersonService:
    """
    CRUD over Person on top of SqlAlchemyPersonRepo.

    The caller owns the transaction: the service only flushes, so a router
    (or test) decides when to commit or roll back.
    """

    def __init__(self, session: Session, repo: SqlAlchemyPersonRepo | None = None) -> None:
        self.db = session
        self.repo = repo or SqlAlchemyPersonRepo(session)

    # ---- reads ----

    def get_people_by_name(self, name: str) -> List[Person]:
        return self.repo.find_by_name(name)

    def get_person(self, person_id: int) -> Optional[Person]:
        person = self.repo.get(person_id)
        log.info("person : %r", person)
        return person

    # ---- writes ----

    def put(self, person: Person) -> Person:
        saved = self.repo.save(person)
        log.info("saved person id=%s", saved.id)
        return saved

    def create(self, dto: PersonDto) -> Person:
        return self.put(Person.from_dto(dto))

    def modify(self, person_id: int, dto: PersonDto) -> Person:
        person = self._get_or_raise(person_id)
        if person.name != dto.name:
            log.warning("modify rejected: id=%s has name %r, payload says %r", person_id, person.name, dto.name)
            raise PersonServiceError(MSG_NAME_MISMATCH)

        person.set(dto)
        return self.repo.save(person)

    def modify_name(self, person_id: int, name: str) -> Person:
        person = self._get_or_raise(person_id)
        person.name = name
        return self.repo.save(person)

    def delete(self, person_id: int) -> None:
        person = self._get_or_raise(person_id)
        person.mark_deleted()
        self.repo.save(person)
        log.info("soft-deleted person id=%s", person_id)

    # ---- helpers ----

    def _get_or_raise(self, person_id: int) -> Person:
        person = self.repo.get(person_id)
        if person is None:
            log.warning("person id=%s not found", person_id)
            raise PersonServiceError(MSG_ID_NOT_FOUND)
        return person
