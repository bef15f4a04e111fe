# peoplebook/database/models/person.py
from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Optional

from sqlalchemy import CheckConstraint, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, validates

from peoplebook.database.core.main import Base
from peoplebook.database.core.service_object import ServiceObject
from peoplebook.database.core.soft_delete import SoftDeleteMixin
from peoplebook.domain.entities.birthday import Birthday
from peoplebook.domain.errors import EntityValidationError

if TYPE_CHECKING:
    from peoplebook.services.schemas.person import PersonDto


# the embedded Birthday is stored whole or not at all
BIRTHDAY_ALL_OR_NONE = (
    "(year_of_birthday IS NULL AND month_of_birthday IS NULL AND day_of_birthday IS NULL)"
    " OR (year_of_birthday IS NOT NULL AND month_of_birthday IS NOT NULL AND day_of_birthday IS NOT NULL)"
)


class Person(SoftDeleteMixin, ServiceObject, Base):
    """
    Person row.
      - name is required and never blank
      - birthday is an embedded value spread over three nullable columns, all set or all NULL
      - deleted=True hides the row from ORM queries (see SoftDeleteMixin)
    """
    __tablename__ = "person"
    __table_args__ = (
        Index("ix_person_name", "name"),
        Index("ix_person_month_of_birthday", "month_of_birthday"),
        CheckConstraint(BIRTHDAY_ALL_OR_NONE, name="birthday_all_or_none"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    hobby: Mapped[Optional[str]] = mapped_column(String(255))
    address: Mapped[Optional[str]] = mapped_column(Text)

    # embedded Birthday
    year_of_birthday: Mapped[Optional[int]] = mapped_column(Integer)
    month_of_birthday: Mapped[Optional[int]] = mapped_column(Integer)
    day_of_birthday: Mapped[Optional[int]] = mapped_column(Integer)

    job: Mapped[Optional[str]] = mapped_column(String(255))
    phone_number: Mapped[Optional[str]] = mapped_column(String(32))

    def __init__(self, **kw):
        kw.setdefault("deleted", False)
        super().__init__(**kw)

    @validates("name")
    def _validate_name(self, _key: str, value: Optional[str]) -> str:
        if value is None or not str(value).strip():
            raise EntityValidationError("Person.name is required")
        return value

    @property
    def birthday(self) -> Optional[Birthday]:
        return Birthday.from_parts(self.year_of_birthday, self.month_of_birthday, self.day_of_birthday)

    @birthday.setter
    def birthday(self, value: Optional[Birthday | date]) -> None:
        if isinstance(value, date):
            value = Birthday.of(value)
        self.year_of_birthday = value.year if value else None
        self.month_of_birthday = value.month if value else None
        self.day_of_birthday = value.day if value else None

    @classmethod
    def from_dto(cls, dto: "PersonDto") -> "Person":
        person = cls(name=dto.name)
        person.set(dto)
        return person

    def set(self, dto: "PersonDto") -> None:
        """Merge non-empty DTO fields onto this row; absent fields keep their value."""
        if dto.name:
            self.name = dto.name
        if dto.hobby:
            self.hobby = dto.hobby
        if dto.address:
            self.address = dto.address
        if dto.job:
            self.job = dto.job
        if dto.phone_number:
            self.phone_number = dto.phone_number
        if dto.birthday is not None:
            self.birthday = dto.birthday

    def get_age(self, today: Optional[date] = None) -> Optional[int]:
        # counting age: the birth year already counts as 1
        birthday = self.birthday
        if birthday is None:
            return None
        today = today or date.today()
        return today.year - birthday.year + 1

    def is_birthday_today(self, today: Optional[date] = None) -> bool:
        """Month and day match today (any year); False when no birthday is stored."""
        birthday = self.birthday
        if birthday is None:
            return False
        return birthday.falls_on(today or date.today())

    def __repr__(self) -> str:
        return f"<Person id={self.id} name={self.name!r} deleted={self.deleted}>"
