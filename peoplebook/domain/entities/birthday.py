# peoplebook/domain/entities/birthday.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Birthday:
    """
    Embedded value object (year, month, day) owned by a Person.
    No identity of its own; stored as three columns on the owner's row.
    """
    year: int
    month: int
    day: int

    def __post_init__(self):
        for label, value in (("year", self.year), ("month", self.month), ("day", self.day)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Birthday.{label} must be an int")
        # raises ValueError for month 13, Feb 30, ...
        date(self.year, self.month, self.day)

    @classmethod
    def of(cls, d: date) -> "Birthday":
        return cls(year=d.year, month=d.month, day=d.day)

    @classmethod
    def from_parts(cls, year: Optional[int], month: Optional[int], day: Optional[int]) -> Optional["Birthday"]:
        """Rebuild from stored columns; all-NULL means no birthday."""
        if year is None and month is None and day is None:
            return None
        return cls(year=year, month=month, day=day)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def falls_on(self, d: date) -> bool:
        return self.month == d.month and self.day == d.day
