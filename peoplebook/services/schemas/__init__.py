from peoplebook.services.schemas.person import (
    PersonDto,
    PersonCreate,
    PersonRead,
    BirthdayRead,
)

__all__ = [
    "PersonDto",
    "PersonCreate",
    "PersonRead",
    "BirthdayRead",
]
