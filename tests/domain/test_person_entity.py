import pytest
from datetime import date

from peoplebook.database.models.person import Person
from peoplebook.domain.entities.birthday import Birthday
from peoplebook.domain.errors import EntityValidationError
from peoplebook.services.schemas.person import PersonDto


def _martin() -> Person:
    return Person(
        name="martin",
        hobby="programming",
        address="Seoul",
        job="programmer",
        phone_number="010-1111-2222",
        birthday=Birthday(1991, 8, 15),
    )


def test_new_person_is_not_deleted():
    assert Person(name="john").deleted is False


@pytest.mark.parametrize("bad", ["", "   ", None])
def test_person_name_is_required(bad):
    with pytest.raises(EntityValidationError):
        Person(name=bad)


def test_set_overwrites_only_present_fields():
    p = _martin()
    p.set(PersonDto(name="martin", hobby="", job="chef", phone_number=None))

    assert p.hobby == "programming"
    assert p.job == "chef"
    assert p.phone_number == "010-1111-2222"
    assert p.address == "Seoul"
    assert p.birthday == Birthday(1991, 8, 15)


def test_set_converts_dto_birthday():
    p = Person(name="david")
    p.set(PersonDto(birthday=date(1992, 7, 21), address="Busan"))
    assert p.birthday == Birthday(1992, 7, 21)
    assert (p.year_of_birthday, p.month_of_birthday, p.day_of_birthday) == (1992, 7, 21)
    assert p.address == "Busan"
    assert p.name == "david"


def test_from_dto_builds_a_fresh_row():
    p = Person.from_dto(PersonDto(name="sophia", hobby="reading", birthday=date(1994, 8, 31)))
    assert p.id is None
    assert p.name == "sophia" and p.hobby == "reading"
    assert p.birthday == Birthday(1994, 8, 31)


def test_clearing_birthday_nulls_all_three_columns():
    p = _martin()
    p.birthday = None
    assert p.birthday is None
    assert p.year_of_birthday is None and p.month_of_birthday is None and p.day_of_birthday is None


def test_get_age_counts_birth_year_as_one():
    assert _martin().get_age(today=date(2026, 1, 1)) == 36
    assert _martin().get_age(today=date(2026, 12, 31)) == 36


def test_get_age_without_birthday_is_none():
    assert Person(name="john").get_age() is None


def test_is_birthday_today():
    p = _martin()
    assert p.is_birthday_today(today=date(2026, 8, 15))
    assert not p.is_birthday_today(today=date(2026, 8, 14))


def test_is_birthday_today_without_birthday_is_false():
    assert Person(name="john").is_birthday_today() is False
