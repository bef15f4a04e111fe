# tests/database/test_person_repo.py
import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from peoplebook.database.models.person import Person
from peoplebook.database.repos.person_repo import SqlAlchemyPersonRepo
from peoplebook.domain.entities.birthday import Birthday


def test_save_then_find_by_name(db):
    repo = SqlAlchemyPersonRepo(db)
    p = repo.save(Person(name="john"))
    assert p.id is not None

    result = repo.find_by_name("john")
    assert len(result) == 1
    assert result[0].name == "john"


def test_find_by_name_is_exact_and_case_sensitive(seeded):
    repo = SqlAlchemyPersonRepo(seeded)
    assert [p.name for p in repo.find_by_name("martin")] == ["martin"]
    assert repo.find_by_name("Martin") == []
    assert repo.find_by_name("mar") == []


def test_find_by_month_of_birthday(seeded):
    repo = SqlAlchemyPersonRepo(seeded)
    result = repo.find_by_month_of_birthday(8)
    assert [p.name for p in result] == ["martin", "sophia"]
    assert result[0].birthday == Birthday(1991, 8, 15)
    assert result[1].birthday == Birthday(1994, 8, 31)


def test_get_by_id(seeded):
    repo = SqlAlchemyPersonRepo(seeded)
    p = repo.get(3)
    assert p is not None and p.name == "dennis"
    assert repo.get(999) is None


def test_save_existing_row_updates(seeded):
    repo = SqlAlchemyPersonRepo(seeded)
    p = repo.get(2)
    p.hobby = "cooking"
    repo.save(p)
    seeded.expire_all()
    assert repo.get(2).hobby == "cooking"
    assert len(repo.find_all()) == 5


def test_soft_deleted_rows_are_hidden_from_orm_queries(seeded):
    repo = SqlAlchemyPersonRepo(seeded)
    p = repo.get(1)
    p.mark_deleted()
    repo.save(p)

    assert repo.get(1) is None
    assert repo.find_by_name("martin") == []
    assert [x.name for x in repo.find_by_month_of_birthday(8)] == ["sophia"]
    assert [x.id for x in repo.find_all()] == [2, 3, 4, 5]


def test_find_people_deleted_uses_native_query(seeded):
    repo = SqlAlchemyPersonRepo(seeded)
    assert repo.find_people_deleted() == []

    for pid in (1, 4):
        p = repo.get(pid)
        p.mark_deleted()
        repo.save(p)

    deleted = repo.find_people_deleted()
    assert [p.name for p in deleted] == ["martin", "sophia"]
    assert all(p.deleted for p in deleted)


def test_partial_birthday_is_rejected_by_the_table(db):
    with pytest.raises(IntegrityError):
        db.execute(text("insert into person (id, name, year_of_birthday) values (50, 'x', 1990)"))


def test_partial_birthday_is_rejected_on_flush(db):
    p = Person(name="x")
    p.year_of_birthday = 1990
    db.add(p)
    with pytest.raises(IntegrityError):
        db.flush()
