# peoplebook/services/api/routers/people.py
from __future__ import annotations

from http import HTTPStatus
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from peoplebook.common.settings import get_settings
from peoplebook.services.api.deps import get_person_service
from peoplebook.services.people.service import PersonService
from peoplebook.services.schemas.person import PersonCreate, PersonDto, PersonRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/people", tags=["people"])


# ---- queries ----

@router.get("", response_model=List[PersonRead])
def list_people_by_name(
    name: str = Query(..., min_length=1, description="Exact, case-sensitive name"),
    svc: PersonService = Depends(get_person_service),
) -> List[PersonRead]:
    return [PersonRead.model_validate(p) for p in svc.get_people_by_name(name)]


@router.get("/birthday-month/{month}", response_model=List[PersonRead])
def list_people_by_birthday_month(
    month: int = Path(..., ge=1, le=12),
    svc: PersonService = Depends(get_person_service),
) -> List[PersonRead]:
    rows = svc.repo.find_by_month_of_birthday(month)
    return [PersonRead.model_validate(p) for p in rows]


@router.get("/deleted", response_model=List[PersonRead])
def list_deleted_people(
    svc: PersonService = Depends(get_person_service),
) -> List[PersonRead]:
    return [PersonRead.model_validate(p) for p in svc.repo.find_people_deleted()]


# ---- CRUD ----

@router.get("/{person_id}", response_model=PersonRead)
def get_person(
    person_id: int = Path(...),
    svc: PersonService = Depends(get_person_service),
) -> PersonRead:
    obj = svc.get_person(person_id)
    if obj is None:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Person not found")
    return PersonRead.model_validate(obj)


@router.post("", response_model=PersonRead, status_code=HTTPStatus.CREATED)
def create_person(
    payload: PersonCreate,
    svc: PersonService = Depends(get_person_service),
) -> PersonRead:
    obj = svc.create(payload)
    return PersonRead.model_validate(obj)


@router.put("/{person_id}", response_model=PersonRead)
def modify_person(
    person_id: int,
    payload: PersonDto,
    svc: PersonService = Depends(get_person_service),
) -> PersonRead:
    return PersonRead.model_validate(svc.modify(person_id, payload))


@router.patch("/{person_id}", response_model=PersonRead)
def rename_person(
    person_id: int,
    name: str = Query(..., min_length=1, max_length=255),
    svc: PersonService = Depends(get_person_service),
) -> PersonRead:
    return PersonRead.model_validate(svc.modify_name(person_id, name))


@router.delete("/{person_id}", status_code=HTTPStatus.NO_CONTENT)
def delete_person(
    person_id: int,
    svc: PersonService = Depends(get_person_service),
) -> None:
    svc.delete(person_id)
    # 204
    return None
