# peoplebook/services/schemas/person.py
from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PersonDto(BaseModel):
    """Partial-update payload: every field optional, empty strings mean "leave as is"."""
    name: Optional[str] = Field(default=None, max_length=255)
    hobby: Optional[str] = Field(default=None, max_length=255)
    address: Optional[str] = None
    birthday: Optional[date] = None
    job: Optional[str] = Field(default=None, max_length=255)
    phone_number: Optional[str] = Field(default=None, max_length=32)


class PersonCreate(PersonDto):
    name: str = Field(..., min_length=1, max_length=255)


class BirthdayRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    year: int
    month: int
    day: int


class PersonRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    hobby: Optional[str] = None
    address: Optional[str] = None
    birthday: Optional[BirthdayRead] = None
    job: Optional[str] = None
    phone_number: Optional[str] = None
    deleted: bool = False
