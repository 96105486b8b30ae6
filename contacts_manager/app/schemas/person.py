"""
Pydantic schemas for persons.

``PersonAddRequest`` and ``PersonUpdateRequest`` accept any shape of
payload and declare their validation rules for
``core.validation.validate_model``; nothing is rejected at parse time
apart from wrongly typed values.  ``PersonRead`` is the denormalized
view returned to callers: it adds ``country_name`` (resolved from
``country_id``) and ``age`` (computed from ``date_of_birth`` at the
moment the view is built).

Updates replace every mutable field.  A field omitted from
``PersonUpdateRequest`` is stored as empty, not left unchanged.
"""

import uuid
from datetime import date, datetime
from typing import Any, ClassVar, Optional, Tuple

from pydantic import BaseModel, Field

from ..core.validation import EmailAddress, MaxLength, Required, Rule
from ..models import Person
from .enums import GenderOptions

DAYS_PER_YEAR = 365.25

_PERSON_RULES: Tuple[Rule, ...] = (
    Required("name", "Person name can't be empty."),
    MaxLength("name", "Person name can't be longer than 40 characters.", 40),
    Required("email", "Email can't be empty."),
    EmailAddress("email", "Email should be valid format."),
    MaxLength("email", "Email can't be longer than 40 characters.", 40),
    MaxLength("address", "Address can't be longer than 200 characters.", 200),
)


def compute_age(date_of_birth: Optional[date], now: Optional[datetime] = None) -> Optional[int]:
    """Whole years between ``date_of_birth`` and ``now``, or ``None``."""
    if date_of_birth is None:
        return None
    now = now or datetime.now()
    born = datetime(date_of_birth.year, date_of_birth.month, date_of_birth.day)
    days = (now - born).total_seconds() / 86400
    return round(days / DAYS_PER_YEAR)


class PersonBase(BaseModel):
    name: Optional[str] = Field(None, examples=["Ann Smith"])
    email: Optional[str] = Field(None, examples=["ann@example.com"])
    gender: Optional[GenderOptions] = Field(None, examples=["Female"])
    date_of_birth: Optional[date] = Field(None, examples=["1990-01-05"])
    country_id: Optional[uuid.UUID] = None
    address: Optional[str] = Field(None, examples=["12 Harbour Road"])
    receive_newsletters: bool = False

    def to_person(self, person_id: uuid.UUID) -> Person:
        return Person(
            id=person_id,
            name=self.name,
            email=self.email,
            gender=self.gender.value if self.gender is not None else None,
            date_of_birth=self.date_of_birth,
            country_id=self.country_id,
            address=self.address,
            receive_newsletters=self.receive_newsletters,
        )


class PersonAddRequest(PersonBase):
    """Schema for adding a person.  The id is always generated."""

    rules: ClassVar[Tuple[Rule, ...]] = _PERSON_RULES


class PersonUpdateRequest(PersonBase):
    """Schema for replacing a stored person.

    ``id`` selects the record; every other field overwrites the stored
    value.
    """

    id: Optional[uuid.UUID] = None

    rules: ClassVar[Tuple[Rule, ...]] = (
        Required("id", "Person id can't be empty."),
    ) + _PERSON_RULES

    @classmethod
    def from_read(cls, person: "PersonRead") -> "PersonUpdateRequest":
        """Start an update from the current view of a person."""
        return cls(
            id=person.id,
            name=person.name,
            email=person.email,
            gender=person.gender,
            date_of_birth=person.date_of_birth,
            country_id=person.country_id,
            address=person.address,
            receive_newsletters=person.receive_newsletters,
        )


class PersonRead(BaseModel):
    """Read‑only view of a person.

    Two views are equal when their stored fields match; the derived
    ``country_name`` and ``age`` are ignored.
    """

    id: uuid.UUID
    name: Optional[str] = None
    email: Optional[str] = None
    gender: Optional[str] = None
    date_of_birth: Optional[date] = None
    country_id: Optional[uuid.UUID] = None
    country_name: Optional[str] = None
    address: Optional[str] = None
    receive_newsletters: bool = False
    age: Optional[int] = None

    model_config = {
        "frozen": True,
        "from_attributes": True,
    }

    @classmethod
    def from_person(
        cls,
        person: Person,
        country_name: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> "PersonRead":
        return cls(
            id=person.id,
            name=person.name,
            email=person.email,
            gender=person.gender,
            date_of_birth=person.date_of_birth,
            country_id=person.country_id,
            country_name=country_name,
            address=person.address,
            receive_newsletters=person.receive_newsletters,
            age=compute_age(person.date_of_birth, now),
        )

    def _stored_fields(self) -> tuple:
        return (
            self.id,
            self.name,
            self.email,
            self.gender,
            self.date_of_birth,
            self.country_id,
            self.address,
            self.receive_newsletters,
        )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, PersonRead):
            return False
        return self._stored_fields() == other._stored_fields()

    def __hash__(self) -> int:
        return hash(self._stored_fields())
