"""
Pydantic schemas for countries.

``CountryAddRequest`` is the incoming payload and carries its own
validation rules (see ``core.validation``).  ``CountryRead`` is the
read‑only view handed back to callers.
"""

import uuid
from typing import ClassVar, Optional, Tuple

from pydantic import BaseModel, Field

from ..core.validation import Required, Rule
from ..models import Country


class CountryAddRequest(BaseModel):
    """Schema for adding a country."""

    name: Optional[str] = Field(None, examples=["Canada"])

    rules: ClassVar[Tuple[Rule, ...]] = (
        Required("name", "Country name can't be blank."),
    )

    def to_country(self, country_id: uuid.UUID) -> Country:
        return Country(id=country_id, name=self.name)


class CountryRead(BaseModel):
    """Schema for reading a country."""

    id: uuid.UUID
    name: str

    model_config = {
        "frozen": True,
        "from_attributes": True,
    }
