"""
Stored records.

These are the shapes repositories persist.  They are never returned
through the API directly: services convert them to the read schemas in
``schemas`` so that derived values (country name, age) can be added
without touching storage.
"""

import uuid
from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class Country:
    id: uuid.UUID
    name: str


@dataclass
class Person:
    id: uuid.UUID
    name: str
    email: str
    gender: Optional[str] = None
    date_of_birth: Optional[date] = None
    country_id: Optional[uuid.UUID] = None
    address: Optional[str] = None
    receive_newsletters: bool = False
