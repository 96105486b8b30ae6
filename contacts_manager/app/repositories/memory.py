"""
In‑memory repositories.

Records live in plain lists in insertion order.  Stored objects are
copied on the way in and out so callers never hold a reference into
the store.
"""

import uuid
from dataclasses import replace as copy_record
from typing import List, Optional

from ..models import Country, Person


class InMemoryCountryRepository:
    """Countries kept in a process‑local list."""

    def __init__(self) -> None:
        self._countries: List[Country] = []

    def add(self, country: Country) -> Country:
        self._countries.append(copy_record(country))
        return copy_record(country)

    def get(self, country_id: uuid.UUID) -> Optional[Country]:
        for country in self._countries:
            if country.id == country_id:
                return copy_record(country)
        return None

    def find_by_name(self, name: str) -> Optional[Country]:
        for country in self._countries:
            if country.name == name:
                return copy_record(country)
        return None

    def list_all(self) -> List[Country]:
        return [copy_record(country) for country in self._countries]


class InMemoryPersonRepository:
    """Persons kept in a process‑local list."""

    def __init__(self) -> None:
        self._persons: List[Person] = []

    def add(self, person: Person) -> Person:
        self._persons.append(copy_record(person))
        return copy_record(person)

    def get(self, person_id: uuid.UUID) -> Optional[Person]:
        index = self._index_of(person_id)
        if index is None:
            return None
        return copy_record(self._persons[index])

    def list_all(self) -> List[Person]:
        return [copy_record(person) for person in self._persons]

    def replace(self, person: Person) -> bool:
        index = self._index_of(person.id)
        if index is None:
            return False
        # Swap the whole record in one assignment.
        self._persons[index] = copy_record(person)
        return True

    def delete(self, person_id: uuid.UUID) -> bool:
        index = self._index_of(person_id)
        if index is None:
            return False
        del self._persons[index]
        return True

    def _index_of(self, person_id: uuid.UUID) -> Optional[int]:
        for index, person in enumerate(self._persons):
            if person.id == person_id:
                return index
        return None
