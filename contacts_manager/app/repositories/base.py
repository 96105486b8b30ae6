"""
Storage contracts used by the services.

Repositories only store and retrieve records; they enforce no business
rules.  ``replace`` and ``delete`` report whether a record with the
given id existed.  Every successful write is durable when the call
returns.
"""

import uuid
from typing import List, Optional, Protocol

from ..models import Country, Person


class CountryRepository(Protocol):
    def add(self, country: Country) -> Country: ...

    def get(self, country_id: uuid.UUID) -> Optional[Country]: ...

    def find_by_name(self, name: str) -> Optional[Country]: ...

    def list_all(self) -> List[Country]: ...


class PersonRepository(Protocol):
    def add(self, person: Person) -> Person: ...

    def get(self, person_id: uuid.UUID) -> Optional[Person]: ...

    def list_all(self) -> List[Person]: ...

    def replace(self, person: Person) -> bool: ...

    def delete(self, person_id: uuid.UUID) -> bool: ...
