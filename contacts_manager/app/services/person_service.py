"""
Business logic for persons.

``PersonsService`` validates add and update requests, assigns ids,
stores records through a ``PersonRepository`` and returns
``PersonRead`` views.  Each view is built at read time: the country
name is looked up through ``CountriesService`` and the age is computed
from the date of birth, so neither is ever stored.

Lookups and deletes that match nothing return ``None`` / ``False``;
updating a missing person raises ``NotFoundError``.
"""

import logging
import uuid
from datetime import datetime
from typing import Iterable, List, Optional, Union

from ..core.exceptions import MissingArgumentError, NotFoundError
from ..core.validation import validate_model
from ..models import Person
from ..repositories.base import PersonRepository
from ..repositories.memory import InMemoryPersonRepository
from ..schemas.enums import SortOrderOptions
from ..schemas.person import PersonAddRequest, PersonRead, PersonUpdateRequest
from . import query_service
from .country_service import CountriesService

logger = logging.getLogger(__name__)


class PersonsService:
    """Service for managing persons.

    ``countries`` is used read‑only to resolve country names.  ``seed``
    records are inserted once at construction unless their id is
    already stored.
    """

    def __init__(
        self,
        countries: CountriesService,
        repository: Optional[PersonRepository] = None,
        seed: Iterable[Person] = (),
    ) -> None:
        self._countries = countries
        self._repository = repository if repository is not None else InMemoryPersonRepository()
        for person in seed:
            if self._repository.get(person.id) is None:
                self._repository.add(person)

    async def _to_read(self, person: Person) -> PersonRead:
        country = await self._countries.get_country_by_id(person.country_id)
        return PersonRead.from_person(person, country.name if country else None)

    async def add_person(self, request: Optional[PersonAddRequest]) -> PersonRead:
        """Validate and store a new person; the id is always generated."""
        validate_model(request, "person_add_request")
        person = self._repository.add(request.to_person(uuid.uuid4()))
        logger.info("Added person %s", person.id)
        return await self._to_read(person)

    async def get_all_persons(self) -> List[PersonRead]:
        """Return views of every stored person in insertion order."""
        names = {country.id: country.name for country in await self._countries.get_all_countries()}
        now = datetime.now()
        return [
            PersonRead.from_person(person, names.get(person.country_id), now)
            for person in self._repository.list_all()
        ]

    async def get_person_by_id(self, person_id: Optional[uuid.UUID]) -> Optional[PersonRead]:
        """Return the person with ``person_id`` or ``None``."""
        if person_id is None:
            return None
        person = self._repository.get(person_id)
        if person is None:
            return None
        return await self._to_read(person)

    async def update_person(self, request: Optional[PersonUpdateRequest]) -> PersonRead:
        """Replace every mutable field of an existing person.

        The request must carry the complete desired state; fields left
        out are stored empty.  Nothing is written unless validation
        passes and the id exists.
        """
        validate_model(request, "person_update_request")
        if self._repository.get(request.id) is None:
            raise NotFoundError("id", request.id)
        person = request.to_person(request.id)
        if not self._repository.replace(person):
            raise NotFoundError("id", request.id)
        logger.info("Updated person %s", person.id)
        return await self._to_read(person)

    async def delete_person(self, person_id: Optional[uuid.UUID]) -> bool:
        """Delete a person.  Returns ``False`` if no such person exists."""
        if person_id is None:
            raise MissingArgumentError("person_id")
        deleted = self._repository.delete(person_id)
        if deleted:
            logger.info("Deleted person %s", person_id)
        return deleted

    async def get_filtered_persons(
        self,
        search_by: Optional[str],
        search_string: Optional[str],
    ) -> List[PersonRead]:
        """Return all persons matching ``search_string`` in ``search_by``."""
        return query_service.filter_persons(await self.get_all_persons(), search_by, search_string)

    def get_sorted_persons(
        self,
        persons: List[PersonRead],
        sort_by: Optional[str],
        sort_order: Union[SortOrderOptions, str, None] = SortOrderOptions.ASC,
    ) -> List[PersonRead]:
        return query_service.sort_persons(persons, sort_by, sort_order)
