"""
Business logic for countries.

``CountriesService`` owns country records.  It rejects blank and
duplicate names (exact, case‑sensitive comparison) and resolves ids to
read views for the persons service.  Countries are never updated or
deleted.
"""

import logging
import uuid
from typing import Iterable, List, Optional

from ..core.exceptions import DuplicateNameError
from ..core.validation import validate_model
from ..models import Country
from ..repositories.base import CountryRepository
from ..repositories.memory import InMemoryCountryRepository
from ..schemas.country import CountryAddRequest, CountryRead

logger = logging.getLogger(__name__)


class CountriesService:
    """Service for managing countries.

    Storage is delegated to a ``CountryRepository``; without one the
    service keeps countries in memory.  ``seed`` records are inserted
    once at construction unless their id or name is already stored.
    """

    def __init__(
        self,
        repository: Optional[CountryRepository] = None,
        seed: Iterable[Country] = (),
    ) -> None:
        self._repository = repository if repository is not None else InMemoryCountryRepository()
        for country in seed:
            if self._repository.get(country.id) is not None:
                continue
            if self._repository.find_by_name(country.name) is not None:
                logger.info("Skipping seed country %s: name already taken", country.name)
                continue
            self._repository.add(country)

    async def add_country(self, request: Optional[CountryAddRequest]) -> CountryRead:
        """Add a country and return it with its generated id.

        Raises ``MissingArgumentError`` for a ``None`` request,
        ``InvalidArgumentError`` for a blank name and
        ``DuplicateNameError`` when the name is already taken.
        """
        validate_model(request, "country_add_request")
        if self._repository.find_by_name(request.name) is not None:
            raise DuplicateNameError(request.name)
        country = self._repository.add(request.to_country(uuid.uuid4()))
        logger.info("Added country %s (%s)", country.name, country.id)
        return CountryRead.model_validate(country)

    async def get_all_countries(self) -> List[CountryRead]:
        """Return every country in insertion order."""
        return [CountryRead.model_validate(country) for country in self._repository.list_all()]

    async def get_country_by_id(self, country_id: Optional[uuid.UUID]) -> Optional[CountryRead]:
        """Return the country with ``country_id`` or ``None``."""
        if country_id is None:
            return None
        country = self._repository.get(country_id)
        if country is None:
            return None
        return CountryRead.model_validate(country)
