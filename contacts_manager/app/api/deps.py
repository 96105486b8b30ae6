"""
Dependencies that hand the shared service instances to route handlers.

``create_app`` builds the services once and stores them on
``app.state``; routes ask for them with ``Depends`` so tests can swap
them out through ``app.dependency_overrides``.
"""

from fastapi import Request

from ..services.country_service import CountriesService
from ..services.import_service import CountryImportService
from ..services.person_service import PersonsService


def get_countries_service(request: Request) -> CountriesService:
    return request.app.state.countries_service


def get_persons_service(request: Request) -> PersonsService:
    return request.app.state.persons_service


def get_import_service(request: Request) -> CountryImportService:
    return request.app.state.import_service
