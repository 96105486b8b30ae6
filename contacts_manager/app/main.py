"""
Main entrypoint for the Contacts Manager API.

This module assembles the FastAPI application, sets up logging, builds
the services and includes versioned routers.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``, so it can be served with::

    uvicorn contacts_manager.app.main:app --reload

Storage backend and demo data are chosen by ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional, Tuple

from fastapi import FastAPI

from .api.v1.errors import register_exception_handlers
from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.db import get_database_path, init_db
from .core.logging_config import setup_logging
from .core.seed import SeedData, demo_seed
from .repositories.memory import InMemoryCountryRepository, InMemoryPersonRepository
from .repositories.sqlite import SqliteCountryRepository, SqlitePersonRepository
from .services.country_service import CountriesService
from .services.import_service import CountryImportService
from .services.person_service import PersonsService

logger = logging.getLogger(__name__)


def build_services(app_settings: Settings) -> Tuple[CountriesService, PersonsService]:
    """Wire repositories and services according to ``app_settings``."""
    if app_settings.storage_backend == "sqlite":
        db_path = get_database_path(app_settings.database_url)
        fresh = init_db(db_path)
        country_repo = SqliteCountryRepository(db_path)
        person_repo = SqlitePersonRepository(db_path)
    elif app_settings.storage_backend == "memory":
        country_repo = InMemoryCountryRepository()
        person_repo = InMemoryPersonRepository()
        fresh = True
    else:
        raise ValueError(f"Unknown storage backend: {app_settings.storage_backend}")

    # Demo data goes into new stores only; an existing database keeps
    # its deletions and imported countries.
    seed = demo_seed() if app_settings.seed_demo_data and fresh else SeedData()
    countries = CountriesService(country_repo, seed=seed.countries)
    persons = PersonsService(countries, person_repo, seed=seed.persons)
    return countries, persons


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module‑level ``settings``.
        Tests pass their own to pick the backend and disable the demo
        data.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    # Initialise logging before anything else so that service
    # construction below can log.
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    app = FastAPI(title=app_settings.project_name, version=app_settings.api_version, debug=app_settings.debug)

    countries, persons = build_services(app_settings)
    app.state.countries_service = countries
    app.state.persons_service = persons
    app.state.import_service = CountryImportService(countries)
    logger.info("Using %s storage", app_settings.storage_backend)

    register_exception_handlers(app)
    app.include_router(v1_router, prefix="/api/v1")
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
