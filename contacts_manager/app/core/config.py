"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with an in‑memory store and the demo data set.  In a
production deployment you should point ``STORAGE_BACKEND`` at
``sqlite`` and override ``DATABASE_URL``.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Contacts Manager API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Where person and country records live.  ``memory`` keeps them in
    # process lists (lost on restart); ``sqlite`` persists them to the
    # file named by ``database_url``.
    storage_backend: str = os.getenv("STORAGE_BACKEND", "memory")

    # Path to the SQLite database.  A relative path is resolved against
    # the project root by ``core.db.get_database_path``.
    database_url: str = os.getenv("DATABASE_URL", "contacts.db")

    # Load the starter set of countries and persons from ``core.seed``.
    seed_demo_data: bool = _env_flag("SEED_DEMO_DATA", "true")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
