"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.
When new endpoints are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import countries, persons

router = APIRouter()

router.include_router(countries.router, prefix="/countries", tags=["countries"])
router.include_router(persons.router, prefix="/persons", tags=["persons"])
