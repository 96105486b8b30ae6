"""
Country endpoints for API v1.

Countries can be listed, looked up, added one at a time or imported
in bulk from an Excel workbook.  Blank names are rejected with 422 and
duplicate names with 409 (see ``api.v1.errors``).
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from contacts_manager.app.api.deps import get_countries_service, get_import_service
from contacts_manager.app.schemas.country import CountryAddRequest, CountryRead
from contacts_manager.app.services.country_service import CountriesService
from contacts_manager.app.services.import_service import CountryImportService

router = APIRouter()


@router.get("/", response_model=List[CountryRead])
async def list_countries(
    countries: CountriesService = Depends(get_countries_service),
) -> List[CountryRead]:
    """Return all countries in the order they were added."""
    return await countries.get_all_countries()


@router.post("/", response_model=CountryRead, status_code=status.HTTP_201_CREATED)
async def add_country(
    country_in: CountryAddRequest,
    countries: CountriesService = Depends(get_countries_service),
) -> CountryRead:
    """Add a country.  The id is generated by the server."""
    return await countries.add_country(country_in)


@router.post("/upload")
async def upload_countries(
    file: UploadFile = File(...),
    importer: CountryImportService = Depends(get_import_service),
) -> dict:
    """Import countries from the ``Countries`` sheet of an ``.xlsx`` file.

    Names that already exist are skipped.  Responds with the number of
    countries actually added.
    """
    content = await file.read()
    inserted = await importer.upload_countries_from_excel(content)
    return {"inserted": inserted}


@router.get("/{country_id}", response_model=CountryRead)
async def get_country(
    country_id: uuid.UUID,
    countries: CountriesService = Depends(get_countries_service),
) -> CountryRead:
    """Retrieve a single country.  Returns 404 if it does not exist."""
    country = await countries.get_country_by_id(country_id)
    if country is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Country not found")
    return country
