"""
Person endpoints for API v1.

The listing endpoint mirrors the directory page of the web front end:
it filters by ``search_by`` / ``search_string`` and then sorts by
``sort_by`` / ``sort_order`` (name ascending by default).  Unknown
field names are ignored rather than rejected.

Updates replace the whole record; send every field, not only the ones
that changed.
"""

import uuid
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from contacts_manager.app.api.deps import get_persons_service
from contacts_manager.app.schemas.enums import SortOrderOptions
from contacts_manager.app.schemas.person import PersonAddRequest, PersonRead, PersonUpdateRequest
from contacts_manager.app.services.person_service import PersonsService
from contacts_manager.app.services.query_service import SearchField

router = APIRouter()

SEARCH_FIELD_LABELS: Dict[str, str] = {
    SearchField.NAME.value: "Person Name",
    SearchField.EMAIL.value: "Email",
    SearchField.DATE_OF_BIRTH.value: "Date Of Birth",
    SearchField.GENDER.value: "Gender",
    SearchField.COUNTRY_NAME.value: "Country",
    SearchField.ADDRESS.value: "Address",
}


@router.get("/", response_model=List[PersonRead])
async def list_persons(
    search_by: Optional[str] = Query(None),
    search_string: Optional[str] = Query(None),
    sort_by: str = Query("name"),
    sort_order: str = Query(SortOrderOptions.ASC.value),
    persons: PersonsService = Depends(get_persons_service),
) -> List[PersonRead]:
    """Search and sort the person directory.

    - **search_by** — `name`, `email`, `date_of_birth`, `gender`, `country_name`, `address`.
    - **search_string** — case‑insensitive text to look for; dates match as `05 Jan 1990`.
    - **sort_by** — any search field plus `age` and `receive_newsletters`.
    - **sort_order** — `ASC` or `DESC` (case‑insensitive; anything else sorts ascending).
    """
    matching = await persons.get_filtered_persons(search_by, search_string)
    return persons.get_sorted_persons(matching, sort_by, sort_order)


@router.get("/search-fields")
async def list_search_fields() -> Dict[str, str]:
    """Return the selectable search fields and their display labels."""
    return SEARCH_FIELD_LABELS


@router.get("/{person_id}", response_model=PersonRead)
async def get_person(
    person_id: uuid.UUID,
    persons: PersonsService = Depends(get_persons_service),
) -> PersonRead:
    """Retrieve a single person.  Returns 404 if it does not exist."""
    person = await persons.get_person_by_id(person_id)
    if person is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Person not found")
    return person


@router.post("/", response_model=PersonRead, status_code=status.HTTP_201_CREATED)
async def add_person(
    person_in: PersonAddRequest,
    persons: PersonsService = Depends(get_persons_service),
) -> PersonRead:
    """Add a person.  Name and a valid email are required."""
    return await persons.add_person(person_in)


@router.put("/{person_id}", response_model=PersonRead)
async def update_person(
    person_id: uuid.UUID,
    person_in: PersonUpdateRequest,
    persons: PersonsService = Depends(get_persons_service),
) -> PersonRead:
    """Replace a person.  The id in the path wins over any id in the body."""
    return await persons.update_person(person_in.model_copy(update={"id": person_id}))


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_person(
    person_id: uuid.UUID,
    persons: PersonsService = Depends(get_persons_service),
) -> None:
    """Delete a person.  Returns 404 if it does not exist."""
    deleted = await persons.delete_person(person_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Person not found")
    return None
