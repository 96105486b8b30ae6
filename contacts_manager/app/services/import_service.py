"""
Bulk import of countries from an Excel workbook.

The workbook must contain a worksheet named ``Countries``; the first
row is a header and country names are read from the first column of
every following row.  Blank cells are ignored; other values are used
as written.  A name that already
exists, either in the directory or earlier in the same file, is
skipped rather than failing the batch.  ``CountriesService`` still
rejects duplicates on its own.
"""

import asyncio
import io
import logging
import zipfile
from typing import List

import openpyxl
from openpyxl.utils.exceptions import InvalidFileException

from ..core.exceptions import FieldError, InvalidArgumentError
from ..schemas.country import CountryAddRequest
from .country_service import CountriesService

logger = logging.getLogger(__name__)

COUNTRIES_SHEET = "Countries"


def read_country_names(content: bytes, sheet_name: str = COUNTRIES_SHEET) -> List[str]:
    """Return the non‑blank first‑column values below the header row.

    Values are kept as written, surrounding whitespace included, so an
    imported name is compared and stored exactly like one sent to
    ``CountriesService.add_country``.
    """
    try:
        workbook = openpyxl.load_workbook(filename=io.BytesIO(content), read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError) as exc:
        raise InvalidArgumentError([FieldError("file", "File is not a valid Excel workbook.")]) from exc
    try:
        if sheet_name not in workbook.sheetnames:
            raise InvalidArgumentError([FieldError("file", f"Worksheet '{sheet_name}' not found.")])
        names: List[str] = []
        for row in workbook[sheet_name].iter_rows(min_row=2, max_col=1, values_only=True):
            cell = row[0] if row else None
            if cell is None:
                continue
            value = str(cell)
            if value.strip():
                names.append(value)
        return names
    finally:
        workbook.close()


class CountryImportService:
    """Loads countries from spreadsheets into a ``CountriesService``."""

    def __init__(self, countries: CountriesService) -> None:
        self._countries = countries

    async def upload_countries_from_excel(self, content: bytes, sheet_name: str = COUNTRIES_SHEET) -> int:
        """Import countries from ``content`` and return how many were added."""
        names = await asyncio.to_thread(read_country_names, content, sheet_name)
        existing = {country.name for country in await self._countries.get_all_countries()}
        inserted = 0
        for name in names:
            if name in existing:
                logger.debug("Skipping existing country %s", name)
                continue
            await self._countries.add_country(CountryAddRequest(name=name))
            existing.add(name)
            inserted += 1
        logger.info("Imported %s of %s countries from workbook", inserted, len(names))
        return inserted
