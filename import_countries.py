#!/usr/bin/env python3
"""
Import countries from an Excel workbook into the Contacts Manager SQLite database.

Reads the ``Countries`` worksheet (header in row 1, names in column A)
and adds every name that is not already stored.  The database schema is
created if the file does not exist yet.

Usage:
    python import_countries.py --db ./contacts.db --file ./countries.xlsx
"""

import argparse
import asyncio
import os
import sys

from contacts_manager.app.core.db import init_db
from contacts_manager.app.core.exceptions import InvalidArgumentError
from contacts_manager.app.repositories.sqlite import SqliteCountryRepository
from contacts_manager.app.services.country_service import CountriesService
from contacts_manager.app.services.import_service import COUNTRIES_SHEET, CountryImportService


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Import countries from an .xlsx file (SQLite).")
    ap.add_argument("--db", required=True, help="Path to SQLite DB file (e.g., ./contacts.db)")
    ap.add_argument("--file", required=True, help="Workbook containing a 'Countries' sheet")
    ap.add_argument("--sheet", default=COUNTRIES_SHEET, help="Worksheet name (default: %(default)s)")
    args = ap.parse_args(argv)

    if not os.path.exists(args.file):
        print(f"[!] Workbook not found: {args.file}", file=sys.stderr)
        return 1

    db_path = os.path.abspath(args.db)
    init_db(db_path)
    importer = CountryImportService(CountriesService(SqliteCountryRepository(db_path)))

    with open(args.file, "rb") as fh:
        content = fh.read()
    try:
        inserted = asyncio.run(importer.upload_countries_from_excel(content, args.sheet))
    except InvalidArgumentError as exc:
        print(f"[!] {exc}", file=sys.stderr)
        return 2

    print(f"[+] Imported {inserted} countries into {db_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
