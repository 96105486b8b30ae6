"""
SQLite repositories.

Each call opens a connection through ``core.db``, runs parameterized
statements and closes it again.  Writes go through ``get_cursor`` so a
failing statement is rolled back.  UUIDs are stored as their string
form and dates as ISO ``YYYY-MM-DD`` text.
"""

import sqlite3
import uuid
from datetime import date
from typing import List, Optional

from ..core.db import get_connection, get_cursor
from ..models import Country, Person

_NEXT_POSITION = "(SELECT COALESCE(MAX(position), 0) + 1 FROM {table})"


def _row_to_country(row: sqlite3.Row) -> Country:
    return Country(id=uuid.UUID(row["id"]), name=row["name"])


def _row_to_person(row: sqlite3.Row) -> Person:
    return Person(
        id=uuid.UUID(row["id"]),
        name=row["name"],
        email=row["email"],
        gender=row["gender"],
        date_of_birth=date.fromisoformat(row["date_of_birth"]) if row["date_of_birth"] else None,
        country_id=uuid.UUID(row["country_id"]) if row["country_id"] else None,
        address=row["address"],
        receive_newsletters=bool(row["receive_newsletters"]),
    )


def _person_params(person: Person) -> tuple:
    return (
        person.name,
        person.email,
        person.gender,
        person.date_of_birth.isoformat() if person.date_of_birth else None,
        str(person.country_id) if person.country_id else None,
        person.address,
        1 if person.receive_newsletters else 0,
        str(person.id),
    )


class SqliteCountryRepository:
    def __init__(self, db_path: str) -> None:
        self.db_path = db_path

    def add(self, country: Country) -> Country:
        with get_cursor(self.db_path) as cursor:
            cursor.execute(
                f"INSERT INTO countries (id, name, position) VALUES (?, ?, {_NEXT_POSITION.format(table='countries')})",
                (str(country.id), country.name),
            )
        return country

    def get(self, country_id: uuid.UUID) -> Optional[Country]:
        return self._fetch_one("SELECT id, name FROM countries WHERE id = ?", (str(country_id),))

    def find_by_name(self, name: str) -> Optional[Country]:
        return self._fetch_one("SELECT id, name FROM countries WHERE name = ?", (name,))

    def list_all(self) -> List[Country]:
        conn = get_connection(self.db_path)
        try:
            rows = conn.execute("SELECT id, name FROM countries ORDER BY position").fetchall()
            return [_row_to_country(row) for row in rows]
        finally:
            conn.close()

    def _fetch_one(self, query: str, params: tuple) -> Optional[Country]:
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(query, params).fetchone()
            return _row_to_country(row) if row else None
        finally:
            conn.close()


class SqlitePersonRepository:
    def __init__(self, db_path: str) -> None:
        self.db_path = db_path

    def add(self, person: Person) -> Person:
        with get_cursor(self.db_path) as cursor:
            cursor.execute(
                f"""
                INSERT INTO persons (name, email, gender, date_of_birth, country_id, address,
                                     receive_newsletters, id, position)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, {_NEXT_POSITION.format(table='persons')})
                """,
                _person_params(person),
            )
        return person

    def get(self, person_id: uuid.UUID) -> Optional[Person]:
        conn = get_connection(self.db_path)
        try:
            row = conn.execute("SELECT * FROM persons WHERE id = ?", (str(person_id),)).fetchone()
            return _row_to_person(row) if row else None
        finally:
            conn.close()

    def list_all(self) -> List[Person]:
        conn = get_connection(self.db_path)
        try:
            rows = conn.execute("SELECT * FROM persons ORDER BY position").fetchall()
            return [_row_to_person(row) for row in rows]
        finally:
            conn.close()

    def replace(self, person: Person) -> bool:
        with get_cursor(self.db_path) as cursor:
            cursor.execute(
                """
                UPDATE persons
                SET name = ?, email = ?, gender = ?, date_of_birth = ?, country_id = ?,
                    address = ?, receive_newsletters = ?
                WHERE id = ?
                """,
                _person_params(person),
            )
            return cursor.rowcount > 0

    def delete(self, person_id: uuid.UUID) -> bool:
        with get_cursor(self.db_path) as cursor:
            cursor.execute("DELETE FROM persons WHERE id = ?", (str(person_id),))
            return cursor.rowcount > 0
