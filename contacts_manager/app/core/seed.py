"""
Demo data set.

Passed explicitly to the services (``seed=``) when
``settings.seed_demo_data`` is on.  Seeding is idempotent: records whose
id is already stored are skipped, so restarting against a SQLite file
does not duplicate them.
"""

import uuid
from dataclasses import dataclass, field
from datetime import date
from typing import List

from ..models import Country, Person

BANGLADESH = uuid.UUID("6AF61BFD-D839-400C-91DC-F4DC231F420E")
USA = uuid.UUID("18C77678-FB49-447D-9DC0-42442DADD11A")
INDIA = uuid.UUID("FAFF4812-127B-45C2-9B77-E3972F61D434")


@dataclass
class SeedData:
    countries: List[Country] = field(default_factory=list)
    persons: List[Person] = field(default_factory=list)


def _person(pid, name, address, email, country_id, gender, born, newsletters) -> Person:
    return Person(
        id=uuid.UUID(pid),
        name=name,
        email=email,
        gender=gender,
        date_of_birth=date.fromisoformat(born),
        country_id=country_id,
        address=address,
        receive_newsletters=newsletters,
    )


def demo_seed() -> SeedData:
    """Return a fresh copy of the starter countries and persons."""
    return SeedData(
        countries=[
            Country(id=BANGLADESH, name="Bangladesh"),
            Country(id=USA, name="USA"),
            Country(id=INDIA, name="India"),
        ],
        persons=[
            _person("CEA7610A-8D2D-4867-B2E6-D863BD41C5B3", "Imon Islam", "Ctg", "imon@email.com", BANGLADESH, "Male", "1990-01-05", True),
            _person("13F73876-AE6A-4530-9482-DBE272F66300", "John Doe", "Era Island", "john@email.com", USA, "Male", "1995-05-05", True),
            _person("26DE0B87-C73A-4422-B458-518E02476E91", "Shem Tov", "Northern America", "shem@email.com", BANGLADESH, "Female", "2000-07-01", False),
            _person("A397C3C5-A7AE-4AFB-AFC3-6F36C3D262AD", "Main Uddin", "Feni", "main@email.com", INDIA, "Male", "1999-03-09", True),
            _person("04AF0A9D-08F4-4542-9D32-2829DF05EE51", "Christopher", "Era Island", "ch@email.com", USA, "Male", "1988-09-01", True),
            _person("5B89D3F5-37B4-452C-8230-4E1DB9A9E810", "Lowand", "Saudi Arabia", "lowand@email.com", BANGLADESH, "Female", "2003-04-02", False),
            _person("AF4A1979-BABF-4696-9199-F19F7D8C4D87", "Chan Soe", "Era Island", "chan@email.com", USA, "Male", "1995-05-05", True),
            _person("7B85C697-787F-4D29-96BB-45370B0A7361", "Shein Loe", "Northern America", "Shein@email.com", BANGLADESH, "Female", "2000-07-01", False),
            _person("8D71340A-318C-4E5D-A777-9808135A8E59", "Zain Lee", "Zaniaba", "zain@email.com", INDIA, "Female", "1997-03-09", True),
            _person("C381EBE7-BB0A-4D5B-A706-C0C5E2E3C943", "Christopher Losen", "Era Island", "chrr@email.com", USA, "Female", "1989-09-01", True),
        ],
    )
