import uuid
from datetime import date

import pytest
from fastapi.testclient import TestClient

from contacts_manager.app.core.config import Settings
from contacts_manager.app.main import create_app
from contacts_manager.app.schemas.person import PersonRead
from contacts_manager.app.services.country_service import CountriesService
from contacts_manager.app.services.person_service import PersonsService


@pytest.fixture
def countries_service():
    return CountriesService()


@pytest.fixture
def persons_service(countries_service):
    return PersonsService(countries_service)


@pytest.fixture
def memory_settings():
    return Settings(storage_backend="memory", seed_demo_data=False, log_level="WARNING")


@pytest.fixture
def client(memory_settings):
    return TestClient(create_app(memory_settings))


def _make_view(name, **fields):
    fields.setdefault("email", f"{(name or 'anon').split()[0].lower()}@example.com")
    return PersonRead(id=uuid.uuid4(), name=name, **fields)


@pytest.fixture
def make_view():
    """Build a person view directly, for query engine tests."""
    return _make_view


@pytest.fixture
def views():
    return [
        _make_view("Mona Lisa", gender="Female", date_of_birth=date(1990, 1, 5),
                   country_name="Italy", address="Florence", age=35, receive_newsletters=True),
        _make_view("john doe", gender="Male", date_of_birth=date(1985, 6, 20),
                   country_name="USA", address="Era Island", age=40),
        _make_view("Simon", gender="Male", address=None, age=None),
        _make_view("", email="blank@example.com", country_name="Canada", age=22, receive_newsletters=True),
        _make_view("Amos Burton", gender="Other", date_of_birth=date(2001, 3, 9),
                   country_name="usa", address="Ceres", age=24),
    ]
