import io
import uuid

import pytest
from fastapi.testclient import TestClient
from openpyxl import Workbook

from contacts_manager.app.core.config import Settings
from contacts_manager.app.main import create_app

PERSONS = "/api/v1/persons/"
COUNTRIES = "/api/v1/countries/"


def add_person(client, **fields):
    payload = {"name": "Ann", "email": "ann@x.com"}
    payload.update(fields)
    response = client.post(PERSONS, json=payload)
    assert response.status_code == 201, response.text
    return response.json()


class TestCountries:
    def test_add_and_list(self, client):
        response = client.post(COUNTRIES, json={"name": "Canada"})
        assert response.status_code == 201
        canada = response.json()
        assert canada["name"] == "Canada"

        assert client.get(COUNTRIES).json() == [canada]
        assert client.get(f"{COUNTRIES}{canada['id']}").json() == canada

    def test_blank_name_is_422(self, client):
        response = client.post(COUNTRIES, json={"name": "  "})
        assert response.status_code == 422
        body = response.json()
        assert body["errors"] == [{"field": "name", "message": "Country name can't be blank."}]

    def test_duplicate_name_is_409(self, client):
        client.post(COUNTRIES, json={"name": "Canada"})
        response = client.post(COUNTRIES, json={"name": "Canada"})
        assert response.status_code == 409
        assert response.json()["errors"][0]["field"] == "name"

    def test_unknown_country_is_404(self, client):
        assert client.get(f"{COUNTRIES}{uuid.uuid4()}").status_code == 404

    def test_upload(self, client):
        workbook = Workbook()
        sheet = workbook.active
        sheet.title = "Countries"
        for value in ["Name", "Peru", "Chile"]:
            sheet.append([value])
        content = _save(workbook)

        response = client.post(
            f"{COUNTRIES}upload",
            files={"file": ("countries.xlsx", content, "application/octet-stream")},
        )
        assert response.status_code == 200
        assert response.json() == {"inserted": 2}
        assert [c["name"] for c in client.get(COUNTRIES).json()] == ["Peru", "Chile"]

    def test_upload_rejects_non_workbook(self, client):
        response = client.post(
            f"{COUNTRIES}upload",
            files={"file": ("countries.txt", b"Peru", "text/plain")},
        )
        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "file"


def _save(workbook):
    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


class TestPersons:
    def test_add_returns_view_with_country_name(self, client):
        canada = client.post(COUNTRIES, json={"name": "Canada"}).json()
        person = add_person(client, country_id=canada["id"], gender="Female", date_of_birth="1990-01-05")
        assert person["country_name"] == "Canada"
        assert person["gender"] == "Female"
        assert isinstance(person["age"], int)
        assert client.get(f"{PERSONS}{person['id']}").json() == person

    def test_add_ignores_client_id(self, client):
        chosen = str(uuid.uuid4())
        person = add_person(client, id=chosen)
        assert person["id"] != chosen

    def test_invalid_person_is_422_with_every_error(self, client):
        response = client.post(PERSONS, json={"name": "", "email": "nope"})
        assert response.status_code == 422
        fields = [error["field"] for error in response.json()["errors"]]
        assert fields == ["name", "email"]
        assert client.get(PERSONS).json() == []

    def test_unknown_person_is_404(self, client):
        assert client.get(f"{PERSONS}{uuid.uuid4()}").status_code == 404

    def test_update_replaces_record(self, client):
        person = add_person(client, address="Old Street")
        response = client.put(
            f"{PERSONS}{person['id']}",
            json={"name": "Ann Smith", "email": "ann.smith@x.com"},
        )
        assert response.status_code == 200
        updated = response.json()
        assert updated["id"] == person["id"]
        assert updated["name"] == "Ann Smith"
        assert updated["address"] is None

    def test_update_unknown_is_404(self, client):
        response = client.put(f"{PERSONS}{uuid.uuid4()}", json={"name": "Ann", "email": "ann@x.com"})
        assert response.status_code == 404
        assert response.json()["errors"][0]["field"] == "id"

    def test_update_invalid_keeps_record(self, client):
        person = add_person(client)
        response = client.put(f"{PERSONS}{person['id']}", json={"name": "", "email": "ann@x.com"})
        assert response.status_code == 422
        assert client.get(f"{PERSONS}{person['id']}").json()["name"] == "Ann"

    def test_delete(self, client):
        person = add_person(client)
        assert client.delete(f"{PERSONS}{person['id']}").status_code == 204
        assert client.delete(f"{PERSONS}{person['id']}").status_code == 404

    def test_search_fields(self, client):
        fields = client.get(f"{PERSONS}search-fields").json()
        assert fields["name"] == "Person Name"
        assert "age" not in fields


class TestListing:
    @pytest.fixture
    def seeded_client(self):
        settings = Settings(storage_backend="memory", seed_demo_data=True, log_level="WARNING")
        return TestClient(create_app(settings))

    def test_default_sort_is_name_ascending(self, seeded_client):
        names = [p["name"] for p in seeded_client.get(PERSONS).json()]
        assert len(names) == 10
        assert names == sorted(names, key=str.lower)

    def test_search_and_sort_descending(self, seeded_client):
        response = seeded_client.get(
            PERSONS,
            params={"search_by": "country_name", "search_string": "usa", "sort_by": "name", "sort_order": "DESC"},
        )
        names = [p["name"] for p in response.json()]
        assert names == ["John Doe", "Christopher Losen", "Christopher", "Chan Soe"]

    def test_unknown_fields_are_ignored(self, seeded_client):
        response = seeded_client.get(
            PERSONS,
            params={"search_by": "bogus", "search_string": "x", "sort_by": "bogus", "sort_order": "sideways"},
        )
        assert response.status_code == 200
        assert len(response.json()) == 10
