import uuid
from datetime import date, datetime

import pytest

from contacts_manager.app.core.exceptions import (
    InvalidArgumentError,
    MissingArgumentError,
    NotFoundError,
)
from contacts_manager.app.core.seed import demo_seed
from contacts_manager.app.schemas.country import CountryAddRequest
from contacts_manager.app.schemas.enums import GenderOptions
from contacts_manager.app.schemas.person import (
    PersonAddRequest,
    PersonUpdateRequest,
    compute_age,
)
from contacts_manager.app.services.country_service import CountriesService
from contacts_manager.app.services.person_service import PersonsService


def ann(**overrides):
    fields = dict(name="Ann", email="ann@x.com")
    fields.update(overrides)
    return PersonAddRequest(**fields)


class TestAddPerson:
    @pytest.mark.asyncio
    async def test_none_request(self, persons_service):
        with pytest.raises(MissingArgumentError):
            await persons_service.add_person(None)

    @pytest.mark.asyncio
    async def test_name_is_none(self, persons_service):
        with pytest.raises(InvalidArgumentError):
            await persons_service.add_person(PersonAddRequest(name=None, email="a@x.com"))
        assert await persons_service.get_all_persons() == []

    @pytest.mark.asyncio
    async def test_invalid_email(self, persons_service):
        with pytest.raises(InvalidArgumentError) as excinfo:
            await persons_service.add_person(ann(email="nope"))
        assert excinfo.value.errors[0].field == "email"

    @pytest.mark.asyncio
    async def test_proper_person_details(self, persons_service):
        response = await persons_service.add_person(
            PersonAddRequest(
                name="Person name...",
                email="person@email.com",
                address="Sample Address",
                country_id=uuid.uuid4(),
                gender=GenderOptions.MALE,
                date_of_birth=date(2000, 1, 1),
                receive_newsletters=True,
            )
        )
        assert response.id != uuid.UUID(int=0)
        assert response.gender == "Male"
        assert response.age is not None
        assert response.country_name is None
        assert response in await persons_service.get_all_persons()

    @pytest.mark.asyncio
    async def test_country_name_is_denormalized(self, countries_service, persons_service):
        canada = await countries_service.add_country(CountryAddRequest(name="Canada"))
        view = await persons_service.add_person(ann(country_id=canada.id))
        assert view.country_name == "Canada"
        assert (await persons_service.get_person_by_id(view.id)).country_name == "Canada"
        assert (await persons_service.get_all_persons())[0].country_name == "Canada"

    @pytest.mark.asyncio
    async def test_each_add_gets_a_new_id(self, persons_service):
        first = await persons_service.add_person(ann())
        second = await persons_service.add_person(ann())
        assert first.id != second.id
        assert len(await persons_service.get_all_persons()) == 2


class TestGetPerson:
    @pytest.mark.asyncio
    async def test_none_id(self, persons_service):
        assert await persons_service.get_person_by_id(None) is None

    @pytest.mark.asyncio
    async def test_unknown_id(self, persons_service):
        assert await persons_service.get_person_by_id(uuid.uuid4()) is None

    @pytest.mark.asyncio
    async def test_valid_id(self, persons_service):
        added = await persons_service.add_person(ann())
        assert await persons_service.get_person_by_id(added.id) == added

    @pytest.mark.asyncio
    async def test_empty_list_by_default(self, persons_service):
        assert await persons_service.get_all_persons() == []


class TestUpdatePerson:
    @pytest.mark.asyncio
    async def test_none_request(self, persons_service):
        with pytest.raises(MissingArgumentError):
            await persons_service.update_person(None)

    @pytest.mark.asyncio
    async def test_unknown_id(self, persons_service):
        with pytest.raises(NotFoundError):
            await persons_service.update_person(
                PersonUpdateRequest(id=uuid.uuid4(), name="Ann", email="ann@x.com")
            )

    @pytest.mark.asyncio
    async def test_empty_name_leaves_record_unchanged(self, persons_service):
        added = await persons_service.add_person(ann())
        request = PersonUpdateRequest.from_read(added).model_copy(update={"name": ""})
        with pytest.raises(InvalidArgumentError):
            await persons_service.update_person(request)
        assert (await persons_service.get_person_by_id(added.id)).name == "Ann"

    @pytest.mark.asyncio
    async def test_replaces_every_field(self, countries_service, persons_service):
        japan = await countries_service.add_country(CountryAddRequest(name="Japan"))
        added = await persons_service.add_person(
            ann(address="Old Street", gender=GenderOptions.FEMALE, receive_newsletters=True)
        )
        updated = await persons_service.update_person(
            PersonUpdateRequest(
                id=added.id,
                name="Ann Smith",
                email="ann.smith@x.com",
                country_id=japan.id,
                date_of_birth=date(1990, 1, 5),
            )
        )
        assert updated.id == added.id
        assert updated.name == "Ann Smith"
        assert updated.email == "ann.smith@x.com"
        assert updated.country_name == "Japan"
        # Omitted fields are cleared, not merged.
        assert updated.address is None
        assert updated.gender is None
        assert updated.receive_newsletters is False
        assert await persons_service.get_person_by_id(added.id) == updated


class TestDeletePerson:
    @pytest.mark.asyncio
    async def test_none_id(self, persons_service):
        with pytest.raises(MissingArgumentError):
            await persons_service.delete_person(None)

    @pytest.mark.asyncio
    async def test_unknown_id(self, persons_service):
        assert await persons_service.delete_person(uuid.uuid4()) is False

    @pytest.mark.asyncio
    async def test_delete_twice(self, persons_service):
        added = await persons_service.add_person(ann())
        assert await persons_service.delete_person(added.id) is True
        assert await persons_service.delete_person(added.id) is False
        assert await persons_service.get_person_by_id(added.id) is None


class TestFilterAndSort:
    @pytest.fixture
    def seeded(self):
        seed = demo_seed()
        countries = CountriesService(seed=seed.countries)
        return PersonsService(countries, seed=seed.persons)

    @pytest.mark.asyncio
    async def test_filtered_by_country_name(self, seeded):
        matching = await seeded.get_filtered_persons("country_name", "india")
        assert sorted(person.name for person in matching) == ["Main Uddin", "Zain Lee"]

    @pytest.mark.asyncio
    async def test_no_search_returns_everyone(self, seeded):
        assert len(await seeded.get_filtered_persons(None, None)) == 10

    @pytest.mark.asyncio
    async def test_sorted_by_name(self, seeded):
        everyone = await seeded.get_all_persons()
        ordered = seeded.get_sorted_persons(everyone, "name", "ASC")
        assert ordered[0].name == "Chan Soe"
        assert ordered[-1].name == "Zain Lee"
        assert [person.name for person in everyone][0] == "Imon Islam"


@pytest.mark.asyncio
async def test_end_to_end(countries_service, persons_service):
    canada = await countries_service.add_country(CountryAddRequest(name="Canada"))
    person = await persons_service.add_person(ann(country_id=canada.id))
    assert person.country_name == "Canada"

    with pytest.raises(InvalidArgumentError):
        await persons_service.update_person(
            PersonUpdateRequest.from_read(person).model_copy(update={"name": ""})
        )
    assert (await persons_service.get_person_by_id(person.id)).name == "Ann"

    assert await persons_service.delete_person(person.id) is True
    assert await persons_service.get_person_by_id(person.id) is None


@pytest.mark.parametrize(
    "born, now, expected",
    [
        (date(1990, 1, 5), datetime(2020, 1, 5), 30),
        (date(2000, 1, 1), datetime(2010, 1, 1), 10),
        (date(2000, 7, 1), datetime(2000, 8, 1), 0),
        (None, datetime(2020, 1, 1), None),
    ],
)
def test_compute_age(born, now, expected):
    assert compute_age(born, now) == expected
