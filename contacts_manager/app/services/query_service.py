"""
Filtering and sorting of person views by a field named at runtime.

Field names arrive as untrusted strings from query parameters.  They
are resolved against the ``SearchField`` / ``SortField`` enumerations
(ignoring case and underscores, so ``date_of_birth``, ``dateOfBirth``
and ``DateOfBirth`` are the same field) and each member maps to an
accessor.  An empty or unknown field name is not an error: the input
comes back unchanged.

Both functions are pure.  They return a new list and never modify the
sequence they are given.
"""

from enum import Enum
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Type, TypeVar, Union

from ..schemas.enums import SortOrderOptions
from ..schemas.person import PersonRead

DATE_DISPLAY_FORMAT = "%d %b %Y"

FieldT = TypeVar("FieldT", bound=Enum)


class SearchField(str, Enum):
    NAME = "name"
    EMAIL = "email"
    DATE_OF_BIRTH = "date_of_birth"
    GENDER = "gender"
    COUNTRY_NAME = "country_name"
    ADDRESS = "address"


class SortField(str, Enum):
    NAME = "name"
    EMAIL = "email"
    COUNTRY_NAME = "country_name"
    GENDER = "gender"
    DATE_OF_BIRTH = "date_of_birth"
    ADDRESS = "address"
    AGE = "age"
    RECEIVE_NEWSLETTERS = "receive_newsletters"


# Selector names sent by the web front end.
_FIELD_ALIASES: Dict[str, str] = {
    "personname": "name",
    "country": "country_name",
    "countryid": "country_name",
}


def _normalize(name: str) -> str:
    return name.strip().replace("_", "").lower()


def resolve_field(enum_cls: Type[FieldT], name: Optional[str]) -> Optional[FieldT]:
    """Map a raw field name to a member of ``enum_cls`` or ``None``."""
    if not name:
        return None
    key = _normalize(name)
    key = _normalize(_FIELD_ALIASES.get(key, key))
    for member in enum_cls:
        if _normalize(member.value) == key:
            return member
    return None


def display_date(person: PersonRead) -> Optional[str]:
    if person.date_of_birth is None:
        return None
    return person.date_of_birth.strftime(DATE_DISPLAY_FORMAT)


SEARCH_TEXT: Mapping[SearchField, Callable[[PersonRead], Optional[str]]] = {
    SearchField.NAME: lambda person: person.name,
    SearchField.EMAIL: lambda person: person.email,
    SearchField.DATE_OF_BIRTH: display_date,
    SearchField.GENDER: lambda person: person.gender,
    SearchField.COUNTRY_NAME: lambda person: person.country_name,
    SearchField.ADDRESS: lambda person: person.address,
}


def _contains(value: Optional[str], needle: str) -> bool:
    # Records with nothing in the searched field always match.
    if not value:
        return True
    return needle in value.casefold()


def filter_persons(
    persons: Sequence[PersonRead],
    search_by: Optional[str],
    search_string: Optional[str],
) -> List[PersonRead]:
    """Keep persons whose ``search_by`` field contains ``search_string``.

    Matching is a case‑insensitive substring test.  Dates of birth are
    matched against their ``"05 Jan 1990"`` rendering and countries
    against the resolved ``country_name``.
    """
    matching = list(persons)
    if not search_by or not search_string:
        return matching
    field = resolve_field(SearchField, search_by)
    if field is None:
        return matching
    text_of = SEARCH_TEXT[field]
    needle = search_string.casefold()
    return [person for person in matching if _contains(text_of(person), needle)]


def _text_key(get: Callable[[PersonRead], Optional[str]]) -> Callable[[PersonRead], tuple]:
    def key(person: PersonRead) -> tuple:
        value = get(person)
        return (value is not None, value.casefold() if value is not None else None)

    return key


def _value_key(get: Callable[[PersonRead], object]) -> Callable[[PersonRead], tuple]:
    def key(person: PersonRead) -> tuple:
        value = get(person)
        return (value is not None, value)

    return key


# Keys put ``None`` before any value, so absent values come first in
# ascending order and last in descending order.
SORT_KEYS: Mapping[SortField, Callable[[PersonRead], tuple]] = {
    SortField.NAME: _text_key(lambda person: person.name),
    SortField.EMAIL: _text_key(lambda person: person.email),
    SortField.COUNTRY_NAME: _text_key(lambda person: person.country_name),
    SortField.GENDER: _text_key(lambda person: person.gender),
    SortField.DATE_OF_BIRTH: _value_key(lambda person: person.date_of_birth),
    SortField.ADDRESS: _text_key(lambda person: person.address),
    SortField.AGE: _value_key(lambda person: person.age),
    SortField.RECEIVE_NEWSLETTERS: _value_key(lambda person: person.receive_newsletters),
}


def resolve_order(order: Union[SortOrderOptions, str, None]) -> SortOrderOptions:
    """Parse a sort order; anything other than ``DESC`` means ascending."""
    if isinstance(order, SortOrderOptions):
        return order
    if order and order.strip().upper() == SortOrderOptions.DESC.value:
        return SortOrderOptions.DESC
    return SortOrderOptions.ASC


def sort_persons(
    persons: Sequence[PersonRead],
    sort_by: Optional[str],
    sort_order: Union[SortOrderOptions, str, None] = SortOrderOptions.ASC,
) -> List[PersonRead]:
    """Return ``persons`` ordered by the ``sort_by`` field.

    Text fields compare case‑insensitively; dates, ages and the
    newsletter flag by value.  The sort is stable in both directions:
    persons with equal keys keep their input order.
    """
    field = resolve_field(SortField, sort_by)
    if field is None:
        return list(persons)
    descending = resolve_order(sort_order) is SortOrderOptions.DESC
    return sorted(persons, key=SORT_KEYS[field], reverse=descending)
