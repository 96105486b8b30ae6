"""
Exceptions raised by the contacts services.

Services raise these at the point a request is rejected and let them
propagate; the API layer maps each kind to an HTTP status in
``api.v1.errors``.  Lookups and deletes that find nothing are not
errors and return ``None`` / ``False`` instead.
"""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class FieldError:
    """A single failed validation rule."""

    field: str
    message: str


class ContactsError(Exception):
    """Base class for all contacts service errors."""


class MissingArgumentError(ContactsError, ValueError):
    """A required request object or identifier was ``None``."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"{argument} can't be null")


class InvalidArgumentError(ContactsError, ValueError):
    """A request failed validation.

    ``errors`` lists every failed rule; the exception message is taken
    from the first one unless an explicit message is given.
    """

    def __init__(self, errors: List[FieldError], message: Optional[str] = None) -> None:
        self.errors = list(errors)
        if message is None:
            message = self.errors[0].message if self.errors else "Invalid argument"
        super().__init__(message)


class DuplicateNameError(InvalidArgumentError):
    """A country with the same name already exists."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            [FieldError("name", "Given country name already exists")],
        )


class NotFoundError(InvalidArgumentError):
    """An update referenced a record id that is not stored."""

    def __init__(self, field: str, value: object) -> None:
        self.value = value
        super().__init__(
            [FieldError(field, f"Given {field} is invalid")],
            message=f"No record found for {field}={value}",
        )
