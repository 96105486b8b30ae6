"""
Declarative validation of request schemas.

Request schemas are permissive pydantic models (every
field optional) so that a bad payload still reaches the service layer
and is rejected there with a field/message pair.  Each request class
lists its rules in a ``rules`` class variable::

    class CountryAddRequest(BaseModel):
        rules: ClassVar[Tuple[Rule, ...]] = (
            Required("name", "Country name can't be blank."),
        )

``validate_model`` evaluates every rule and raises
``InvalidArgumentError`` carrying all failures, or
``MissingArgumentError`` when the request itself is ``None``.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .exceptions import FieldError, InvalidArgumentError, MissingArgumentError

_email_adapter = TypeAdapter(EmailStr)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


@dataclass(frozen=True)
class Rule:
    """Base rule bound to a single field."""

    field: str
    message: str

    def is_valid(self, value: Any) -> bool:  # pragma: no cover - overridden
        raise NotImplementedError

    def check(self, request: Any) -> Optional[FieldError]:
        if self.is_valid(getattr(request, self.field, None)):
            return None
        return FieldError(self.field, self.message)


@dataclass(frozen=True)
class Required(Rule):
    """Value must be present and, for strings, not blank."""

    def is_valid(self, value: Any) -> bool:
        return not _is_blank(value)


@dataclass(frozen=True)
class EmailAddress(Rule):
    """String must be a valid email address, as judged by ``EmailStr``.

    Absent values pass; combine with ``Required`` to demand one.

    ``email-validator`` is stricter than a plain syntax check: it also
    rejects special-use and reserved domains, so ``a@host.test`` and
    ``a@localhost`` fail even though they are well formed.  Contacts
    are expected to carry deliverable addresses.
    """

    def is_valid(self, value: Any) -> bool:
        if _is_blank(value):
            return True
        try:
            _email_adapter.validate_python(value)
        except PydanticValidationError:
            return False
        return True


@dataclass(frozen=True)
class MaxLength(Rule):
    """String may not be longer than ``limit`` characters."""

    limit: int = 0

    def is_valid(self, value: Any) -> bool:
        if value is None:
            return True
        return len(str(value)) <= self.limit


def collect_errors(request: Any, rules: Sequence[Rule]) -> List[FieldError]:
    """Evaluate ``rules`` against ``request`` and return every failure."""
    errors: List[FieldError] = []
    for rule in rules:
        error = rule.check(request)
        if error is not None:
            errors.append(error)
    return errors


def validate_model(request: Any, argument: str = "request") -> None:
    """Validate ``request`` against the rules declared on its class.

    Raises
    ------
    MissingArgumentError
        If ``request`` is ``None``.
    InvalidArgumentError
        If one or more rules fail.  ``errors`` keeps declaration order.
    """
    if request is None:
        raise MissingArgumentError(argument)
    errors = collect_errors(request, getattr(type(request), "rules", ()))
    if errors:
        raise InvalidArgumentError(errors)
