"""
Field constraint vocabulary.

Each helper returns an ``Annotated`` type carrying a :class:`Constraint`.
A constraint holds the message reported when the field is missing or has
the wrong JSON type, plus the rules checked against a well-typed value.
Every failed rule contributes its own message, in declaration order.

Usage:
    class SpoolCreate(RequestSchema):
        name: non_empty("Makara adı zorunlu.")
        quantity: at_least(1, "Adet zorunlu ve en az 1 olmalı.")
        end_date: optional_text() = None
"""

from typing import Annotated, Any, Callable, NamedTuple, Optional, get_args

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator
from pydantic_core import PydanticCustomError

INVALID_VALUE_MESSAGE = "Geçersiz değer."


class Rule(NamedTuple):
    """A predicate over a typed value and the message used when it fails."""

    test: Callable[[Any], bool]
    message: str


class Constraint:
    """Validator attached to a field through ``AfterValidator``."""

    def __init__(self, message: str, *rules: Rule, type_message: str | None = None):
        self.message = message
        self.rules = rules
        self.type_message = type_message or message

    def __call__(self, value: Any) -> Any:
        failures = [rule.message for rule in self.rules if not rule.test(value)]
        if failures:
            raise PydanticCustomError(
                "constraint",
                "{summary}",
                {"summary": " ".join(failures), "messages": failures},
            )
        return value

    def __repr__(self) -> str:
        return f"Constraint({self.message!r}, rules={len(self.rules)})"


def find_constraint(*candidates: Any) -> Constraint | None:
    """
    Locate the Constraint inside field metadata or an annotation.

    Looks through ``Optional[...]`` and nested ``Annotated[...]`` so derived
    update models resolve to the same constraint as their create model.
    """
    for candidate in candidates:
        func = getattr(candidate, "func", None)
        if isinstance(func, Constraint):
            return func
        found = find_constraint(*get_args(candidate))
        if found is not None:
            return found
    return None


def _has_length(value: str) -> bool:
    return len(value) > 0


def _is_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def non_empty(message: str) -> Any:
    """String with at least one character."""
    return Annotated[str, AfterValidator(Constraint(message, Rule(_has_length, message)))]


def date_string(message: str) -> Any:
    """
    Date as sent by the client.

    Only presence is checked; the value is stored verbatim.
    """
    return non_empty(message)


def one_of(choices: tuple[str, ...], message: str) -> Any:
    """String from a closed set."""
    allowed = frozenset(choices)
    return Annotated[
        str,
        AfterValidator(Constraint(message, Rule(lambda v: v in allowed, message))),
    ]


def at_least(minimum: float, message: str) -> Any:
    """Finite JSON number (not a numeric string, not a boolean) >= minimum."""
    return Annotated[
        float,
        AfterValidator(Constraint(message, Rule(lambda v: v >= minimum, message))),
    ]


def non_negative(message: str) -> Any:
    return at_least(0, message)


def email(message: str) -> Any:
    """Syntactically valid e-mail address."""
    return Annotated[str, AfterValidator(Constraint(message, Rule(_is_email, message)))]


def min_length(length: int, message: str) -> Any:
    return Annotated[
        str,
        AfterValidator(Constraint(message, Rule(lambda v: len(v) >= length, message))),
    ]


def optional_text() -> Any:
    """Free text that may be absent or null."""
    return Optional[
        Annotated[str, AfterValidator(Constraint(INVALID_VALUE_MESSAGE))]
    ]
