"""Validation outcome types.

A validator returns either the VALID sentinel or a non-empty mapping of
error code to message. An empty mapping is never a success value.
"""

from typing import Any, Callable, Final, Union

from form_handler.registry.models import FieldDefinition


class _Valid:
    """Marker type for a successful validation."""

    _instance: "_Valid | None" = None

    def __new__(cls) -> "_Valid":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "VALID"

    def __reduce__(self) -> str:
        return "VALID"


VALID: Final = _Valid()

FieldErrors = dict[str, str]
ValidationOutcome = Union[_Valid, FieldErrors]

Validator = Callable[[Any, FieldDefinition, bool], ValidationOutcome]
Sanitizer = Callable[[Any, FieldDefinition], Any]


def is_valid(outcome: ValidationOutcome) -> bool:
    """Whether an outcome is the VALID sentinel."""
    return outcome is VALID


def finish(errors: FieldErrors) -> ValidationOutcome:
    """Turn collected errors into an outcome."""
    if errors:
        return errors
    return VALID
