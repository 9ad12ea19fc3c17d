"""Field validators and the validation outcome types."""

from form_handler.validation.outcome import (
    VALID,
    FieldErrors,
    Sanitizer,
    ValidationOutcome,
    Validator,
    is_valid,
)
from form_handler.validation.validators import (
    RecaptchaValidator,
    is_address,
    is_date,
    is_email,
    is_empty,
    is_file,
    is_name,
    is_phone,
    is_website,
    not_empty,
    not_empty_choiceable,
)

__all__ = [
    "VALID",
    "FieldErrors",
    "RecaptchaValidator",
    "Sanitizer",
    "ValidationOutcome",
    "Validator",
    "is_address",
    "is_date",
    "is_email",
    "is_empty",
    "is_file",
    "is_name",
    "is_phone",
    "is_valid",
    "is_website",
    "not_empty",
    "not_empty_choiceable",
]
