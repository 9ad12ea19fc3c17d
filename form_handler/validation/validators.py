"""Per-type field validators.

Every validator takes (value, field, required) and returns VALID or a
mapping of error code to user-facing message. Checks within a validator
accumulate, so one field can report several codes at once.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any

from pydantic import EmailStr, TypeAdapter, ValidationError

from form_handler.core.models import UploadError, UploadedFile
from form_handler.core.protocols import CaptchaVerifier
from form_handler.registry.models import FieldDefinition
from form_handler.validation.outcome import VALID, FieldErrors, ValidationOutcome, finish

logger = logging.getLogger(__name__)

REQUIRED_MESSAGE = "This field is required."
RECAPTCHA_MESSAGE = "Your reCAPTCHA response was incorrect."

_email_adapter = TypeAdapter(EmailStr)

PHONE_INVALID_CHARS = re.compile(r"[^0-9+.)(\-]")
WEBSITE_PATTERN = re.compile(
    r"^https?://"
    r"(?:[a-z0-9\-._]+(?:\.[a-z0-9\-._]+)+|localhost)"
    r"/?"
    r"[a-z0-9\-.?,'/\\+&%$#_]*"
    r"[\w./%+\-=&?:\\\"',|~;]*$",
    re.IGNORECASE,
)
DATE_PATTERN = re.compile(r"^[0-9/]+$")
NUMERIC_PATTERN = re.compile(r"^[0-9]+$")


def is_empty(value: Any) -> bool:
    """Whether a raw value counts as not filled in.

    None, empty collections and missing uploads are empty. Strings are
    empty when nothing but whitespace remains, so "   " does not satisfy a
    required field.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, UploadedFile):
        return value.is_missing
    if isinstance(value, (Mapping, list, tuple, set)):
        return len(value) == 0
    return False


def _part(value: Any, key: str) -> Any:
    if isinstance(value, Mapping):
        return value.get(key)
    return None


def is_email_address(value: str) -> bool:
    """Syntax check for a single email address."""
    try:
        _email_adapter.validate_python(value)
    except ValidationError:
        return False
    return True


def not_empty(value: Any, field: FieldDefinition, required: bool) -> ValidationOutcome:
    if required and is_empty(value):
        return {"required": REQUIRED_MESSAGE}
    return VALID


def not_empty_choiceable(
    value: Any, field: FieldDefinition, required: bool
) -> ValidationOutcome:
    """Required check for dropdown, radio and checkbox values.

    A list of selections only satisfies the requirement when at least one
    entry is itself non-empty; a list of blanks counts as nothing chosen.
    """
    if not required:
        return VALID

    if isinstance(value, Mapping):
        selections = list(value.values())
    elif isinstance(value, (list, tuple, set)):
        selections = list(value)
    else:
        return not_empty(value, field, required)

    if any(not is_empty(selection) for selection in selections):
        return VALID
    return {"required": REQUIRED_MESSAGE}


def is_email(value: Any, field: FieldDefinition, required: bool) -> ValidationOutcome:
    """Validate a plain address or an {email, confirm} pair.

    For a pair, the required checks run on each part independently and the
    match check always runs, so confirm_required and match can both be
    reported for the same submission.
    """
    errors: FieldErrors = {}

    if isinstance(value, Mapping):
        email = value.get("email")
        confirm = value.get("confirm")

        if required and is_empty(email):
            errors["email_required"] = REQUIRED_MESSAGE
        elif not is_empty(email) and not is_email_address(email):
            errors["email"] = "This is not a valid email"

        if required and is_empty(confirm):
            errors["confirm_required"] = REQUIRED_MESSAGE
        if (email or "") != (confirm or ""):
            errors["match"] = "Emails do not match."
    else:
        if required and is_empty(value):
            errors["email_required"] = REQUIRED_MESSAGE
        elif not is_empty(value) and not is_email_address(value):
            errors["email"] = "This is not a valid email"

    return finish(errors)


def is_phone(value: Any, field: FieldDefinition, required: bool) -> ValidationOutcome:
    errors: FieldErrors = {}

    if is_empty(value):
        if required:
            return {"required": REQUIRED_MESSAGE}
        return VALID

    value = str(value)
    digits = re.sub(r"[^0-9]", "", value)

    if len(digits) < 7:
        errors["digits"] = "This phone number is too short"

    if PHONE_INVALID_CHARS.search(value):
        errors["chars"] = "This phone number contains invalid characters."

    if field.phone_format == "us" and len(digits) != 10:
        errors["digits"] = "This phone number is not 10 digits."

    return finish(errors)


def is_website(value: Any, field: FieldDefinition, required: bool) -> ValidationOutcome:
    if required and is_empty(value):
        return {"website_required": REQUIRED_MESSAGE}
    if not is_empty(value) and not WEBSITE_PATTERN.match(str(value)):
        return {"website": "This is not a valid URL. URL's must start with http(s)://"}
    return VALID


def is_name(value: Any, field: FieldDefinition, required: bool) -> ValidationOutcome:
    errors: FieldErrors = {}

    if required and is_empty(_part(value, "first")):
        errors["first_required"] = "First name is required."
    if required and is_empty(_part(value, "last")):
        errors["last_required"] = "Last name is required."

    return finish(errors)


def is_address(value: Any, field: FieldDefinition, required: bool) -> ValidationOutcome:
    if not required:
        return VALID

    parts = ["street", "city", "state", "zipcode"]
    if field.address_type == "international":
        parts.append("country")

    errors: FieldErrors = {
        f"{part}_required": REQUIRED_MESSAGE
        for part in parts
        if is_empty(_part(value, part))
    }
    return finish(errors)


def _check_part(
    errors: FieldErrors,
    value: Any,
    required: bool,
    key: str,
    required_code: str,
    required_message: str,
    pattern: re.Pattern[str],
    invalid_message: str,
) -> None:
    part = _part(value, key)
    if required and is_empty(part):
        errors[required_code] = required_message
    elif not is_empty(part) and not pattern.match(str(part)):
        errors[key] = invalid_message


def is_date(value: Any, field: FieldDefinition, required: bool) -> ValidationOutcome:
    """Validate a date/time composite.

    The parts checked depend on the field's show_date/show_time flags:
    date only, time only, or (any other combination) both. In time-only
    mode the hour accepts slashes like the date part does; with both shown
    the hour must be purely numeric.
    """
    errors: FieldErrors = {}

    date_only = field.show_date and not field.show_time
    time_only = field.show_time and not field.show_date

    if not time_only:
        _check_part(
            errors, value, required, "date",
            "date_required", "Date is required.",
            DATE_PATTERN, "This date is not valid.",
        )

    if not date_only:
        hour_pattern = DATE_PATTERN if time_only else NUMERIC_PATTERN
        _check_part(
            errors, value, required, "hour",
            "hour_required", "Hour is required.",
            hour_pattern, "This is not a valid hour.",
        )
        _check_part(
            errors, value, required, "minute",
            "minutes_required", "Minute is required.",
            NUMERIC_PATTERN, "This is not a valid minute.",
        )
        if required and is_empty(_part(value, "am-pm")):
            errors["am-pm_required"] = "AM/PM is required."

    return finish(errors)


def is_file(value: Any, field: FieldDefinition, required: bool) -> ValidationOutcome:
    """Validate upload metadata for a file field.

    Size limits are configured in megabytes (10^6 bytes). A transport
    size error reports file_size; any other transport error, or an empty
    file, reports file_upload on its own.
    """
    upload = value if isinstance(value, UploadedFile) else None

    if upload is None or upload.is_missing:
        if required:
            return {"required": REQUIRED_MESSAGE}
        return VALID

    errors: FieldErrors = {}
    max_size = field.max_file_size

    too_big = bool(max_size) and upload.size > max_size * 1000 * 1000
    if too_big or upload.error in (UploadError.INI_SIZE, UploadError.FORM_SIZE):
        if max_size:
            errors["file_size"] = f"This file is too big ({int(max_size)} MB max)"
        else:
            errors["file_size"] = "This file is too big."

    if upload.error in (UploadError.INI_SIZE, UploadError.FORM_SIZE):
        return errors

    if upload.error != UploadError.OK or not upload.size:
        return {"file_upload": "An upload error occurred."}

    allowed = field.allowed_extensions()
    if allowed and upload.extension not in allowed:
        errors["file_extension"] = "File contains an invalid extension."

    return finish(errors)


class RecaptchaValidator:
    """Validator that checks a CAPTCHA response with an external verifier.

    Without a verifier every response is rejected.
    """

    def __init__(self, verifier: CaptchaVerifier | None = None) -> None:
        self._verifier = verifier

    def __call__(
        self, value: Any, field: FieldDefinition, required: bool
    ) -> ValidationOutcome:
        if self._verifier is None:
            logger.warning("No CAPTCHA verifier configured; rejecting field %s", field.slug)
            return {"recaptcha": RECAPTCHA_MESSAGE}

        token = "" if value is None else str(value)
        try:
            accepted = self._verifier.verify(token, field.secret_key or "")
        except Exception:
            logger.warning("CAPTCHA verification failed for field %s", field.slug, exc_info=True)
            accepted = False

        if not accepted:
            return {"recaptcha": RECAPTCHA_MESSAGE}
        return VALID
