"""Factory functions for creating pre-configured components."""

from form_handler.core.field_types import FieldTypeRegistry
from form_handler.core.protocols import CaptchaVerifier, UploadStore
from form_handler.registry.models import FieldType
from form_handler.sanitization import (
    FileSanitizer,
    sanitize_email,
    sanitize_phone,
    sanitize_text,
    sanitize_url,
)
from form_handler.validation import (
    RecaptchaValidator,
    is_address,
    is_date,
    is_email,
    is_file,
    is_name,
    is_phone,
    is_website,
    not_empty,
    not_empty_choiceable,
)


def create_field_types(
    upload_store: UploadStore | None = None,
    captcha_verifier: CaptchaVerifier | None = None,
) -> FieldTypeRegistry:
    """Create a field type registry with all built-in types registered.

    File and reCAPTCHA fields need collaborators. Without an upload store
    file fields still validate but store nothing; without a CAPTCHA
    verifier every reCAPTCHA response is rejected.

    Args:
        upload_store: Storage used by the file sanitizer.
        captcha_verifier: Verifier used by the reCAPTCHA validator.

    Returns:
        A FieldTypeRegistry ready to pass to the processors.
    """
    registry = FieldTypeRegistry()

    registry.register(FieldType.SINGLE_LINE_TEXT, sanitizer=sanitize_text, validator=not_empty)
    registry.register(FieldType.PARAGRAPH_TEXT, sanitizer=sanitize_text, validator=not_empty)
    registry.register(FieldType.HIDDEN, sanitizer=sanitize_text)
    registry.register(FieldType.EMAIL, sanitizer=sanitize_email, validator=is_email)
    registry.register(FieldType.PHONE, sanitizer=sanitize_phone, validator=is_phone)
    registry.register(FieldType.WEBSITE, sanitizer=sanitize_url, validator=is_website)
    registry.register(FieldType.NAME, sanitizer=sanitize_text, validator=is_name)
    registry.register(FieldType.ADDRESS, sanitizer=sanitize_text, validator=is_address)
    registry.register(FieldType.DATE, sanitizer=sanitize_text, validator=is_date)

    for choiceable in (FieldType.DROPDOWN, FieldType.CHECKBOXES, FieldType.RADIO):
        registry.register(choiceable, sanitizer=sanitize_text, validator=not_empty_choiceable)

    file_sanitizer = FileSanitizer(upload_store) if upload_store is not None else None
    registry.register(FieldType.FILE, sanitizer=file_sanitizer, validator=is_file)

    registry.register(FieldType.RECAPTCHA, validator=RecaptchaValidator(captcha_verifier))

    return registry
