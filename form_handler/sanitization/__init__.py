"""Sanitizers that clean validated field values for storage."""

from form_handler.sanitization.sanitizers import (
    FileSanitizer,
    sanitize_email,
    sanitize_phone,
    sanitize_text,
    sanitize_url,
)

__all__ = [
    "FileSanitizer",
    "sanitize_email",
    "sanitize_phone",
    "sanitize_text",
    "sanitize_url",
]
