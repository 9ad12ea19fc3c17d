"""Core shared infrastructure for the form handler.

Contains the field type registry, collaborator protocols, and the
upload models shared by validators, sanitizers and processors.
"""

from form_handler.core.field_types import FieldCallbacks, FieldTypeRegistry
from form_handler.core.models import StoredFile, UploadedFile, UploadError
from form_handler.core.protocols import (
    CaptchaVerifier,
    FormStore,
    Mailer,
    NonceVerifier,
    SubmissionStore,
    UploadStore,
)

__all__ = [
    # Models
    "StoredFile",
    "UploadError",
    "UploadedFile",
    # Protocols
    "CaptchaVerifier",
    "FormStore",
    "Mailer",
    "NonceVerifier",
    "SubmissionStore",
    "UploadStore",
    # Registry
    "FieldCallbacks",
    "FieldTypeRegistry",
]
