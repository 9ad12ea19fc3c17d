"""form-handler: field-driven form validation and submission processing."""

__version__ = "0.1.0"

from form_handler.core.factory import create_field_types
from form_handler.hooks import ProcessorHooks
from form_handler.pipeline import (
    ErrorStore,
    FieldProcessor,
    OutcomeCode,
    SubmissionOutcome,
    SubmissionProcessor,
    SubmissionRequest,
)

__all__ = [
    "__version__",
    "ErrorStore",
    "FieldProcessor",
    "OutcomeCode",
    "ProcessorHooks",
    "SubmissionOutcome",
    "SubmissionProcessor",
    "SubmissionRequest",
    "create_field_types",
]
