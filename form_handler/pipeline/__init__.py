"""Field and submission processing."""

from form_handler.pipeline.errors import ErrorStore
from form_handler.pipeline.field import FieldProcessor, FieldResult
from form_handler.pipeline.models import OutcomeCode, SubmissionOutcome, SubmissionRequest
from form_handler.pipeline.submission import SubmissionProcessor

__all__ = [
    "ErrorStore",
    "FieldProcessor",
    "FieldResult",
    "OutcomeCode",
    "SubmissionOutcome",
    "SubmissionProcessor",
    "SubmissionRequest",
]
