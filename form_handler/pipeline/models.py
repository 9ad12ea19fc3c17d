"""Submission request and outcome models."""

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field

from form_handler.core.models import UploadedFile
from form_handler.validation.outcome import FieldErrors


class OutcomeCode(str, Enum):
    """Stable failure codes returned to the caller."""

    HONEYPOT = "honeypot"
    NONCE = "nonce"
    MISSING_FORM = "missing_form"
    INVALID_FIELDS = "invalid_fields"
    COULD_NOT_CREATE_SUBMISSION = "could_not_create_submission"


class SubmissionRequest(BaseModel):
    """One submission as parsed by the HTTP layer.

    `values` holds the posted fields by input key (scalars, mappings for
    composite fields, lists for multi-select fields); `files` holds upload
    metadata by input key.
    """

    form_id: int
    values: dict[str, Any] = Field(default_factory=dict)
    files: dict[str, UploadedFile] = Field(default_factory=dict)
    remote_addr: str = ""
    form_page: str | None = None


class SubmissionOutcome(BaseModel):
    """Result of processing a submission."""

    success: bool
    error: OutcomeCode | None = None
    field_errors: dict[str, FieldErrors] | None = None
    submission_id: int | None = None
    action_type: Literal["text", "redirect"] | None = None
    completion_redirect_url: str | None = None
    completion_message: str | None = None

    @classmethod
    def failure(
        cls,
        code: OutcomeCode,
        field_errors: dict[str, FieldErrors] | None = None,
    ) -> "SubmissionOutcome":
        return cls(success=False, error=code, field_errors=field_errors)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire dict, excluding unset values."""
        return self.model_dump(mode="json", exclude_none=True)
