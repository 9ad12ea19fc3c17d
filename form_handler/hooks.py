"""Extension points for the submission pipeline.

Each hook receives the default value plus context and returns the value
to use. The base class returns every default unchanged; hosts subclass it
and override only what they need.
"""

from typing import Any

from form_handler.registry.models import FieldDefinition, FormDefinition
from form_handler.validation.outcome import Sanitizer, Validator


class ProcessorHooks:
    """Identity implementation of every pipeline hook."""

    def display_only_types(self, types: set[str], form: FormDefinition) -> set[str]:
        """Field types that never submit a value and are skipped entirely."""
        return types

    def storage_excluded_types(self, types: set[str], form: FormDefinition) -> set[str]:
        """Field types that must validate but are never stored or emailed."""
        return types

    def validator(
        self,
        validator: Validator | None,
        value: Any,
        field: FieldDefinition,
    ) -> Validator | None:
        """Validator to run for one field value."""
        return validator

    def sanitizer(
        self,
        sanitizer: Sanitizer | None,
        value: Any,
        field: FieldDefinition,
    ) -> Sanitizer | None:
        """Sanitizer to run for one field value (or one leaf of a composite)."""
        return sanitizer

    def email_subject(
        self,
        subject: str,
        form: FormDefinition,
        recipient: str,
        form_page: str | None,
    ) -> str:
        return subject

    def email_body(
        self,
        body: str,
        form: FormDefinition,
        recipient: str,
        form_page: str | None,
    ) -> str:
        return body

    def email_headers(
        self,
        headers: list[str],
        form: FormDefinition,
        recipient: str,
        form_page: str | None,
    ) -> list[str]:
        return headers
