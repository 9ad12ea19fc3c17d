"""Validate-then-sanitize processing for a single field."""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from form_handler.core.field_types import FieldTypeRegistry
from form_handler.core.protocols import FormStore
from form_handler.hooks import ProcessorHooks
from form_handler.registry.models import FieldDefinition
from form_handler.validation.outcome import FieldErrors, Sanitizer, is_valid

logger = logging.getLogger(__name__)

INVALID_MESSAGE = "This field is invalid."


class FieldResult(BaseModel):
    """Outcome of processing one field.

    Exactly one of the two states holds: `error` is set and
    `sanitized_value` is None, or `error` is None.
    """

    error: FieldErrors | None = None
    sanitized_value: Any = None

    @property
    def is_error(self) -> bool:
        return self.error is not None


class FieldProcessor:
    """Runs a field's validator and, on success, its sanitizer.

    Composite values (mappings of named parts, or lists of selections)
    are sanitized leaf by leaf with the field type's scalar sanitizer.
    """

    def __init__(
        self,
        field_types: FieldTypeRegistry,
        forms: FormStore | None = None,
        hooks: ProcessorHooks | None = None,
    ) -> None:
        """Initialize the field processor.

        Args:
            field_types: Registry resolving a type tag to its callbacks.
            forms: Store used to resolve field IDs in process().
            hooks: Optional validator/sanitizer overrides.
        """
        self.field_types = field_types
        self.forms = forms
        self.hooks = hooks if hooks is not None else ProcessorHooks()

    def process(self, field_id: int, value: Any) -> FieldResult:
        """Process a raw value for a field identified by ID.

        Raises:
            ValueError: If the processor was built without a form store.
            FieldNotFoundError: If the store does not know the field.
        """
        if self.forms is None:
            raise ValueError("FieldProcessor needs a form store to resolve field IDs")
        return self.process_definition(self.forms.get_field(field_id), value)

    def process_definition(self, field: FieldDefinition, value: Any) -> FieldResult:
        """Process a raw value against a field definition.

        Args:
            field: The field definition.
            value: The raw submitted value (scalar, mapping, list, or upload).

        Returns:
            FieldResult with either the error mapping or the sanitized value.
        """
        callbacks = self.field_types.lookup(field.type)

        validator = self.hooks.validator(callbacks.validator, value, field)
        if validator is not None:
            outcome = validator(value, field, field.required)
            if not is_valid(outcome):
                if not isinstance(outcome, Mapping):
                    outcome = {"invalid": INVALID_MESSAGE}
                logger.debug("Field %s failed validation: %s", field.slug, list(outcome))
                return FieldResult(error=dict(outcome))

        return FieldResult(sanitized_value=self._sanitize(field, value, callbacks.sanitizer))

    def _sanitize(
        self,
        field: FieldDefinition,
        value: Any,
        default_sanitizer: Sanitizer | None,
    ) -> Any:
        if isinstance(value, Mapping):
            cleaned: dict[str, Any] = {}
            for key, leaf in value.items():
                sanitizer = self.hooks.sanitizer(default_sanitizer, leaf, field)
                if sanitizer is not None:
                    cleaned[key] = sanitizer(leaf, field)
            return cleaned

        if isinstance(value, (list, tuple)):
            cleaned_list: list[Any] = []
            for leaf in value:
                sanitizer = self.hooks.sanitizer(default_sanitizer, leaf, field)
                if sanitizer is not None:
                    cleaned_list.append(sanitizer(leaf, field))
            return cleaned_list

        sanitizer = self.hooks.sanitizer(default_sanitizer, value, field)
        if sanitizer is None:
            return None
        return sanitizer(value, field)
