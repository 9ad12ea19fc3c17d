"""Form registry for loading and caching form definitions."""

import json
import logging
from pathlib import Path

import jsonschema

from form_handler.exceptions import FieldNotFoundError, FormValidationError
from form_handler.registry.models import FieldDefinition, FormDefinition

logger = logging.getLogger(__name__)


class FormRegistry:
    """File-backed store of form definitions.

    Loads form definitions from a directory structure:
        <registry_path>/forms/<form_id>.json

    Definitions can also be registered in memory, which is how hosts that
    keep forms elsewhere (a database, a CMS) feed the processor.
    """

    def __init__(
        self,
        registry_path: Path | str,
        schema_path: Path | str | None = None,
    ) -> None:
        """Initialize the form registry.

        Args:
            registry_path: Path to the form registry directory.
            schema_path: Optional path to the form definition schema for validation.
        """
        self.registry_path = Path(registry_path)
        self.forms_path = self.registry_path / "forms"
        self._cache: dict[int, FormDefinition] = {}
        self._field_index: dict[int, FieldDefinition] = {}
        self._schema: dict | None = None

        if schema_path:
            with open(schema_path) as f:
                self._schema = json.load(f)

    def _get_form_path(self, form_id: int) -> Path:
        return self.forms_path / f"{form_id}.json"

    def register(self, form: FormDefinition) -> None:
        """Add or replace a form definition in the registry.

        Args:
            form: The form definition to register.
        """
        previous = self._cache.get(form.id)
        if previous is not None:
            for field in previous.fields:
                self._field_index.pop(field.id, None)

        self._cache[form.id] = form
        for field in form.fields:
            self._field_index[field.id] = field

    def load(self, data: dict) -> FormDefinition:
        """Validate raw form data and register the resulting definition.

        Args:
            data: Parsed JSON form definition.

        Returns:
            The registered FormDefinition.

        Raises:
            FormValidationError: If the data fails schema validation.
        """
        if self._schema:
            try:
                jsonschema.validate(data, self._schema)
            except jsonschema.ValidationError as e:
                raise FormValidationError(
                    f"Form definition validation failed: {e.message}"
                ) from e

        form = FormDefinition.model_validate(data)
        self.register(form)
        return form

    def get_form(self, form_id: int) -> FormDefinition | None:
        """Get a form definition by ID.

        Args:
            form_id: The form identifier.

        Returns:
            The FormDefinition, or None if no such form exists.

        Raises:
            FormValidationError: If the stored definition fails schema validation.
        """
        if form_id in self._cache:
            return self._cache[form_id]

        form_path = self._get_form_path(form_id)
        if not form_path.exists():
            return None

        with open(form_path) as f:
            data = json.load(f)

        logger.debug("Loaded form %s from %s", form_id, form_path)
        return self.load(data)

    def get_field(self, field_id: int) -> FieldDefinition:
        """Get a field definition by ID from any loaded form.

        Raises:
            FieldNotFoundError: If no loaded form contains the field.
        """
        if field_id not in self._field_index:
            raise FieldNotFoundError(f"Field not found: {field_id}")
        return self._field_index[field_id]

    def list_forms(self) -> list[int]:
        """List all available form IDs, on disk or registered."""
        form_ids = set(self._cache)
        if self.forms_path.exists():
            for f in self.forms_path.glob("*.json"):
                if f.stem.isdigit():
                    form_ids.add(int(f.stem))
        return sorted(form_ids)
