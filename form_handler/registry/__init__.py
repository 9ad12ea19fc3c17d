"""Registry modules for loading form and field definitions."""

from form_handler.registry.forms import FormRegistry
from form_handler.registry.models import (
    CHOICEABLE_TYPES,
    FieldDefinition,
    FieldType,
    FormDefinition,
)

__all__ = [
    "CHOICEABLE_TYPES",
    "FieldDefinition",
    "FieldType",
    "FormDefinition",
    "FormRegistry",
]
