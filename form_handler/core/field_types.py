"""Field type registry.

Maps a field type tag to its sanitizer/validator pair. The processor
looks every field up here, so hosts add or customize types by
registering on the instance they pass in.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from form_handler.validation.outcome import Sanitizer, Validator


class FieldCallbacks(BaseModel):
    """Capabilities of one field type. Either side may be absent."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    sanitizer: Sanitizer | None = None
    validator: Validator | None = None


_NO_CALLBACKS = FieldCallbacks()


def _tag(type_tag: str) -> str:
    if isinstance(type_tag, Enum):
        return type_tag.value
    return type_tag


class FieldTypeRegistry:
    """Registry of field types and their callbacks.

    Registration overwrites: the last registration for a tag wins.
    Unknown tags resolve to a pair with neither callback, so their values
    pass through unvalidated and unsanitized.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._types: dict[str, FieldCallbacks] = {}

    def register(
        self,
        type_tag: str,
        sanitizer: Sanitizer | None = None,
        validator: Validator | None = None,
    ) -> None:
        """Register or replace the callbacks for a field type.

        Args:
            type_tag: The field type (e.g., "email", "phone").
            sanitizer: Callable cleaning a validated value.
            validator: Callable returning VALID or an error mapping.
        """
        self._types[_tag(type_tag)] = FieldCallbacks(sanitizer=sanitizer, validator=validator)

    def lookup(self, type_tag: str) -> FieldCallbacks:
        """Get the callbacks for a field type.

        Args:
            type_tag: The field type.

        Returns:
            The registered FieldCallbacks, or an empty pair if unknown.
        """
        return self._types.get(_tag(type_tag), _NO_CALLBACKS)

    def has_type(self, type_tag: str) -> bool:
        """Check if a field type is registered."""
        return _tag(type_tag) in self._types

    @property
    def types(self) -> list[str]:
        """List all registered field types."""
        return list(self._types.keys())
