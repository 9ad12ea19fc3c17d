"""Pydantic models for form and field definitions."""

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field


class FieldType(str, Enum):
    """Built-in field type tags.

    Field definitions store the tag as a plain string so hosts can add
    their own types; these members cover the types shipped by default.
    """

    SINGLE_LINE_TEXT = "single-line-text"
    PARAGRAPH_TEXT = "paragraph-text"
    HIDDEN = "hidden"
    EMAIL = "email"
    PHONE = "phone"
    WEBSITE = "website"
    NAME = "name"
    ADDRESS = "address"
    FILE = "file"
    DATE = "date"
    DROPDOWN = "dropdown"
    CHECKBOXES = "checkboxes"
    RADIO = "radio"
    RECAPTCHA = "recaptcha"
    HTML = "html"
    SECTION_HEADER = "section-header"


CHOICEABLE_TYPES = (FieldType.DROPDOWN, FieldType.CHECKBOXES, FieldType.RADIO)


class FieldDefinition(BaseModel):
    """A single configurable input of a form."""

    id: int
    type: str
    slug: str
    label: str | None = None
    required: bool = False

    # file
    max_file_size: float | None = None  # megabytes
    file_extensions: str | None = None  # "jpg, png;gif"

    # address
    address_type: Literal["us", "international"] | None = None

    # date
    show_date: bool = False
    show_time: bool = False

    # phone
    phone_format: str | None = None

    # recaptcha
    site_key: str | None = None
    secret_key: str | None = None

    # choiceable
    choices: list[str] = Field(default_factory=list)

    # free-form configuration for host-provided field types
    options: dict[str, Any] = Field(default_factory=dict)

    def allowed_extensions(self) -> list[str]:
        """Return the lower-cased extension allow-list (empty means any)."""
        if not self.file_extensions:
            return []
        raw = self.file_extensions.lower().replace(";", ",")
        return [ext.strip() for ext in raw.split(",") if ext.strip()]


class FormDefinition(BaseModel):
    """A form: ordered fields plus completion and notification settings."""

    id: int
    title: str = ""
    fields: list[FieldDefinition] = Field(default_factory=list)

    completion_action_type: Literal["text", "redirect"] = "text"
    completion_redirect_url: str | None = None
    completion_message: str | None = None

    send_email_notifications: bool = False
    email_notification_addresses: str | None = None
    email_notification_from_type: Literal["default", "custom", "field"] = "default"
    email_notification_from_address: str | None = None
    email_notification_from_field: str | None = None

    def get_field(self, field_id: int) -> FieldDefinition | None:
        """Get a field by its ID."""
        for field in self.fields:
            if field.id == field_id:
                return field
        return None

    def get_field_by_slug(self, slug: str) -> FieldDefinition | None:
        """Get a field by its slug."""
        for field in self.fields:
            if field.slug == slug:
                return field
        return None

    def notification_addresses(self) -> list[str]:
        """Split the configured recipient string into trimmed addresses."""
        if not self.email_notification_addresses:
            return []
        raw = self.email_notification_addresses.replace(";", ",")
        return [address.strip() for address in raw.split(",") if address.strip()]
