"""HTML rendering of a sanitized submission for notification emails."""

from collections.abc import Callable, Mapping
from html import escape
from typing import Any

from form_handler.notification.formatting import format_address, format_date, format_name
from form_handler.registry.models import CHOICEABLE_TYPES, FieldType, FormDefinition
from form_handler.validation.validators import is_empty

HIDDEN_FIELD_LABEL = "*Hidden Field*"
EMPTY_PLACEHOLDER = "<span>-</span>"

Formatter = Callable[[Any], str]


class SubmissionRenderer:
    """Renders a submission as a label/value listing in form field order.

    Date, name and address values go through pluggable formatters; the
    defaults produce single-line plain text.
    """

    def __init__(
        self,
        date_formatter: Formatter = format_date,
        name_formatter: Formatter = format_name,
        address_formatter: Formatter = format_address,
    ) -> None:
        self.date_formatter = date_formatter
        self.name_formatter = name_formatter
        self.address_formatter = address_formatter

    def render(
        self,
        form: FormDefinition,
        submission: dict[str, Any],
        remote_addr: str = "",
        form_page: str | None = None,
    ) -> str:
        """Render the notification body.

        Args:
            form: The form the submission belongs to.
            submission: Slug -> sanitized value.
            remote_addr: Submitter network address.
            form_page: URL of the page the form was submitted from.

        Returns:
            The HTML body.
        """
        blocks: list[str] = []

        for field in form.fields:
            if field.slug not in submission:
                continue

            label = HIDDEN_FIELD_LABEL if field.type == FieldType.HIDDEN else field.label
            if label:
                heading = f"<b>{escape(label)} ({escape(field.slug)}):</b>"
            else:
                heading = f"<b>{escape(field.slug)}:</b>"

            value_html = self.render_value(field.type, submission[field.slug])
            blocks.append(f"<div>{heading}</div>")
            blocks.append(f'<div style="margin-bottom: 10px;">{value_html}</div>')

        if form_page:
            blocks.append(f"<div>Form submitted from: {escape(form_page)}</div>")
        blocks.append(f"<div>Form submitter IP: {escape(remote_addr)}</div>")

        return "\n".join(blocks)

    def render_value(self, field_type: str, value: Any) -> str:
        """Render one sanitized value as escaped HTML."""
        if is_empty(value):
            return EMPTY_PLACEHOLDER

        if field_type == FieldType.DATE:
            return escape(self.date_formatter(value))
        if field_type == FieldType.NAME:
            return escape(self.name_formatter(value))
        if field_type == FieldType.ADDRESS:
            return escape(self.address_formatter(value))

        if field_type == FieldType.FILE:
            if not isinstance(value, Mapping):
                return escape(str(value))
            url = escape(str(value.get("url", "")))
            file_name = escape(str(value.get("file_name", "")))
            return f'<a href="{url}">{file_name}</a>'

        if field_type == FieldType.EMAIL:
            if isinstance(value, Mapping):
                return escape(str(value.get("email") or ""))
            return escape(str(value))

        if field_type in CHOICEABLE_TYPES:
            if isinstance(value, Mapping):
                value = list(value.values())
            if isinstance(value, (list, tuple)):
                selections = [escape(str(v)) for v in value if not is_empty(v)]
                return "<br>".join(selections) if selections else EMPTY_PLACEHOLDER
            return escape(str(value))

        return escape(str(value))
