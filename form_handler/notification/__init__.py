"""Rendering and delivery of submission notifications."""

from form_handler.notification.formatting import format_address, format_date, format_name
from form_handler.notification.notifier import Notifier
from form_handler.notification.render import SubmissionRenderer

__all__ = [
    "Notifier",
    "SubmissionRenderer",
    "format_address",
    "format_date",
    "format_name",
]
