"""Email notification of completed submissions."""

import logging
from collections.abc import Mapping
from typing import Any

from form_handler.core.protocols import Mailer
from form_handler.hooks import ProcessorHooks
from form_handler.notification.render import SubmissionRenderer
from form_handler.registry.models import FormDefinition
from form_handler.sanitization import sanitize_email

logger = logging.getLogger(__name__)

BASE_HEADERS = ("MIME-Version: 1.0", "Content-type: text/html; charset=utf-8")


class Notifier:
    """Sends one notification per configured recipient.

    Delivery is best effort: any error from a send is logged and the
    remaining recipients are still tried. Errors never reach the caller.
    """

    def __init__(
        self,
        mailer: Mailer,
        renderer: SubmissionRenderer | None = None,
        hooks: ProcessorHooks | None = None,
        site_name: str = "",
    ) -> None:
        self.mailer = mailer
        self.renderer = renderer if renderer is not None else SubmissionRenderer()
        self.hooks = hooks if hooks is not None else ProcessorHooks()
        self.site_name = site_name

    def subject_for(self, form: FormDefinition) -> str:
        return f'{self.site_name}: Form Submission to "{form.title}"'

    def headers_for(self, form: FormDefinition, submission: dict[str, Any]) -> list[str]:
        """Build message headers, including the configured sender if any."""
        headers = list(BASE_HEADERS)
        sender = ""

        if form.email_notification_from_type == "custom":
            sender = sanitize_email(form.email_notification_from_address)
        elif form.email_notification_from_type == "field":
            value = submission.get(form.email_notification_from_field or "")
            if isinstance(value, Mapping):
                value = value.get("confirm") or value.get("email")
            if value:
                sender = sanitize_email(value)

        if sender:
            headers.append(f"From: {sender}")
            headers.append(f"Reply-To: {sender}")
        return headers

    def notify(
        self,
        form: FormDefinition,
        submission: dict[str, Any],
        remote_addr: str = "",
        form_page: str | None = None,
    ) -> int:
        """Email the rendered submission to every recipient.

        Args:
            form: The form definition holding notification settings.
            submission: Slug -> sanitized value.
            remote_addr: Submitter network address.
            form_page: URL of the page the form was submitted from.

        Returns:
            Number of messages handed to the mailer successfully.
        """
        recipients = form.notification_addresses()
        if not form.send_email_notifications or not recipients:
            return 0

        body = self.renderer.render(form, submission, remote_addr=remote_addr, form_page=form_page)
        headers = self.headers_for(form, submission)
        subject = self.subject_for(form)

        sent = 0
        for recipient in recipients:
            try:
                self.mailer.send(
                    recipient,
                    self.hooks.email_subject(subject, form, recipient, form_page),
                    self.hooks.email_body(body, form, recipient, form_page),
                    self.hooks.email_headers(list(headers), form, recipient, form_page),
                )
            except Exception:
                logger.warning(
                    "Notification for form %s to %s failed", form.id, recipient, exc_info=True
                )
                continue
            logger.info("Notification for form %s sent to %s", form.id, recipient)
            sent += 1

        return sent
