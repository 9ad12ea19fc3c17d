"""Collaborator protocols.

The processor never talks to storage, mail transport, or anti-forgery
machinery directly. Hosts provide objects that conform to these protocols;
the local package ships file-backed versions for command line use.
"""

from typing import Any, Protocol, runtime_checkable

from form_handler.core.models import StoredFile, UploadedFile
from form_handler.registry.models import FieldDefinition, FormDefinition


@runtime_checkable
class FormStore(Protocol):
    """Read-only access to form and field definitions."""

    def get_form(self, form_id: int) -> FormDefinition | None:
        """Return the form definition, or None if it does not exist."""
        ...

    def get_field(self, field_id: int) -> FieldDefinition:
        """Return a field definition.

        Raises:
            FieldNotFoundError: If the field does not exist.
        """
        ...


@runtime_checkable
class NonceVerifier(Protocol):
    """Anti-forgery token check."""

    def verify(self, token: str, action: str) -> bool:
        """Return True if the token is valid for the action."""
        ...


@runtime_checkable
class CaptchaVerifier(Protocol):
    """CAPTCHA response check against a site secret."""

    def verify(self, token: str, secret: str) -> bool:
        """Return True if the response token was accepted."""
        ...


@runtime_checkable
class UploadStore(Protocol):
    """Storage for uploaded files."""

    def receive_upload(self, upload: UploadedFile) -> StoredFile | None:
        """Persist an upload and return its stored record.

        Returns None when there was nothing to store.

        Raises:
            UploadStoreError: If the file could not be stored.
        """
        ...

    def reparent(self, file_id: int, owner_id: int) -> None:
        """Attach a stored file to a new owner (a submission record)."""
        ...


@runtime_checkable
class SubmissionStore(Protocol):
    """Persistence for completed submissions."""

    def create_submission(
        self,
        form_id: int,
        data: dict[str, Any],
        remote_addr: str = "",
    ) -> int:
        """Create a submission record parented to the form.

        Returns:
            The new submission ID.

        Raises:
            SubmissionStoreError: If the record could not be created.
        """
        ...


@runtime_checkable
class Mailer(Protocol):
    """Outbound email delivery."""

    def send(
        self,
        to: str,
        subject: str,
        html_body: str,
        headers: list[str],
    ) -> None:
        """Deliver one message.

        Raises:
            MailDeliveryError: If delivery failed.
        """
        ...
