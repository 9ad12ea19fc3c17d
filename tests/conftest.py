"""Pytest configuration and shared fixtures."""

from pathlib import Path
from typing import Any

import pytest

from form_handler.core.factory import create_field_types
from form_handler.core.field_types import FieldTypeRegistry
from form_handler.core.models import StoredFile, UploadedFile
from form_handler.exceptions import MailDeliveryError, SubmissionStoreError
from form_handler.local.mail import SentMessage
from form_handler.notification import Notifier
from form_handler.pipeline import ErrorStore, SubmissionProcessor
from form_handler.registry import FieldDefinition, FormDefinition, FormRegistry


class RecordingMailer:
    """Mailer that records every message, optionally failing for some recipients."""

    def __init__(
        self,
        failing: set[str] | None = None,
        error: type[Exception] = MailDeliveryError,
    ) -> None:
        self.sent: list[SentMessage] = []
        self.failing = failing or set()
        self.error = error

    def send(self, to: str, subject: str, html_body: str, headers: list[str]) -> None:
        if to in self.failing:
            raise self.error(f"cannot deliver to {to}")
        self.sent.append(SentMessage(to=to, subject=subject, html_body=html_body, headers=headers))


class MemorySubmissionStore:
    """Submission store keeping records in a list."""

    def __init__(self, fail: bool = False) -> None:
        self.records: list[dict[str, Any]] = []
        self.fail = fail

    def create_submission(self, form_id: int, data: dict[str, Any], remote_addr: str = "") -> int:
        if self.fail:
            raise SubmissionStoreError("database unavailable")
        self.records.append({"form_id": form_id, "data": data, "remote_addr": remote_addr})
        return 100 + len(self.records)


class MemoryUploadStore:
    """Upload store that hands out sequential IDs and tracks owners."""

    def __init__(self) -> None:
        self.received: list[UploadedFile] = []
        self.owners: dict[int, int] = {}

    def receive_upload(self, upload: UploadedFile) -> StoredFile | None:
        self.received.append(upload)
        file_id = len(self.received)
        return StoredFile(
            id=file_id,
            url=f"https://files.example.org/{file_id}/{upload.filename}",
            file_name=upload.filename,
        )

    def reparent(self, file_id: int, owner_id: int) -> None:
        self.owners[file_id] = owner_id


class SwitchNonceVerifier:
    """Accepts exactly one token."""

    def __init__(self, valid_token: str = "good-nonce") -> None:
        self.valid_token = valid_token
        self.calls: list[tuple[str, str]] = []

    def verify(self, token: str, action: str) -> bool:
        self.calls.append((token, action))
        return token == self.valid_token


class FakeCaptchaVerifier:
    """Accepts one token; raises for the token "explode"."""

    def __init__(self, accepted: str = "human") -> None:
        self.accepted = accepted
        self.calls: list[tuple[str, str]] = []

    def verify(self, token: str, secret: str) -> bool:
        self.calls.append((token, secret))
        if token == "explode":
            raise ConnectionError("verification service unreachable")
        return token == self.accepted


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def schema_path(project_root: Path) -> Path:
    """Return the form definition schema path."""
    return project_root / "schemas" / "form_definition.schema.json"


@pytest.fixture
def mailer() -> RecordingMailer:
    return RecordingMailer()


@pytest.fixture
def submission_store() -> MemorySubmissionStore:
    return MemorySubmissionStore()


@pytest.fixture
def upload_store() -> MemoryUploadStore:
    return MemoryUploadStore()


@pytest.fixture
def nonce_verifier() -> SwitchNonceVerifier:
    return SwitchNonceVerifier()


@pytest.fixture
def captcha_verifier() -> FakeCaptchaVerifier:
    return FakeCaptchaVerifier()


@pytest.fixture
def field_types(upload_store: MemoryUploadStore, captcha_verifier: FakeCaptchaVerifier) -> FieldTypeRegistry:
    """Built-in field types wired to the fake collaborators."""
    return create_field_types(upload_store=upload_store, captcha_verifier=captcha_verifier)


@pytest.fixture
def contact_form() -> FormDefinition:
    """A contact form exercising most built-in field types."""
    return FormDefinition(
        id=7,
        title="Contact Us",
        fields=[
            FieldDefinition(id=1, type="section-header", slug="intro"),
            FieldDefinition(id=2, type="name", slug="your_name", label="Name", required=True),
            FieldDefinition(id=3, type="email", slug="email", label="Email", required=True),
            FieldDefinition(id=4, type="paragraph-text", slug="message", label="Message", required=True),
            FieldDefinition(id=5, type="phone", slug="phone", label="Phone"),
            FieldDefinition(id=6, type="checkboxes", slug="topics", label="Topics", choices=["Sales", "Support"]),
            FieldDefinition(id=7, type="hidden", slug="campaign", label="Campaign"),
            FieldDefinition(id=8, type="recaptcha", slug="captcha", secret_key="s3cret"),
        ],
        send_email_notifications=True,
        email_notification_addresses="owner@acme.io; sales@acme.io",
        completion_message="Thanks, we'll be in touch.",
    )


@pytest.fixture
def form_registry(tmp_path: Path, contact_form: FormDefinition) -> FormRegistry:
    registry = FormRegistry(tmp_path / "form-registry")
    registry.register(contact_form)
    return registry


@pytest.fixture
def error_store() -> ErrorStore:
    return ErrorStore()


@pytest.fixture
def processor(
    form_registry: FormRegistry,
    field_types: FieldTypeRegistry,
    nonce_verifier: SwitchNonceVerifier,
    submission_store: MemorySubmissionStore,
    upload_store: MemoryUploadStore,
    mailer: RecordingMailer,
    error_store: ErrorStore,
) -> SubmissionProcessor:
    """A submission processor wired entirely to fakes."""
    return SubmissionProcessor(
        forms=form_registry,
        field_types=field_types,
        nonce_verifier=nonce_verifier,
        submissions=submission_store,
        uploads=upload_store,
        notifier=Notifier(mailer, site_name="Acme"),
        error_store=error_store,
    )


@pytest.fixture
def valid_values() -> dict[str, Any]:
    """Raw values that pass every field of the contact form."""
    return {
        "form_nonce": "good-nonce",
        "your_name": {"first": "Jane", "last": "Doe"},
        "email": {"email": "jane@acme.io", "confirm": "jane@acme.io"},
        "message": "Hello <b>there</b>",
        "phone": "555-123-4567",
        "topics": ["Sales", ""],
        "campaign": "spring",
        "g-recaptcha-response": "human",
    }
