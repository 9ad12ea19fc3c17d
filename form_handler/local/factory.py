"""Assemble a SubmissionProcessor from local, file-backed collaborators."""

from pathlib import Path

from form_handler.config import Settings
from form_handler.core.factory import create_field_types
from form_handler.core.protocols import CaptchaVerifier, Mailer
from form_handler.local.mail import LogMailer
from form_handler.local.security import AllowAllNonceVerifier, StaticCaptchaVerifier
from form_handler.local.submissions import JsonSubmissionStore
from form_handler.local.uploads import LocalUploadStore
from form_handler.notification import Notifier
from form_handler.pipeline import SubmissionProcessor
from form_handler.registry import FormRegistry


def create_local_processor(
    settings: Settings,
    schema_path: Path | str | None = None,
    mailer: Mailer | None = None,
    captcha_verifier: CaptchaVerifier | None = None,
) -> SubmissionProcessor:
    """Create a processor that reads forms and writes results on disk.

    Args:
        settings: Paths, request keys and site name.
        schema_path: Optional form definition schema for the registry.
        mailer: Delivery collaborator (defaults to LogMailer).
        captcha_verifier: CAPTCHA check (defaults to StaticCaptchaVerifier).

    Returns:
        A ready SubmissionProcessor.
    """
    forms = FormRegistry(settings.form_registry_path, schema_path=schema_path)
    uploads = LocalUploadStore(settings.uploads_path, base_url=settings.uploads_base_url)
    field_types = create_field_types(
        upload_store=uploads,
        captcha_verifier=captcha_verifier or StaticCaptchaVerifier(),
    )

    return SubmissionProcessor(
        forms=forms,
        field_types=field_types,
        nonce_verifier=AllowAllNonceVerifier(),
        submissions=JsonSubmissionStore(settings.submissions_path),
        uploads=uploads,
        notifier=Notifier(mailer or LogMailer(), site_name=settings.site_name),
        settings=settings,
    )
