"""Submission processing.

Runs every field of a form through the field processor, then either
caches the collected errors or persists the sanitized submission and
sends notifications.
"""

import logging
from collections.abc import Mapping
from typing import Any

from form_handler.config import Settings
from form_handler.core.field_types import FieldTypeRegistry
from form_handler.core.protocols import FormStore, NonceVerifier, SubmissionStore, UploadStore
from form_handler.exceptions import SubmissionStoreError, UploadStoreError
from form_handler.hooks import ProcessorHooks
from form_handler.notification.notifier import Notifier
from form_handler.pipeline.errors import ErrorStore
from form_handler.pipeline.field import FieldProcessor, FieldResult
from form_handler.pipeline.models import OutcomeCode, SubmissionOutcome, SubmissionRequest
from form_handler.registry.models import FieldDefinition, FieldType, FormDefinition
from form_handler.validation.outcome import FieldErrors
from form_handler.validation.validators import is_empty

logger = logging.getLogger(__name__)


class SubmissionProcessor:
    """Processes form submissions end to end.

    Collaborators are passed in explicitly; one processor is built by the
    host and shared by all request handlers.
    """

    def __init__(
        self,
        forms: FormStore,
        field_types: FieldTypeRegistry,
        nonce_verifier: NonceVerifier,
        submissions: SubmissionStore,
        uploads: UploadStore | None = None,
        notifier: Notifier | None = None,
        error_store: ErrorStore | None = None,
        hooks: ProcessorHooks | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize the submission processor.

        Args:
            forms: Store of form and field definitions.
            field_types: Registry of field type callbacks.
            nonce_verifier: Anti-forgery token check.
            submissions: Persistence for completed submissions.
            uploads: Upload store used to reparent stored files.
            notifier: Optional email notifier.
            error_store: Cache for the last errors per form.
            hooks: Optional extension hooks.
            settings: Request keys, skip lists and default messages.
        """
        self.forms = forms
        self.nonce_verifier = nonce_verifier
        self.submissions = submissions
        self.uploads = uploads
        self.notifier = notifier
        self.error_store = error_store if error_store is not None else ErrorStore()
        self.hooks = hooks if hooks is not None else ProcessorHooks()
        self.settings = settings if settings is not None else Settings()

        self.field_processor = FieldProcessor(field_types, forms=forms, hooks=self.hooks)
        self.alternate_keys = {FieldType.RECAPTCHA.value: self.settings.captcha_response_key}

    def process_field(self, field_id: int, value: Any) -> FieldResult:
        """Validate and sanitize a single field value."""
        return self.field_processor.process(field_id, value)

    def get_errors(self, form_id: int, slug: str | None = None):
        """Errors cached by the last failed submission for a form."""
        return self.error_store.get_errors(form_id, slug)

    def input_key(self, field: FieldDefinition) -> str:
        """The request key a field's raw value is read from."""
        if field.type in self.alternate_keys:
            return self.alternate_keys[field.type]
        return f"{self.settings.field_key_prefix}{field.slug}"

    def raw_value(self, field: FieldDefinition, request: SubmissionRequest) -> Any:
        key = self.input_key(field)
        if field.type == FieldType.FILE:
            return request.files.get(key)
        return request.values.get(key, "")

    def process(self, request: SubmissionRequest) -> SubmissionOutcome:
        """Process one submission.

        Args:
            request: The parsed submission.

        Returns:
            A SubmissionOutcome. Failures are reported through its error
            code; field errors are never raised.
        """
        values = request.values

        if not is_empty(values.get(self.settings.honeypot_key)):
            logger.warning("Honeypot tripped for form %s", request.form_id)
            return SubmissionOutcome.failure(OutcomeCode.HONEYPOT)

        token = values.get(self.settings.nonce_key)
        if is_empty(token) or not self.nonce_verifier.verify(str(token), self.settings.nonce_action):
            logger.warning("Invalid nonce for form %s", request.form_id)
            return SubmissionOutcome.failure(OutcomeCode.NONCE)

        form = self.forms.get_form(request.form_id)
        if form is None:
            logger.warning("Submission for unknown form %s", request.form_id)
            return SubmissionOutcome.failure(OutcomeCode.MISSING_FORM)

        skip_types = self.hooks.display_only_types(set(self.settings.display_only_types), form)
        save_skip_types = self.hooks.storage_excluded_types(
            set(self.settings.storage_excluded_types), form
        )

        errors: dict[str, FieldErrors] = {}
        submission: dict[str, Any] = {}
        file_ids: list[int] = []

        for field in form.fields:
            if field.type in skip_types:
                continue

            result = self.field_processor.process_definition(field, self.raw_value(field, request))

            if result.error is not None:
                errors[field.slug] = result.error
                continue

            if field.type in save_skip_types:
                continue

            submission[field.slug] = result.sanitized_value

            if field.type == FieldType.FILE and isinstance(result.sanitized_value, Mapping):
                file_id = result.sanitized_value.get("id")
                if file_id is not None:
                    file_ids.append(file_id)

        if errors:
            self.error_store.set_errors(form.id, errors)
            logger.info("Form %s submission rejected: %d invalid field(s)", form.id, len(errors))
            return SubmissionOutcome.failure(OutcomeCode.INVALID_FIELDS, field_errors=errors)

        try:
            submission_id = self.submissions.create_submission(
                form.id, submission, remote_addr=request.remote_addr
            )
        except SubmissionStoreError:
            logger.exception("Could not create submission for form %s", form.id)
            return SubmissionOutcome.failure(OutcomeCode.COULD_NOT_CREATE_SUBMISSION)

        logger.info("Created submission %s for form %s", submission_id, form.id)
        self._reparent_files(file_ids, submission_id)

        outcome = self._completion(form, submission_id)

        if self.notifier is not None:
            self.notifier.notify(
                form,
                submission,
                remote_addr=request.remote_addr,
                form_page=request.form_page,
            )

        return outcome

    def _reparent_files(self, file_ids: list[int], submission_id: int) -> None:
        if self.uploads is None:
            return
        for file_id in file_ids:
            try:
                self.uploads.reparent(file_id, submission_id)
            except UploadStoreError:
                logger.warning(
                    "Could not attach file %s to submission %s", file_id, submission_id, exc_info=True
                )

    def _completion(self, form: FormDefinition, submission_id: int) -> SubmissionOutcome:
        if form.completion_action_type == "redirect":
            return SubmissionOutcome(
                success=True,
                submission_id=submission_id,
                action_type="redirect",
                completion_redirect_url=form.completion_redirect_url or "",
            )

        return SubmissionOutcome(
            success=True,
            submission_id=submission_id,
            action_type="text",
            completion_message=form.completion_message or self.settings.default_completion_message,
        )
