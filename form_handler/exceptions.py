class FormHandlerError(Exception):
    """Base exception for all form handler errors."""


class FieldNotFoundError(FormHandlerError):
    """Raised when a field definition cannot be found."""


class FormValidationError(FormHandlerError):
    """Raised when a form definition fails schema validation."""


class SubmissionStoreError(FormHandlerError):
    """Raised when a submission record cannot be created."""


class UploadStoreError(FormHandlerError):
    """Raised when an uploaded file cannot be stored or reparented."""


class MailDeliveryError(FormHandlerError):
    """Raised when a notification email cannot be delivered."""
