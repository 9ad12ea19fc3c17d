"""File-backed and offline collaborators for running the processor locally."""

from form_handler.local.factory import create_local_processor
from form_handler.local.mail import LogMailer, SentMessage
from form_handler.local.security import AllowAllNonceVerifier, StaticCaptchaVerifier
from form_handler.local.submissions import JsonSubmissionStore
from form_handler.local.uploads import LocalUploadStore

__all__ = [
    "AllowAllNonceVerifier",
    "JsonSubmissionStore",
    "LocalUploadStore",
    "LogMailer",
    "SentMessage",
    "StaticCaptchaVerifier",
    "create_local_processor",
]
