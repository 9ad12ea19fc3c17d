"""Per-type value sanitizers.

A sanitizer takes (value, field) and returns the cleaned value. For
composite values the field processor calls the sanitizer once per leaf,
so these functions only ever see scalars.
"""

import logging
import re
from typing import Any

from pydantic import AnyUrl, TypeAdapter, ValidationError

from form_handler.core.models import UploadedFile
from form_handler.core.protocols import UploadStore
from form_handler.exceptions import UploadStoreError
from form_handler.registry.models import FieldDefinition

logger = logging.getLogger(__name__)

ALLOWED_URL_SCHEMES = ("http", "https", "ftp", "ftps", "mailto", "news", "irc", "gopher", "nntp", "feed", "telnet")

_url_adapter = TypeAdapter(AnyUrl)

_TAG_BLOCK = re.compile(r"<(script|style)[^>]*?>.*?</\1>", re.IGNORECASE | re.DOTALL)
_TAG = re.compile(r"<[^>]*>")
_OCTET = re.compile(r"%[a-f0-9]{2}", re.IGNORECASE)
_WHITESPACE = re.compile(r"[\r\n\t ]+")
_EMAIL_CHARS = re.compile(r"[^a-z0-9!#$%&'*+/=?^_`{|}~.@-]", re.IGNORECASE)


def sanitize_text(value: Any, field: FieldDefinition | None = None) -> str:
    """Strip markup and collapse whitespace, keeping visible text.

    Removes tags (and the contents of script/style blocks), percent-encoded
    octets, line breaks and tabs, then trims.
    """
    if value is None:
        return ""
    text = str(value)

    text = _TAG_BLOCK.sub("", text)
    text = _TAG.sub("", text)

    # Removing one octet can expose another.
    while _OCTET.search(text):
        text = _OCTET.sub("", text)

    text = _WHITESPACE.sub(" ", text)
    return text.strip()


def sanitize_email(value: Any, field: FieldDefinition | None = None) -> str:
    """Drop characters that cannot appear in an address and lower-case the domain."""
    if value is None:
        return ""
    email = _EMAIL_CHARS.sub("", str(value).strip())
    if email.count("@") != 1:
        return ""
    local, domain = email.split("@")
    domain = domain.strip(".").lower()
    if not local or not domain:
        return ""
    return f"{local}@{domain}"


def sanitize_url(value: Any, field: FieldDefinition | None = None) -> str:
    """Normalize a URL for storage, or return "" if it cannot be used.

    Scheme-less input is assumed to be http. Only a fixed set of schemes
    survive.
    """
    if value is None:
        return ""
    url = str(value).strip().replace(" ", "%20")
    if not url:
        return ""

    if "://" not in url and not url.lower().startswith("mailto:"):
        url = f"http://{url}"

    try:
        parsed = _url_adapter.validate_python(url)
    except ValidationError:
        return ""

    if parsed.scheme not in ALLOWED_URL_SCHEMES:
        return ""
    return str(parsed)


def sanitize_phone(value: Any, field: FieldDefinition | None = None) -> str:
    """Keep digits only, preserving a leading plus sign."""
    if value is None:
        return ""
    phone = str(value).strip()
    digits = re.sub(r"[^0-9]", "", phone)
    if phone.startswith("+"):
        return f"+{digits}"
    return digits


class FileSanitizer:
    """Sanitizer that hands a validated upload to the upload store.

    Returns the stored file as a plain dict ({id, url, file_name}) so the
    submission record stays serializable, or None when nothing was stored.
    """

    def __init__(self, store: UploadStore) -> None:
        self._store = store

    def __call__(self, value: Any, field: FieldDefinition) -> dict[str, Any] | None:
        if not isinstance(value, UploadedFile) or value.is_missing:
            return None

        try:
            stored = self._store.receive_upload(value)
        except UploadStoreError:
            logger.warning("Could not store upload for field %s", field.slug, exc_info=True)
            return None

        if stored is None:
            return None
        return stored.model_dump()
