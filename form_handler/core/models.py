"""Models for file uploads moving through the pipeline.

An UploadedFile is what the HTTP layer hands over for a file field; a
StoredFile is what the upload store returns once the file is persisted.
"""

from enum import IntEnum
from pathlib import Path

from pydantic import BaseModel


class UploadError(IntEnum):
    """Transport status reported for an uploaded file."""

    OK = 0
    INI_SIZE = 1  # larger than the server-wide limit
    FORM_SIZE = 2  # larger than the form-declared limit
    PARTIAL = 3
    NO_FILE = 4
    NO_TMP_DIR = 6
    CANT_WRITE = 7
    EXTENSION = 8


class UploadedFile(BaseModel):
    """Upload metadata as received by the transport."""

    request_key: str
    filename: str = ""
    size: int = 0
    error: UploadError = UploadError.OK
    content_type: str | None = None
    path: Path | None = None

    @property
    def extension(self) -> str:
        """Lower-cased extension of the client filename, without the dot."""
        suffix = Path(self.filename).suffix
        return suffix[1:].lower() if suffix else ""

    @property
    def is_missing(self) -> bool:
        """Whether the transport reported that no file was sent."""
        return self.error == UploadError.NO_FILE


class StoredFile(BaseModel):
    """A persisted upload."""

    id: int
    url: str
    file_name: str
