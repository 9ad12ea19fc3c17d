"""LocalUploadStore: keeps uploaded files in a local directory."""

import json
import shutil
from pathlib import Path
from urllib.parse import quote

from form_handler.core.models import StoredFile, UploadedFile
from form_handler.exceptions import UploadStoreError


class LocalUploadStore:
    """Copies uploads into <uploads_path>/<file_id>/<file_name>.

    An index file (_uploads.json) tracks each stored file and the
    submission that owns it.
    """

    def __init__(self, uploads_path: Path | str, base_url: str = "/uploads") -> None:
        self.uploads_path = Path(uploads_path)
        self.uploads_path.mkdir(parents=True, exist_ok=True)
        self.base_url = base_url.rstrip("/")
        self._index_path = self.uploads_path / "_uploads.json"

    def _load_index(self) -> dict[str, dict]:
        if not self._index_path.exists():
            return {}
        with open(self._index_path) as f:
            return json.load(f)

    def _save_index(self, index: dict[str, dict]) -> None:
        with open(self._index_path, "w") as f:
            json.dump(index, f, indent=2)

    def receive_upload(self, upload: UploadedFile) -> StoredFile | None:
        """Copy the temporary upload into the store.

        Raises:
            UploadStoreError: If the temporary file is missing or can't be copied.
        """
        if upload.is_missing:
            return None
        if upload.path is None or not upload.path.exists():
            raise UploadStoreError(f"Temporary file for {upload.request_key} is missing")

        index = self._load_index()
        file_id = max((int(key) for key in index), default=0) + 1
        file_name = Path(upload.filename).name or upload.path.name

        target = self.uploads_path / str(file_id) / file_name
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(upload.path, target)
        except OSError as e:
            raise UploadStoreError(f"Could not store {file_name}: {e}") from e

        url = f"{self.base_url}/{file_id}/{quote(file_name)}"
        index[str(file_id)] = {"file_name": file_name, "url": url, "owner_id": None}
        self._save_index(index)

        return StoredFile(id=file_id, url=url, file_name=file_name)

    def reparent(self, file_id: int, owner_id: int) -> None:
        """Record the submission that owns a stored file.

        Raises:
            UploadStoreError: If the file is unknown.
        """
        index = self._load_index()
        entry = index.get(str(file_id))
        if entry is None:
            raise UploadStoreError(f"Unknown upload: {file_id}")
        entry["owner_id"] = owner_id
        self._save_index(index)

    def owner_of(self, file_id: int) -> int | None:
        """Return the submission owning a stored file, if any."""
        entry = self._load_index().get(str(file_id))
        return entry.get("owner_id") if entry else None
