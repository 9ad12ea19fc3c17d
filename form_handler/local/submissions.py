"""JsonSubmissionStore: file-based persistence for submissions."""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from form_handler.exceptions import SubmissionStoreError


class JsonSubmissionStore:
    """Stores each submission as a JSON file in a local directory.

    Layout:
        <storage_path>/<form_id>/<submission_id>.json
        <storage_path>/_submissions.jsonl   (append-only event log)
    """

    def __init__(self, storage_path: Path | str) -> None:
        """Initialize the store.

        Args:
            storage_path: Directory where submissions are written.
                          Will be created if it doesn't exist.
        """
        self.storage_path = Path(storage_path)
        self.storage_path.mkdir(parents=True, exist_ok=True)
        self._events_path = self.storage_path / "_submissions.jsonl"

    def _next_id(self) -> int:
        ids = [int(f.stem) for f in self.storage_path.glob("*/*.json") if f.stem.isdigit()]
        return max(ids, default=0) + 1

    def _get_submission_path(self, form_id: int, submission_id: int) -> Path:
        return self.storage_path / str(form_id) / f"{submission_id}.json"

    def create_submission(
        self,
        form_id: int,
        data: dict[str, Any],
        remote_addr: str = "",
    ) -> int:
        """Write a submission record parented to the form.

        Returns:
            The new submission ID.

        Raises:
            SubmissionStoreError: If the record could not be written.
        """
        submission_id = self._next_id()
        now = datetime.now(timezone.utc).isoformat()
        record = {
            "id": submission_id,
            "form_id": form_id,
            "data": data,
            "remote_addr": remote_addr,
            "created_at": now,
        }

        path = self._get_submission_path(form_id, submission_id)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w") as f:
                json.dump(record, f, indent=2)
            with open(self._events_path, "a") as f:
                event = {"timestamp": now, "form_id": form_id, "submission_id": submission_id}
                f.write(json.dumps(event) + "\n")
        except (OSError, TypeError) as e:
            raise SubmissionStoreError(
                f"Could not write submission for form {form_id}: {e}"
            ) from e

        return submission_id

    def get_submission(self, form_id: int, submission_id: int) -> dict[str, Any] | None:
        """Load a stored submission record, or None if it doesn't exist."""
        path = self._get_submission_path(form_id, submission_id)
        if not path.exists():
            return None
        with open(path) as f:
            return json.load(f)

    def list_submissions(self, form_id: int) -> list[int]:
        """List stored submission IDs for a form."""
        form_dir = self.storage_path / str(form_id)
        if not form_dir.exists():
            return []
        return sorted(int(f.stem) for f in form_dir.glob("*.json") if f.stem.isdigit())
