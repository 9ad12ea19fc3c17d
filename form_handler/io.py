"""Reading submissions from and writing outcomes to JSONL files."""

import json
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from form_handler.pipeline.models import SubmissionOutcome, SubmissionRequest


def read_submissions(path: Path | str) -> Iterator[SubmissionRequest]:
    """Read a JSONL file of submissions.

    Each line holds one SubmissionRequest: form_id, values, and optionally
    files, remote_addr and form_page.

    Raises:
        ValueError: If a line is not valid JSON or not a valid submission.
    """
    with open(path) as f:
        for line_num, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                yield SubmissionRequest.model_validate(json.loads(line))
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON on line {line_num}: {e}") from e
            except ValidationError as e:
                raise ValueError(f"Invalid submission on line {line_num}: {e}") from e


def write_outcomes(
    path: Path | str,
    outcomes: Iterable[tuple[int, SubmissionOutcome]],
) -> int:
    """Write (form_id, outcome) pairs as JSONL.

    Returns:
        Number of records written.
    """
    count = 0
    with open(path, "w") as f:
        for form_id, outcome in outcomes:
            record: dict[str, Any] = {"form_id": form_id, **outcome.to_dict()}
            f.write(json.dumps(record, ensure_ascii=False) + "\n")
            count += 1
    return count
