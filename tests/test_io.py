"""Tests for JSONL submission input and outcome output."""

import json
from pathlib import Path

import pytest

from form_handler.io import read_submissions, write_outcomes
from form_handler.pipeline import OutcomeCode, SubmissionOutcome


class TestReadSubmissions:
    """Tests for read_submissions."""

    def test_reads_requests(self, tmp_path: Path) -> None:
        path = tmp_path / "in.jsonl"
        path.write_text(
            json.dumps({"form_id": 7, "values": {"message": "Hi"}, "remote_addr": "::1"})
            + "\n\n"
            + json.dumps(
                {
                    "form_id": 12,
                    "files": {"resume": {"request_key": "resume", "filename": "cv.pdf", "size": 10}},
                }
            )
            + "\n"
        )

        requests = list(read_submissions(path))

        assert [request.form_id for request in requests] == [7, 12]
        assert requests[0].values == {"message": "Hi"}
        assert requests[1].files["resume"].extension == "pdf"

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "in.jsonl"
        path.write_text('{"form_id": 7}\n{oops\n')

        with pytest.raises(ValueError, match="line 2"):
            list(read_submissions(path))

    def test_invalid_submission(self, tmp_path: Path) -> None:
        path = tmp_path / "in.jsonl"
        path.write_text('{"values": {}}\n')

        with pytest.raises(ValueError, match="Invalid submission on line 1"):
            list(read_submissions(path))


class TestWriteOutcomes:
    """Tests for write_outcomes."""

    def test_writes_one_line_per_outcome(self, tmp_path: Path) -> None:
        path = tmp_path / "out.jsonl"
        outcomes = [
            (7, SubmissionOutcome(success=True, submission_id=3, action_type="text", completion_message="Thanks")),
            (8, SubmissionOutcome.failure(OutcomeCode.MISSING_FORM)),
        ]

        assert write_outcomes(path, outcomes) == 2

        records = [json.loads(line) for line in path.read_text().splitlines()]
        assert records[0] == {
            "form_id": 7,
            "success": True,
            "submission_id": 3,
            "action_type": "text",
            "completion_message": "Thanks",
        }
        assert records[1] == {"form_id": 8, "success": False, "error": "missing_form"}
