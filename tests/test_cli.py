"""Tests for the form-handler CLI."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from form_handler import __version__
from form_handler.cli import app

runner = CliRunner()


@pytest.fixture
def registry_path(tmp_path: Path) -> Path:
    forms_path = tmp_path / "form-registry" / "forms"
    forms_path.mkdir(parents=True)
    (forms_path / "1.json").write_text(
        json.dumps(
            {
                "id": 1,
                "title": "Feedback",
                "fields": [
                    {"id": 1, "type": "paragraph-text", "slug": "comments", "required": True},
                    {"id": 2, "type": "email", "slug": "email"},
                ],
            }
        )
    )
    return tmp_path / "form-registry"


@pytest.fixture
def local_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("FORM_HANDLER_SUBMISSIONS_PATH", str(tmp_path / "submissions"))
    monkeypatch.setenv("FORM_HANDLER_UPLOADS_PATH", str(tmp_path / "uploads"))
    return tmp_path


class TestVersion:
    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestRunCommand:
    """Tests for `form-handler run`."""

    def test_processes_submissions(
        self, local_paths: Path, registry_path: Path, schema_path: Path
    ) -> None:
        """Test that each input line produces one outcome line."""
        input_path = local_paths / "in.jsonl"
        output_path = local_paths / "out.jsonl"
        input_path.write_text(
            "\n".join(
                json.dumps(line)
                for line in [
                    {"form_id": 1, "values": {"form_nonce": "n", "comments": "Great"}},
                    {"form_id": 1, "values": {"form_nonce": "n", "comments": ""}},
                    {"form_id": 2, "values": {"form_nonce": "n"}},
                ]
            )
        )

        result = runner.invoke(
            app,
            [
                "run",
                "--in", str(input_path),
                "--out", str(output_path),
                "--forms", str(registry_path),
                "--schema", str(schema_path),
            ],
        )

        assert result.exit_code == 0, result.stdout
        outcomes = [json.loads(line) for line in output_path.read_text().splitlines()]
        assert [outcome["success"] for outcome in outcomes] == [True, False, False]
        assert outcomes[1]["error"] == "invalid_fields"
        assert outcomes[1]["field_errors"] == {"comments": {"required": "This field is required."}}
        assert outcomes[2]["error"] == "missing_form"
        assert (local_paths / "submissions" / "1" / "1.json").exists()

    def test_missing_input(self, local_paths: Path, registry_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "run",
                "--in", str(local_paths / "nope.jsonl"),
                "--out", str(local_paths / "out.jsonl"),
                "--forms", str(registry_path),
            ],
        )

        assert result.exit_code == 1
        assert "Input file not found" in result.stdout

    def test_bad_input_line(self, local_paths: Path, registry_path: Path) -> None:
        input_path = local_paths / "in.jsonl"
        input_path.write_text("not json\n")

        result = runner.invoke(
            app,
            [
                "run",
                "--in", str(input_path),
                "--out", str(local_paths / "out.jsonl"),
                "--forms", str(registry_path),
            ],
        )

        assert result.exit_code == 1
        assert "Invalid JSON on line 1" in result.stdout


class TestValidateCommand:
    """Tests for `form-handler validate`."""

    def test_valid_form(self, registry_path: Path, schema_path: Path) -> None:
        result = runner.invoke(
            app, ["validate", str(registry_path / "forms" / "1.json"), "--schema", str(schema_path)]
        )

        assert result.exit_code == 0
        assert "Valid" in result.stdout

    def test_invalid_form(self, tmp_path: Path, schema_path: Path) -> None:
        form_path = tmp_path / "bad.json"
        form_path.write_text(json.dumps({"id": 1}))

        result = runner.invoke(app, ["validate", str(form_path), "--schema", str(schema_path)])

        assert result.exit_code == 1
        assert "Invalid" in result.stdout


class TestTypesCommand:
    def test_lists_types(self) -> None:
        result = runner.invoke(app, ["types"])

        assert result.exit_code == 0
        assert "single-line-text" in result.stdout
        assert "section-header" in result.stdout
