"""CLI for the form handler."""

import json
import logging
from collections import Counter
from pathlib import Path
from typing import Annotated

import jsonschema
import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from form_handler import __version__
from form_handler.config import get_settings
from form_handler.core.factory import create_field_types
from form_handler.io import read_submissions, write_outcomes
from form_handler.local import StaticCaptchaVerifier, create_local_processor

DEFAULT_SCHEMA = Path("schemas") / "form_definition.schema.json"

app = typer.Typer(
    name="form-handler",
    help="Validate, sanitize and store form submissions.",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"form-handler version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """form-handler: field-driven form validation and submission processing."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@app.command()
def run(
    input_path: Annotated[
        Path,
        typer.Option("--in", "-i", help="Input JSONL file of submissions"),
    ],
    output_path: Annotated[
        Path,
        typer.Option("--out", "-o", help="Output JSONL file of outcomes"),
    ],
    forms: Annotated[
        Path | None,
        typer.Option(
            "--forms",
            "-f",
            envvar="FORM_HANDLER_FORM_REGISTRY_PATH",
            help="Path to the form registry",
        ),
    ] = None,
    schema: Annotated[
        Path | None,
        typer.Option("--schema", "-s", help="Form definition schema"),
    ] = None,
) -> None:
    """Process submissions and write one outcome per submission."""
    settings = get_settings()
    if forms is not None:
        settings.form_registry_path = forms

    if not input_path.exists():
        console.print(f"[red]Error:[/red] Input file not found: {input_path}")
        raise typer.Exit(1)

    if not settings.form_registry_path.exists():
        console.print(f"[red]Error:[/red] Form registry not found: {settings.form_registry_path}")
        raise typer.Exit(1)

    if schema is None and DEFAULT_SCHEMA.exists():
        schema = DEFAULT_SCHEMA

    console.print(f"[bold]form-handler[/bold] v{__version__}")
    console.print(f"  Input: {input_path}")
    console.print(f"  Output: {output_path}")
    console.print(f"  Forms: {settings.form_registry_path}")
    console.print(f"  Submissions: {settings.submissions_path}")

    processor = create_local_processor(settings, schema_path=schema)
    results = []
    statuses: Counter[str] = Counter()

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Processing submissions...", total=None)
        try:
            for count, request in enumerate(read_submissions(input_path), 1):
                outcome = processor.process(request)
                results.append((request.form_id, outcome))
                statuses["success" if outcome.success else outcome.error.value] += 1
                progress.update(task, description=f"Processed {count} submissions...")
        except ValueError as e:
            console.print(f"\n[red]Error:[/red] {e}")
            raise typer.Exit(1)

    written = write_outcomes(output_path, results)

    console.print("\n[bold]Summary:[/bold]")
    console.print(f"  Submissions processed: {written}")
    console.print(f"  [green]Success:[/green] {statuses.pop('success', 0)}")
    for code, count in sorted(statuses.items()):
        console.print(f"  [red]{code}:[/red] {count}")


@app.command()
def validate(
    form_path: Annotated[
        Path,
        typer.Argument(help="Path to the form definition file"),
    ],
    schema_path: Annotated[
        Path | None,
        typer.Option("--schema", "-s", help="Path to the schema file"),
    ] = None,
) -> None:
    """Validate a form definition file against the schema."""
    if not form_path.exists():
        console.print(f"[red]Error:[/red] Form file not found: {form_path}")
        raise typer.Exit(1)

    schema_path = schema_path or DEFAULT_SCHEMA
    if not schema_path.exists():
        console.print(f"[red]Error:[/red] Schema file not found: {schema_path}")
        raise typer.Exit(1)

    with open(form_path) as f:
        form = json.load(f)

    with open(schema_path) as f:
        schema = json.load(f)

    try:
        jsonschema.validate(form, schema)
        console.print(f"[green]Valid:[/green] {form_path}")
    except jsonschema.ValidationError as e:
        console.print(f"[red]Invalid:[/red] {e.message}")
        raise typer.Exit(1)


@app.command()
def types() -> None:
    """List the built-in field types and their callbacks."""
    registry = create_field_types(captcha_verifier=StaticCaptchaVerifier())
    settings = get_settings()

    table = Table(title="Field types")
    table.add_column("Type")
    table.add_column("Validator")
    table.add_column("Sanitizer")
    table.add_column("Notes")

    for type_tag in registry.types:
        callbacks = registry.lookup(type_tag)
        notes = []
        if type_tag in settings.storage_excluded_types:
            notes.append("not stored")
        table.add_row(
            type_tag,
            _callable_name(callbacks.validator),
            _callable_name(callbacks.sanitizer),
            ", ".join(notes),
        )
    for type_tag in settings.display_only_types:
        table.add_row(type_tag, "-", "-", "display only")

    console.print(table)


def _callable_name(func) -> str:
    if func is None:
        return "-"
    return getattr(func, "__name__", type(func).__name__)


if __name__ == "__main__":
    app()
