"""CLI for form-api."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn

from form_api import __version__
from form_api.config import get_registry_path, get_schema_path, load_global_config
from form_api.io import read_jsonl, write_jsonl
from form_api.pipeline import Pipeline, PipelineConfig, ResponseStatus
from form_api.registry import (
    FormDefinitionError,
    FormNotFoundError,
    FormRegistry,
    build_form,
    load_definition,
)

app = typer.Typer(
    name="form-api",
    help="Build custom forms and validate client responses.",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"form-api version {__version__}")
        raise typer.Exit()


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", envvar="FORM_API_LOG_LEVEL", help="Logging level"),
    ] = None,
) -> None:
    """form-api: Build custom forms and validate client responses."""
    setup_logging(log_level or load_global_config().log_level)


@app.command()
def render(
    form_id: Annotated[str, typer.Argument(help="Form ID in the registry")],
    form_version: Annotated[
        str | None,
        typer.Option("--form-version", help="Form version (default: latest)"),
    ] = None,
    registry: Annotated[
        Path | None,
        typer.Option("--registry", "-r", envvar="FORM_API_REGISTRY", help="Path to form registry"),
    ] = None,
) -> None:
    """Print the serialized custom_form payload for a form."""
    registry_path = get_registry_path(registry)
    if not registry_path.exists():
        console.print(f"[red]Error:[/red] Form registry not found: {registry_path}")
        raise typer.Exit(1)

    form_registry = FormRegistry(registry_path, schema_path=get_schema_path())
    try:
        if form_version:
            definition = form_registry.get(form_id, form_version)
        else:
            definition = form_registry.get_latest(form_id)
    except (FormNotFoundError, FormDefinitionError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    form = build_form(definition)
    typer.echo(json.dumps(form.json_serialize(), indent=2, ensure_ascii=False))


@app.command()
def process(
    form_id: Annotated[str, typer.Option("--form", "-f", help="Form ID in the registry")],
    input_path: Annotated[
        Path,
        typer.Option("--in", "-i", help="Input JSONL file of response records"),
    ],
    output_path: Annotated[
        Path,
        typer.Option("--out", "-o", help="Output JSONL file of processed results"),
    ],
    form_version: Annotated[
        str | None,
        typer.Option("--form-version", help="Form version (default: latest)"),
    ] = None,
    registry: Annotated[
        Path | None,
        typer.Option("--registry", "-r", envvar="FORM_API_REGISTRY", help="Path to form registry"),
    ] = None,
) -> None:
    """Validate response records and write labelled values.

    Each input line is a record like
    {"submission_id": "...", "player": "...", "response": [...] | null}.
    """
    registry_path = get_registry_path(registry)

    if not input_path.exists():
        console.print(f"[red]Error:[/red] Input file not found: {input_path}")
        raise typer.Exit(1)

    if not registry_path.exists():
        console.print(f"[red]Error:[/red] Form registry not found: {registry_path}")
        raise typer.Exit(1)

    try:
        pipeline = Pipeline(
            PipelineConfig(
                registry_path=registry_path,
                form_id=form_id,
                form_version=form_version,
                schema_path=get_schema_path(),
            )
        )
    except (FormNotFoundError, FormDefinitionError) as e:
        console.print(f"\n[red]Error loading form:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"[bold]form-api[/bold] v{__version__}")
    console.print(f"  Form: {pipeline.definition.form_id}@{pipeline.definition.version}")
    console.print(f"  Input: {input_path}")
    console.print(f"  Output: {output_path}")

    counts = {status: 0 for status in ResponseStatus}

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Processing responses...", total=None)

        def warn_invalid(line_num: int, error: json.JSONDecodeError) -> None:
            console.print(
                f"\n[yellow]Warning:[/yellow] Invalid JSON on line {line_num}: {error}"
            )

        def processed_records():
            for record in read_jsonl(input_path, on_invalid=warn_invalid):
                result = pipeline.process(record)
                counts[result.status] += 1
                progress.update(
                    task, description=f"Processed {sum(counts.values())} responses..."
                )
                yield result.model_dump(mode="json")

        write_jsonl(output_path, processed_records())

    console.print("\n[bold]Summary:[/bold]")
    console.print(f"  Responses processed: {sum(counts.values())}")
    console.print(f"  [green]Valid:[/green] {counts[ResponseStatus.OK]}")
    if counts[ResponseStatus.CANCELLED]:
        console.print(f"  [yellow]Cancelled:[/yellow] {counts[ResponseStatus.CANCELLED]}")
    if counts[ResponseStatus.INVALID]:
        console.print(f"  [red]Invalid:[/red] {counts[ResponseStatus.INVALID]}")


@app.command()
def validate(
    definition_path: Annotated[
        Path,
        typer.Argument(help="Path to the form definition file"),
    ],
    schema_path: Annotated[
        Path | None,
        typer.Option("--schema", "-s", help="Path to the schema file"),
    ] = None,
) -> None:
    """Validate a form definition file against its schema."""
    if not definition_path.exists():
        console.print(f"[red]Error:[/red] Definition file not found: {definition_path}")
        raise typer.Exit(1)

    schema_path = get_schema_path(schema_path)
    if schema_path is None or not schema_path.exists():
        console.print(f"[red]Error:[/red] Schema file not found: {schema_path}")
        raise typer.Exit(1)

    with open(definition_path) as f:
        data = json.load(f)

    with open(schema_path) as f:
        schema = json.load(f)

    try:
        definition = load_definition(data, schema=schema, source=str(definition_path))
    except FormDefinitionError as e:
        console.print(f"[red]Invalid:[/red] {e}")
        raise typer.Exit(1)

    form = build_form(definition)
    console.print(
        f"[green]Valid:[/green] {definition_path} "
        f"({form.get_element_count()} elements, "
        f"{form.get_expected_response_size()} response values)"
    )


if __name__ == "__main__":
    app()
