"""QueryLab CLI application -- Typer-based developer interface.

Runs the SQL assist engine outside the editor: lint a query file, list the
completions or hover text the editor would show, and fetch a hint from the
backend.  Human-readable output goes to *stderr* via Rich; ``--json``
switches every command to machine-readable JSON on *stdout*.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape

from assist_engine.config import Settings, load_settings
from assist_engine.errors import SchemaLoadError
from assist_engine.logging_setup import configure_logging
from assist_engine.models import Position
from assist_engine.orchestration import HintServiceClient, QueryOrchestrator
from assist_engine.service import QueryAssistant
from cli.display import display_diagnostics, display_hint, display_hover, display_suggestions

# ---------------------------------------------------------------------------
# App & global state
# ---------------------------------------------------------------------------

app = typer.Typer(
    name="querylab",
    help="QueryLab - SQL diagnostics, completion and hover for the query editor.",
    no_args_is_help=True,
)
console = Console(stderr=True)

# Mutable global options populated by the Typer callback.
_json_output: bool = False


# ---------------------------------------------------------------------------
# Callback -- global options
# ---------------------------------------------------------------------------


@app.callback()
def _global_options(
    json_mode: bool = typer.Option(
        False,
        "--json/--no-json",
        help="Emit structured JSON to stdout instead of human-readable output.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log engine activity to stderr.",
    ),
) -> None:
    """Global options applied to every command."""
    global _json_output  # noqa: PLW0603
    _json_output = json_mode
    configure_logging(_settings(), level=logging.DEBUG if verbose else logging.WARNING)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _settings() -> Settings:
    return load_settings()


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        console.print(f"[red]Cannot read {escape(str(path))}: {escape(str(exc))}[/red]")
        raise typer.Exit(code=3) from exc


def _schema_tables(payload: Any) -> list[Any]:
    """Accept either a bare table list or an assignment with ``sampleTables``."""
    if isinstance(payload, dict) and "sampleTables" in payload:
        payload = payload["sampleTables"]
    if not isinstance(payload, list):
        raise SchemaLoadError("Schema file must contain a list of tables or an assignment with 'sampleTables'")
    return payload


def _build_assistant(schema: Path | None) -> QueryAssistant:
    """Create an assistant, loading *schema* when given.  Exits with code 3 on bad input."""
    assistant = QueryAssistant(settings=_settings())
    if schema is None:
        return assistant

    try:
        payload = json.loads(_read_text(schema))
        assistant.load_schema(_schema_tables(payload))
    except json.JSONDecodeError as exc:
        console.print(f"[red]Invalid JSON in schema file {escape(str(schema))}: {escape(str(exc))}[/red]")
        raise typer.Exit(code=3) from exc
    except SchemaLoadError as exc:
        console.print(f"[red]Invalid schema: {escape(str(exc))}[/red]")
        raise typer.Exit(code=3) from exc
    return assistant


def _build_hint_client(base_url: str, settings: Settings) -> HintServiceClient:
    token = settings.hint_api_token.get_secret_value() if settings.hint_api_token else None
    return HintServiceClient(base_url, timeout=settings.hint_timeout, api_token=token)


def _emit_json(data: Any) -> None:
    typer.echo(json.dumps(data, indent=2, default=str))


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def check(
    file: Path = typer.Argument(
        ...,
        help="SQL file to analyse.",
        exists=True,
        dir_okay=False,
        resolve_path=True,
    ),
    schema: Path | None = typer.Option(
        None,
        "--schema",
        "-s",
        help="Assignment schema JSON (list of tables or assignment with 'sampleTables').",
        exists=True,
        dir_okay=False,
    ),
) -> None:
    """Report line-level syntax diagnostics for a SQL file.

    Exits 1 when any diagnostic is reported, 0 otherwise.

    Examples::

        querylab check query.sql
        querylab --json check query.sql
    """
    assistant = _build_assistant(schema)
    diagnostics = assistant.analyze(_read_text(file))

    if _json_output:
        _emit_json([d.model_dump(mode="json") | {"marker": d.to_marker()} for d in diagnostics])
    else:
        display_diagnostics(console, file, diagnostics)

    if diagnostics:
        raise typer.Exit(code=1)


@app.command()
def complete(
    file: Path = typer.Argument(..., help="SQL file being edited.", exists=True, dir_okay=False),
    line: int = typer.Option(..., "--line", "-l", min=1, help="1-indexed cursor line."),
    column: int = typer.Option(..., "--column", "-c", min=1, help="1-indexed cursor column."),
    schema: Path | None = typer.Option(
        None,
        "--schema",
        "-s",
        help="Assignment schema JSON.",
        exists=True,
        dir_okay=False,
    ),
) -> None:
    """List the completions the editor would offer at a cursor position."""
    assistant = _build_assistant(schema)
    suggestions = assistant.provide_completions(_read_text(file), Position(line=line, column=column))

    if _json_output:
        _emit_json([s.model_dump(mode="json") for s in suggestions])
    else:
        display_suggestions(console, suggestions)


@app.command()
def hover(
    word: str = typer.Argument(..., help="Table or column name to describe."),
    schema: Path = typer.Option(
        ...,
        "--schema",
        "-s",
        help="Assignment schema JSON.",
        exists=True,
        dir_okay=False,
    ),
) -> None:
    """Describe a table or column from the assignment schema.

    Exits 1 when the word is not a known table or column.
    """
    assistant = _build_assistant(schema)
    contents = assistant.provide_hover(word)

    if _json_output:
        _emit_json({"word": word, "contents": contents})
    elif contents is not None:
        display_hover(console, word, contents)
    else:
        console.print(f"[yellow]No table or column named '{escape(word)}'.[/yellow]")

    if contents is None:
        raise typer.Exit(code=1)


@app.command()
def hint(
    file: Path = typer.Argument(..., help="SQL file with the current attempt.", exists=True, dir_okay=False),
    assignment: str = typer.Option(..., "--assignment", "-a", help="Assignment identifier."),
    url: str | None = typer.Option(
        None,
        "--url",
        help="Backend API base URL (defaults to QUERYLAB_HINT_SERVICE_URL).",
    ),
) -> None:
    """Ask the backend for a hint on the current attempt.

    Network failures never fail the command: the fallback hint is shown.
    """
    settings = _settings()
    query = _read_text(file)
    client = _build_hint_client(url or settings.hint_service_url, settings)

    async def _fetch() -> str | None:
        orchestrator = QueryOrchestrator(
            hint_client=client,
            assignment_id=assignment,
            fallback_hint=settings.fallback_hint,
        )
        try:
            return await orchestrator.request_hint(query)
        finally:
            await client.close()

    text = asyncio.run(_fetch()) or settings.fallback_hint

    if _json_output:
        _emit_json({"assignment": assignment, "hint": text})
    else:
        display_hint(console, text)
