"""Rich output formatting for the QueryLab CLI.

All functions write to a :class:`rich.console.Console` instance (typically
bound to *stderr*) so that machine-readable output on *stdout* is never
polluted with human-readable decoration.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from assist_engine.models import Diagnostic, Suggestion, SuggestionKind

_SEVERITY_ICONS: dict[str, str] = {
    "error": "✗",
    "warning": "⚠",
    "info": "ℹ",
    "hint": "→",
}

_SEVERITY_COLOURS: dict[str, str] = {
    "error": "red",
    "warning": "yellow",
    "info": "dim",
    "hint": "dim",
}

_KIND_COLOURS: dict[SuggestionKind, str] = {
    SuggestionKind.KEYWORD: "magenta",
    SuggestionKind.FUNCTION: "cyan",
    SuggestionKind.TABLE: "green",
    SuggestionKind.COLUMN: "yellow",
}


def display_diagnostics(console: Console, file_path: Path, diagnostics: Sequence[Diagnostic]) -> None:
    """Render diagnostics for one SQL file.

    Parameters
    ----------
    console:
        Rich console to write to (typically stderr).
    file_path:
        The analysed file, used as the location prefix.
    diagnostics:
        Diagnostics in document order.
    """
    status = "[green]PASSED[/green]" if not diagnostics else "[red]FAILED[/red]"
    console.print(f"\nSQL Validator — {status}\n")

    if not diagnostics:
        console.print("  [green]✓ No issues found.[/green]\n")
        return

    location = escape(str(file_path))
    console.print(f"  [bold]{location}[/bold]")
    for d in diagnostics:
        severity = d.severity.value.lower()
        icon = _SEVERITY_ICONS.get(severity, "?")
        colour = _SEVERITY_COLOURS.get(severity, "white")
        console.print(
            f"    [{colour}]{icon} {escape(d.rule_id)}[/{colour}] "
            f"[dim]{location}:{d.line}:{d.column}[/dim]  {escape(d.message)}"
        )

    console.print(f"\n── {len(diagnostics)} error(s)\n")


def display_suggestions(console: Console, suggestions: Sequence[Suggestion]) -> None:
    """Render completion candidates as a table, in catalog order."""
    if not suggestions:
        console.print("[dim]No suggestions.[/dim]")
        return

    replacement = suggestions[0].range
    title = "Completions"
    if replacement is not None:
        title += (
            f" (replace {replacement.start_line}:{replacement.start_column}"
            f"-{replacement.end_line}:{replacement.end_column})"
        )

    table = Table(title=title, show_lines=False)
    table.add_column("Label", style="bold")
    table.add_column("Kind")
    table.add_column("Detail", style="dim")
    for s in suggestions:
        colour = _KIND_COLOURS.get(s.kind, "white")
        table.add_row(escape(s.label), f"[{colour}]{s.kind.value.lower()}[/{colour}]", escape(s.detail))
    console.print(table)


def display_hover(console: Console, word: str, contents: str) -> None:
    console.print(Panel(Markdown(contents), title=escape(word), expand=False))


def display_hint(console: Console, hint: str) -> None:
    console.print(Panel(escape(hint), title="\U0001f4a1 Hint", border_style="yellow", expand=False))
