"""Output formatting for changelet CLI.

Command results (a version, a bump level, a changelog) are written to
stdout. Messages go to the stderr console. With ``--json`` both results
and errors become JSON documents on stdout.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape

from .constants import CHANGES_DIR
from .errors import ChangeletError, ChangeSetError, ParseError


def _stderr_console() -> Console:
    return Console(stderr=True)


@dataclass
class OutputContext:
    """Context for output formatting."""

    console: Console = field(default_factory=_stderr_console)
    json_mode: bool = False
    changes_dir: Path = field(default_factory=lambda: Path(CHANGES_DIR))

    def message(self, message: str, style: str | None = None) -> None:
        """Print a human-facing message, suppressed in JSON mode."""
        if not self.json_mode:
            self.console.print(message, style=style)

    def result(self, text: str, data: dict[str, Any]) -> None:
        """Write a command result to stdout."""
        if self.json_mode:
            typer.echo(json.dumps(data, indent=2, default=str))
        else:
            typer.echo(text, nl=not text.endswith("\n"))

    def error(self, error: ChangeletError | str) -> None:
        """Report an error, listing every offending change file."""
        if self.json_mode:
            typer.echo(json.dumps(_error_payload(error), indent=2))
            return

        if isinstance(error, ChangeSetError):
            lines = [f"[red]Error: {len(error.errors)} invalid change file(s)[/red]"]
            lines.extend(
                f"  [bold]{escape(item.source)}[/bold]: {escape(item.message)}"
                for item in error.errors
            )
        elif isinstance(error, ParseError):
            lines = [
                f"[red]Error:[/red] [bold]{escape(error.source)}[/bold]: {escape(error.message)}"
            ]
        else:
            lines = [f"[red]Error: {escape(str(error))}[/red]"]

        for line in lines:
            self.console.print(line, highlight=False, soft_wrap=True)


def _error_payload(error: ChangeletError | str) -> dict[str, Any]:
    if isinstance(error, ChangeSetError):
        return {
            "error": "invalid change files",
            "files": [_parse_error_entry(item) for item in error.errors],
        }
    if isinstance(error, ParseError):
        return {"error": error.message, "files": [_parse_error_entry(error)]}
    return {"error": str(error)}


def _parse_error_entry(error: ParseError) -> dict[str, str]:
    return {"source": error.source, "type": type(error).__name__, "message": error.message}


# Global output context (set by cli.py main callback)
_ctx: OutputContext | None = None


def get_output_context() -> OutputContext:
    """Get the current output context.

    Returns a default OutputContext if not yet initialized by CLI.
    """
    if _ctx is None:
        return OutputContext()
    return _ctx


def set_output_context(ctx: OutputContext) -> None:
    """Set the global output context. Called by CLI main callback."""
    global _ctx
    _ctx = ctx
