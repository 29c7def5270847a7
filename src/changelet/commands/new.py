"""new command implementation."""

from datetime import UTC, datetime

import typer

from ..constants import EXIT_INVALID, PRIORITY_MAX, PRIORITY_MIN
from ..core import change_file_name, parse_change_file, render_change_file
from ..errors import ParseError
from ..models import ChangeKind
from ..output import get_output_context


def new(
    kind: ChangeKind = typer.Argument(..., help="Kind of change"),
    text: str = typer.Argument(..., help="Changelog entry text"),
    breaking: bool | None = typer.Option(
        None,
        "--breaking/--no-breaking",
        help="Mark as (non-)breaking; defaults by kind (changed and removed are breaking)",
    ),
    priority: int | None = typer.Option(
        None,
        "--priority",
        "-p",
        min=PRIORITY_MIN,
        max=PRIORITY_MAX,
        help="Ordering weight within its section, higher first",
    ),
    name: str | None = typer.Option(
        None,
        "--name",
        "-n",
        help="File name slug (defaults to one derived from the text)",
    ),
) -> None:
    """Write a new change file."""
    ctx = get_output_context()
    changes_dir = ctx.changes_dir

    if not changes_dir.is_dir():
        ctx.error(f"Change directory not found: {changes_dir}. Run 'changelet init' first.")
        raise typer.Exit(EXIT_INVALID)

    now = datetime.now(UTC)
    path = changes_dir / change_file_name(name or text, now)
    content = render_change_file(kind.value, text, breaking=breaking, priority=priority)

    # Refuse to write anything the loader would reject
    try:
        record = parse_change_file(content, now, str(path))
    except ParseError as e:
        ctx.error(e)
        raise typer.Exit(EXIT_INVALID) from None

    try:
        with open(path, "x", encoding="utf-8") as f:
            f.write(content)
    except FileExistsError:
        ctx.error(f"Change file already exists: {path}")
        raise typer.Exit(EXIT_INVALID) from None

    ctx.message(f"[green]Created change file:[/green] {path}")
    ctx.result(
        str(path),
        {
            "path": str(path),
            "kind": record.kind.value,
            "breaking": record.breaking,
            "priority": record.priority,
        },
    )
