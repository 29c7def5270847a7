"""Shared helpers for command implementations."""

import typer

from ..config import ChangeletConfig, load_config
from ..constants import EXIT_INVALID
from ..core import collect_sources, load_changes
from ..errors import ChangeletError, ChangesDirNotFoundError
from ..models import ChangeRecord, Version
from ..output import get_output_context

FAIL_FAST_OPTION = typer.Option(
    None,
    "--fail-fast/--all-errors",
    help="Stop at the first invalid change file (default from config)",
)


def parse_version_argument(text: str) -> Version:
    """Parse a version given on the command line, exiting on failure."""
    ctx = get_output_context()
    try:
        return Version.parse(text)
    except ChangeletError as e:
        ctx.error(e)
        raise typer.Exit(EXIT_INVALID) from None


def load_change_set(fail_fast: bool | None) -> tuple[ChangeletConfig, list[ChangeRecord]]:
    """Load config and every change record from the change directory.

    Any invalid file ends the command: no partial record set is returned.
    """
    ctx = get_output_context()
    try:
        config = load_config(ctx.changes_dir)
        sources = collect_sources(ctx.changes_dir, config.changes.pattern)
        stop_early = config.changes.fail_fast if fail_fast is None else fail_fast
        records = load_changes(sources, fail_fast=stop_early)
    except ChangesDirNotFoundError as e:
        ctx.error(f"{e}. Run 'changelet init' first.")
        raise typer.Exit(EXIT_INVALID) from None
    except ChangeletError as e:
        ctx.error(e)
        raise typer.Exit(EXIT_INVALID) from None
    return config, records
