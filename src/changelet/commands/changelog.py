"""compile-changelog command implementation."""

import logging
from datetime import date

import typer

from ..constants import EXIT_INVALID
from ..core import compile_changelog, group_changes
from ..output import get_output_context
from .common import FAIL_FAST_OPTION, load_change_set, parse_version_argument

logger = logging.getLogger(__name__)


def compile_changelog_cmd(
    new_version: str = typer.Argument(..., help="Version being released, e.g. 1.5.0"),
    release_date: str | None = typer.Option(
        None,
        "--date",
        help="Release date as YYYY-MM-DD (defaults to today)",
    ),
    no_date: bool = typer.Option(
        False,
        "--no-date",
        help="Leave the release date out of the heading",
    ),
    fail_fast: bool | None = FAIL_FAST_OPTION,
) -> None:
    """Render the changelog section for a release."""
    ctx = get_output_context()

    parse_version_argument(new_version)

    heading_date: date | None = None
    if release_date is not None and not no_date:
        try:
            heading_date = date.fromisoformat(release_date)
        except ValueError:
            ctx.error(f"Invalid release date {release_date!r} (expected YYYY-MM-DD)")
            raise typer.Exit(EXIT_INVALID) from None

    config, records = load_change_set(fail_fast)

    if heading_date is None and not no_date and config.changelog.include_date:
        heading_date = date.today()

    if not records:
        logger.warning("No change files found; the changelog has no sections")

    text = compile_changelog(
        new_version,
        records,
        release_date=heading_date,
        date_format=config.changelog.date_format,
        bullet=config.changelog.bullet,
    )

    ctx.result(
        text,
        {
            "version": new_version,
            "date": heading_date.isoformat() if heading_date else None,
            "sections": {
                kind.value: [record.text for record in members]
                for kind, members in group_changes(records).items()
            },
            "changelog": text,
        },
    )
