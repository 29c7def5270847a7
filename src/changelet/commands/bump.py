"""compute-bump-level command implementation."""

import logging

import typer

from ..core import calculate_bump
from ..models import BumpLevel
from ..output import get_output_context
from .common import FAIL_FAST_OPTION, load_change_set, parse_version_argument

logger = logging.getLogger(__name__)


def compute_bump_level(
    current_version: str = typer.Argument(..., help="Current version, e.g. 1.4.2"),
    level: bool = typer.Option(
        False,
        "--level",
        help="Print the bump level (none, patch, minor, major) instead of the next version",
    ),
    fail_fast: bool | None = FAIL_FAST_OPTION,
) -> None:
    """Print the version the pending changes would release."""
    ctx = get_output_context()

    current = parse_version_argument(current_version)
    config, records = load_change_set(fail_fast)

    bump = calculate_bump(
        records,
        current=current,
        initial_development=config.bump.initial_development,
    )
    next_version = current.bump(bump)

    if bump == BumpLevel.NONE:
        logger.info("No release needed: no pending changes")
    else:
        logger.debug(f"{len(records)} changes imply a {bump} bump")

    ctx.result(
        str(bump) if level else str(next_version),
        {
            "current_version": str(current),
            "next_version": str(next_version),
            "bump_level": str(bump),
            "release_needed": bump != BumpLevel.NONE,
            "changes": len(records),
        },
    )
