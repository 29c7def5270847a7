"""check command implementation."""

import typer
from rich.table import Table

from ..core import SECTION_ORDER, calculate_bump, group_changes
from ..output import get_output_context
from .common import FAIL_FAST_OPTION, load_change_set, parse_version_argument


def check(
    current_version: str | None = typer.Argument(
        None,
        help="Current version; applies [bump] initial_development to the reported level",
    ),
    fail_fast: bool | None = FAIL_FAST_OPTION,
) -> None:
    """Validate every change file and summarize the pending release."""
    ctx = get_output_context()

    current = parse_version_argument(current_version) if current_version is not None else None
    config, records = load_change_set(fail_fast)
    groups = group_changes(records)
    bump = calculate_bump(
        records,
        current=current,
        initial_development=config.bump.initial_development,
    )
    breaking = sum(1 for record in records if record.breaking)

    if records and not ctx.json_mode:
        table = Table(title=f"Pending changes in {ctx.changes_dir}")
        table.add_column("Kind")
        table.add_column("Changes", justify="right")
        table.add_column("Breaking", justify="right")
        for kind in SECTION_ORDER:
            members = groups.get(kind, [])
            if members:
                table.add_row(
                    kind.heading,
                    str(len(members)),
                    str(sum(1 for record in members if record.breaking)),
                )
        ctx.console.print(table)

    noun = "change file" if len(records) == 1 else "change files"
    ctx.result(
        f"{len(records)} valid {noun}, bump level: {bump}",
        {
            "valid": True,
            "changes": len(records),
            "breaking": breaking,
            "by_kind": {kind.value: len(members) for kind, members in groups.items()},
            "bump_level": str(bump),
            "current_version": str(current) if current is not None else None,
            "next_version": str(current.bump(bump)) if current is not None else None,
        },
    )
