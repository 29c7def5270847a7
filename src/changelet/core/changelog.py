"""Changelog compilation.

Renders change records as one Markdown release section, grouped by kind in
"Keep a Changelog" order.
"""

from collections.abc import Iterable
from datetime import date

from ..models import ChangeKind, ChangeRecord

SECTION_ORDER: tuple[ChangeKind, ...] = (
    ChangeKind.ADDED,
    ChangeKind.CHANGED,
    ChangeKind.DEPRECATED,
    ChangeKind.REMOVED,
    ChangeKind.FIXED,
    ChangeKind.SECURITY,
)

DEFAULT_DATE_FORMAT = "%Y-%m-%d"


def display_order(record: ChangeRecord) -> tuple[int, object]:
    """Sort key: highest priority first, then oldest first."""
    return (-record.priority, record.created_at)


def group_changes(records: Iterable[ChangeRecord]) -> dict[ChangeKind, list[ChangeRecord]]:
    """Group records by kind in section order, each group in display order.

    Kinds without records are left out. The sort is stable, so records
    tied on priority and timestamp keep their input order.
    """
    ordered = sorted(records, key=display_order)
    groups: dict[ChangeKind, list[ChangeRecord]] = {}
    for kind in SECTION_ORDER:
        members = [record for record in ordered if record.kind == kind]
        if members:
            groups[kind] = members
    return groups


def compile_changelog(
    version: str,
    records: Iterable[ChangeRecord],
    *,
    release_date: date | None = None,
    date_format: str = DEFAULT_DATE_FORMAT,
    bullet: str = "-",
) -> str:
    """Render the changelog section for a release.

    Args:
        version: Release version, used verbatim in the heading
        records: All change records in the release
        release_date: Optional date appended to the heading
        date_format: strftime format for ``release_date``
        bullet: List marker placed before each change

    Returns:
        Markdown text ending in a single newline
    """
    heading = f"## {version}"
    if release_date is not None:
        heading += f" - {release_date.strftime(date_format)}"

    lines = [heading]
    for kind, members in group_changes(records).items():
        lines.extend(["", f"### {kind.heading}", ""])
        lines.extend(f"{bullet} {record.text}" for record in members)

    return "\n".join(lines) + "\n"
