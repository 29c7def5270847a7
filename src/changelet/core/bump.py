"""Bump level calculation.

Each change contributes a level and the release takes the highest one.
The rules live in static tables so they can be read and tested on their own.
"""

from collections.abc import Iterable

from ..models import BumpLevel, ChangeKind, ChangeRecord, Version

# Contribution of a non-breaking change; breaking changes are always MAJOR
KIND_CONTRIBUTION: dict[ChangeKind, BumpLevel] = {
    ChangeKind.ADDED: BumpLevel.MINOR,
    ChangeKind.FIXED: BumpLevel.PATCH,
    ChangeKind.CHANGED: BumpLevel.PATCH,
    ChangeKind.REMOVED: BumpLevel.PATCH,
    ChangeKind.DEPRECATED: BumpLevel.PATCH,
    ChangeKind.SECURITY: BumpLevel.PATCH,
}

BREAKING_CONTRIBUTION = BumpLevel.MAJOR

# Opt-in 0.y.z leniency: everything moves down one level
INITIAL_DEVELOPMENT_SHIFT: dict[BumpLevel, BumpLevel] = {
    BumpLevel.NONE: BumpLevel.NONE,
    BumpLevel.PATCH: BumpLevel.PATCH,
    BumpLevel.MINOR: BumpLevel.PATCH,
    BumpLevel.MAJOR: BumpLevel.MINOR,
}


def contribution(record: ChangeRecord) -> BumpLevel:
    """Level a single change contributes on its own."""
    if record.breaking:
        return BREAKING_CONTRIBUTION
    return KIND_CONTRIBUTION[record.kind]


def calculate_bump(
    records: Iterable[ChangeRecord],
    *,
    current: Version | None = None,
    initial_development: bool = False,
) -> BumpLevel:
    """Reduce a collection of changes to a single bump level.

    An empty collection yields ``BumpLevel.NONE``. Adding a change never
    lowers the result.

    Args:
        records: Validated change records
        current: Current version, only consulted for initial development
        initial_development: Treat ``0.y.z`` versions leniently, so breaking
            changes bump the minor and everything else bumps the patch
            (``0.0.z`` always bumps the patch)

    Returns:
        Highest contribution across ``records``
    """
    level = max((contribution(record) for record in records), default=BumpLevel.NONE)

    if initial_development and current is not None and current.major == 0:
        if current.minor == 0 and level != BumpLevel.NONE:
            return BumpLevel.PATCH
        return INITIAL_DEVELOPMENT_SHIFT[level]
    return level
