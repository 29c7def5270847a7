"""Change record model for parsed change files.

A change record is the validated, in-memory form of one file in the change
directory. Records are immutable once built and live only for the command
that loaded them.
"""

import re
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import PRIORITY_MAX, PRIORITY_MIN
from ..errors import (
    EmptyBodyError,
    InvalidBreakingFlagError,
    InvalidOrMissingKindError,
    InvalidPriorityError,
)


class ChangeKind(str, Enum):
    """Kinds of change a change file can describe."""

    ADDED = "added"
    FIXED = "fixed"
    CHANGED = "changed"
    REMOVED = "removed"
    DEPRECATED = "deprecated"
    SECURITY = "security"

    @property
    def heading(self) -> str:
        """Section heading used in the rendered changelog."""
        return self.value.capitalize()


# Whether a change of this kind is breaking when the file does not say
DEFAULT_BREAKING: dict[ChangeKind, bool] = {
    ChangeKind.ADDED: False,
    ChangeKind.FIXED: False,
    ChangeKind.CHANGED: True,
    ChangeKind.REMOVED: True,
    ChangeKind.DEPRECATED: False,
    ChangeKind.SECURITY: False,
}

_BOOLEAN_LITERALS = {"true": True, "false": False}
_INTEGER_RE = re.compile(r"-?[0-9]+")


class ChangeRecord(BaseModel):
    """One validated change.

    Attributes:
        kind: What sort of change this is.
        breaking: Whether the change breaks backward compatibility. Always
            resolved, either from the file or from ``DEFAULT_BREAKING``.
        priority: Ordering weight within a changelog section (higher first).
        text: Body of the change file, rendered verbatim.
        created_at: Timestamp supplied by the host, used to order ties. Always
            timezone-aware (UTC).
        source: Identifier of the originating file, for messages only.
    """

    model_config = ConfigDict(frozen=True)

    kind: ChangeKind = Field(description="Kind of change")
    breaking: bool = Field(description="Breaks backward compatibility")
    priority: int = Field(default=0, ge=PRIORITY_MIN, le=PRIORITY_MAX)
    text: str = Field(min_length=1, description="Change description, verbatim")
    created_at: datetime = Field(description="When the change file was created")
    source: str = Field(default="<unknown>", description="Originating file")

    @field_validator("created_at")
    @classmethod
    def normalize_created_at(cls, value: datetime) -> datetime:
        """Store timestamps in UTC; naive values are taken as local time."""
        return value.astimezone(UTC)

    @classmethod
    def from_fields(
        cls,
        *,
        kind: Any,
        breaking: Any = None,
        priority: Any = None,
        text: str,
        created_at: datetime,
        source: str = "<unknown>",
    ) -> "ChangeRecord":
        """Validate raw metadata values and build a record.

        Raw values are what the metadata block held: strings, or ``None``
        when a key was absent. Native ``bool``/``int`` values are accepted
        too so records can be built directly in code.

        Raises:
            InvalidOrMissingKindError: ``kind`` absent or not a known kind
            InvalidBreakingFlagError: ``breaking`` not ``true``/``false``
            InvalidPriorityError: ``priority`` not an integer in bounds
            EmptyBodyError: ``text`` is blank
        """
        change_kind = _resolve_kind(kind, source)
        is_breaking = _resolve_breaking(breaking, change_kind, source)
        level = _resolve_priority(priority, source)
        if not isinstance(text, str) or not text.strip():
            raise EmptyBodyError("change text is empty", source)

        return cls(
            kind=change_kind,
            breaking=is_breaking,
            priority=level,
            text=text,
            created_at=created_at,
            source=source,
        )


def _resolve_kind(raw: Any, source: str) -> ChangeKind:
    if raw is None:
        raise InvalidOrMissingKindError("missing required key 'kind'", source)
    if isinstance(raw, ChangeKind):
        return raw
    if isinstance(raw, str):
        try:
            return ChangeKind(raw)
        except ValueError:
            pass
    expected = ", ".join(kind.value for kind in ChangeKind)
    raise InvalidOrMissingKindError(f"invalid kind {raw!r} (expected one of: {expected})", source)


def _resolve_breaking(raw: Any, kind: ChangeKind, source: str) -> bool:
    if raw is None:
        return DEFAULT_BREAKING[kind]
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str) and raw in _BOOLEAN_LITERALS:
        return _BOOLEAN_LITERALS[raw]
    raise InvalidBreakingFlagError(
        f"invalid breaking flag {raw!r} (expected true or false)", source
    )


def _resolve_priority(raw: Any, source: str) -> int:
    if raw is None:
        return PRIORITY_MIN
    if isinstance(raw, int) and not isinstance(raw, bool):
        value = raw
    elif isinstance(raw, str) and _INTEGER_RE.fullmatch(raw):
        value = int(raw)
    else:
        raise InvalidPriorityError(f"invalid priority {raw!r} (expected an integer)", source)
    if not PRIORITY_MIN <= value <= PRIORITY_MAX:
        raise InvalidPriorityError(
            f"priority {value} out of range ({PRIORITY_MIN} to {PRIORITY_MAX})", source
        )
    return value
