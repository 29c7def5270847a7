"""Change file parsing.

A change file opens with a metadata block between two ``---`` lines,
followed by the free-text body::

    ---
    kind: fixed
    priority: 2
    ---
    Crash when the cache directory is missing.

Parsing is a pure function of the file text: no file system access, no
state shared between files.
"""

from datetime import datetime
from typing import Any

import yaml

from ..constants import FRONT_MATTER_DELIMITER
from ..errors import MalformedFrontMatterError, MissingFrontMatterError
from ..models import ChangeRecord


def split_front_matter(text: str, source: str = "<unknown>") -> tuple[str, str]:
    """Split change file text into its metadata block and body.

    Blank lines before the opening delimiter are tolerated. Any delimiter
    line after the closing one belongs to the body.

    Args:
        text: Full change file content
        source: Identifier used in error messages

    Returns:
        Tuple of (metadata block, body), both untrimmed

    Raises:
        MissingFrontMatterError: If either delimiter line is missing
    """
    lines = text.lstrip("\ufeff").splitlines(keepends=True)

    start = 0
    while start < len(lines) and not lines[start].strip():
        start += 1

    if start == len(lines) or lines[start].rstrip() != FRONT_MATTER_DELIMITER:
        raise MissingFrontMatterError(
            f"missing opening '{FRONT_MATTER_DELIMITER}' front matter delimiter", source
        )

    for end in range(start + 1, len(lines)):
        if lines[end].rstrip() == FRONT_MATTER_DELIMITER:
            return "".join(lines[start + 1 : end]), "".join(lines[end + 1 :])

    raise MissingFrontMatterError(
        f"missing closing '{FRONT_MATTER_DELIMITER}' front matter delimiter", source
    )


def parse_metadata(block: str, source: str = "<unknown>") -> dict[str, Any]:
    """Parse the metadata block into a mapping of raw values.

    The block is loaded with YAML's base loader, so every scalar stays a
    string and ``yes``/``on``/``1`` are never coerced into booleans.

    Raises:
        MalformedFrontMatterError: If the block is not a YAML mapping
    """
    if not block.strip():
        return {}

    try:
        data = yaml.load(block, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        problem = getattr(e, "problem", None) or str(e)
        raise MalformedFrontMatterError(f"front matter is not valid YAML: {problem}", source) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MalformedFrontMatterError("front matter must be a mapping of keys to values", source)
    return data


def parse_change_file(text: str, created_at: datetime, source: str = "<unknown>") -> ChangeRecord:
    """Parse one change file into a validated record.

    Unknown metadata keys are ignored.

    Args:
        text: Full change file content
        created_at: Creation timestamp supplied by the caller
        source: Identifier of the file, carried into errors and the record

    Returns:
        Immutable change record

    Raises:
        ParseError: One of its subclasses, naming ``source``
    """
    block, body = split_front_matter(text, source)
    metadata = parse_metadata(block, source)

    return ChangeRecord.from_fields(
        kind=metadata.get("kind"),
        breaking=metadata.get("breaking"),
        priority=metadata.get("priority"),
        text=body.strip(),
        created_at=created_at,
        source=source,
    )


def render_change_file(
    kind: str,
    text: str,
    *,
    breaking: bool | None = None,
    priority: int | None = None,
) -> str:
    """Render the content of a new change file.

    Optional keys are only written when given, so defaults stay implicit.
    """
    lines = [FRONT_MATTER_DELIMITER, f"kind: {kind}"]
    if breaking is not None:
        lines.append(f"breaking: {'true' if breaking else 'false'}")
    if priority is not None:
        lines.append(f"priority: {priority}")
    lines.append(FRONT_MATTER_DELIMITER)
    lines.append(text.strip())
    return "\n".join(lines) + "\n"
