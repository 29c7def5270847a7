"""Change file collection from the change directory."""

import logging
import re
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

from ..constants import CONFIG_FILE, DEFAULT_PATTERN
from ..errors import ChangesDirNotFoundError, ParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChangeSource:
    """Raw content of one change file as handed to the parser.

    A file that could not be decoded carries the failure in ``error`` and an
    empty ``text``; the loader reports it with the other invalid files.
    """

    text: str
    created_at: datetime
    identifier: str
    error: ParseError | None = None


def collect_sources(changes_dir: Path, pattern: str = DEFAULT_PATTERN) -> list[ChangeSource]:
    """Read every change file in the change directory.

    The file modification time stands in for the creation time. Files are
    returned in name order; dotfiles and the config file are skipped.

    Args:
        changes_dir: Directory holding the change files
        pattern: Glob pattern selecting change files

    Returns:
        One source per change file (empty if there are none)

    Raises:
        ChangesDirNotFoundError: If the directory does not exist
    """
    if not changes_dir.is_dir():
        raise ChangesDirNotFoundError(f"Change directory not found: {changes_dir}")

    sources: list[ChangeSource] = []
    for path in sorted(changes_dir.glob(pattern)):
        if path.name.startswith(".") or path.name == CONFIG_FILE or not path.is_file():
            continue
        modified = datetime.fromtimestamp(path.stat().st_mtime, tz=UTC)
        error: ParseError | None = None
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            text = ""
            error = ParseError("file is not valid UTF-8", str(path))
        sources.append(
            ChangeSource(text=text, created_at=modified, identifier=str(path), error=error)
        )

    logger.debug(f"Found {len(sources)} change files in {changes_dir}")
    return sources


def sanitize_slug(name: str) -> str:
    """Convert name to safe slug.

    Args:
        name: Name to sanitize

    Returns:
        Lowercase slug with only alphanumeric and hyphens
    """
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower())
    slug = slug.strip("-")
    return slug[:50].rstrip("-") if slug else "change"


def change_file_name(slug: str, now: datetime | None = None) -> str:
    """Build a change file name in format YYYYMMDD-HHMMSS-<slug>.md.

    The timestamp prefix keeps a directory listing in creation order.
    """
    now = now or datetime.now()
    return f"{now.strftime('%Y%m%d-%H%M%S')}-{sanitize_slug(slug)}.md"
