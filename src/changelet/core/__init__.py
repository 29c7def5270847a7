"""Core business logic for changelet.

This package holds the change-file pipeline:
- parser: Change file parsing and rendering
- bump: Bump level calculation
- changelog: Changelog grouping and rendering
- sources: Reading change files from the change directory
- loader: Parsing a whole change set, all-or-nothing
"""

from .bump import calculate_bump, contribution
from .changelog import SECTION_ORDER, compile_changelog, group_changes
from .loader import load_changes
from .parser import parse_change_file, parse_metadata, render_change_file, split_front_matter
from .sources import ChangeSource, change_file_name, collect_sources, sanitize_slug

__all__ = [
    "SECTION_ORDER",
    "ChangeSource",
    "calculate_bump",
    "change_file_name",
    "collect_sources",
    "compile_changelog",
    "contribution",
    "group_changes",
    "load_changes",
    "parse_change_file",
    "parse_metadata",
    "render_change_file",
    "sanitize_slug",
    "split_front_matter",
]
