"""CLI command implementations for changelet.

This package contains the implementation of each CLI command,
separated from the CLI framework setup in cli.py.
"""

from .bump import compute_bump_level
from .changelog import compile_changelog_cmd
from .check import check
from .init import init
from .new import new

__all__ = [
    "check",
    "compile_changelog_cmd",
    "compute_bump_level",
    "init",
    "new",
]
