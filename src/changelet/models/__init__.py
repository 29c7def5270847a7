"""Data models for changelet.

- Change records and kinds (ChangeRecord, ChangeKind)
- Bump levels (BumpLevel)
- Semantic versions (Version)

All records are frozen Pydantic models: once a change file is parsed its
record cannot be altered by later stages.
"""

from .bump import BumpLevel
from .change import DEFAULT_BREAKING, ChangeKind, ChangeRecord
from .version import Version

__all__ = [
    "DEFAULT_BREAKING",
    "BumpLevel",
    "ChangeKind",
    "ChangeRecord",
    "Version",
]
