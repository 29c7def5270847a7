"""Bump level enumeration.

A bump level is the semantic-version impact of a set of changes. Levels are
totally ordered so an aggregate is simply the ``max`` of its parts.
"""

from enum import IntEnum


class BumpLevel(IntEnum):
    """Semantic-version impact, ordered NONE < PATCH < MINOR < MAJOR."""

    NONE = 0
    PATCH = 1
    MINOR = 2
    MAJOR = 3

    def __str__(self) -> str:
        return self.name.lower()
