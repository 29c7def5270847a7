"""changelet: version bumps and changelogs from per-change files."""

__version__ = "0.1.0"
