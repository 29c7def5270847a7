"""Errors raised by changelet.

Every error is terminal for the current command. Parse errors carry the
identifier of the change file they came from so the user can fix it.
"""


class ChangeletError(Exception):
    """Base exception for changelet errors."""


class ParseError(ChangeletError):
    """A change file could not be turned into a change record."""

    def __init__(self, message: str, source: str = "<unknown>") -> None:
        self.message = message
        self.source = source
        super().__init__(f"{source}: {message}")


class MissingFrontMatterError(ParseError):
    """The metadata block delimiters are missing."""


class MalformedFrontMatterError(MissingFrontMatterError):
    """The metadata block is present but is not a key/value mapping."""


class InvalidOrMissingKindError(ParseError):
    """The ``kind`` key is absent or not one of the known kinds."""


class InvalidBreakingFlagError(ParseError):
    """The ``breaking`` key is not ``true`` or ``false``."""


class InvalidPriorityError(ParseError):
    """The ``priority`` key is not an integer within bounds."""


class EmptyBodyError(ParseError):
    """Nothing follows the metadata block."""


class ChangeSetError(ChangeletError):
    """One or more change files failed to parse."""

    def __init__(self, errors: list[ParseError]) -> None:
        self.errors = errors
        noun = "file" if len(errors) == 1 else "files"
        lines = [f"{len(errors)} invalid change {noun}:"]
        lines.extend(f"  {error}" for error in errors)
        super().__init__("\n".join(lines))


class MalformedVersionError(ChangeletError):
    """A version string is not a valid semantic version."""


class ChangesDirNotFoundError(ChangeletError):
    """The change directory does not exist."""


class ConfigError(ChangeletError):
    """The configuration file could not be read or validated."""
