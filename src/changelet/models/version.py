"""Semantic version model.

Only the numeric core takes part in bump arithmetic. Pre-release and build
metadata are kept as opaque strings and dropped whenever a bump happens.
"""

import re

from pydantic import BaseModel, ConfigDict, Field

from ..errors import MalformedVersionError
from .bump import BumpLevel

SEMVER_RE = re.compile(
    r"(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-([0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+([0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?",
    re.ASCII,
)


class Version(BaseModel):
    """A semantic version ``MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]``.

    Example:
        >>> Version.parse("1.2.3-rc.1").bump(BumpLevel.MINOR)
        Version(major=1, minor=3, patch=0, prerelease=None, build=None)
    """

    model_config = ConfigDict(frozen=True)

    major: int = Field(ge=0)
    minor: int = Field(ge=0)
    patch: int = Field(ge=0)
    prerelease: str | None = Field(default=None, description="Opaque pre-release suffix")
    build: str | None = Field(default=None, description="Opaque build metadata")

    @classmethod
    def parse(cls, text: str) -> "Version":
        """Parse a version string.

        Raises:
            MalformedVersionError: If the string is not a semantic version
        """
        match = SEMVER_RE.fullmatch(text.strip())
        if match is None:
            raise MalformedVersionError(f"malformed version string {text!r}")
        major, minor, patch, prerelease, build = match.groups()
        return cls(
            major=int(major),
            minor=int(minor),
            patch=int(patch),
            prerelease=prerelease,
            build=build,
        )

    def bump(self, level: BumpLevel) -> "Version":
        """Return the version that follows this one at the given level.

        ``BumpLevel.NONE`` means no release is warranted and returns this
        version unchanged, suffixes included.
        """
        if level == BumpLevel.MAJOR:
            return Version(major=self.major + 1, minor=0, patch=0)
        if level == BumpLevel.MINOR:
            return Version(major=self.major, minor=self.minor + 1, patch=0)
        if level == BumpLevel.PATCH:
            return Version(major=self.major, minor=self.minor, patch=self.patch + 1)
        return self

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += f"-{self.prerelease}"
        if self.build:
            text += f"+{self.build}"
        return text
