"""Development version tag parsed from a branch name."""

import re

from pydantic import BaseModel, ConfigDict, Field

# ASCII digits only; fullmatch so a trailing newline is rejected
BRANCH_NAME_PATTERN = re.compile(r"([0-9]+)\.([0-9]+)\.([0-9]+)_Dev")
BRANCH_NAME_EXAMPLE = "1.0.1_Dev"

DIGITS = r"^[0-9]+$"


class VersionTag(BaseModel):
    """Major.Minor.Revision triple of a development branch.

    Components keep the digits exactly as typed, so ``01.2.3_Dev`` yields
    version ``01.2.3``. Use ``numbers`` for the integer values.

    Attributes:
        major: Major version digits
        minor: Minor version digits
        revision: Revision digits
    """

    model_config = ConfigDict(frozen=True)

    major: str = Field(pattern=DIGITS, description="Major version")
    minor: str = Field(pattern=DIGITS, description="Minor version")
    revision: str = Field(pattern=DIGITS, description="Revision number")

    @classmethod
    def from_branch_name(cls, raw_name: str) -> "VersionTag":
        """Parse a ``Major.Minor.Revision_Dev`` branch name.

        Raises:
            ValueError: If the name doesn't follow the pattern
        """
        match = BRANCH_NAME_PATTERN.fullmatch(raw_name)
        if match is None:
            raise ValueError(f"Not a development branch name: {raw_name!r}")
        major, minor, revision = match.groups()
        return cls(major=major, minor=minor, revision=revision)

    @property
    def numbers(self) -> tuple[int, int, int]:
        """Integer values of the components."""
        return int(self.major), int(self.minor), int(self.revision)

    @property
    def version(self) -> str:
        """Dotted version string, e.g. ``1.0.1``."""
        return f"{self.major}.{self.minor}.{self.revision}"

    @property
    def branch_name(self) -> str:
        """Branch name, e.g. ``1.0.1_Dev``."""
        return f"{self.version}_Dev"
