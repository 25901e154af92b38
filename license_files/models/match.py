"""Match result Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, Field


class Verbosity(Enum):
    """Output verbosity levels."""

    QUIET = "quiet"
    NORMAL = "normal"
    VERBOSE = "verbose"


class FindOptions(BaseModel):
    """Options for rendering a license file search."""

    model_config = {"extra": "forbid"}

    format: Literal["terminal", "markdown", "json"] = Field(
        default="terminal",
        description="Output format for match results",
    )
    verbosity: Verbosity = Field(
        default=Verbosity.NORMAL,
        description="Output verbosity level (quiet, normal, verbose)",
    )
    first_only: bool = Field(
        default=False,
        description="Report only the highest-precedence license file",
    )


class LicenseFileMatch(BaseModel):
    """A filename selected by one precedence rule."""

    model_config = {"extra": "forbid"}

    filename: str = Field(description="Filename exactly as supplied")
    basename: str = Field(description="Base name used for matching (extension removed)")
    rule: str = Field(description="Name of the rule that selected the file")
    rank: int = Field(ge=0, description="Rank of the rule (0 is highest precedence)")
    position: int = Field(ge=0, description="Index of the filename in the input")


class MatchResult(BaseModel):
    """All license file candidates found in one listing, in precedence order."""

    model_config = {"extra": "forbid"}

    matches: list[LicenseFileMatch] = Field(default_factory=list)
    candidates_checked: int = Field(
        default=0, ge=0, description="Number of filenames inspected"
    )

    @property
    def filenames(self) -> list[str]:
        """Matched filenames in precedence order."""
        return [match.filename for match in self.matches]

    @property
    def best(self) -> Optional[LicenseFileMatch]:
        """The highest-precedence match, or None if nothing matched."""
        return self.matches[0] if self.matches else None

    @property
    def has_matches(self) -> bool:
        """Check if any license file was found.

        Returns:
            True if at least one rule matched.
        """
        return bool(self.matches)

    def first_only(self) -> MatchResult:
        """Return a copy holding only the highest-precedence match."""
        return MatchResult(
            matches=self.matches[:1],
            candidates_checked=self.candidates_checked,
        )
