"""Precedence rule Pydantic model."""
from __future__ import annotations

from typing import Pattern

from pydantic import BaseModel, Field


class PrecedenceRule(BaseModel):
    """One accepted license-file naming convention.

    The pattern is tested against the upper-cased base name of a file
    and must match it in full.
    """

    model_config = {"extra": "forbid", "frozen": True}

    name: str = Field(description="Short label for the rule, e.g. 'license-variant'")
    rank: int = Field(ge=0, description="Position in the precedence table (0 is highest)")
    pattern: Pattern[str] = Field(description="Pattern over the upper-cased base name")
    description: str = Field(default="", description="Human readable summary")

    def matches(self, key: str) -> bool:
        """Check whether an upper-cased base name satisfies this rule.

        Args:
            key: Upper-cased base name of a file.

        Returns:
            True if the whole key matches the rule's pattern.
        """
        return self.pattern.fullmatch(key) is not None
