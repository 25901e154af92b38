"""Configuration Pydantic models for license-files."""
from __future__ import annotations

import os
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator


class FinderConfig(BaseModel):
    """Configuration for license-files.

    All fields are optional with None defaults to allow partial configuration.
    """

    model_config = {"extra": "forbid"}

    ignored_files: Optional[List[str]] = Field(
        default=None,
        description="Filenames to drop from directory listings before matching.",
    )
    format: Optional[Literal["terminal", "markdown", "json"]] = Field(
        default=None,
        description="Default output format when --format is not given.",
    )
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = Field(
        default=None,
        description="Log level used when neither --verbose nor --quiet is given.",
    )

    @field_validator("ignored_files")
    @classmethod
    def _bare_names_only(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        """Listings hold entry names, so paths and blanks could never match."""
        if value is None:
            return value
        separators = {"/", os.sep}
        for name in value:
            if not name.strip():
                raise ValueError("entries must be non-empty file names")
            if any(sep in name for sep in separators):
                raise ValueError(f"'{name}' is a path; list bare file names")
        return value
