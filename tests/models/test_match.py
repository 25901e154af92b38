"""Tests for match result models."""

import re

import pytest
from pydantic import ValidationError

from license_files.models.match import (
    FindOptions,
    LicenseFileMatch,
    MatchResult,
    Verbosity,
)
from license_files.models.rule import PrecedenceRule


def _match(filename: str, rule: str, rank: int, position: int = 0) -> LicenseFileMatch:
    return LicenseFileMatch(
        filename=filename,
        basename=filename.split(".")[0],
        rule=rule,
        rank=rank,
        position=position,
    )


class TestMatchResult:
    """Tests for MatchResult."""

    def test_defaults(self) -> None:
        """Test an empty result."""
        result = MatchResult()

        assert result.matches == []
        assert result.candidates_checked == 0
        assert result.filenames == []
        assert result.best is None
        assert result.has_matches is False

    def test_properties(self) -> None:
        """Test filenames, best and has_matches."""
        result = MatchResult(
            matches=[_match("LICENSE", "license", 0, 1), _match("README.md", "readme", 6)],
            candidates_checked=4,
        )

        assert result.filenames == ["LICENSE", "README.md"]
        assert result.best is not None
        assert result.best.filename == "LICENSE"
        assert result.has_matches is True

    def test_first_only(self) -> None:
        """Test that first_only keeps the top match and the candidate count."""
        result = MatchResult(
            matches=[_match("LICENSE", "license", 0), _match("COPYING", "copying", 5)],
            candidates_checked=2,
        )

        first = result.first_only()

        assert first.filenames == ["LICENSE"]
        assert first.candidates_checked == 2
        assert result.filenames == ["LICENSE", "COPYING"]

    def test_first_only_empty(self) -> None:
        """Test first_only on an empty result."""
        assert MatchResult().first_only().matches == []

    def test_extra_fields_forbidden(self) -> None:
        """Test that extra fields are not allowed."""
        with pytest.raises(ValidationError):
            MatchResult(unknown=1)  # type: ignore[call-arg]


class TestLicenseFileMatch:
    """Tests for LicenseFileMatch."""

    def test_negative_rank_rejected(self) -> None:
        """Test that rank must be non-negative."""
        with pytest.raises(ValidationError):
            LicenseFileMatch(
                filename="LICENSE", basename="LICENSE", rule="license", rank=-1, position=0
            )

    def test_dump(self) -> None:
        """Test serialization to a plain dict."""
        data = _match("LICENSE.md", "license", 0, 3).model_dump()

        assert data == {
            "filename": "LICENSE.md",
            "basename": "LICENSE",
            "rule": "license",
            "rank": 0,
            "position": 3,
        }


class TestFindOptions:
    """Tests for FindOptions."""

    def test_defaults(self) -> None:
        """Test default options."""
        options = FindOptions()

        assert options.format == "terminal"
        assert options.verbosity == Verbosity.NORMAL
        assert options.first_only is False

    def test_invalid_format(self) -> None:
        """Test that unknown formats are rejected."""
        with pytest.raises(ValidationError):
            FindOptions(format="html")  # type: ignore[arg-type]


class TestPrecedenceRule:
    """Tests for PrecedenceRule."""

    def test_matches_whole_key(self) -> None:
        """Test that a rule only matches the whole key."""
        rule = PrecedenceRule(name="copying", rank=5, pattern=re.compile("COPYING"))

        assert rule.matches("COPYING")
        assert not rule.matches("COPYING2")
        assert not rule.matches("XCOPYING")

    def test_is_frozen(self) -> None:
        """Test that rules cannot be modified."""
        rule = PrecedenceRule(name="readme", rank=6, pattern=re.compile("README"))

        with pytest.raises(ValidationError):
            rule.rank = 0  # type: ignore[misc]
