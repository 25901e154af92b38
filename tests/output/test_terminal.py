"""Tests for terminal formatter."""

from io import StringIO

from rich.console import Console

from license_files.matching.matcher import match_license_files
from license_files.models.match import MatchResult, Verbosity
from license_files.output.terminal import TerminalFormatter


def _render(result: MatchResult, verbosity: Verbosity = Verbosity.NORMAL, source=None) -> str:
    string_io = StringIO()
    console = Console(file=string_io, width=120)
    TerminalFormatter(console=console, verbosity=verbosity).format_match_result(
        result, source
    )
    return string_io.getvalue()


class TestTerminalFormatter:
    """Tests for TerminalFormatter."""

    def test_formats_matches_as_table(self) -> None:
        """Test that matches are displayed in a table."""
        output = _render(match_license_files(["readme.md", "LICENSE-MIT"]))

        assert "License Files" in output
        assert "LICENSE-MIT" in output
        assert "license-variant" in output
        assert "readme.md" in output
        assert "Best match:" in output

    def test_title_includes_source(self) -> None:
        """Test that the source directory appears in the title."""
        output = _render(match_license_files(["COPYING"]), source="vendor")

        assert "vendor" in output

    def test_no_matches(self) -> None:
        """Test the message shown when nothing matched."""
        output = _render(match_license_files(["setup.py"]))

        assert "No license files found" in output

    def test_quiet_prints_filenames_only(self) -> None:
        """Test that quiet mode prints one filename per line."""
        output = _render(
            match_license_files(["readme.md", "LICENSE"]), verbosity=Verbosity.QUIET
        )

        assert output.splitlines() == ["LICENSE", "readme.md"]

    def test_quiet_no_matches_prints_nothing(self) -> None:
        """Test that quiet mode stays silent when nothing matched."""
        output = _render(match_license_files(["setup.py"]), verbosity=Verbosity.QUIET)

        assert output == ""

    def test_verbose_shows_details(self) -> None:
        """Test that verbose mode adds base name and position columns."""
        output = _render(
            match_license_files(["notes.txt", "LICENSE.md"]), verbosity=Verbosity.VERBOSE
        )

        assert "Base Name" in output
        assert "Position" in output
        assert "Files checked:" in output

    def test_markup_in_filename_is_escaped(self) -> None:
        """Test that Rich markup characters in filenames are shown literally."""
        output = _render(match_license_files(["[red]/README"]))

        assert "[red]/README" in output
