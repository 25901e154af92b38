"""Tests for Markdown match formatter."""

from license_files.matching.matcher import match_license_files
from license_files.output.match_markdown import MatchMarkdownFormatter


class TestMatchMarkdownFormatter:
    """Tests for MatchMarkdownFormatter class."""

    def test_report_structure(self) -> None:
        """Test title, best match and table rows."""
        result = match_license_files(["readme.md", "LICENSE-MIT"])

        output = MatchMarkdownFormatter().format_match_result(result, "vendor")

        assert output.startswith("# License Files Report")
        assert "**Source:** `vendor`" in output
        assert "**Files checked:** 2" in output
        assert "**Best match:** `LICENSE-MIT`" in output
        assert "| 2 | license-variant | LICENSE-MIT |" in output
        assert "| 7 | readme | readme.md |" in output

    def test_rows_in_precedence_order(self) -> None:
        """Test that table rows follow rule order."""
        result = match_license_files(["COPYING", "LICENSE"])

        output = MatchMarkdownFormatter().format_match_result(result)

        assert output.index("| LICENSE |") < output.index("| COPYING |")

    def test_no_matches(self) -> None:
        """Test the report when nothing matched."""
        output = MatchMarkdownFormatter().format_match_result(match_license_files([]))

        assert "*No license files found.*" in output
        assert "## Matches" not in output

    def test_pipe_in_filename_is_escaped(self) -> None:
        """Test that pipes do not break the table."""
        result = match_license_files(["a|b/LICENSE"])

        output = MatchMarkdownFormatter().format_match_result(result)

        assert "a\\|b/LICENSE" in output
