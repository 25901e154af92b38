"""Markdown output formatter for license file matches."""

from datetime import datetime, timezone
from typing import Optional

from license_files.models.match import MatchResult
from license_files.output.display import display_name


class MatchMarkdownFormatter:
    """Format match results as a Markdown report."""

    def format_match_result(self, result: MatchResult, source: Optional[str] = None) -> str:
        """Format match result as Markdown string.

        Args:
            result: The match result to format.
            source: Directory (or other origin) the filenames came from.

        Returns:
            Markdown string representation of the match result.
        """
        lines: list[str] = []

        lines.append("# License Files Report")
        lines.append("")

        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        lines.append(f"*Generated: {timestamp}*")
        lines.append("")

        if source:
            lines.append(f"**Source:** `{display_name(source)}`")
            lines.append("")

        lines.append(f"**Files checked:** {result.candidates_checked}")
        lines.append("")

        if not result.has_matches:
            lines.append("*No license files found.*")
            return "\n".join(lines)

        lines.append(f"**Best match:** `{display_name(result.matches[0].filename)}`")
        lines.append("")

        lines.extend(self._format_matches(result))
        lines.append("")

        return "\n".join(lines)

    def _format_matches(self, result: MatchResult) -> list[str]:
        lines = [
            "## Matches",
            "",
            "| Rank | Rule | File |",
            "|------|------|------|",
        ]
        for match in result.matches:
            filename = self._escape_markdown(display_name(match.filename))
            lines.append(f"| {match.rank + 1} | {match.rule} | {filename} |")
        return lines

    def _escape_markdown(self, text: str) -> str:
        """Escape characters that break a Markdown table cell."""
        return text.replace("|", "\\|")
