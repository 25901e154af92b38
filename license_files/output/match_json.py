"""JSON output formatter for license file matches."""
import json
from datetime import datetime, timezone
from typing import Any, Optional

from license_files import __version__
from license_files.models.match import LicenseFileMatch, MatchResult
from license_files.output.display import display_name


class MatchJsonFormatter:
    """Format match results as JSON output for scripts and CI pipelines."""

    def format_match_result(self, result: MatchResult, source: Optional[str] = None) -> str:
        """Format match result as JSON string.

        Args:
            result: The match result to format.
            source: Directory (or other origin) the filenames came from.

        Returns:
            JSON string representation of the match result.
        """
        output = self._build_output(result, source)
        return json.dumps(output, indent=2)

    def _build_output(self, result: MatchResult, source: Optional[str]) -> dict[str, Any]:
        return {
            "metadata": self._build_metadata(source),
            "summary": self._build_summary(result),
            "matches": [self._build_match(match) for match in result.matches],
        }

    def _build_metadata(self, source: Optional[str]) -> dict[str, Any]:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        return {
            "generated_at": timestamp,
            "tool_version": __version__,
            "source": display_name(source) if source else source,
        }

    def _build_summary(self, result: MatchResult) -> dict[str, Any]:
        best = result.best
        return {
            "candidates_checked": result.candidates_checked,
            "matches_found": len(result.matches),
            "best": display_name(best.filename) if best else None,
            "status": "found" if result.has_matches else "not_found",
        }

    def _build_match(self, match: LicenseFileMatch) -> dict[str, Any]:
        data = match.model_dump()
        data["filename"] = display_name(match.filename)
        data["basename"] = display_name(match.basename)
        return data
