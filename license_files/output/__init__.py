"""Output formatters for license-files."""

from license_files.output.display import display_name
from license_files.output.match_json import MatchJsonFormatter
from license_files.output.match_markdown import MatchMarkdownFormatter
from license_files.output.terminal import TerminalFormatter

__all__ = [
    "MatchJsonFormatter",
    "MatchMarkdownFormatter",
    "TerminalFormatter",
    "display_name",
]
