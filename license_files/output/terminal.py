"""Terminal output formatter using Rich."""
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from license_files.models.match import MatchResult, Verbosity
from license_files.output.display import display_name


class TerminalFormatter:
    """Format match results for terminal display using Rich.

    Normal output is a table of matches in precedence order; quiet
    output is one filename per line so it can be piped into other tools.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        verbosity: Verbosity = Verbosity.NORMAL,
    ) -> None:
        """Initialize the formatter with a Rich console.

        Args:
            console: Optional Rich Console instance. If not provided,
                a new Console will be created.
            verbosity: Output verbosity level.
        """
        self._console = console if console is not None else Console()
        self._verbosity = verbosity

    def format_match_result(self, result: MatchResult, source: Optional[str] = None) -> None:
        """Display match results.

        Args:
            result: The match result to display.
            source: Directory (or other origin) the filenames came from.
        """
        if self._verbosity == Verbosity.QUIET:
            for match in result.matches:
                self._console.print(
                    display_name(match.filename), markup=False, highlight=False
                )
            return

        if not result.has_matches:
            where = f" in {escape(display_name(source))}" if source else ""
            self._console.print(f"[yellow]No license files found{where}[/yellow]")
            return

        title = "License Files"
        if source:
            title += f" in {escape(display_name(source))}"
        table = Table(title=title)

        table.add_column("Rank", justify="right")
        table.add_column("Rule", style="magenta")
        table.add_column("File", style="cyan", no_wrap=True)
        if self._verbosity == Verbosity.VERBOSE:
            table.add_column("Base Name")
            table.add_column("Position", justify="right")

        for match in result.matches:
            row = [str(match.rank + 1), match.rule, escape(display_name(match.filename))]
            if self._verbosity == Verbosity.VERBOSE:
                row.extend([escape(display_name(match.basename)), str(match.position)])
            table.add_row(*row)

        self._console.print(table)
        best = escape(display_name(result.matches[0].filename))
        self._console.print(f"\n[bold]Best match:[/bold] [green]{best}[/green]")
        if self._verbosity == Verbosity.VERBOSE:
            self._console.print(f"[bold]Files checked:[/bold] {result.candidates_checked}")
