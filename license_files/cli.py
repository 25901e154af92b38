"""CLI entry point for license-files."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Callable, Literal, Optional, cast

import click
from rich.console import Console
from rich.markup import escape

from license_files import __version__
from license_files.config import FinderConfig, load_config
from license_files.constants import EXIT_ERROR, EXIT_FOUND, EXIT_NOT_FOUND
from license_files.exceptions import ConfigurationError, LicenseFilesError
from license_files.listing import filter_ignored_files, list_directory
from license_files.logger import configure_logging, get_logger
from license_files.matching import match_license_files
from license_files.models.match import FindOptions, MatchResult, Verbosity
from license_files.output.display import display_name
from license_files.output.match_json import MatchJsonFormatter
from license_files.output.match_markdown import MatchMarkdownFormatter
from license_files.output.terminal import TerminalFormatter

logger = get_logger(__name__)

# Module-level console for consistent output
_console = Console()
# Separate console for error output (writes to stderr)
_error_console = Console(stderr=True)

FORMAT_CHOICES = ["terminal", "markdown", "json"]


def _common_options(func: Callable) -> Callable:
    """Attach the output options shared by every matching command."""
    options = [
        click.option(
            "--format",
            "output_format",
            type=click.Choice(FORMAT_CHOICES, case_sensitive=False),
            default=None,
            help="Output format (default: terminal, or 'format' from config).",
        ),
        click.option(
            "--output",
            "-o",
            "output_path",
            type=click.Path(dir_okay=False),
            default=None,
            help="Write report to file instead of stdout.",
        ),
        click.option(
            "--first",
            "first_only",
            is_flag=True,
            default=False,
            help="Report only the highest-precedence license file.",
        ),
        click.option(
            "--verbose",
            "-v",
            "verbose_flag",
            is_flag=True,
            default=False,
            help="Show match details and debug logging.",
        ),
        click.option(
            "--quiet",
            "-q",
            "quiet_flag",
            is_flag=True,
            default=False,
            help="Print only matching filenames.",
        ),
        click.option(
            "--config",
            "-c",
            "config_path",
            type=click.Path(exists=True, dir_okay=False),
            default=None,
            help="Path to configuration file.",
        ),
        click.option(
            "--log-file",
            "log_file",
            type=click.Path(dir_okay=False),
            default=None,
            help="Also write debug logs to this file.",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """License Files - find a directory's license documentation.

    Picks the files that document a project's license (LICENSE,
    LICENSE-MIT, LICENCE, COPYING, README, ...) and lists them in
    precedence order.

    \b
    Examples:
        license-files find
        license-files find path/to/project --first
        license-files match LICENSE-MIT readme.md
        license-files find --format json
    """
    pass


@main.command()
@click.argument(
    "directory",
    type=click.Path(file_okay=False),
    default=".",
    required=False,
)
@_common_options
def find(
    directory: str,
    output_format: str | None,
    output_path: str | None,
    first_only: bool,
    verbose_flag: bool,
    quiet_flag: bool,
    config_path: str | None,
    log_file: str | None,
) -> None:
    """Find license files in a directory.

    Lists the entries of DIRECTORY (default: current directory, no
    recursion) and reports the license files in precedence order.

    \b
    Examples:
        license-files find
        license-files find vendor/somelib
        license-files find --first --quiet
        license-files find --format markdown --output licenses.md
    """
    _run(
        lambda config: filter_ignored_files(list_directory(directory), config).filenames,
        directory,
        output_format,
        output_path,
        first_only,
        verbose_flag,
        quiet_flag,
        config_path,
        log_file,
    )


@main.command()
@click.argument("filenames", nargs=-1)
@_common_options
def match(
    filenames: tuple[str, ...],
    output_format: str | None,
    output_path: str | None,
    first_only: bool,
    verbose_flag: bool,
    quiet_flag: bool,
    config_path: str | None,
    log_file: str | None,
) -> None:
    """Match FILENAMES against the license file conventions.

    The names are classified as given; nothing is read from disk.

    \b
    Examples:
        license-files match LICENSE-MIT LICENSE
        license-files match $(ls vendor/somelib) --first -q
    """
    _run(
        lambda config: list(filenames),
        None,
        output_format,
        output_path,
        first_only,
        verbose_flag,
        quiet_flag,
        config_path,
        log_file,
    )


def _run(
    get_filenames: Callable[[FinderConfig], list[str]],
    source: str | None,
    output_format: str | None,
    output_path: str | None,
    first_only: bool,
    verbose_flag: bool,
    quiet_flag: bool,
    config_path: str | None,
    log_file: str | None,
) -> None:
    """Load config, match filenames, display the result and exit.

    Args:
        get_filenames: Produces the filenames to classify, given the config.
        source: Where the filenames came from, for display.
        output_format: --format value, or None to use the config.
        output_path: Optional file path to write output to.
        first_only: Keep only the highest-precedence match.
        verbose_flag: --verbose was given.
        quiet_flag: --quiet was given.
        config_path: Optional configuration file path.
        log_file: Optional debug log file path.
    """
    if verbose_flag and quiet_flag:
        raise click.UsageError("--verbose and --quiet are mutually exclusive.")

    if quiet_flag:
        verbosity = Verbosity.QUIET
    elif verbose_flag:
        verbosity = Verbosity.VERBOSE
    else:
        verbosity = Verbosity.NORMAL

    error_format = (output_format or "terminal").lower()

    try:
        # Flags first so config discovery is logged, then the config log level
        configure_logging(_resolve_log_level(verbosity), log_file=log_file)
        config = load_config(config_path)
        if config.log_level and verbosity == Verbosity.NORMAL:
            configure_logging(_resolve_log_level(verbosity, config), log_file=log_file)

        format_value = cast(
            Literal["terminal", "markdown", "json"],
            (output_format or config.format or "terminal").lower(),
        )
        error_format = format_value
        options = FindOptions(
            format=format_value, verbosity=verbosity, first_only=first_only
        )

        result = match_license_files(get_filenames(config))
        logger.info(
            "Found %d license file(s) among %d candidate(s)",
            len(result.matches),
            result.candidates_checked,
        )
        if options.first_only:
            result = result.first_only()

        _display_result(result, options, source, output_path)

        if result.has_matches:
            sys.exit(EXIT_FOUND)
        sys.exit(EXIT_NOT_FOUND)

    except LicenseFilesError as e:
        _display_error(e, error_format)
        sys.exit(EXIT_ERROR)


def _resolve_log_level(verbosity: Verbosity, config: FinderConfig | None = None) -> str:
    """Pick the console log level from the command flags and config."""
    if verbosity == Verbosity.VERBOSE:
        return "DEBUG"
    if verbosity == Verbosity.QUIET:
        return "ERROR"
    if config is not None and config.log_level:
        return config.log_level
    return "WARNING"


def _write_output_to_file(content: str, path: str) -> None:
    """Write report content to file.

    Args:
        content: The report content to write.
        path: The file path to write to.

    Raises:
        ConfigurationError: If file cannot be written.
    """
    file_path = Path(path)
    shown = escape(display_name(path))

    try:
        if file_path.exists():
            _error_console.print(
                f"[yellow]Warning: Overwriting existing file: {shown}[/yellow]"
            )
        file_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot write to file '{path}': {e}") from e

    _error_console.print(f"[green]Report written to {shown}[/green]")


def _display_result(
    result: MatchResult,
    options: FindOptions,
    source: Optional[str],
    output_path: str | None = None,
) -> None:
    """Display match results in the specified format.

    Args:
        result: The match result to display.
        options: Options including format and verbosity.
        source: Where the filenames came from.
        output_path: Optional file path to write output to.
    """
    if options.format == "json":
        content = MatchJsonFormatter().format_match_result(result, source)
    elif options.format == "markdown":
        content = MatchMarkdownFormatter().format_match_result(result, source)
    else:  # terminal
        if output_path:
            # Terminal format to file uses markdown instead
            content = MatchMarkdownFormatter().format_match_result(result, source)
        else:
            TerminalFormatter(
                console=_console, verbosity=options.verbosity
            ).format_match_result(result, source)
            return

    if output_path:
        _write_output_to_file(content, output_path)
    else:
        click.echo(content)


def _display_error(error: LicenseFilesError, format_type: str) -> None:
    """Display error message to user on stderr.

    Args:
        error: The exception that occurred.
        format_type: Output format type for styling.
    """
    error_type = type(error).__name__
    message = display_name(str(error))

    if format_type == "json":
        click.echo(
            json.dumps({"error": {"type": error_type, "message": message}}, indent=2),
            err=True,
        )
    elif format_type == "terminal":
        _error_console.print(
            f"Error: {error_type}: {message}", style="red bold", markup=False
        )
    else:
        click.echo(f"Error: {error_type}: {message}", err=True)


if __name__ == "__main__":
    main()
