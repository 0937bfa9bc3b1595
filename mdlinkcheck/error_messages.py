"""Helpful error messages for fatal mdlinkcheck conditions."""

import logging
import sys

from rich.console import Console
from rich.markup import escape

from .api.errors import ConfigError, LinkCheckError, MissingDependencyError, ParseError

logger = logging.getLogger(__name__)

FATAL_EXIT_CODE = 2


def _emit_error(title: str, *lines: str) -> None:
    """Write a framed error message to STDERR."""
    console = Console(file=sys.stderr, highlight=False)
    console.print("=" * 70)
    console.print(f"[bold red]{escape(title)}[/bold red]")
    console.print("=" * 70)
    for line in lines:
        console.print(escape(line))
    console.print("=" * 70)


def missing_dependency_error(error: MissingDependencyError) -> int:
    """Explain how to install a missing external program.

    Returns:
        The exit code for fatal conditions
    """
    logger.debug(f"Missing dependency: {error.program}")
    _emit_error(
        f"MISSING DEPENDENCY: {error.program}",
        f"Couldn't find '{error.program}' on PATH.",
        "",
        "Possible solutions:",
        f"  1. Install {error.program} (https://pandoc.org/installing.html)",
        "  2. Use the built-in parser instead: --parser markdown",
    )
    return FATAL_EXIT_CODE


def config_error(error: ConfigError) -> int:
    """Report an invalid configuration."""
    logger.debug(f"Invalid configuration: {error.errors}")
    _emit_error(
        "INVALID CONFIGURATION",
        *(f"  - {message}" for message in error.errors),
    )
    return FATAL_EXIT_CODE


def parse_error(error: ParseError) -> int:
    """Report a document that could not be read or parsed."""
    logger.debug(f"Parse failure: {error.path} - {error.reason}")
    _emit_error(
        "DOCUMENT COULD NOT BE PARSED",
        f"File: {error.path}",
        f"Reason: {error.reason}",
    )
    return FATAL_EXIT_CODE


def fatal_error(error: LinkCheckError) -> int:
    """Report any fatal condition, choosing the most specific message."""
    if isinstance(error, MissingDependencyError):
        return missing_dependency_error(error)
    if isinstance(error, ConfigError):
        return config_error(error)
    if isinstance(error, ParseError):
        return parse_error(error)
    logger.debug(f"Link check aborted: {error}")
    _emit_error("LINK CHECK ABORTED", str(error))
    return FATAL_EXIT_CODE
