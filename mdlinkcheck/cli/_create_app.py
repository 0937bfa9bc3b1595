"""Create the mdlinkcheck Typer CLI app."""

import logging
from enum import Enum
from pathlib import Path

import typer

from mdlinkcheck.api.config.get_package_version import get_package_version
from mdlinkcheck.api.config.RunConfig import RunConfig
from mdlinkcheck.api.errors import LinkCheckError
from mdlinkcheck.api.link._parsers import get_parser
from mdlinkcheck.api.link.check_files import check_files
from mdlinkcheck.api.link.ErrorReport import ErrorReport
from mdlinkcheck.error_messages import fatal_error
from mdlinkcheck.utils.logger import configure_logging, get_logger

logger = get_logger("cli")

BROKEN_LINKS_EXIT_CODE = 1


class ParserName(str, Enum):
    """Available Markdown parser backends."""

    markdown = "markdown"
    pandoc = "pandoc"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"mdlinkcheck {get_package_version()}")
        raise typer.Exit()


def _create_app() -> typer.Typer:
    """Create and configure the mdlinkcheck Typer app."""
    app = typer.Typer(
        name="mdlinkcheck",
        help="Validate internal links and anchors in Markdown documents.",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        add_completion=False,
    )

    @app.command()
    def check(
        files: list[Path] = typer.Argument(
            ...,
            help="Markdown files to check",
            exists=True,
            dir_okay=False,
            readable=True,
        ),
        base_path: Path | None = typer.Option(
            None,
            "--base-path",
            help="Root used when no git work tree is found",
            exists=True,
            file_okay=False,
            dir_okay=True,
        ),
        dropped_extension: str | None = typer.Option(
            None,
            "--dropped-extension",
            "-e",
            help="Extension link targets omit (e.g. 'md' for wikis)",
        ),
        relative_links: bool | None = typer.Option(
            None,
            "--relative-links/--no-relative-links",
            "-r",
            help="Allow link targets in other directories",
        ),
        parser: ParserName = typer.Option(ParserName.markdown, "--parser", "-p", help="Markdown parser backend"),
        jobs: int = typer.Option(1, "--jobs", "-j", min=1, help="Documents checked in parallel"),
        verbose: bool = typer.Option(False, "--verbose", help="Log progress on stderr"),
        version: bool = typer.Option(  # noqa: ARG001
            False,
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ) -> None:
        """Check that every local link in FILES points to an existing file and heading."""
        configure_logging(logging.DEBUG if verbose else logging.WARNING)

        report = ErrorReport()
        try:
            config = RunConfig.load(
                base_path=base_path,
                dropped_extension=dropped_extension,
                relative_links=relative_links,
            )
            checked = check_files(files, config, get_parser(parser.value), report, jobs=jobs)
        except LinkCheckError as e:
            raise typer.Exit(fatal_error(e)) from e

        logger.info(f"Checked {checked} local links in {len(files)} files, {len(report.errors)} broken")
        if report.any_error_found():
            raise typer.Exit(BROKEN_LINKS_EXIT_CODE)

    return app
