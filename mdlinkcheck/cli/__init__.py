"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Returns:
        0 when every link resolves, 1 when broken links were reported and 2
        for usage errors or fatal conditions
    """
    import click
    import typer

    from mdlinkcheck.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    app = _create_app()
    try:
        exit_code = app(args=argv, prog_name="mdlinkcheck", standalone_mode=False)
    except click.exceptions.UsageError as e:
        e.show()
        return e.exit_code
    except click.exceptions.Abort:
        typer.echo("Aborted!", err=True)
        return 130
    return exit_code if isinstance(exit_code, int) else 0
