"""CLI entry point: registers all subcommands."""

from typing import Optional

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="lime-coverage",
    help="lime-coverage - Line coverage reports for PHP sources",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"lime-coverage {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Report which executable PHP lines a test run covered."""


# Import subcommands to register them
from .report import report as _report  # noqa: F401, E402
from .lines import lines as _lines  # noqa: F401, E402
