"""Coverage report command."""

from pathlib import Path
from typing import Optional

import typer

from ..coverage_data import load_all
from ..exceptions import LimeCoverageError
from ..formatters import get_formatter
from ..logging_config import get_logger, setup_logging
from ..registration import FileRegistry
from ..report import build_report
from . import app
from ._common import fail, resolve_config

logger = get_logger(__name__)


@app.command()
def report(
    paths: list[Path] = typer.Argument(
        ...,
        help="Source files or directories to report on",
    ),
    coverage: list[Path] = typer.Option(
        ...,
        "--coverage",
        "-c",
        help="JSON coverage dump (repeat to merge several runs)",
        dir_okay=False,
    ),
    base_dir: Optional[Path] = typer.Option(
        None,
        "--base-dir",
        "-b",
        help="Directory stripped from displayed file names",
        file_okay=False,
    ),
    extension: Optional[str] = typer.Option(
        None,
        "--extension",
        "-e",
        help="Suffix of source files collected from directories (default .php)",
    ),
    fmt: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: rich, json",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="List missing lines and enable debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Configuration file (TOML)",
        dir_okay=False,
    ),
) -> None:
    """Print per-file and total line coverage.

    [bold cyan]Examples:[/bold cyan]

      lime-coverage report lib/ -c coverage.json

      lime-coverage report lib/ -c unit.json -c functional.json -b lib -v
    """
    setup_logging(verbose=verbose, quiet=quiet)

    try:
        settings = resolve_config(
            config=config,
            base_dir=base_dir,
            extension=extension,
            fmt=fmt,
            verbose=verbose,
            no_color=no_color,
        )
        registry = FileRegistry(extension=settings.extension, base_dir=settings.base_dir)
        registry.register(paths)
        logger.debug("Registered %d source files", len(registry))

        data = load_all(coverage)
        result = build_report(registry, data)
    except LimeCoverageError as e:
        fail(e)

    get_formatter(settings.output_format, settings).render(result)
