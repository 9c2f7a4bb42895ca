"""Shared CLI helpers."""

from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..config import CoverageConfig, load_config
from ..exceptions import LimeCoverageError

console = Console()
err_console = Console(stderr=True)


def resolve_config(
    config: Optional[Path] = None,
    base_dir: Optional[Path] = None,
    extension: Optional[str] = None,
    fmt: Optional[str] = None,
    verbose: bool = False,
    no_color: bool = False,
) -> CoverageConfig:
    """Build configuration from CLI options; unset flags keep file/env values."""
    overrides = {
        "base_dir": str(base_dir) if base_dir is not None else None,
        "extension": extension,
        "output_format": fmt,
        "verbose": True if verbose else None,
        "color": "never" if no_color else None,
    }
    return load_config(config_file=config, **overrides)


def fail(error: LimeCoverageError) -> NoReturn:
    """Print an error and exit with status 1."""
    err_console.print(f"[red]Error:[/red] {escape(str(error))}", soft_wrap=True)
    raise typer.Exit(1)
