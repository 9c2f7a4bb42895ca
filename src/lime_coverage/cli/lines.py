"""Single-file executable line listing."""

from pathlib import Path
from typing import Optional

import typer

from ..coverage_data import load_coverage, merge_coverage
from ..exceptions import LimeCoverageError
from ..report import analyze_file, format_range
from . import app
from ._common import console, fail


@app.command()
def lines(
    file: Path = typer.Argument(..., help="PHP source file", dir_okay=False),
    coverage: Optional[Path] = typer.Option(
        None,
        "--coverage",
        "-c",
        help="JSON coverage dump to filter against the executable lines",
        dir_okay=False,
    ),
) -> None:
    """Show which lines of a file count as executable."""
    try:
        counts: dict[int, int] = {}
        if coverage is not None:
            data = merge_coverage([load_coverage(coverage)])
            counts = data.get(str(file.resolve()), {})
        item = analyze_file(file.resolve(), counts, str(file))
    except LimeCoverageError as e:
        fail(e)

    console.print(f"executable: {format_range(item.executable_lines)}", markup=False, soft_wrap=True)
    if coverage is not None:
        console.print(f"covered: {format_range(item.covered_lines)}", markup=False, soft_wrap=True)
        console.print(f"missing: {format_range(item.missing_lines)}", markup=False, soft_wrap=True)
        console.print(f"coverage: {item.percent:3.0f}%", markup=False, soft_wrap=True)
