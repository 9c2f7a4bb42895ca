"""Rich terminal formatter for coverage reports."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.text import Text

from ..config import ColorMode, StyleConfig
from ..report import CoverageReport, FileCoverage, format_range
from .base import BaseFormatter


def _make_console(color: ColorMode) -> Console:
    if color == "never":
        return Console(color_system=None, highlight=False)
    if color == "always":
        return Console(force_terminal=True, highlight=False)
    return Console(highlight=False)


class RichFormatter(BaseFormatter):
    """One row per file with its percentage, then the total.

    Rows are styled by how well the file is covered: complete files use the
    ``info`` style, files above high_threshold ``parameter`` and files below
    low_threshold ``error``. In verbose mode each incomplete file is followed
    by a ``# missing: ...`` comment.
    """

    def __init__(
        self,
        styles: Optional[StyleConfig] = None,
        console: Optional[Console] = None,
        verbose: bool = False,
        color: ColorMode = "auto",
        high_threshold: float = 90.0,
        low_threshold: float = 20.0,
        name_width: int = 30,
    ) -> None:
        self.styles = styles or StyleConfig()
        self.console = console or _make_console(color)
        self.verbose = verbose
        self.high_threshold = high_threshold
        self.low_threshold = low_threshold
        self.name_width = name_width

    def row_style(self, percent: float) -> str:
        """Style name for a row at the given coverage percentage."""
        if percent == 100:
            return "INFO"
        if percent > self.high_threshold:
            return "PARAMETER"
        if percent < self.low_threshold:
            return "ERROR"
        return ""

    def _file_row(self, item: FileCoverage) -> str:
        name = item.name[-self.name_width:]
        return f"{name:<{self.name_width}} {item.percent:3.0f}%"

    def lines(self, report: CoverageReport) -> list[tuple[str, str]]:
        """Report lines as (text, style name) pairs."""
        rows: list[tuple[str, str]] = []
        for item in report.files:
            rows.append((self._file_row(item), self.row_style(item.percent)))
            if self.verbose and not item.is_complete:
                rows.append((f"# missing: {format_range(item.missing_lines)}", "COMMENT"))
        rows.append((f"TOTAL COVERAGE: {report.percent:3.0f}%", ""))
        return rows

    def render(self, report: CoverageReport) -> None:
        for text, style in self.lines(report):
            self.echoln(text, style)

    def format(self, report: CoverageReport) -> str:
        return "\n".join(text for text, _ in self.lines(report))

    def echoln(self, message: str, style: str = "") -> None:
        """Print one line in a named style."""
        self.console.print(Text(message, style=self.styles.get(style)), soft_wrap=True)
