"""Per-file and total line coverage for registered PHP sources."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .classifier import classify
from .exceptions import CoverageError, SourceReadError
from .logging_config import get_logger
from .registration import FileRegistry

logger = get_logger(__name__)


def format_range(lines: Iterable[int]) -> str:
    """Render line numbers as single numbers and ``[first - last]`` runs.

    Example:
        >>> format_range([9, 1, 3, 4, 5])
        '1 [3 - 5] 9'
    """
    parts: list[str] = []
    first = last = None
    for line in sorted(set(lines)):
        if last is not None and line == last + 1:
            last = line
            continue
        if first is not None:
            parts.append(_format_run(first, last))
        first = last = line
    if first is not None:
        parts.append(_format_run(first, last))
    return " ".join(parts)


def _format_run(first: int, last: int) -> str:
    return str(first) if first == last else f"[{first} - {last}]"


def coverage_percent(covered: int, executable: int) -> float:
    """Percentage of executable lines covered; a file with none counts as complete."""
    if executable == 0:
        return 100.0
    return covered * 100.0 / executable


@dataclass(frozen=True)
class FileCoverage:
    """Coverage of one source file.

    Attributes:
        path: Absolute path of the source
        name: Display name (base directory and extension stripped)
        executable_lines: Lines holding a statement
        coverage: Hit counts restricted to executable lines
    """

    path: Path
    name: str
    executable_lines: frozenset[int]
    coverage: dict[int, int]

    @property
    def covered_lines(self) -> frozenset[int]:
        return frozenset(line for line, count in self.coverage.items() if count > 0)

    @property
    def missing_lines(self) -> frozenset[int]:
        return self.executable_lines - self.covered_lines

    @property
    def percent(self) -> float:
        return coverage_percent(len(self.covered_lines), len(self.executable_lines))

    @property
    def is_complete(self) -> bool:
        return not self.missing_lines

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": str(self.path),
            "name": self.name,
            "percent": round(self.percent, 2),
            "executable": len(self.executable_lines),
            "covered": len(self.covered_lines),
            "missing": sorted(self.missing_lines),
            "missing_ranges": format_range(self.missing_lines),
        }


@dataclass(frozen=True)
class CoverageReport:
    """Coverage of every registered file, sorted by path."""

    files: list[FileCoverage] = field(default_factory=list)

    @property
    def total_executable(self) -> int:
        return sum(len(f.executable_lines) for f in self.files)

    @property
    def total_covered(self) -> int:
        return sum(len(f.covered_lines) for f in self.files)

    @property
    def percent(self) -> float:
        return coverage_percent(self.total_covered, self.total_executable)

    def to_dict(self) -> dict[str, Any]:
        return {
            "files": [f.to_dict() for f in self.files],
            "total": {
                "percent": round(self.percent, 2),
                "executable": self.total_executable,
                "covered": self.total_covered,
            },
        }


def analyze_file(path: Path, counts: Mapping[int, int], name: str = "") -> FileCoverage:
    """Read and classify one source file against its hit counts.

    Raises:
        SourceReadError: If the file cannot be read
    """
    try:
        source = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise SourceReadError(path, e.strerror or str(e))

    result = classify(source, counts)
    return FileCoverage(
        path=path,
        name=name or str(path),
        executable_lines=result.lines,
        coverage=result.coverage,
    )


def build_report(
    registry: FileRegistry, coverage: Mapping[str, Mapping[int, int]]
) -> CoverageReport:
    """Build the report for every registered file.

    Files missing from the coverage data are reported with no hits.

    Raises:
        CoverageError: If no files are registered
        SourceReadError: If a registered file cannot be read
    """
    if not len(registry):
        raise CoverageError("You must register some files to cover!")

    by_path = {Path(filename).resolve(): lines for filename, lines in coverage.items()}
    unregistered = [p for p in by_path if p not in registry]
    if unregistered:
        logger.debug("Ignoring coverage for %d unregistered files", len(unregistered))

    files = []
    for path in sorted(registry.files):
        counts = by_path.get(path)
        if counts is None:
            logger.info("No coverage data for %s", path)
            counts = {}
        files.append(analyze_file(path, counts, registry.relative_name(path)))

    return CoverageReport(files=files)
