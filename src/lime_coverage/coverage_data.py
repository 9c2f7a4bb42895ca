"""Loading and merging of line coverage dumps.

A dump is a JSON object mapping absolute source paths to
``{line: hit count}`` objects, the shape xdebug returns from
``xdebug_get_code_coverage()``:

    {
        "/app/lib/Foo.php": {"3": 1, "4": 12, "9": -1},
        "/app/lib/Bar.php": {"7": 1}
    }

Profilers mark unexecuted and dead lines with negative counts (-1, -2).
Those are clamped to 0: the line is known but was not hit.
"""

from __future__ import annotations

import json
import math
from collections.abc import Iterable, Mapping
from pathlib import Path

from .exceptions import CoverageDataError
from .logging_config import get_logger

logger = get_logger(__name__)

LineCounts = dict[int, int]
CoverageMap = dict[str, LineCounts]


def _parse_line_counts(source: Path, filename: str, raw: object) -> LineCounts:
    if not isinstance(raw, Mapping):
        raise CoverageDataError(source, f"lines for '{filename}' must be an object")

    counts: LineCounts = {}
    for line, count in raw.items():
        try:
            line_no = int(line)
        except (TypeError, ValueError):
            raise CoverageDataError(source, f"invalid line number '{line}' in '{filename}'")
        if line_no < 1:
            raise CoverageDataError(source, f"line numbers start at 1, got {line_no} in '{filename}'")
        if isinstance(count, bool) or not isinstance(count, (int, float)):
            raise CoverageDataError(source, f"invalid hit count for line {line_no} in '{filename}'")
        if isinstance(count, float) and not math.isfinite(count):
            raise CoverageDataError(
                source, f"hit count for line {line_no} in '{filename}' is not finite"
            )
        counts[line_no] = max(int(count), 0)
    return counts


def parse_coverage(data: object, source: Path = Path("<memory>")) -> CoverageMap:
    """Validate decoded dump data and normalise it to ``{path: {line: count}}``.

    Raises:
        CoverageDataError: If the data does not have the dump shape
    """
    if not isinstance(data, Mapping):
        raise CoverageDataError(source, "top level must be an object of files")

    return {
        str(filename): _parse_line_counts(source, str(filename), lines)
        for filename, lines in data.items()
    }


def load_coverage(path: Path) -> CoverageMap:
    """Read one JSON coverage dump.

    Raises:
        CoverageDataError: If the file cannot be read or is not a valid dump
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise CoverageDataError(path, e.strerror or str(e))
    except json.JSONDecodeError as e:
        raise CoverageDataError(path, f"not valid JSON: {e}")

    coverage = parse_coverage(data, source=path)
    logger.debug("Loaded coverage for %d files from %s", len(coverage), path)
    return coverage


def merge_coverage(maps: Iterable[Mapping[str, Mapping[int, int]]]) -> CoverageMap:
    """Merge several dumps by summing the hit counts of each line.

    File keys are normalised to resolved absolute paths so dumps written
    from different working directories line up.
    """
    merged: CoverageMap = {}
    for coverage in maps:
        for filename, lines in coverage.items():
            target = merged.setdefault(str(Path(filename).resolve()), {})
            for line, count in lines.items():
                target[line] = target.get(line, 0) + count
    return merged


def load_all(paths: Iterable[Path]) -> CoverageMap:
    """Load and merge every dump in paths."""
    return merge_coverage(load_coverage(path) for path in paths)
