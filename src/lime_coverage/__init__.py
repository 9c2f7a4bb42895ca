"""
lime-coverage - Line coverage reports for PHP sources

Decides which lines of a PHP file hold a statement, filters profiler hit
counts down to those lines and reports per-file and total coverage.
"""

__version__ = "0.1.0"

from .classifier import ClassificationResult, LineClassifier, classify
from .registration import FileRegistry
from .report import CoverageReport, FileCoverage, build_report, format_range

__all__ = [
    "classify",  # Main entry point
    "ClassificationResult",
    "LineClassifier",
    "FileRegistry",
    "CoverageReport",
    "FileCoverage",
    "build_report",
    "format_range",
]
