"""Base formatter interface for coverage report rendering."""

from abc import ABC, abstractmethod

from ..report import CoverageReport


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, report: CoverageReport) -> None:
        """Write the report to the terminal."""

    @abstractmethod
    def format(self, report: CoverageReport) -> str:
        """Return the report as a plain string."""
