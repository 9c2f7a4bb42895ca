"""JSON formatter for coverage reports."""

import json

from ..report import CoverageReport
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render reports as JSON."""

    def render(self, report: CoverageReport) -> None:
        print(self.format(report))

    def format(self, report: CoverageReport) -> str:
        return json.dumps(report.to_dict(), indent=2)
