"""Output formatters for lime-coverage."""

from typing import Optional

from ..config import DEFAULT_CONFIG, CoverageConfig
from .base import BaseFormatter
from .json_formatter import JsonFormatter
from .rich_formatter import RichFormatter


def get_formatter(name: str, config: Optional[CoverageConfig] = None) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "rich", "json"
        config: Settings for styled output (styles, thresholds, verbosity)

    Returns:
        Formatter instance

    Raises:
        ValueError: If name is not recognized
    """
    config = config or DEFAULT_CONFIG
    if name == "rich":
        return RichFormatter(
            styles=config.styles,
            verbose=config.verbose,
            color=config.color,
            high_threshold=config.high_threshold,
            low_threshold=config.low_threshold,
            name_width=config.name_width,
        )
    if name == "json":
        return JsonFormatter()
    raise ValueError(f"Unknown formatter: {name!r}. Choose from: json, rich")


__all__ = [
    "BaseFormatter",
    "RichFormatter",
    "JsonFormatter",
    "get_formatter",
]
