"""Exception hierarchy for lime-coverage."""

from .base import LimeCoverageError
from .config import ConfigurationError, InvalidConfigError
from .coverage import (
    CoverageDataError,
    CoverageError,
    GrammarUnavailableError,
    RegistrationError,
    SourceReadError,
)

__all__ = [
    "LimeCoverageError",
    "ConfigurationError",
    "InvalidConfigError",
    "CoverageError",
    "CoverageDataError",
    "GrammarUnavailableError",
    "RegistrationError",
    "SourceReadError",
]
