"""Configuration exceptions: settings files, environment, CLI values."""

from typing import Any, Optional

from .base import LimeCoverageError


class ConfigurationError(LimeCoverageError):
    """Base class for configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str, source: Optional[str] = None):
        details = {"key": key, "value": str(value), "reason": reason}
        if source is not None:
            details["source"] = source

        super().__init__(f"Invalid configuration for {key}: {value}", details=details)
        self.key = key
        self.value = value
        self.reason = reason
        self.source = source
