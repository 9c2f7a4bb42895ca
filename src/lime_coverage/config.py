"""Configuration loading and management for lime-coverage.

Configuration sources are merged in priority order:
    1. Defaults (defined in CoverageConfig)
    2. Global config (~/.lime-coverage.toml)
    3. Project config (./lime-coverage.toml)
    4. Explicit config file
    5. Environment variables (LIME_COVERAGE_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(verbose=True, base_dir="lib")
    >>> config.verbose
    True
    >>> config.extension
    '.php'
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

ColorMode = Literal["auto", "always", "never"]
OutputFormat = Literal["rich", "json"]

_COLOR_MODES = ("auto", "always", "never")
_OUTPUT_FORMATS = ("rich", "json")

ENV_PREFIX = "LIME_COVERAGE_"
CONFIG_FILENAME = "lime-coverage.toml"


@dataclass(frozen=True)
class StyleConfig:
    """Named output styles, as rich style strings.

    Attributes:
        error: Poorly covered files and failures
        info: Fully covered files
        parameter: Well covered files
        comment: Missing-line summaries and other remarks
    """

    error: str = "bold white on red"
    info: str = "bold green"
    parameter: str = "cyan"
    comment: str = "yellow"

    def get(self, name: str) -> str:
        """Look up a style by its name (case-insensitive); unknown names are unstyled."""
        return getattr(self, name.lower(), "") if name else ""


@dataclass(frozen=True)
class CoverageConfig:
    """Configuration for a coverage run.

    Attributes:
        Source discovery:
            extension: Suffix of source files picked up from directories
            base_dir: Directory stripped from displayed file names

        Report thresholds (percent):
            high_threshold: Above this a file is shown as well covered
            low_threshold: Below this a file is shown as poorly covered

        Output control:
            verbose: List missing lines for incompletely covered files
            color: Colorize output (auto = only on a terminal)
            output_format: Renderer name ("rich" or "json")
            name_width: Characters of the file name kept in a report row
            styles: Style table handed to formatters
    """

    # Source discovery
    extension: str = ".php"
    base_dir: str = ""

    # Report thresholds
    high_threshold: float = 90.0
    low_threshold: float = 20.0

    # Output control
    verbose: bool = False
    color: ColorMode = "auto"
    output_format: OutputFormat = "rich"
    name_width: int = 30
    styles: StyleConfig = field(default_factory=StyleConfig)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.extension:
            raise InvalidConfigError("extension", self.extension, "must not be empty")
        if not 0.0 <= self.low_threshold <= 100.0:
            raise InvalidConfigError("low_threshold", self.low_threshold, "must be between 0 and 100")
        if not 0.0 <= self.high_threshold <= 100.0:
            raise InvalidConfigError(
                "high_threshold", self.high_threshold, "must be between 0 and 100"
            )
        if self.low_threshold > self.high_threshold:
            raise InvalidConfigError(
                "low_threshold", self.low_threshold, "must not exceed high_threshold"
            )
        if self.color not in _COLOR_MODES:
            raise InvalidConfigError("color", self.color, f"expected one of {', '.join(_COLOR_MODES)}")
        if self.output_format not in _OUTPUT_FORMATS:
            raise InvalidConfigError(
                "output_format", self.output_format, f"expected one of {', '.join(_OUTPUT_FORMATS)}"
            )
        if self.name_width < 1:
            raise InvalidConfigError("name_width", self.name_width, "must be at least 1")


DEFAULT_CONFIG = CoverageConfig()


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> CoverageConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); None values
            are ignored so unset CLI options keep lower-priority values

    Returns:
        Validated CoverageConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / f".{CONFIG_FILENAME}"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / CONFIG_FILENAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())
    merged.update({key: value for key, value in overrides.items() if value is not None})

    styles = merged.pop("styles", None)
    if isinstance(styles, dict):
        try:
            merged["styles"] = StyleConfig(**{k.lower(): v for k, v in styles.items()})
        except TypeError as e:
            raise ConfigurationError(f"Invalid [styles] config: {e}")
    elif isinstance(styles, StyleConfig):
        merged["styles"] = styles

    try:
        return CoverageConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from LIME_COVERAGE_* environment variables.

    Supported environment variables:
        LIME_COVERAGE_EXTENSION: str
        LIME_COVERAGE_BASE_DIR: str
        LIME_COVERAGE_HIGH_THRESHOLD: float
        LIME_COVERAGE_LOW_THRESHOLD: float
        LIME_COVERAGE_VERBOSE: bool (true/false/1/0)
        LIME_COVERAGE_COLOR: auto/always/never
        LIME_COVERAGE_OUTPUT_FORMAT: rich/json
        LIME_COVERAGE_NAME_WIDTH: int
    """
    type_hints = get_type_hints(CoverageConfig)
    result: dict[str, Any] = {}

    for field_name in CoverageConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(field_name, env_value, str(e), source=env_key)
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Returns None for types that cannot come from the environment.

    Raises:
        ValueError: If value can't be parsed to the expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        if lower in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    # String (including Literal types like ColorMode)
    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file and return the parsed dict.

    A ``[tool.lime-coverage]`` table is used when present so the settings
    can live in pyproject-style files.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

    tool_section = data.get("tool", {}).get("lime-coverage")
    if isinstance(tool_section, dict):
        return dict(tool_section)
    return data
