"""Tests for configuration loading."""

import os

import pytest

from lime_coverage.config import CoverageConfig, StyleConfig, load_config
from lime_coverage.exceptions import ConfigurationError, InvalidConfigError


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user and project config files and LIME_COVERAGE_* vars out of tests."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("LIME_COVERAGE_"):
            monkeypatch.delenv(key)


class TestCoverageConfig:
    def test_defaults(self):
        config = CoverageConfig()
        assert config.extension == ".php"
        assert config.high_threshold == 90.0
        assert config.low_threshold == 20.0
        assert config.color == "auto"
        assert config.styles == StyleConfig()

    def test_thresholds_validated(self):
        with pytest.raises(InvalidConfigError):
            CoverageConfig(high_threshold=120.0)
        with pytest.raises(InvalidConfigError):
            CoverageConfig(low_threshold=95.0, high_threshold=90.0)

    def test_color_validated(self):
        with pytest.raises(InvalidConfigError) as exc_info:
            CoverageConfig(color="sometimes")
        assert exc_info.value.key == "color"

    def test_empty_extension_rejected(self):
        with pytest.raises(InvalidConfigError):
            CoverageConfig(extension="")

    def test_style_lookup_is_case_insensitive(self):
        styles = StyleConfig(info="green")
        assert styles.get("INFO") == "green"
        assert styles.get("") == ""
        assert styles.get("unknown") == ""


class TestLoadConfig:
    def test_defaults_without_sources(self):
        assert load_config() == CoverageConfig()

    def test_overrides(self):
        config = load_config(verbose=True, base_dir="lib")
        assert config.verbose is True
        assert config.base_dir == "lib"

    def test_none_overrides_ignored(self):
        config = load_config(extension=None)
        assert config.extension == ".php"

    def test_project_file(self, tmp_path):
        (tmp_path / "lime-coverage.toml").write_text('extension = ".inc"\nverbose = true\n')
        config = load_config()
        assert config.extension == ".inc"
        assert config.verbose is True

    def test_explicit_file_overrides_project_file(self, tmp_path):
        (tmp_path / "lime-coverage.toml").write_text("low_threshold = 10.0\n")
        explicit = tmp_path / "custom.toml"
        explicit.write_text("low_threshold = 30.0\n")
        assert load_config(config_file=explicit).low_threshold == 30.0

    def test_tool_section(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[tool.lime-coverage]\nname_width = 40\n')
        assert load_config(config_file=path).name_width == 40

    def test_styles_table(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text('[styles]\nERROR = "red"\ninfo = "blue"\n')
        config = load_config(config_file=path)
        assert config.styles.error == "red"
        assert config.styles.info == "blue"
        assert config.styles.comment == StyleConfig().comment

    def test_unknown_style_rejected(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text('[styles]\nsparkle = "red"\n')
        with pytest.raises(ConfigurationError):
            load_config(config_file=path)

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(config_file=tmp_path / "missing.toml")
        assert "not found" in str(exc_info.value)

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("this is = = not toml")
        with pytest.raises(ConfigurationError):
            load_config(config_file=path)

    def test_unknown_field(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text("frobnicate = 1\n")
        with pytest.raises(ConfigurationError):
            load_config(config_file=path)

    def test_env_vars(self, monkeypatch):
        monkeypatch.setenv("LIME_COVERAGE_VERBOSE", "yes")
        monkeypatch.setenv("LIME_COVERAGE_HIGH_THRESHOLD", "95")
        monkeypatch.setenv("LIME_COVERAGE_COLOR", "never")
        config = load_config()
        assert config.verbose is True
        assert config.high_threshold == 95.0
        assert config.color == "never"

    def test_invalid_env_var(self, monkeypatch):
        monkeypatch.setenv("LIME_COVERAGE_NAME_WIDTH", "wide")
        with pytest.raises(InvalidConfigError) as exc_info:
            load_config()
        assert exc_info.value.source == "LIME_COVERAGE_NAME_WIDTH"

    def test_cli_overrides_env(self, monkeypatch):
        monkeypatch.setenv("LIME_COVERAGE_EXTENSION", ".inc")
        assert load_config(extension=".php5").extension == ".php5"
