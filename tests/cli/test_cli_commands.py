"""Tests for the lime-coverage command line."""

import json

import pytest
from typer.testing import CliRunner

from lime_coverage import __version__
from lime_coverage.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run every command away from user and project config files."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def dump(php_project, write_dump):
    lib = php_project / "lib"
    return write_dump(
        {
            str(lib / "Greeter.php"): {"8": 1, "9": 1, "14": 1, "2": 1},
            str(lib / "util" / "helpers.php"): {"4": -1},
        }
    )


class TestReportCommand:
    def test_report(self, php_project, dump):
        lib = php_project / "lib"
        result = runner.invoke(
            app, ["report", str(lib), "-c", str(dump), "-b", str(lib), "--no-color"]
        )
        assert result.exit_code == 0, result.output
        lines = result.stdout.splitlines()
        assert lines[0] == f"{'Greeter':<30} 100%"
        assert lines[1] == f"{'util/helpers':<30}   0%"
        assert lines[-1] == "TOTAL COVERAGE:  75%"

    def test_verbose_lists_missing(self, php_project, dump):
        lib = php_project / "lib"
        result = runner.invoke(
            app, ["report", str(lib), "-c", str(dump), "-b", str(lib), "-v", "--no-color"]
        )
        assert result.exit_code == 0, result.output
        assert "# missing: 4" in result.stdout

    def test_json_format(self, php_project, dump):
        lib = php_project / "lib"
        result = runner.invoke(
            app, ["report", str(lib), "-c", str(dump), "-b", str(lib), "--format", "json"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["total"] == {"percent": 75.0, "executable": 4, "covered": 3}
        assert [f["name"] for f in data["files"]] == ["Greeter", "util/helpers"]

    def test_merges_several_dumps(self, php_project, write_dump):
        lib = php_project / "lib"
        helpers = str(lib / "util" / "helpers.php")
        first = write_dump({helpers: {"4": 0}})
        second = write_dump({helpers: {"4": 2}})
        result = runner.invoke(
            app,
            ["report", str(lib / "util"), "-c", str(first), "-c", str(second), "--format", "json"],
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["total"]["percent"] == 100.0

    def test_config_file_sets_format(self, php_project, dump, tmp_path):
        config = tmp_path / "custom.toml"
        config.write_text('output_format = "json"\n')
        result = runner.invoke(
            app, ["report", str(php_project / "lib"), "-c", str(dump), "--config", str(config)]
        )
        assert result.exit_code == 0, result.output
        assert "total" in json.loads(result.stdout)

    def test_missing_path_fails(self, tmp_path, dump):
        result = runner.invoke(app, ["report", str(tmp_path / "nowhere"), "-c", str(dump)])
        assert result.exit_code == 1
        assert "does not exist" in result.output

    def test_invalid_dump_fails(self, php_project, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("[]")
        result = runner.invoke(app, ["report", str(php_project / "lib"), "-c", str(bad)])
        assert result.exit_code == 1
        assert "Invalid coverage data" in result.output

    def test_non_finite_count_fails_cleanly(self, php_project, tmp_path):
        bad = tmp_path / "nan.json"
        bad.write_text('{"/a.php": {"3": NaN}}')
        result = runner.invoke(app, ["report", str(php_project / "lib"), "-c", str(bad)])
        assert result.exit_code == 1
        assert "Invalid coverage data" in result.output

    def test_coverage_option_required(self, php_project):
        result = runner.invoke(app, ["report", str(php_project / "lib")])
        assert result.exit_code != 0


class TestLinesCommand:
    def test_lists_executable_lines(self, php_project):
        result = runner.invoke(app, ["lines", str(php_project / "lib" / "Greeter.php")])
        assert result.exit_code == 0, result.output
        assert result.stdout.splitlines() == ["executable: [8 - 9] 14"]

    def test_with_coverage(self, php_project, dump):
        result = runner.invoke(
            app, ["lines", str(php_project / "lib" / "Greeter.php"), "-c", str(dump)]
        )
        assert result.exit_code == 0, result.output
        lines = result.stdout.splitlines()
        assert "covered: [8 - 9] 14" in lines
        assert any(line.startswith("missing:") for line in lines)
        assert "coverage: 100%" in lines

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["lines", str(tmp_path / "gone.php")])
        assert result.exit_code == 1
        assert "Cannot read source file" in result.output


class TestVersion:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
