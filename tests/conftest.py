"""Shared test fixtures for lime-coverage tests."""

import json

import pytest


GREETER_PHP = """<?php
class Greeter
{
  protected $name = 'world';

  public function greet()
  {
    $message = 'hello '.$this->name;
    return $message;
  }

  public function shout()
  {
    return strtoupper($this->greet());
  }
}
"""

HELPERS_PHP = """<?php
function add($a, $b)
{
  return $a + $b;
}
"""


@pytest.fixture
def php_project(tmp_path):
    """A small PHP tree: lib/Greeter.php, lib/util/helpers.php, lib/README.txt."""
    lib = tmp_path / "lib"
    (lib / "util").mkdir(parents=True)
    (lib / "Greeter.php").write_text(GREETER_PHP)
    (lib / "util" / "helpers.php").write_text(HELPERS_PHP)
    (lib / "README.txt").write_text("not php\n")
    return tmp_path


@pytest.fixture
def write_dump(tmp_path):
    """Write a JSON coverage dump and return its path."""
    counter = {"n": 0}

    def _write(data, name=None):
        counter["n"] += 1
        path = tmp_path / (name or f"coverage-{counter['n']}.json")
        path.write_text(json.dumps(data))
        return path

    return _write
