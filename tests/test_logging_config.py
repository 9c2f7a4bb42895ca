"""Tests for logging setup."""

import logging

import pytest

from lime_coverage.logging_config import get_logger, log_level, setup_logging


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    setup_logging()


class TestGetLogger:
    def test_root_logger(self):
        assert get_logger().name == "lime_coverage"

    def test_module_name_kept(self):
        assert get_logger("lime_coverage.report").name == "lime_coverage.report"

    def test_prefix_added(self):
        assert get_logger("custom").name == "lime_coverage.custom"


class TestLogLevel:
    @pytest.mark.parametrize(
        "verbose,quiet,level",
        [
            (False, False, logging.WARNING),
            (True, False, logging.DEBUG),
            (False, True, logging.ERROR),
            (True, True, logging.ERROR),
        ],
    )
    def test_flags(self, verbose, quiet, level):
        assert log_level(verbose, quiet) == level


class TestSetupLogging:
    def test_levels(self):
        assert setup_logging(verbose=True).level == logging.DEBUG
        assert setup_logging(quiet=True).level == logging.ERROR
        assert setup_logging().level == logging.WARNING

    def test_repeated_setup_does_not_stack_handlers(self):
        setup_logging()
        logger = setup_logging(verbose=True)
        assert len(logger.handlers) == 1

    def test_module_loggers_inherit_level(self):
        setup_logging(quiet=True)
        assert get_logger("report").getEffectiveLevel() == logging.ERROR

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "run.log"
        logger = setup_logging(log_file=str(log_file))
        get_logger("report").warning("written to file")
        for handler in logger.handlers:
            handler.flush()
        assert len(logger.handlers) == 2
        assert "lime_coverage.report - WARNING - written to file" in log_file.read_text()
