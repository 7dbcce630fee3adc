"""
Tests for the logging helpers.
"""

import logging

import pytest

from morningpost.logging_config import get_logger, log_performance, setup_logging


class TestLogPerformance:

    def test_returns_result_and_logs_completion(self, caplog):
        logger = get_logger("test.performance")

        @log_performance(logger, "adding")
        def add(a, b):
            return a + b

        with caplog.at_level(logging.DEBUG, logger="test.performance"):
            assert add(1, 2) == 3

        assert "Starting adding" in caplog.text
        assert "Completed adding" in caplog.text

    def test_reraises_and_logs_failure(self, caplog):
        logger = get_logger("test.performance")

        @log_performance(logger, "failing")
        def fail():
            raise RuntimeError("boom")

        with caplog.at_level(logging.DEBUG, logger="test.performance"):
            with pytest.raises(RuntimeError):
                fail()

        assert "Failed failing" in caplog.text
        assert "boom" in caplog.text
        assert all(r.levelno == logging.DEBUG for r in caplog.records)


class TestSetupLogging:

    def test_sets_level_and_quiets_http_libraries(self):
        setup_logging(level="debug")

        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("urllib3").level == logging.WARNING

    def test_unknown_level_falls_back_to_warning(self):
        setup_logging(level="chatty")

        assert logging.getLogger().level == logging.WARNING
