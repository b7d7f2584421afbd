"""
Tests for the structured category logger.
"""

import io

import pytest

from models.enums import LogCategory, LogLevel
from utils.logger import Logger, configure_logger, get_category_logger, get_logger


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def logger(stream):
    return Logger(min_level=LogLevel.DEBUG, use_colors=False, stream=stream)


class TestLogger:
    """Line format and level filtering."""

    def test_message_line(self, logger, stream):
        logger.info(LogCategory.DECODER, "Image block decoded")
        line = stream.getvalue().splitlines()[0]
        assert "DECODER" in line
        assert line.endswith("✓ Image block decoded")

    def test_details_as_tree(self, logger, stream):
        logger.info(LogCategory.SCHEDULER, "Promoted", slot=1, delay_ms=100)
        lines = stream.getvalue().splitlines()
        assert lines[1].strip() == "├─ slot: 1"
        assert lines[2].strip() == "└─ delay_ms: 100"

    def test_level_filtering(self, stream):
        logger = Logger(min_level=LogLevel.WARN, use_colors=False, stream=stream)
        logger.info(LogCategory.SYSTEM, "hidden")
        logger.error(LogCategory.SYSTEM, "shown")
        assert "hidden" not in stream.getvalue()
        assert "shown" in stream.getvalue()

    def test_no_ansi_without_colors(self, logger, stream):
        logger.warn(LogCategory.CONFIG, "plain")
        assert "\033[" not in stream.getvalue()

    def test_colors(self, stream):
        logger = Logger(use_colors=True, stream=stream)
        logger.error(LogCategory.HARDWARE, "red")
        assert "\033[31m" in stream.getvalue()

    def test_bound_logger_category(self, logger, stream):
        log = logger.for_category(LogCategory.CATALOG)
        log.debug("Loaded picture")
        log.with_category(LogCategory.TRACE).info("dump")
        lines = stream.getvalue().splitlines()
        assert "CATALOG" in lines[0]
        assert "TRACE" in lines[1]


class TestSingleton:
    """configure_logger() modifies the shared instance in place."""

    def test_configure_keeps_instance(self, stream):
        original = get_logger()
        bound = get_category_logger(LogCategory.SYSTEM)
        try:
            configure_logger(LogLevel.DEBUG, use_colors=False, stream=stream)
            assert get_logger() is original
            bound.debug("through bound logger")
            assert "through bound logger" in stream.getvalue()
        finally:
            configure_logger(LogLevel.INFO, use_colors=True)
