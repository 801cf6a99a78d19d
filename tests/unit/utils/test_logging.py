"""Tests for logging configuration utilities."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

from tidewave.core.config.loader import apply_logging_config
from tidewave.core.config.models import LoggingConfig
from tidewave.core.utils.logging import (
    StructuredJSONFormatter,
    configure_logging,
    get_logger,
    log_performance,
)


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Put the root logger back after a test reconfigures it."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) in (logging.FileHandler, logging.StreamHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def _record(msg: str, level: int = logging.WARNING, **extra: object) -> logging.LogRecord:
    record = logging.getLogger("tidewave.test").makeRecord(
        "tidewave.test", level, __file__, 10, msg, (), None, func="test_func"
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredJSONFormatter:
    """Tests for StructuredJSONFormatter."""

    def test_basic_fields(self) -> None:
        """Level, message, timestamp and location are present."""
        entry = json.loads(StructuredJSONFormatter().format(_record("unknown pattern")))
        assert entry["level"] == "WARNING"
        assert entry["message"] == "unknown pattern"
        assert "timestamp" in entry
        assert entry["context"]["logger_name"] == "tidewave.test"
        assert entry["context"]["function"] == "test_func"
        assert entry["context"]["line"] == 10

    def test_extra_fields_in_context(self) -> None:
        """Extra attributes end up in the context."""
        entry = json.loads(StructuredJSONFormatter().format(_record("hello", surface="footer", seed=42)))
        assert entry["context"]["surface"] == "footer"
        assert entry["context"]["seed"] == 42

    def test_exception_info(self) -> None:
        """Exceptions are summarised in the context."""
        try:
            raise ValueError("bad curve")
        except ValueError:
            record = logging.getLogger("tidewave.test").makeRecord(
                "tidewave.test", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
            )
        entry = json.loads(StructuredJSONFormatter().format(record))
        assert entry["context"]["error_type"] == "ValueError"
        assert entry["context"]["error_message"] == "bad curve"
        assert "Traceback" in entry["context"]["stack_trace"]


class TestGetLogger:
    """Tests for get_logger."""

    def test_plain_logger(self) -> None:
        """Without context a Logger is returned."""
        assert isinstance(get_logger("tidewave.test"), logging.Logger)

    def test_adapter_with_context(self) -> None:
        """Context kwargs produce a LoggerAdapter."""
        logger = get_logger("tidewave.test", surface="hero")
        assert isinstance(logger, logging.LoggerAdapter)
        assert logger.extra == {"surface": "hero"}


class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.mark.usefixtures("restore_root_logger")
    def test_structured_file_output(self, tmp_path: Path) -> None:
        """Structured mode writes one JSON object per line."""
        log_file = tmp_path / "waves.jsonl"
        configure_logging(level="info", filename=str(log_file), structured=True)
        get_logger("tidewave.test", surface="footer").info("generated %d paths", 2)
        for handler in logging.getLogger().handlers:
            handler.flush()

        entry = json.loads(log_file.read_text(encoding="utf-8").strip().splitlines()[-1])
        assert entry["message"] == "generated 2 paths"
        assert entry["context"]["surface"] == "footer"

    @pytest.mark.usefixtures("restore_root_logger")
    def test_level_applied(self) -> None:
        """The root level follows the configured level."""
        configure_logging(level="WARNING")
        assert logging.getLogger().level == logging.WARNING

    @pytest.mark.usefixtures("restore_root_logger")
    def test_apply_logging_config(self, tmp_path: Path) -> None:
        """A LoggingConfig drives configure_logging."""
        log_file = tmp_path / "waves.log"
        apply_logging_config(LoggingConfig(level="debug", filename=str(log_file), format="%(levelname)s %(message)s"))
        logging.getLogger("tidewave.test").debug("traced")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "DEBUG traced" in log_file.read_text(encoding="utf-8")


class TestLogPerformance:
    """Tests for the log_performance decorator."""

    def test_logs_timing_and_returns(self, caplog: pytest.LogCaptureFixture) -> None:
        """The wrapped result is returned and the call time logged."""

        @log_performance
        def build() -> str:
            return "M 0 1 Z"

        with caplog.at_level(logging.DEBUG, logger="tidewave.perf"):
            assert build() == "M 0 1 Z"
        assert any("build took" in record.getMessage() for record in caplog.records)
        assert build.__name__ == "build"
