# tests/test_logging.py

import logging

import pytest

from activity_indexer.core.logging import (
    ActivityFormatter,
    ActivityLogger,
    LoggingMixin,
    get_class_logger,
    log_with_context,
)


class Watcher(LoggingMixin):
    pass


def test_file_handlers(tmp_path):
    ActivityLogger.configure(log_dir=tmp_path / "logs", console_enabled=False)
    logger = ActivityLogger.get_logger("tests")

    log_with_context(logger, logging.INFO, "classified", tx_digest="abc")
    log_with_context(logger, logging.ERROR, "Failed to decode tx", tx_digest="def", error_type="unknown_tx_type")

    main_log = (tmp_path / "logs" / "activity.log").read_text()
    error_log = (tmp_path / "logs" / "activity_errors.log").read_text()

    assert "classified | tx_digest=abc" in main_log
    assert "Failed to decode tx | tx_digest=def error_type=unknown_tx_type" in main_log
    assert "classified" not in error_log
    assert "Failed to decode tx" in error_log


def test_configure_runs_once(tmp_path):
    ActivityLogger.configure(log_dir=tmp_path, console_enabled=False, log_level="WARNING")
    ActivityLogger.configure(log_dir=tmp_path, console_enabled=False, log_level="DEBUG")

    assert logging.getLogger("activity_indexer").level == logging.WARNING


def test_unknown_level():
    with pytest.raises(ValueError):
        ActivityLogger.configure(log_level="LOUD", console_enabled=False)


def test_logger_names():
    assert ActivityLogger.get_logger("core.config").name == "activity_indexer.core.config"
    assert ActivityLogger.get_logger("activity_indexer.sink").name == "activity_indexer.sink"
    assert get_class_logger(Watcher()).name.endswith(".Watcher")
    assert get_class_logger(Watcher()).name.startswith("activity_indexer.")


def test_context_is_attached_and_none_dropped(caplog):
    with caplog.at_level(logging.DEBUG, logger="activity_indexer"):
        Watcher().log_warning("watching", watched_account="0xda", cursor=None)

    record = [r for r in caplog.records if r.getMessage() == "watching"][0]
    assert record.watched_account == "0xda"
    assert not hasattr(record, "cursor")


def test_formatter_without_context():
    record = logging.LogRecord("activity_indexer.x", logging.INFO, "", 0, "hello", (), None)
    record.tx_digest = "abc"

    assert ActivityFormatter(include_context=False).format(record).endswith("INFO - hello")
    assert ActivityFormatter(include_context=True).format(record).endswith("hello | tx_digest=abc")
