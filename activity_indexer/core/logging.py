# activity_indexer/core/logging.py
"""
Logging for the activity indexer.

Everything logs under the ``activity_indexer`` logger. ActivityLogger
attaches the handlers once per process: stdout, plus ``activity.log`` and
``activity_errors.log`` when a log directory is configured. Classes log
through LoggingMixin, passing structured context as keyword arguments:

    self.log_info("Transaction classified", tx_digest=tx.digest)
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

ROOT_LOGGER_NAME = 'activity_indexer'

# Record attributes rendered after the message, in this order
CONTEXT_ATTRS = ('tx_digest', 'record_id', 'watched_account', 'event_type', 'dex',
                 'error_type', 'error_id', 'error', 'cursor')

PLAIN_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class ActivityFormatter(logging.Formatter):
    """``<time> - <logger> - <level> - <message> | key=value ...``"""

    def __init__(self, include_context: bool = False):
        super().__init__()
        self.include_context = include_context

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
        line = f"{created} - {record.name} - {record.levelname} - {record.getMessage()}"

        if self.include_context:
            context = _record_context(record)
            if context:
                line += " | " + " ".join(f"{key}={value}" for key, value in context.items())

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def _record_context(record: logging.LogRecord) -> Dict[str, Any]:
    return {attr: getattr(record, attr) for attr in CONTEXT_ATTRS if hasattr(record, attr)}


def _handler(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


class ActivityLogger:
    """Process wide handler setup for the ``activity_indexer`` logger tree"""

    _configured = False
    _log_dir: Optional[Path] = None
    _log_level = logging.INFO

    @classmethod
    def configure(cls,
                  log_dir: Optional[Path] = None,
                  log_level: str = "INFO",
                  console_enabled: bool = True,
                  file_enabled: bool = True,
                  structured_format: bool = True) -> None:
        if cls._configured:
            return

        level = logging.getLevelName(log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {log_level}")

        cls._log_dir = log_dir
        cls._log_level = level

        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.setLevel(level)
        cls._remove_handlers(root_logger)

        if console_enabled:
            console_formatter = (ActivityFormatter(include_context=True) if structured_format
                                 else logging.Formatter(PLAIN_FORMAT))
            root_logger.addHandler(_handler(logging.StreamHandler(sys.stdout), level, console_formatter))

        if file_enabled and log_dir:
            log_dir.mkdir(parents=True, exist_ok=True)
            file_formatter = ActivityFormatter(include_context=True)
            root_logger.addHandler(
                _handler(logging.FileHandler(log_dir / 'activity.log'), level, file_formatter))
            root_logger.addHandler(
                _handler(logging.FileHandler(log_dir / 'activity_errors.log'), logging.ERROR, file_formatter))

        cls._configured = True

    @classmethod
    def reset(cls) -> None:
        """Detach and close all handlers so configure() can run again"""
        cls._remove_handlers(logging.getLogger(ROOT_LOGGER_NAME))
        cls._configured = False
        cls._log_dir = None

    @staticmethod
    def _remove_handlers(logger: logging.Logger) -> None:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
            name = f"{ROOT_LOGGER_NAME}.{name}"
        return logging.getLogger(name)


def get_class_logger(cls_instance) -> logging.Logger:
    """Logger named ``activity_indexer.<module>.<Class>`` for an instance"""
    cls = type(cls_instance)
    module = cls.__module__
    if module.startswith(f"{ROOT_LOGGER_NAME}."):
        module = module[len(ROOT_LOGGER_NAME) + 1:]
    return ActivityLogger.get_logger(f"{module}.{cls.__name__}")


def log_with_context(logger: logging.Logger, level: int, message: str, **context) -> None:
    """Log ``message`` with each keyword set as an attribute on the record. None values are dropped."""
    if not logger.isEnabledFor(level):
        return
    record = logger.makeRecord(logger.name, level, "", 0, message, (), None)
    for key, value in context.items():
        if value is not None:
            setattr(record, key, value)
    logger.handle(record)


class LoggingMixin:
    """Adds log_debug / log_info / log_warning / log_error with keyword context"""

    @property
    def logger(self) -> logging.Logger:
        if not hasattr(self, '_logger'):
            self._logger = get_class_logger(self)
        return self._logger

    def log_debug(self, message: str, **context) -> None:
        log_with_context(self.logger, logging.DEBUG, message, **context)

    def log_info(self, message: str, **context) -> None:
        log_with_context(self.logger, logging.INFO, message, **context)

    def log_warning(self, message: str, **context) -> None:
        log_with_context(self.logger, logging.WARNING, message, **context)

    def log_error(self, message: str, **context) -> None:
        log_with_context(self.logger, logging.ERROR, message, **context)
