"""
Structured Logging for Parameter Validation

Every loader and validator logs through StructuredLogger: keyword fields
(param, value, phase, k, ...) travel as record attributes, and fields bound
with StructuredLogger.context() (prepare() binds phase and schema) are added
to every record emitted inside the block.

The package never configures handlers on import. Applications call
setup_logging(), which takes level and format from Settings
(DISKANN_CONFIG_LOG_LEVEL / DISKANN_CONFIG_LOG_JSON when none are given).
"""

from __future__ import annotations

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from enum import IntEnum
from typing import Any, Optional, TextIO

from diskann_config.core.config import Settings, resolve_settings
from diskann_config.core.errors import ConfigError, Result

PACKAGE_LOGGER = "diskann_config"


class LogLevel(IntEnum):
    """Log level enumeration."""
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        return cls[name.strip().upper()]


# Fields bound for the duration of one prepare() call
_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})

# Attributes every logging.LogRecord carries; anything else came from extra=
_STANDARD_ATTRS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", None, None)).keys()
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per line: timestamp, level, logger, message, then fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "@timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(_log_context.get())
        payload.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _STANDARD_ATTRS
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class StructuredLogger:
    """
    Thin wrapper turning keyword arguments into record fields.

    Usage:
        logger = StructuredLogger(__name__)

        with logger.context(phase="search"):
            logger.error("search_list_size(5) should be larger than k(10)", k=10)
    """

    __slots__ = ("_logger",)

    def __init__(self, name: str) -> None:
        self._logger = logging.getLogger(name)

    @property
    def name(self) -> str:
        return self._logger.name

    def debug(self, message: str, **fields: Any) -> None:
        self._logger.log(LogLevel.DEBUG, message, extra=fields)

    def warning(self, message: str, **fields: Any) -> None:
        self._logger.log(LogLevel.WARNING, message, extra=fields)

    def error(self, message: str, **fields: Any) -> None:
        self._logger.log(LogLevel.ERROR, message, extra=fields)

    @staticmethod
    def context(**fields: Any) -> "_LogContext":
        """Bind fields to every record logged inside the with-block."""
        return _LogContext(fields)


class _LogContext:
    __slots__ = ("_fields", "_token")

    def __init__(self, fields: dict[str, Any]) -> None:
        self._fields = fields
        self._token = None

    def __enter__(self) -> _LogContext:
        self._token = _log_context.set({**_log_context.get(), **self._fields})
        return self

    def __exit__(self, *args: Any) -> None:
        if self._token is not None:
            _log_context.reset(self._token)


def setup_logging(
    settings: Optional[Settings] = None,
    stream: Optional[TextIO] = None,
) -> Result[Settings, ConfigError]:
    """
    Attach a handler to the package logger according to Settings.

    Args:
        settings: Level and format to use (default: read from the environment)
        stream: Output stream (default: stderr)

    Returns:
        Ok(settings actually applied), or Err(INVALID_SETTINGS) leaving the
        logger untouched.
    """
    result = resolve_settings(settings)
    if result.is_err():
        return result
    applied = result.unwrap()
    level = LogLevel.from_name(applied.log_level)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    if applied.log_json:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
        ))

    pkg = logging.getLogger(PACKAGE_LOGGER)
    pkg.setLevel(level)
    pkg.handlers.clear()
    pkg.addHandler(handler)
    return result
