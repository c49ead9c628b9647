"""
Observability module: structured logging.
"""

from diskann_config.observability.logging import (
    JsonFormatter,
    LogLevel,
    StructuredLogger,
    setup_logging,
)

__all__ = [
    "JsonFormatter",
    "LogLevel",
    "StructuredLogger",
    "setup_logging",
]
