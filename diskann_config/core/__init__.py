"""
Core Module: Types, Errors, Constants and Settings

Foundational abstractions shared by the schema, loader and validators.
"""

from diskann_config.core.types import (
    MetricType,
    ParamType,
    Phase,
)
from diskann_config.core.errors import (
    ConfigError,
    Err,
    ErrorCode,
    Ok,
    Result,
)
from diskann_config.core.config import (
    Settings,
    resolve_settings,
)

__all__ = [
    # Types
    "MetricType",
    "ParamType",
    "Phase",
    # Errors
    "ConfigError",
    "Err",
    "ErrorCode",
    "Ok",
    "Result",
    # Settings
    "Settings",
    "resolve_settings",
]
