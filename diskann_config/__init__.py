"""
diskann_config: Parameter Schema & Phase Validation for Disk-Resident ANN Indexes

Declares every tunable parameter of a DiskANN-style graph index (type,
default, legal range, applicable phases) and validates a populated
configuration immediately before build, search or range search.

Usage:
    from diskann_config import Phase, prepare

    result = prepare({"k": 10, "beamwidth": 4}, Phase.SEARCH)
    if result.is_ok():
        config = result.unwrap()
        config.search_list_size   # 16 = max(k, 16)
    else:
        print(result.error.message)

    # Lower-level entry points
    from diskann_config import DISKANN_SCHEMA, load_config, check_and_adjust_for_build

    record = load_config(params, Phase.BUILD).unwrap()
    check_and_adjust_for_build(record)

    # Metadata export
    DISKANN_SCHEMA.describe(Phase.BUILD)

    # Diagnostics (level and format from DISKANN_CONFIG_LOG_LEVEL / _LOG_JSON)
    from diskann_config import setup_logging
    setup_logging()
"""

from __future__ import annotations

__version__ = "0.1.0"

from diskann_config.core.types import MetricType, ParamType, Phase
from diskann_config.core.errors import (
    ConfigError,
    Err,
    ErrorCode,
    Ok,
    Result,
)
from diskann_config.core.config import Settings
from diskann_config.observability import setup_logging
from diskann_config.schema import (
    BASE_FIELDS,
    DISKANN_FIELDS,
    DISKANN_SCHEMA,
    ParamDescriptor,
    Schema,
    declare,
)
from diskann_config.config import ConfigRecord, FieldState, load_config
from diskann_config.validation import (
    check_and_adjust,
    check_and_adjust_for_build,
    check_and_adjust_for_search,
    prepare,
)

__all__ = [
    # Version
    "__version__",
    # Core types
    "MetricType",
    "ParamType",
    "Phase",
    # Error handling
    "ConfigError",
    "Err",
    "ErrorCode",
    "Ok",
    "Result",
    "Settings",
    "setup_logging",
    # Schema
    "BASE_FIELDS",
    "DISKANN_FIELDS",
    "DISKANN_SCHEMA",
    "ParamDescriptor",
    "Schema",
    "declare",
    # Records
    "ConfigRecord",
    "FieldState",
    "load_config",
    # Validation
    "check_and_adjust",
    "check_and_adjust_for_build",
    "check_and_adjust_for_search",
    "prepare",
]
