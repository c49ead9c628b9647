"""
Phase Dispatch: Load -> Adjust -> Freeze

prepare() is the single entry point an operation handler calls before it
hands a configuration to the index engine.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from diskann_config.config.loader import load_config
from diskann_config.config.record import ConfigRecord
from diskann_config.core.config import Settings
from diskann_config.core.errors import ConfigError, Ok, Result
from diskann_config.core.types import Phase
from diskann_config.observability.logging import StructuredLogger
from diskann_config.schema.diskann import DISKANN_SCHEMA
from diskann_config.schema.registry import Schema
from diskann_config.validation.phase import (
    check_and_adjust_for_build,
    check_and_adjust_for_search,
)

logger = StructuredLogger(__name__)

Adjuster = Callable[[ConfigRecord, Optional[int]], Result[ConfigRecord, ConfigError]]


def _no_adjustment(record: ConfigRecord, k: Optional[int]) -> Result[ConfigRecord, ConfigError]:
    return Ok(record)


PHASE_ADJUSTERS: Mapping[Phase, Adjuster] = {
    Phase.BUILD: lambda record, k: check_and_adjust_for_build(record),
    Phase.SEARCH: check_and_adjust_for_search,
    Phase.RANGE_SEARCH: _no_adjustment,
    Phase.DESERIALIZE: _no_adjustment,
}


def check_and_adjust(
    record: ConfigRecord,
    phase: Phase | str,
    k: Optional[int] = None,
) -> Result[ConfigRecord, ConfigError]:
    """Run the phase-specific adjuster on an already-loaded record."""
    return PHASE_ADJUSTERS[Phase.parse(phase)](record, k)


def prepare(
    params: Mapping[str, Any],
    phase: Phase | str,
    *,
    k: Optional[int] = None,
    schema: Schema = DISKANN_SCHEMA,
    settings: Optional[Settings] = None,
) -> Result[ConfigRecord, ConfigError]:
    """
    Produce a validated, read-only configuration for one operation.

    Args:
        params: Caller-supplied parameter values
        phase: Operation about to run
        k: Requested result count; overrides params' k and is loaded and
            checked like any other parameter
        schema: Descriptor table
        settings: Loader settings

    Returns:
        Ok(frozen record) or Err(ConfigError); the caller aborts the operation
        and surfaces the error message on Err.
    """
    phase = Phase.parse(phase)
    if k is not None:
        params = {**params, "k": k}
    with logger.context(phase=phase.value, schema=schema.name):
        result = (
            load_config(params, phase, schema=schema, settings=settings)
            .flat_map(lambda record: check_and_adjust(record, phase))
            .map(lambda record: record.freeze())
        )
        if result.is_ok():
            logger.debug("configuration prepared", params=result.unwrap().as_dict())
        return result
