"""
Base Configuration Mechanism: Populate, Default, Check

Turns an already-typed parameter mapping into a ConfigRecord for one phase:

    1. populate   copy applicable keys, type-check values
    2. default    fill unset fields that declare a default
    3. required   reject applicable required fields that are still unset
    4. range      reject values outside their declared range/enumeration

Parsing text or JSON into Python values happens before this layer.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from diskann_config.config.record import ConfigRecord
from diskann_config.core.config import Settings, resolve_settings
from diskann_config.core.errors import ConfigError, Err, Ok, Result
from diskann_config.core.types import Phase
from diskann_config.observability.logging import StructuredLogger
from diskann_config.schema.diskann import DISKANN_SCHEMA
from diskann_config.schema.registry import Schema

logger = StructuredLogger(__name__)


def load_config(
    params: Mapping[str, Any],
    phase: Phase | str,
    *,
    schema: Schema = DISKANN_SCHEMA,
    settings: Optional[Settings] = None,
) -> Result[ConfigRecord, ConfigError]:
    """
    Build a checked ConfigRecord for the given phase.

    Args:
        params: Caller-supplied values keyed by parameter name (None = unset)
        phase: Operation about to run
        schema: Descriptor table to validate against
        settings: Loader settings (default: Settings.from_env())

    Returns:
        Ok(record) with every applicable field set or legitimately empty,
        Err(ConfigError) on the first violation.
    """
    phase = Phase.parse(phase)
    record = ConfigRecord(schema)

    return (
        resolve_settings(settings)
        .flat_map(lambda s: _populate(record, params, phase, s))
        .flat_map(lambda r: _apply_defaults(r, phase))
        .flat_map(lambda r: _check_required(r, phase))
        .flat_map(lambda r: _check_ranges(r, phase))
    )


def _populate(
    record: ConfigRecord,
    params: Mapping[str, Any],
    phase: Phase,
    settings: Settings,
) -> Result[ConfigRecord, ConfigError]:
    schema = record.schema
    for name, value in params.items():
        descriptor = schema.get(name)
        if descriptor is None:
            if settings.reject_unknown_params:
                error = ConfigError.unknown(name)
                logger.error(error.message, param=name, phase=phase.value)
                return Err(error)
            logger.warning("ignoring unknown param", param=name, phase=phase.value)
            continue
        if not descriptor.applies_to(phase):
            logger.debug("param not used in phase", param=name, phase=phase.value)
            continue
        if value is None:
            continue
        if not descriptor.accepts_type(value):
            error = ConfigError.type_mismatch(name, value, descriptor.param_type.value)
            logger.error(error.message, param=name, phase=phase.value)
            return Err(error)
        record.set_explicit(name, descriptor.param_type.normalize(value))
    return Ok(record)


def _apply_defaults(record: ConfigRecord, phase: Phase) -> Result[ConfigRecord, ConfigError]:
    for descriptor in record.schema.fields_for(phase):
        if descriptor.default is not None and not record.has_value(descriptor.name):
            record.fill_default(descriptor.name, descriptor.default)
    return Ok(record)


def _check_required(record: ConfigRecord, phase: Phase) -> Result[ConfigRecord, ConfigError]:
    for descriptor in record.schema.fields_for(phase):
        if descriptor.required and not record.has_value(descriptor.name):
            error = ConfigError.missing(descriptor.name, phase.value)
            logger.error(error.message, param=descriptor.name, phase=phase.value)
            return Err(error)
    return Ok(record)


def _check_ranges(record: ConfigRecord, phase: Phase) -> Result[ConfigRecord, ConfigError]:
    for descriptor in record.schema.fields_for(phase):
        value = record.get(descriptor.name)
        if value is None or descriptor.in_range(value):
            continue
        error = ConfigError.out_of_range(
            descriptor.name,
            value,
            min_value=descriptor.min_value,
            max_value=descriptor.max_value,
            choices=descriptor.choices,
        )
        logger.error(error.message, param=descriptor.name, value=value, phase=phase.value)
        return Err(error)
    return Ok(record)
