"""
Phase Validators: Cross-Field Checks and Computed Defaults

Called once, immediately before the operation they guard, on a record the
loader has already populated and range-checked. Both may fill an unset
search_list_size; no other field is touched.
"""

from __future__ import annotations

from typing import Optional

from diskann_config.config.record import ConfigRecord
from diskann_config.core import constants as C
from diskann_config.core.errors import ConfigError, Err, Ok, Result
from diskann_config.observability.logging import StructuredLogger

logger = StructuredLogger(__name__)

SEARCH_LIST_SIZE = "search_list_size"


def check_and_adjust_for_search(
    record: ConfigRecord,
    k: Optional[int] = None,
) -> Result[ConfigRecord, ConfigError]:
    """
    Enforce search_list_size >= k before a top-k search.

    Args:
        record: Populated configuration record
        k: Requested result count (default: the record's own k)

    Returns:
        Ok(record) with search_list_size set, or Err(OUT_OF_RANGE) naming
        both values when an explicit search_list_size is smaller than k.
        A k that is not an integer in the declared k range is rejected first.

    Example:
        k=10, search_list_size unset -> search_list_size = 16
        k=10, search_list_size=5     -> Err
        k=10, search_list_size=10    -> Ok, unchanged
    """
    if k is None:
        k = record.get("k")
    if k is None:
        error = ConfigError.missing("k", "search")
        logger.error(error.message, param="k")
        return Err(error)

    k_descriptor = record.schema["k"]
    if not k_descriptor.accepts_type(k):
        error = ConfigError.type_mismatch("k", k, k_descriptor.param_type.value)
        logger.error(error.message, param="k")
        return Err(error)
    k = k_descriptor.param_type.normalize(k)
    if not k_descriptor.in_range(k):
        error = ConfigError.out_of_range(
            "k", k, min_value=k_descriptor.min_value, max_value=k_descriptor.max_value
        )
        logger.error(error.message, param="k", value=k)
        return Err(error)

    if not record.has_value(SEARCH_LIST_SIZE):
        record.fill_default(SEARCH_LIST_SIZE, max(k, C.SEARCH_LIST_SIZE_MIN_VALUE))
        return Ok(record)

    search_list_size = record.get(SEARCH_LIST_SIZE)
    if k > search_list_size:
        error = ConfigError.search_list_below_k(search_list_size, k)
        logger.error(error.message, search_list_size=search_list_size, k=k)
        return Err(error)

    return Ok(record)


def check_and_adjust_for_build(record: ConfigRecord) -> Result[ConfigRecord, ConfigError]:
    """Default an unset search_list_size for graph construction. k plays no part here."""
    if not record.has_value(SEARCH_LIST_SIZE):
        record.fill_default(SEARCH_LIST_SIZE, C.DEFAULT_SEARCH_LIST_SIZE_FOR_BUILD)
    return Ok(record)
