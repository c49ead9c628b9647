"""
Validation Module: Phase Validators and Dispatch
"""

from diskann_config.validation.phase import (
    check_and_adjust_for_build,
    check_and_adjust_for_search,
)
from diskann_config.validation.dispatch import (
    PHASE_ADJUSTERS,
    check_and_adjust,
    prepare,
)

__all__ = [
    "check_and_adjust_for_build",
    "check_and_adjust_for_search",
    "PHASE_ADJUSTERS",
    "check_and_adjust",
    "prepare",
]
