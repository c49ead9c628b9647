"""
DiskANN Parameter Constants

Numeric limits and defaults shared by the schema declarations and the
phase validators.

Width:
- Integer parameters are 32-bit signed on the engine side
- Floating-point parameters are single precision
"""

from typing import Final

import numpy as np

# =============================================================================
# NUMERIC LIMITS
# =============================================================================
INT_MAX: Final[int] = int(np.iinfo(np.int32).max)
FLOAT_MAX: Final[float] = float(np.finfo(np.float32).max)

# =============================================================================
# SEARCH LIST SIZE
# =============================================================================
SEARCH_LIST_SIZE_MIN_VALUE: Final[int] = 16
DEFAULT_SEARCH_LIST_SIZE_FOR_BUILD: Final[int] = 128

# =============================================================================
# GRAPH
# =============================================================================
DEFAULT_MAX_DEGREE: Final[int] = 48
MAX_DEGREE_LIMIT: Final[int] = 2048

# =============================================================================
# DISK I/O
# =============================================================================
DEFAULT_BEAMWIDTH: Final[int] = 8
BEAMWIDTH_LIMIT: Final[int] = 128

# =============================================================================
# RANGE SEARCH (iterative top-k widening)
# =============================================================================
DEFAULT_MIN_K: Final[int] = 100
DEFAULT_MAX_K: Final[int] = 10000
DEFAULT_SEARCH_LIST_AND_K_RATIO: Final[float] = 2.0
SEARCH_LIST_AND_K_RATIO_MIN: Final[float] = 1.0
SEARCH_LIST_AND_K_RATIO_MAX: Final[float] = 5.0

# =============================================================================
# FILTERED SEARCH
# =============================================================================
DEFAULT_FILTER_THRESHOLD: Final[float] = -1.0
FILTER_THRESHOLD_MIN: Final[float] = -1.0
FILTER_THRESHOLD_MAX: Final[float] = 1.0

# =============================================================================
# BASE (all index families)
# =============================================================================
DEFAULT_METRIC: Final[str] = "L2"
DEFAULT_TOPK: Final[int] = 10
DEFAULT_RADIUS: Final[float] = 0.0
DEFAULT_RANGE_FILTER: Final[float] = float("inf")

# =============================================================================
# ENVIRONMENT
# =============================================================================
ENV_PREFIX: Final[str] = "DISKANN_CONFIG_"
