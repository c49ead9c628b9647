"""
Core Type Definitions: Phases, Semantic Types, Metrics

Every parameter descriptor is tagged with a semantic type and the set of
operation phases in which it is read. These enums are the shared vocabulary
of the schema, the loader and the phase validators.
"""

from __future__ import annotations

from enum import Enum
from numbers import Integral, Real
from typing import Any

import numpy as np


# =============================================================================
# OPERATION PHASES
# =============================================================================
class Phase(Enum):
    """
    Operation phases a parameter can be relevant to.

    BUILD and SEARCH are the two phases with an adjustment step; RANGE_SEARCH
    and DESERIALIZE only get loader-level checks.
    """
    BUILD = "build"
    SEARCH = "search"
    RANGE_SEARCH = "range_search"
    DESERIALIZE = "deserialize"

    @classmethod
    def parse(cls, value: "Phase | str") -> "Phase":
        """Accept a Phase or its value ("range_search" or "range-search")."""
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower().replace("-", "_"))


# =============================================================================
# SEMANTIC TYPES
# =============================================================================
class ParamType(Enum):
    """Semantic type of a parameter value."""
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    STRING = "string"

    @property
    def is_numeric(self) -> bool:
        return self in (ParamType.INTEGER, ParamType.FLOAT)

    def accepts(self, value: Any) -> bool:
        """
        True if value is a legal Python representation of this type.

        bool is never accepted as a number; integers are accepted where a
        float is expected. numpy scalars count as their Python equivalents.
        """
        if isinstance(value, (bool, np.bool_)):
            return self is ParamType.BOOLEAN
        if self is ParamType.INTEGER:
            return isinstance(value, Integral)
        if self is ParamType.FLOAT:
            return isinstance(value, Real)
        if self is ParamType.STRING:
            return isinstance(value, str)
        return False

    def normalize(self, value: Any) -> Any:
        """Convert an accepted value (incl. numpy scalars) to a plain Python value."""
        if self is ParamType.INTEGER:
            return int(value)
        if self is ParamType.FLOAT:
            return float(value)
        if self is ParamType.BOOLEAN:
            return bool(value)
        return str(value)


# =============================================================================
# METRIC TYPES
# =============================================================================
class MetricType(Enum):
    """
    Similarity metrics understood by the disk index.

    L2 is a distance (lower = closer); IP and COSINE are similarities.
    """
    L2 = "L2"
    IP = "IP"
    COSINE = "COSINE"

    @classmethod
    def names(cls) -> frozenset[str]:
        return frozenset(m.value for m in cls)
