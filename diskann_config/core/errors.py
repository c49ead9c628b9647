"""
Result Monad & Error Types: Zero-Exception Validation Flow

Validation never raises on a bad configuration. Every loader and phase
validator returns a Result: Ok carrying the (possibly adjusted) record, or
Err carrying a structured ConfigError the caller surfaces to its own client.

Exceptions are reserved for programming errors:
    - unwrap() on an Err
    - mutating a frozen record
    - malformed field declarations at import time
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import (
    Any,
    Callable,
    Generic,
    Literal,
    NoReturn,
    Optional,
    TypeVar,
    Union,
    final,
)


# =============================================================================
# TYPE VARIABLES
# =============================================================================
T = TypeVar("T")  # Success value type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Transform result type


# =============================================================================
# RESULT MONAD: SUCCESS VARIANT
# =============================================================================
@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """
    Success variant of Result monad.

    Example:
        result = check_and_adjust_for_build(record)
        if result.is_ok():
            record = result.unwrap()
    """
    _value: T

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def unwrap(self) -> T:
        """Extract value. Safe to call after is_ok() check."""
        return self._value

    def unwrap_or(self, default: T) -> T:
        return self._value

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        """
        Apply transformation to success value.

        Example:
            Ok(record).map(lambda r: r.freeze())
        """
        return Ok(fn(self._value))

    def flat_map(self, fn: Callable[[T], "Result[U, Any]"]) -> "Result[U, Any]":
        """Monadic bind for chaining fallible steps (load -> adjust)."""
        return fn(self._value)

    def and_then(self, fn: Callable[[T], "Result[U, Any]"]) -> "Result[U, Any]":
        """Alias for flat_map - Rust naming convention."""
        return fn(self._value)

    @property
    def value(self) -> T:
        return self._value

    @property
    def error(self) -> None:
        return None

    def __repr__(self) -> str:
        return f"Ok({self._value!r})"

    def __bool__(self) -> Literal[True]:
        return True


# =============================================================================
# RESULT MONAD: ERROR VARIANT
# =============================================================================
@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """
    Error variant of Result monad.

    Example:
        result = check_and_adjust_for_search(record, k=10)
        if result.is_err():
            print(result.error.message)
    """
    _error: E

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def unwrap(self) -> NoReturn:
        """
        Attempting to unwrap an error is a programming error.

        Raises:
            RuntimeError: Always, with error context
        """
        raise RuntimeError(f"Called unwrap() on Err: {self._error}")

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, fn: Callable[[Any], U]) -> "Err[E]":
        """No-op on error variant - propagates error unchanged."""
        return self

    def flat_map(self, fn: Callable[[Any], "Result[U, E]"]) -> "Err[E]":
        """Propagate error through monadic chain."""
        return self

    def and_then(self, fn: Callable[[Any], "Result[U, E]"]) -> "Err[E]":
        return self

    @property
    def value(self) -> None:
        return None

    @property
    def error(self) -> E:
        return self._error

    def __repr__(self) -> str:
        return f"Err({self._error!r})"

    def __bool__(self) -> Literal[False]:
        return False


# Union type for pattern matching
Result = Union[Ok[T], Err[E]]


# =============================================================================
# ERROR TAXONOMY
# =============================================================================
class ErrorCode(Enum):
    """
    Canonical error codes for configuration failures.

    Ranges:
        5000-5099: Value errors (range, type)
        5100-5199: Presence errors (missing, unknown)
        5200-5299: Settings errors
    """
    OUT_OF_RANGE = 5001
    TYPE_MISMATCH = 5002

    MISSING_REQUIRED = 5101
    UNKNOWN_PARAM = 5102

    INVALID_SETTINGS = 5201


@dataclass(frozen=True, slots=True)
class ConfigError:
    """
    Structured configuration error.

    The phase validators only ever produce OUT_OF_RANGE; the remaining codes
    originate in the base loader. Equality and hashing use code and message.
    """
    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict, compare=False)
    timestamp: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc), compare=False
    )

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logging/transmission."""
        return {
            "code": self.code.value,
            "code_name": self.code.name,
            "message": self.message,
            "details": self.details,
            "timestamp": self.timestamp.isoformat(),
        }

    # -------------------------------------------------------------------------
    # Convenience constructors
    # -------------------------------------------------------------------------
    @classmethod
    def out_of_range(
        cls,
        param: str,
        value: Any,
        min_value: Optional[Any] = None,
        max_value: Optional[Any] = None,
        choices: Optional[frozenset[str]] = None,
    ) -> "ConfigError":
        if choices is not None:
            allowed = ", ".join(sorted(choices))
            message = f"param '{param}' ({value!r}) should be one of [{allowed}]"
        else:
            message = (
                f"param '{param}' ({value!r}) should be in range "
                f"[{min_value}, {max_value}]"
            )
        return cls(
            code=ErrorCode.OUT_OF_RANGE,
            message=message,
            details={
                "param": param,
                "value": value,
                "min": min_value,
                "max": max_value,
                "choices": sorted(choices) if choices is not None else None,
            },
        )

    @classmethod
    def search_list_below_k(cls, search_list_size: int, k: int) -> "ConfigError":
        return cls(
            code=ErrorCode.OUT_OF_RANGE,
            message=(
                f"search_list_size({search_list_size}) should be larger than k({k})"
            ),
            details={"search_list_size": search_list_size, "k": k},
        )

    @classmethod
    def type_mismatch(cls, param: str, value: Any, expected: str) -> "ConfigError":
        return cls(
            code=ErrorCode.TYPE_MISMATCH,
            message=(
                f"param '{param}' expects {expected}, "
                f"got {type(value).__name__} ({value!r})"
            ),
            details={"param": param, "value": value, "expected": expected},
        )

    @classmethod
    def missing(cls, param: str, phase: str) -> "ConfigError":
        return cls(
            code=ErrorCode.MISSING_REQUIRED,
            message=f"param '{param}' not set for {phase}",
            details={"param": param, "phase": phase},
        )

    @classmethod
    def unknown(cls, param: str) -> "ConfigError":
        return cls(
            code=ErrorCode.UNKNOWN_PARAM,
            message=f"unknown param '{param}'",
            details={"param": param},
        )

    @classmethod
    def invalid_settings(cls, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.INVALID_SETTINGS,
            message=reason,
            details={"reason": reason},
        )
