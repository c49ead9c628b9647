"""
Configuration Record: Per-Operation Parameter Values

One record is created per operation request, populated from caller input,
validated once for the phase about to run, frozen, and handed to the engine.

Each declared field is in exactly one state:
    UNSET      no value
    EXPLICIT   supplied by the caller
    DEFAULTED  filled from a declared or computed default during validation
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from diskann_config.schema.registry import Schema


class FieldState(Enum):
    """Provenance of a field value."""
    UNSET = "unset"
    EXPLICIT = "explicit"
    DEFAULTED = "defaulted"


class ConfigRecord:
    """
    Optional value for every field declared in a schema.

    Values are read by name (record.get("beamwidth")) or as attributes
    (record.beamwidth); unset fields read as None. Writes go through
    set_explicit (population) and fill_default (validation) only.
    """

    __slots__ = ("_schema", "_values", "_states", "_frozen")

    def __init__(self, schema: Schema) -> None:
        self._schema = schema
        self._values: dict[str, Any] = {}
        self._states: dict[str, FieldState] = {name: FieldState.UNSET for name in schema.names()}
        self._frozen = False

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------
    @property
    def schema(self) -> Schema:
        return self._schema

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, name: str) -> Optional[Any]:
        self._require_declared(name)
        return self._values.get(name)

    def has_value(self, name: str) -> bool:
        return self.state(name) is not FieldState.UNSET

    def state(self, name: str) -> FieldState:
        self._require_declared(name)
        return self._states[name]

    def as_dict(self, include_unset: bool = False) -> dict[str, Any]:
        """Field values in schema order; unset fields appear as None when requested."""
        return {
            name: self._values.get(name)
            for name in self._schema.names()
            if include_unset or self._states[name] is not FieldState.UNSET
        }

    def __getattr__(self, name: str) -> Any:
        # Only reached for names that are not slots or methods.
        try:
            schema = object.__getattribute__(self, "_schema")
        except AttributeError:
            raise AttributeError(name) from None
        if name in schema:
            return self._values.get(name)
        raise AttributeError(f"{type(self).__name__!s} has no parameter {name!r}")

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------
    def set_explicit(self, name: str, value: Any) -> None:
        """Store a caller-supplied value; None leaves the field unset."""
        self._require_mutable(name)
        if value is None:
            self._values.pop(name, None)
            self._states[name] = FieldState.UNSET
            return
        self._values[name] = value
        self._states[name] = FieldState.EXPLICIT

    def fill_default(self, name: str, value: Any) -> None:
        """Fill an unset field with a default. Set fields are never overwritten."""
        self._require_mutable(name)
        if self._states[name] is not FieldState.UNSET:
            raise RuntimeError(f"parameter '{name}' already has a value")
        self._values[name] = value
        self._states[name] = FieldState.DEFAULTED

    def freeze(self) -> ConfigRecord:
        """Make the record read-only. Returns self for chaining."""
        self._frozen = True
        return self

    # -------------------------------------------------------------------------
    # Guards
    # -------------------------------------------------------------------------
    def _require_declared(self, name: str) -> None:
        if name not in self._schema:
            raise KeyError(f"parameter '{name}' is not declared in schema {self._schema.name!r}")

    def _require_mutable(self, name: str) -> None:
        self._require_declared(name)
        if self._frozen:
            raise RuntimeError(f"cannot modify '{name}': configuration record is frozen")

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self.as_dict().items())
        return f"ConfigRecord({fields})"
