"""
Parameter Descriptors: Immutable Per-Field Metadata

A ParamDescriptor records everything known about one tunable parameter:
semantic type, default, legal range or enumeration, and the phases in which
it is read. Descriptors are produced by FieldBuilder at import time and are
shared read-only by every operation afterwards.

Predicates on a descriptor never raise; they answer questions the loader and
the phase validators turn into errors.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Union

from diskann_config.core.types import ParamType, Phase

Number = Union[int, float]


# =============================================================================
# DESCRIPTOR
# =============================================================================
@dataclass(frozen=True, slots=True)
class ParamDescriptor:
    """
    Metadata for a single named parameter.

    Attributes:
        name: Stable identifier, also the key in caller input
        param_type: Semantic type of the value
        description: Human-readable summary
        default: Value used when the field is left unset (None = no default)
        min_value / max_value: Inclusive numeric bounds (None = unbounded)
        choices: Legal string values (None = any string)
        phases: Phases in which the field is read and validated
        allow_empty: The field may stay unset without a default
    """
    name: str
    param_type: ParamType
    description: str = ""
    default: Optional[Any] = None
    min_value: Optional[Number] = None
    max_value: Optional[Number] = None
    choices: Optional[frozenset[str]] = None
    phases: frozenset[Phase] = field(default_factory=frozenset)
    allow_empty: bool = False

    @property
    def required(self) -> bool:
        """Absence is an error: no default and not allowed to stay empty."""
        return self.default is None and not self.allow_empty

    @property
    def has_range(self) -> bool:
        return (
            self.min_value is not None
            or self.max_value is not None
            or self.choices is not None
        )

    def applies_to(self, phase: Phase) -> bool:
        return phase in self.phases

    def accepts_type(self, value: Any) -> bool:
        return self.param_type.accepts(value)

    def in_range(self, value: Any) -> bool:
        """Inclusive bounds check; enumeration membership for strings."""
        if self.choices is not None:
            return value in self.choices
        if not self.param_type.is_numeric:
            return True
        if isinstance(value, float) and math.isnan(value):
            return not self.has_range
        if self.min_value is not None and value < self.min_value:
            return False
        if self.max_value is not None and value > self.max_value:
            return False
        return True

    def to_dict(self) -> dict[str, Any]:
        """Metadata export for documentation and input-form generation."""
        data: dict[str, Any] = {
            "name": self.name,
            "type": self.param_type.value,
            "description": self.description,
            "default": self.default,
            "phases": sorted(p.value for p in self.phases),
            "required": self.required,
        }
        if self.choices is not None:
            data["choices"] = sorted(self.choices)
        elif self.has_range:
            data["range"] = [self.min_value, self.max_value]
        return data


# =============================================================================
# FLUENT BUILDER
# =============================================================================
class FieldBuilder:
    """
    Fluent declaration of a ParamDescriptor.

    Usage:
        declare("beamwidth", ParamType.INTEGER)
            .description("IO requests per search iteration.")
            .set_default(8)
            .set_range(1, 128)
            .for_search()
            .for_range_search()
            .build()

    Declaration mistakes raise ValueError, so a malformed schema fails at
    import rather than during an operation.
    """

    __slots__ = (
        "_name", "_type", "_description", "_default",
        "_min", "_max", "_choices", "_phases", "_allow_empty",
    )

    def __init__(self, name: str, param_type: ParamType) -> None:
        if not name:
            raise ValueError("parameter name must be non-empty")
        self._name = name
        self._type = param_type
        self._description = ""
        self._default: Optional[Any] = None
        self._min: Optional[Number] = None
        self._max: Optional[Number] = None
        self._choices: Optional[frozenset[str]] = None
        self._phases: set[Phase] = set()
        self._allow_empty = False

    def description(self, text: str) -> FieldBuilder:
        self._description = text
        return self

    def set_default(self, value: Any) -> FieldBuilder:
        if not self._type.accepts(value):
            raise ValueError(
                f"default {value!r} for '{self._name}' is not a {self._type.value}"
            )
        self._default = self._type.normalize(value)
        return self

    def set_range(self, min_value: Number, max_value: Number) -> FieldBuilder:
        if not self._type.is_numeric:
            raise ValueError(f"range on non-numeric parameter '{self._name}'")
        if min_value > max_value:
            raise ValueError(
                f"empty range [{min_value}, {max_value}] for '{self._name}'"
            )
        self._min = self._type.normalize(min_value)
        self._max = self._type.normalize(max_value)
        return self

    def set_choices(self, choices: Iterable[str]) -> FieldBuilder:
        if self._type is not ParamType.STRING:
            raise ValueError(f"choices on non-string parameter '{self._name}'")
        self._choices = frozenset(choices)
        if not self._choices:
            raise ValueError(f"empty choices for '{self._name}'")
        return self

    def allow_empty_without_default(self) -> FieldBuilder:
        self._allow_empty = True
        return self

    def for_build(self) -> FieldBuilder:
        self._phases.add(Phase.BUILD)
        return self

    def for_search(self) -> FieldBuilder:
        self._phases.add(Phase.SEARCH)
        return self

    def for_range_search(self) -> FieldBuilder:
        self._phases.add(Phase.RANGE_SEARCH)
        return self

    def for_deserialize(self) -> FieldBuilder:
        self._phases.add(Phase.DESERIALIZE)
        return self

    def for_build_and_search(self) -> FieldBuilder:
        return self.for_build().for_search()

    def build(self) -> ParamDescriptor:
        if not self._phases:
            raise ValueError(f"parameter '{self._name}' is not bound to any phase")
        descriptor = ParamDescriptor(
            name=self._name,
            param_type=self._type,
            description=self._description,
            default=self._default,
            min_value=self._min,
            max_value=self._max,
            choices=self._choices,
            phases=frozenset(self._phases),
            allow_empty=self._allow_empty,
        )
        if descriptor.default is not None and not descriptor.in_range(descriptor.default):
            raise ValueError(
                f"default {descriptor.default!r} for '{self._name}' is outside its range"
            )
        return descriptor


def declare(name: str, param_type: ParamType) -> FieldBuilder:
    """Start a FieldBuilder; reads like the declaration it produces."""
    return FieldBuilder(name, param_type)
