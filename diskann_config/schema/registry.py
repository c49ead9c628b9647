"""
Schema Registry: Flat, Inspectable Descriptor Table

A Schema is the composition of one or more field sets (the base fields shared
by every index family plus the fields of one family) merged into a single
read-only name -> ParamDescriptor mapping. Later field sets override earlier
ones by name.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Optional, Sequence

from diskann_config.core.types import Phase
from diskann_config.schema.descriptor import ParamDescriptor


class Schema:
    """
    Immutable parameter schema.

    Usage:
        schema = Schema.merge(BASE_FIELDS, DISKANN_FIELDS, name="diskann")
        schema.is_applicable("beamwidth", Phase.SEARCH)   # True
        schema.in_range("beamwidth", 129)                 # False
    """

    __slots__ = ("_name", "_fields")

    def __init__(self, fields: Mapping[str, ParamDescriptor], name: str = "") -> None:
        self._name = name
        self._fields: Mapping[str, ParamDescriptor] = MappingProxyType(dict(fields))

    @classmethod
    def merge(
        cls,
        *field_sets: Sequence[ParamDescriptor],
        name: str = "",
    ) -> Schema:
        """Compose field sets in order; a repeated name replaces the earlier declaration."""
        merged: dict[str, ParamDescriptor] = {}
        for field_set in field_sets:
            seen: set[str] = set()
            for descriptor in field_set:
                if descriptor.name in seen:
                    raise ValueError(
                        f"parameter '{descriptor.name}' declared twice in one field set"
                    )
                seen.add(descriptor.name)
                merged[descriptor.name] = descriptor
        return cls(merged, name=name)

    # -------------------------------------------------------------------------
    # Mapping-style access
    # -------------------------------------------------------------------------
    @property
    def name(self) -> str:
        return self._name

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __getitem__(self, name: str) -> ParamDescriptor:
        return self._fields[name]

    def __iter__(self) -> Iterator[ParamDescriptor]:
        return iter(self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)

    def get(self, name: str) -> Optional[ParamDescriptor]:
        return self._fields.get(name)

    def names(self) -> tuple[str, ...]:
        return tuple(self._fields)

    def fields_for(self, phase: Phase) -> tuple[ParamDescriptor, ...]:
        return tuple(d for d in self._fields.values() if d.applies_to(phase))

    # -------------------------------------------------------------------------
    # Predicates (never raise for undeclared names)
    # -------------------------------------------------------------------------
    def is_applicable(self, name: str, phase: Phase) -> bool:
        descriptor = self._fields.get(name)
        return descriptor is not None and descriptor.applies_to(phase)

    def in_range(self, name: str, value: Any) -> bool:
        descriptor = self._fields.get(name)
        if descriptor is None:
            return False
        return descriptor.accepts_type(value) and descriptor.in_range(value)

    # -------------------------------------------------------------------------
    # Metadata export
    # -------------------------------------------------------------------------
    def describe(self, phase: Optional[Phase] = None) -> list[dict[str, Any]]:
        """Per-field metadata, optionally restricted to one phase, in declaration order."""
        fields: Iterable[ParamDescriptor] = (
            self._fields.values() if phase is None else self.fields_for(phase)
        )
        return [d.to_dict() for d in fields]

    def __repr__(self) -> str:
        return f"Schema(name={self._name!r}, fields={len(self._fields)})"
