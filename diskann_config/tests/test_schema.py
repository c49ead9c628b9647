"""
Unit Tests: Parameter Schema

Tests:
    - FieldBuilder declaration and declaration-time errors
    - ParamDescriptor predicates (phase, type, range)
    - Schema composition and metadata export
    - DiskANN field table (defaults, ranges, phases)
"""

import math

import numpy as np
import pytest

from diskann_config.core import constants as C
from diskann_config.core.types import ParamType, Phase
from diskann_config.schema import (
    BASE_FIELDS,
    DISKANN_FIELDS,
    DISKANN_SCHEMA,
    Schema,
    declare,
)


class TestFieldBuilder:
    """Tests for fluent field declaration."""

    def test_build_descriptor(self):
        """Test a fully specified declaration."""
        d = (
            declare("beamwidth", ParamType.INTEGER)
            .description("io width")
            .set_default(8)
            .set_range(1, 128)
            .for_search()
            .for_range_search()
            .build()
        )

        assert d.name == "beamwidth"
        assert d.default == 8
        assert (d.min_value, d.max_value) == (1, 128)
        assert d.phases == frozenset({Phase.SEARCH, Phase.RANGE_SEARCH})
        assert not d.required

    def test_required_without_default(self):
        """Test that a field with no default and no empty allowance is required."""
        d = declare("dim", ParamType.INTEGER).for_build().build()
        assert d.required

    def test_allow_empty_not_required(self):
        """Test allow_empty_without_default."""
        d = declare("x", ParamType.INTEGER).allow_empty_without_default().for_build().build()
        assert not d.required
        assert d.default is None

    def test_float_default_normalized(self):
        """Test integer default on a float field becomes float."""
        d = declare("budget", ParamType.FLOAT).set_default(0).for_build().build()
        assert d.default == 0.0
        assert isinstance(d.default, float)

    def test_no_phase_rejected(self):
        """Test a field bound to no phase fails at declaration."""
        with pytest.raises(ValueError):
            declare("orphan", ParamType.INTEGER).build()

    def test_range_on_string_rejected(self):
        """Test numeric range on a string field."""
        with pytest.raises(ValueError):
            declare("s", ParamType.STRING).set_range(0, 1)

    def test_inverted_range_rejected(self):
        """Test min > max."""
        with pytest.raises(ValueError):
            declare("n", ParamType.INTEGER).set_range(10, 1)

    def test_default_type_mismatch_rejected(self):
        """Test default of the wrong type."""
        with pytest.raises(ValueError):
            declare("flag", ParamType.BOOLEAN).set_default(1)

    def test_default_outside_range_rejected(self):
        """Test default that violates its own range."""
        with pytest.raises(ValueError):
            declare("n", ParamType.INTEGER).set_default(0).set_range(1, 10).for_build().build()


class TestParamDescriptor:
    """Tests for descriptor predicates."""

    def test_applies_to(self):
        d = DISKANN_SCHEMA["search_list_size"]
        assert d.applies_to(Phase.BUILD)
        assert d.applies_to(Phase.SEARCH)
        assert not d.applies_to(Phase.RANGE_SEARCH)
        assert not d.applies_to(Phase.DESERIALIZE)

    def test_bool_is_not_integer(self):
        """Test bool rejected for integer fields."""
        d = DISKANN_SCHEMA["beamwidth"]
        assert not d.accepts_type(True)
        assert d.accepts_type(4)

    def test_numpy_scalars_accepted(self):
        """Test numpy scalar values."""
        assert DISKANN_SCHEMA["beamwidth"].accepts_type(np.int64(4))
        assert DISKANN_SCHEMA["filter_threshold"].accepts_type(np.float32(0.5))

    def test_int_accepted_for_float(self):
        assert DISKANN_SCHEMA["pq_code_budget_gb"].accepts_type(1)
        assert not DISKANN_SCHEMA["pq_code_budget_gb"].accepts_type("1")

    def test_nan_rejected_for_ranged_float(self):
        assert not DISKANN_SCHEMA["filter_threshold"].in_range(math.nan)

    def test_unbounded_float_accepts_inf(self):
        assert DISKANN_SCHEMA["range_filter"].in_range(math.inf)

    def test_to_dict(self):
        """Test metadata export."""
        data = DISKANN_SCHEMA["beamwidth"].to_dict()
        assert data == {
            "name": "beamwidth",
            "type": "integer",
            "description": DISKANN_SCHEMA["beamwidth"].description,
            "default": 8,
            "phases": ["range_search", "search"],
            "required": False,
            "range": [1, 128],
        }

    def test_to_dict_choices(self):
        data = DISKANN_SCHEMA["metric_type"].to_dict()
        assert data["choices"] == ["COSINE", "IP", "L2"]
        assert "range" not in data


class TestSchemaRanges:
    """Boundary inclusivity of declared ranges."""

    @pytest.mark.parametrize("value,accepted", [
        (0, False),
        (1, True),
        (128, True),
        (129, False),
    ])
    def test_beamwidth(self, value, accepted):
        assert DISKANN_SCHEMA.in_range("beamwidth", value) is accepted

    @pytest.mark.parametrize("value,accepted", [
        (-1.0, True),
        (1.0, True),
        (0.0, True),
        (-1.0001, False),
        (1.0001, False),
    ])
    def test_filter_threshold(self, value, accepted):
        assert DISKANN_SCHEMA.in_range("filter_threshold", value) is accepted

    @pytest.mark.parametrize("value,accepted", [
        (0, False),
        (1, True),
        (2048, True),
        (2049, False),
    ])
    def test_max_degree(self, value, accepted):
        assert DISKANN_SCHEMA.in_range("max_degree", value) is accepted

    @pytest.mark.parametrize("value,accepted", [
        (0.99, False),
        (1.0, True),
        (5.0, True),
        (5.01, False),
    ])
    def test_search_list_and_k_ratio(self, value, accepted):
        assert DISKANN_SCHEMA.in_range("search_list_and_k_ratio", value) is accepted

    def test_budgets_non_negative(self):
        assert DISKANN_SCHEMA.in_range("pq_code_budget_gb", 0.0)
        assert not DISKANN_SCHEMA.in_range("pq_code_budget_gb", -0.5)
        assert DISKANN_SCHEMA.in_range("build_dram_budget_gb", C.FLOAT_MAX)

    def test_search_list_size_upper_bound(self):
        assert DISKANN_SCHEMA.in_range("search_list_size", C.INT_MAX)
        assert not DISKANN_SCHEMA.in_range("search_list_size", C.INT_MAX + 1)

    def test_disk_pq_dims_unconstrained(self):
        assert DISKANN_SCHEMA.in_range("disk_pq_dims", 0)
        assert DISKANN_SCHEMA.in_range("disk_pq_dims", 64)

    def test_metric_enumeration(self):
        assert DISKANN_SCHEMA.in_range("metric_type", "L2")
        assert DISKANN_SCHEMA.in_range("metric_type", "COSINE")
        assert not DISKANN_SCHEMA.in_range("metric_type", "HAMMING")

    def test_wrong_type_not_in_range(self):
        assert not DISKANN_SCHEMA.in_range("beamwidth", "8")

    def test_undeclared_name(self):
        assert not DISKANN_SCHEMA.in_range("ef_search", 10)
        assert not DISKANN_SCHEMA.is_applicable("ef_search", Phase.SEARCH)


class TestSchemaComposition:
    """Tests for merging field sets."""

    def test_diskann_overrides_base_metric(self):
        """Test the family declaration of metric_type replaces the base one."""
        base_metric = next(d for d in BASE_FIELDS if d.name == "metric_type")
        assert Phase.RANGE_SEARCH in base_metric.phases

        merged = DISKANN_SCHEMA["metric_type"]
        assert merged.phases == frozenset({Phase.BUILD, Phase.SEARCH, Phase.DESERIALIZE})
        assert merged.default == "L2"

    def test_contains_both_sets(self):
        names = set(DISKANN_SCHEMA.names())
        assert {d.name for d in BASE_FIELDS} <= names
        assert {d.name for d in DISKANN_FIELDS} <= names
        assert len(DISKANN_SCHEMA) == len(names)

    def test_duplicate_within_set_rejected(self):
        d = declare("x", ParamType.INTEGER).for_build().build()
        with pytest.raises(ValueError):
            Schema.merge((d, d))

    def test_read_only(self):
        with pytest.raises(TypeError):
            DISKANN_SCHEMA._fields["x"] = None  # type: ignore[index]

    def test_fields_for_phase(self):
        names = {d.name for d in DISKANN_SCHEMA.fields_for(Phase.RANGE_SEARCH)}
        assert {"beamwidth", "min_k", "max_k", "search_list_and_k_ratio", "radius"} <= names
        assert "search_list_size" not in names

    def test_describe_phase(self):
        described = DISKANN_SCHEMA.describe(Phase.DESERIALIZE)
        names = [d["name"] for d in described]
        assert "warm_up" in names
        assert "use_bfs_cache" in names
        assert "search_cache_budget_gb" in names
        assert "beamwidth" not in names

    def test_describe_all(self):
        assert len(DISKANN_SCHEMA.describe()) == len(DISKANN_SCHEMA)


class TestDiskANNTable:
    """The declared DiskANN parameters."""

    @pytest.mark.parametrize("name,default", [
        ("metric_type", "L2"),
        ("max_degree", 48),
        ("search_list_size", None),
        ("pq_code_budget_gb", None),
        ("build_dram_budget_gb", None),
        ("disk_pq_dims", 0),
        ("accelerate_build", False),
        ("search_cache_budget_gb", 0.0),
        ("warm_up", False),
        ("use_bfs_cache", False),
        ("beamwidth", 8),
        ("min_k", 100),
        ("max_k", 10000),
        ("search_list_and_k_ratio", 2.0),
        ("filter_threshold", -1.0),
    ])
    def test_defaults(self, name, default):
        assert DISKANN_SCHEMA[name].default == default

    def test_budgets_required_for_build(self):
        assert DISKANN_SCHEMA["pq_code_budget_gb"].required
        assert DISKANN_SCHEMA["build_dram_budget_gb"].required
        assert not DISKANN_SCHEMA["search_list_size"].required

    @pytest.mark.parametrize("name,phases", [
        ("max_degree", {Phase.BUILD}),
        ("search_cache_budget_gb", {Phase.BUILD, Phase.DESERIALIZE}),
        ("warm_up", {Phase.DESERIALIZE}),
        ("beamwidth", {Phase.SEARCH, Phase.RANGE_SEARCH}),
        ("min_k", {Phase.RANGE_SEARCH}),
        ("filter_threshold", {Phase.SEARCH}),
    ])
    def test_phases(self, name, phases):
        assert DISKANN_SCHEMA[name].phases == frozenset(phases)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
