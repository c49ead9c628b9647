"""
Base Field Set: Parameters Shared by Every Index Family

Index families compose these with their own fields via Schema.merge and may
override any of them by redeclaring the name.
"""

from __future__ import annotations

from diskann_config.core import constants as C
from diskann_config.core.types import MetricType, ParamType
from diskann_config.schema.descriptor import ParamDescriptor, declare

BASE_FIELDS: tuple[ParamDescriptor, ...] = (
    declare("metric_type", ParamType.STRING)
        .description("metric type")
        .set_default(C.DEFAULT_METRIC)
        .set_choices(MetricType.names())
        .for_build_and_search()
        .for_range_search()
        .for_deserialize()
        .build(),
    declare("dim", ParamType.INTEGER)
        .description("vector dim")
        .set_range(1, C.INT_MAX)
        .for_build()
        .build(),
    declare("k", ParamType.INTEGER)
        .description("search for top k similar vector.")
        .set_default(C.DEFAULT_TOPK)
        .set_range(1, C.INT_MAX)
        .for_search()
        .build(),
    declare("num_build_thread", ParamType.INTEGER)
        .description("index thread limit for build.")
        .allow_empty_without_default()
        .set_range(1, C.INT_MAX)
        .for_build()
        .build(),
    declare("data_path", ParamType.STRING)
        .description("raw data path.")
        .allow_empty_without_default()
        .for_build()
        .build(),
    declare("index_prefix", ParamType.STRING)
        .description("path prefix to load or save index.")
        .allow_empty_without_default()
        .for_build()
        .for_deserialize()
        .build(),
    declare("radius", ParamType.FLOAT)
        .description("radius for range search")
        .set_default(C.DEFAULT_RADIUS)
        .for_range_search()
        .build(),
    declare("range_filter", ParamType.FLOAT)
        .description("result filter for range search")
        .set_default(C.DEFAULT_RANGE_FILTER)
        .for_range_search()
        .build(),
    declare("trace_visit", ParamType.BOOLEAN)
        .description("trace visit for feder")
        .set_default(False)
        .for_search()
        .for_range_search()
        .build(),
    declare("enable_mmap", ParamType.BOOLEAN)
        .description("enable mmap for deserialize")
        .set_default(False)
        .for_deserialize()
        .build(),
)
