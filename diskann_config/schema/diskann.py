"""
DiskANN Field Set: Disk-Resident Graph Index Parameters

Declared once at import and merged with BASE_FIELDS into DISKANN_SCHEMA.

Tuning notes:
    max_degree            Graph out-degree R, typically 60-150. Larger R gives
                          bigger indices and longer builds but better recall.
    search_list_size      Candidate list width L for build and search, typically
                          75-200. Keep it above max_degree unless build speed
                          matters more than quality.
    pq_code_budget_gb     Cap on in-memory PQ codes; oversized budgets are
                          clipped by the engine to dim * row_num.
    build_dram_budget_gb  Below the one-pass requirement the build falls back
                          to overlapping partitioned sub-graphs (up to ~1.5x
                          slower).
    disk_pq_dims          0 keeps full-precision vectors on SSD.
    accelerate_build      Skips the second Vamana pass (~30% faster build,
                          ~1% recall loss).
    use_bfs_cache         False caches nodes on sample-query search paths
                          (better for top-k); True caches by BFS from the
                          entry point (better for range search).
    beamwidth             IO requests per search iteration. W=1 maximises
                          throughput at fixed IOPS; 4-8 or more for latency.
    min_k / max_k         Range search is simulated by top-k search with k
                          doubling from min_k up to max_k.
    filter_threshold      Fraction of filtered-out rows at or above which
                          search switches to PQ + refine. Negative values
                          defer to the engine's dynamic threshold.
"""

from __future__ import annotations

from diskann_config.core import constants as C
from diskann_config.core.types import MetricType, ParamType
from diskann_config.schema.base import BASE_FIELDS
from diskann_config.schema.descriptor import ParamDescriptor, declare
from diskann_config.schema.registry import Schema

DISKANN_FIELDS: tuple[ParamDescriptor, ...] = (
    declare("metric_type", ParamType.STRING)
        .set_default(C.DEFAULT_METRIC)
        .description("metric type")
        .set_choices(MetricType.names())
        .for_build_and_search()
        .for_deserialize()
        .build(),
    declare("max_degree", ParamType.INTEGER)
        .description("the degree of the graph index.")
        .set_default(C.DEFAULT_MAX_DEGREE)
        .set_range(1, C.MAX_DEGREE_LIMIT)
        .for_build()
        .build(),
    declare("search_list_size", ParamType.INTEGER)
        .description("the size of search list during the index build or search.")
        .allow_empty_without_default()
        .set_range(1, C.INT_MAX)
        .for_build()
        .for_search()
        .build(),
    declare("pq_code_budget_gb", ParamType.FLOAT)
        .description("the size of PQ compressed representation in GB.")
        .set_range(0, C.FLOAT_MAX)
        .for_build()
        .build(),
    declare("build_dram_budget_gb", ParamType.FLOAT)
        .description("limit on the memory allowed for building the index in GB.")
        .set_range(0, C.FLOAT_MAX)
        .for_build()
        .build(),
    declare("disk_pq_dims", ParamType.INTEGER)
        .description("the dimension of compressed vectors stored on the ssd, use 0 to store uncompressed data.")
        .set_default(0)
        .for_build()
        .build(),
    declare("accelerate_build", ParamType.BOOLEAN)
        .description("a flag to enable fast build.")
        .set_default(False)
        .for_build()
        .build(),
    declare("search_cache_budget_gb", ParamType.FLOAT)
        .description("the size of cached nodes in GB.")
        .set_default(0)
        .set_range(0, C.FLOAT_MAX)
        .for_build()
        .for_deserialize()
        .build(),
    declare("warm_up", ParamType.BOOLEAN)
        .description("should do warm up before search.")
        .set_default(False)
        .for_deserialize()
        .build(),
    declare("use_bfs_cache", ParamType.BOOLEAN)
        .description("should bfs strategy to cache nodes.")
        .set_default(False)
        .for_deserialize()
        .build(),
    declare("beamwidth", ParamType.INTEGER)
        .description("the maximum number of IO requests each query will issue per iteration of search code.")
        .set_default(C.DEFAULT_BEAMWIDTH)
        .set_range(1, C.BEAMWIDTH_LIMIT)
        .for_search()
        .for_range_search()
        .build(),
    declare("min_k", ParamType.INTEGER)
        .description("the min l_search size used in range search.")
        .set_default(C.DEFAULT_MIN_K)
        .set_range(1, C.INT_MAX)
        .for_range_search()
        .build(),
    declare("max_k", ParamType.INTEGER)
        .description("the max l_search size used in range search.")
        .set_default(C.DEFAULT_MAX_K)
        .set_range(1, C.INT_MAX)
        .for_range_search()
        .build(),
    declare("search_list_and_k_ratio", ParamType.FLOAT)
        .description("the ratio of search list size and k.")
        .set_default(C.DEFAULT_SEARCH_LIST_AND_K_RATIO)
        .set_range(C.SEARCH_LIST_AND_K_RATIO_MIN, C.SEARCH_LIST_AND_K_RATIO_MAX)
        .for_range_search()
        .build(),
    declare("filter_threshold", ParamType.FLOAT)
        .description("the threshold of filter ratio to use PQ + Refine.")
        .set_default(C.DEFAULT_FILTER_THRESHOLD)
        .set_range(C.FILTER_THRESHOLD_MIN, C.FILTER_THRESHOLD_MAX)
        .for_search()
        .build(),
)

DISKANN_SCHEMA: Schema = Schema.merge(BASE_FIELDS, DISKANN_FIELDS, name="diskann")
