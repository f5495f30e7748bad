"""Registries shared by the column family and mutable column family domains.

Each key is declared once here; every domain whose options type carries the
matching field reuses these registries in memtable, compaction, misc order.
"""

from __future__ import annotations

from functools import partial

from ..parsing import (
    parse_boolean,
    parse_colon_list,
    parse_double,
    parse_int,
    parse_size_t,
    parse_uint32,
    parse_uint64,
)
from .bindings import FieldBinding, OptionRegistry, bind

MEMTABLE_OPTIONS = OptionRegistry(
    "memtable",
    {
        **bind(
            parse_size_t,
            "write_buffer_size",
            "arena_block_size",
            "memtable_prefix_bloom_huge_page_tlb_size",
            "max_successive_merges",
            "inplace_update_num_locks",
        ),
        **bind(parse_uint32, "memtable_prefix_bloom_bits", "memtable_prefix_bloom_probes"),
        **bind(parse_boolean, "filter_deletes"),
        **bind(parse_int, "max_write_buffer_number"),
    },
)

COMPACTION_OPTIONS = OptionRegistry(
    "compaction",
    {
        **bind(parse_boolean, "disable_auto_compactions", "verify_checksums_in_compaction"),
        **bind(parse_double, "soft_rate_limit", "hard_rate_limit"),
        **bind(
            parse_int,
            "level0_file_num_compaction_trigger",
            "level0_slowdown_writes_trigger",
            "level0_stop_writes_trigger",
            "max_grandparent_overlap_factor",
            "expanded_compaction_factor",
            "source_compaction_factor",
            "target_file_size_base",
            "target_file_size_multiplier",
            "max_bytes_for_level_multiplier",
            "max_mem_compaction_level",
        ),
        **bind(parse_uint64, "max_bytes_for_level_base"),
        "max_bytes_for_level_multiplier_additional": FieldBinding(
            "max_bytes_for_level_multiplier_additional",
            partial(parse_colon_list, element=parse_int),
        ),
    },
)

MISC_OPTIONS = OptionRegistry(
    "misc",
    bind(parse_uint64, "max_sequential_skip_in_iterations"),
)

SHARED_REGISTRIES = (MEMTABLE_OPTIONS, COMPACTION_OPTIONS, MISC_OPTIONS)
