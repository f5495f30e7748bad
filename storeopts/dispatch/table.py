"""Registry and dispatcher for block-based table options."""

from __future__ import annotations

from functools import partial

from ..models.components import new_bloom_filter_policy, new_lru_cache
from ..models.options import BlockBasedTableOptions
from ..parsing import (
    parse_boolean,
    parse_checksum_type,
    parse_index_type,
    parse_int,
    parse_size_t,
    parse_tagged,
)
from .bindings import FieldBinding, OptionRegistry, bind
from .dispatcher import Dispatcher

BLOOM_FILTER_TAG = "bloomfilter:"

TABLE_OPTIONS = OptionRegistry(
    "table",
    {
        **bind(
            parse_boolean,
            "cache_index_and_filter_blocks",
            "hash_index_allow_collision",
            "no_block_cache",
            "whole_key_filtering",
        ),
        **bind(parse_index_type, "index_type"),
        **bind(parse_checksum_type, "checksum"),
        **bind(parse_size_t, "block_size"),
        **bind(parse_int, "block_size_deviation", "block_restart_interval"),
        "block_cache": FieldBinding("block_cache", parse_size_t, build=new_lru_cache),
        "block_cache_compressed": FieldBinding(
            "block_cache_compressed", parse_size_t, build=new_lru_cache
        ),
        # bloomfilter:<bits_per_key>:<use_block_based_builder>
        "filter_policy": FieldBinding(
            "filter_policy",
            partial(parse_tagged, tag=BLOOM_FILTER_TAG, coercers=(parse_int, parse_boolean)),
            build=lambda fields: new_bloom_filter_policy(*fields),
        ),
    },
)

TABLE_DISPATCHER: Dispatcher[BlockBasedTableOptions] = Dispatcher(
    domain="table",
    registries=(TABLE_OPTIONS,),
)
