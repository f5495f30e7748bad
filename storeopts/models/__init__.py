"""Typed option models for the storage engine.

This package contains the configuration dataclasses, enumerations, auxiliary
component records, and result records shared by the parsing modules.
"""

from .components import (
    BloomFilterPolicy,
    FixedPrefixTransform,
    LRUCache,
    new_bloom_filter_policy,
    new_fixed_prefix_transform,
    new_lru_cache,
)
from .enums import ChecksumType, CompactionStyle, CompressionType, IndexType
from .options import (
    UINT64_MAX,
    BlockBasedTableFactory,
    BlockBasedTableOptions,
    ColumnFamilyOptions,
    CompactionOptionsFIFO,
    CompactionOptionsUniversal,
    CompressionOptions,
    DBOptions,
    MutableCFOptions,
    new_block_based_table_factory,
)
from .results import CoercionFailure, OptionsResult

__all__ = [
    "BlockBasedTableFactory",
    "BlockBasedTableOptions",
    "BloomFilterPolicy",
    "ChecksumType",
    "CoercionFailure",
    "ColumnFamilyOptions",
    "CompactionOptionsFIFO",
    "CompactionOptionsUniversal",
    "CompactionStyle",
    "CompressionOptions",
    "CompressionType",
    "DBOptions",
    "FixedPrefixTransform",
    "IndexType",
    "LRUCache",
    "MutableCFOptions",
    "OptionsResult",
    "UINT64_MAX",
    "new_block_based_table_factory",
    "new_bloom_filter_policy",
    "new_fixed_prefix_transform",
    "new_lru_cache",
]
