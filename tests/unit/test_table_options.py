"""Unit tests for block-based table option dispatch."""

from __future__ import annotations

import pytest

from storeopts import apply_table_options
from storeopts.errors import UnrecognizedKeyError, ValueParseError
from storeopts.models import (
    BlockBasedTableOptions,
    BloomFilterPolicy,
    ChecksumType,
    IndexType,
    LRUCache,
)


def test_apply_table_options_sets_every_supported_key() -> None:
    """All table keys should coerce and land on their fields."""

    result = apply_table_options(
        BlockBasedTableOptions(),
        "cache_index_and_filter_blocks=1;index_type=kHashSearch;"
        "hash_index_allow_collision=false;checksum=kxxHash;no_block_cache=1;"
        "block_cache=1M;block_cache_compressed=1k;block_size=1024;"
        "block_size_deviation=8;block_restart_interval=4;"
        "filter_policy=bloomfilter:4:true;whole_key_filtering=0",
    )

    assert result.ok
    options = result.unwrap()
    assert options.cache_index_and_filter_blocks is True
    assert options.index_type is IndexType.HASH_SEARCH
    assert options.hash_index_allow_collision is False
    assert options.checksum is ChecksumType.XXHASH
    assert options.no_block_cache is True
    assert options.block_cache == LRUCache(capacity=1 << 20)
    assert options.block_cache_compressed == LRUCache(capacity=1024)
    assert options.block_size == 1024
    assert options.block_size_deviation == 8
    assert options.block_restart_interval == 4
    assert options.filter_policy == BloomFilterPolicy(bits_per_key=4, use_block_based_builder=True)
    assert options.whole_key_filtering is False


def test_apply_table_options_keeps_unmentioned_fields_from_base() -> None:
    """Only mentioned keys should change; the base object stays untouched."""

    base = BlockBasedTableOptions(block_size=16384, checksum=ChecksumType.NO_CHECKSUM)

    options = apply_table_options(base, "block_restart_interval=8").unwrap()

    assert options is not base
    assert options.block_restart_interval == 8
    assert options.block_size == 16384
    assert options.checksum is ChecksumType.NO_CHECKSUM
    assert base.block_restart_interval == 16


def test_apply_table_options_accepts_tokenized_map() -> None:
    """A pre-tokenized mapping should be applied without re-tokenizing."""

    options = apply_table_options(
        BlockBasedTableOptions(), {"block_size": "8k", "filter_policy": "bloomfilter:10:false"}
    ).unwrap()

    assert options.block_size == 8192
    assert options.filter_policy == BloomFilterPolicy(10, use_block_based_builder=False)


@pytest.mark.parametrize(
    "value",
    ["bloomfilter:10", "bloomfilter:10:true:x", "cuckoo:10:true", "bloomfilter:ten:true"],
)
def test_apply_table_options_rejects_bad_filter_policy(value: str) -> None:
    """Malformed bloom filter payloads should be value-parse errors for `filter_policy`."""

    result = apply_table_options(BlockBasedTableOptions(), {"filter_policy": value})

    assert isinstance(result.error, ValueParseError)
    assert result.error.key == "filter_policy"
    assert result.error.detail.startswith("error parsing filter_policy:")


def test_apply_table_options_rejects_unknown_enum_symbol() -> None:
    """Unknown checksum names should fail naming the key and the cause."""

    result = apply_table_options(BlockBasedTableOptions(), "checksum=kMD5")

    assert isinstance(result.error, ValueParseError)
    assert result.error.detail == "error parsing checksum: unknown checksum type: kMD5"


def test_apply_table_options_rejects_column_family_keys() -> None:
    """Keys from other domains should be unrecognized at table level."""

    result = apply_table_options(BlockBasedTableOptions(), "write_buffer_size=1")

    assert isinstance(result.error, UnrecognizedKeyError)
    assert result.error.key == "write_buffer_size"
    assert result.error.detail == "unrecognized option: write_buffer_size"
