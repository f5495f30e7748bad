"""Auxiliary engine components referenced by option values.

Responsibilities:
- Describe caches, filter policies, and prefix extractors as immutable value
  records.
- Provide the factory functions option dispatchers call to build them.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LRUCache:
    """Block cache with least-recently-used eviction.

    Attributes:
        capacity: Cache capacity in bytes.
        num_shard_bits: Number of bits used to shard the cache.
    """

    capacity: int
    num_shard_bits: int = 4


@dataclass(frozen=True, slots=True)
class BloomFilterPolicy:
    """Bloom filter policy attached to block-based tables.

    Attributes:
        bits_per_key: Filter bits allocated per key.
        use_block_based_builder: Build one filter per data block instead of
            one filter per table file.
    """

    bits_per_key: int
    use_block_based_builder: bool = True


@dataclass(frozen=True, slots=True)
class FixedPrefixTransform:
    """Prefix extractor taking the first `prefix_len` bytes of each key."""

    prefix_len: int


def new_lru_cache(capacity: int) -> LRUCache:
    """Build a block cache holding up to `capacity` bytes."""

    return LRUCache(capacity=capacity)


def new_bloom_filter_policy(
    bits_per_key: int, use_block_based_builder: bool = True
) -> BloomFilterPolicy:
    """Build a bloom filter policy with `bits_per_key` bits per key."""

    return BloomFilterPolicy(
        bits_per_key=bits_per_key,
        use_block_based_builder=use_block_based_builder,
    )


def new_fixed_prefix_transform(prefix_len: int) -> FixedPrefixTransform:
    """Build a prefix extractor over the first `prefix_len` bytes."""

    return FixedPrefixTransform(prefix_len=prefix_len)
