"""Typed configuration objects for the storage engine.

Responsibilities:
- Define engine-wide, column family, mutable column family, and block-based
  table options as dataclasses with the engine's stock defaults.
- Keep nested values immutable (tuples, frozen records) so that a shallow copy
  of an options object never shares mutable state with its source.

Key types:
- `DBOptions`: engine-wide settings.
- `MutableCFOptions`: column family settings that may change on a live engine.
- `ColumnFamilyOptions`: full per-column-family settings.
- `BlockBasedTableOptions`: settings of the block-based table format.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields

from .components import BloomFilterPolicy, FixedPrefixTransform, LRUCache
from .enums import ChecksumType, CompactionStyle, CompressionType, IndexType

UINT64_MAX = (1 << 64) - 1

_DEFAULT_NUM_LEVELS = 7


@dataclass(frozen=True, slots=True)
class CompressionOptions:
    """Tuning passed to the compression library.

    Attributes:
        window_bits: Compression window size exponent (negative for raw deflate).
        level: Compression level, `-1` selecting the library default.
        strategy: Library-specific compression strategy.
    """

    window_bits: int = -14
    level: int = -1
    strategy: int = 0


@dataclass(frozen=True, slots=True)
class CompactionOptionsFIFO:
    """FIFO compaction settings; oldest files are dropped past the size cap."""

    max_table_files_size: int = 1 << 30


@dataclass(frozen=True, slots=True)
class CompactionOptionsUniversal:
    """Universal compaction settings."""

    size_ratio: int = 1
    min_merge_width: int = 2
    max_merge_width: int = 0xFFFFFFFF
    max_size_amplification_percent: int = 200
    compression_size_percent: int = -1


@dataclass(slots=True)
class BlockBasedTableOptions:
    """Block-based table format settings.

    Attributes:
        cache_index_and_filter_blocks: Keep index/filter blocks in the block cache.
        index_type: Index structure used to locate data blocks.
        hash_index_allow_collision: Allow hash collisions in the hash index.
        checksum: Checksum written for every block.
        no_block_cache: Disable the uncompressed block cache.
        block_cache: Cache for uncompressed blocks, `None` for engine default.
        block_cache_compressed: Cache for compressed blocks.
        block_size: Approximate user data packed per block, in bytes.
        block_size_deviation: Percentage of free space below which a block closes.
        block_restart_interval: Keys between restart points for delta encoding.
        filter_policy: Filter policy used to reduce disk reads.
        whole_key_filtering: Place whole keys in the filter.
    """

    cache_index_and_filter_blocks: bool = False
    index_type: IndexType = IndexType.BINARY_SEARCH
    hash_index_allow_collision: bool = True
    checksum: ChecksumType = ChecksumType.CRC32C
    no_block_cache: bool = False
    block_cache: LRUCache | None = None
    block_cache_compressed: LRUCache | None = None
    block_size: int = 4 * 1024
    block_size_deviation: int = 10
    block_restart_interval: int = 16
    filter_policy: BloomFilterPolicy | None = None
    whole_key_filtering: bool = True


@dataclass(frozen=True, slots=True)
class BlockBasedTableFactory:
    """Table factory producing block-based tables from `table_options`."""

    table_options: BlockBasedTableOptions = field(default_factory=BlockBasedTableOptions)


def new_block_based_table_factory(
    table_options: BlockBasedTableOptions | None = None,
) -> BlockBasedTableFactory:
    """Wrap table options into a factory, defaulting to stock table options."""

    if table_options is None:
        return BlockBasedTableFactory()
    return BlockBasedTableFactory(table_options=table_options)


@dataclass(slots=True)
class MutableCFOptions:
    """Column family settings that can be changed without reopening the engine."""

    # memtable
    write_buffer_size: int = 4 << 20
    arena_block_size: int = 0
    memtable_prefix_bloom_bits: int = 0
    memtable_prefix_bloom_probes: int = 6
    memtable_prefix_bloom_huge_page_tlb_size: int = 0
    max_successive_merges: int = 0
    filter_deletes: bool = False
    max_write_buffer_number: int = 2
    inplace_update_num_locks: int = 10000

    # compaction
    disable_auto_compactions: bool = False
    soft_rate_limit: float = 0.0
    hard_rate_limit: float = 0.0
    level0_file_num_compaction_trigger: int = 4
    level0_slowdown_writes_trigger: int = 20
    level0_stop_writes_trigger: int = 24
    max_grandparent_overlap_factor: int = 10
    expanded_compaction_factor: int = 25
    source_compaction_factor: int = 1
    target_file_size_base: int = 2 << 20
    target_file_size_multiplier: int = 1
    max_bytes_for_level_base: int = 10 << 20
    max_bytes_for_level_multiplier: int = 10
    max_bytes_for_level_multiplier_additional: tuple[int, ...] = (1,) * _DEFAULT_NUM_LEVELS
    max_mem_compaction_level: int = 2
    verify_checksums_in_compaction: bool = True

    # misc
    max_sequential_skip_in_iterations: int = 8

    @classmethod
    def from_column_family(cls, options: MutableCFOptions) -> MutableCFOptions:
        """Extract the mutable subset from full column family options."""

        return cls(**{item.name: getattr(options, item.name) for item in fields(cls)})


@dataclass(slots=True)
class ColumnFamilyOptions(MutableCFOptions):
    """Per-column-family settings, including the mutable subset."""

    min_write_buffer_number_to_merge: int = 1
    compression: CompressionType = CompressionType.SNAPPY
    compression_per_level: tuple[CompressionType, ...] = ()
    compression_opts: CompressionOptions = field(default_factory=CompressionOptions)
    num_levels: int = _DEFAULT_NUM_LEVELS
    purge_redundant_kvs_while_flush: bool = True
    compaction_style: CompactionStyle = CompactionStyle.LEVEL
    compaction_options_universal: CompactionOptionsUniversal = field(
        default_factory=CompactionOptionsUniversal
    )
    compaction_options_fifo: CompactionOptionsFIFO = field(
        default_factory=CompactionOptionsFIFO
    )
    bloom_locality: int = 0
    min_partial_merge_operands: int = 2
    inplace_update_support: bool = False
    prefix_extractor: FixedPrefixTransform | None = None
    table_factory: BlockBasedTableFactory = field(default_factory=BlockBasedTableFactory)


@dataclass(slots=True)
class DBOptions:
    """Engine-wide settings shared by every column family."""

    create_if_missing: bool = False
    create_missing_column_families: bool = False
    error_if_exists: bool = False
    paranoid_checks: bool = True
    max_open_files: int = 5000
    max_total_wal_size: int = 0
    disable_data_sync: bool = False
    use_fsync: bool = False
    db_paths: tuple[tuple[str, int], ...] = ()
    db_log_dir: str = ""
    wal_dir: str = ""
    delete_obsolete_files_period_micros: int = 6 * 60 * 60 * 1000000
    max_background_compactions: int = 1
    max_background_flushes: int = 1
    max_log_file_size: int = 0
    log_file_time_to_roll: int = 0
    keep_log_file_num: int = 1000
    max_manifest_file_size: int = UINT64_MAX
    table_cache_numshardbits: int = 4
    table_cache_remove_scan_count_limit: int = 16
    wal_ttl_seconds: int = 0
    wal_size_limit_mb: int = 0
    manifest_preallocation_size: int = 4 * 1024 * 1024
    allow_os_buffer: bool = True
    allow_mmap_reads: bool = False
    allow_mmap_writes: bool = False
    is_fd_close_on_exec: bool = True
    skip_log_error_on_recovery: bool = False
    stats_dump_period_sec: int = 3600
    advise_random_on_open: bool = True
    db_write_buffer_size: int = 0
    use_adaptive_mutex: bool = False
    bytes_per_sync: int = 0
