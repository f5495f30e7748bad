"""Registry and dispatcher for engine-wide (DB) options.

String keys keep the engine's spelling; a few map to snake_case fields,
e.g. `WAL_ttl_seconds` to `wal_ttl_seconds`.
"""

from __future__ import annotations

from ..models.options import DBOptions
from ..parsing import parse_boolean, parse_int, parse_size_t, parse_string, parse_uint32, parse_uint64
from .bindings import FieldBinding, OptionRegistry, bind
from .dispatcher import Dispatcher

DB_OPTIONS = OptionRegistry(
    "db",
    {
        **bind(
            parse_boolean,
            "create_if_missing",
            "create_missing_column_families",
            "error_if_exists",
            "paranoid_checks",
            "disable_data_sync",
            "use_fsync",
            "allow_os_buffer",
            "allow_mmap_reads",
            "allow_mmap_writes",
            "is_fd_close_on_exec",
            "skip_log_error_on_recovery",
            "advise_random_on_open",
            "use_adaptive_mutex",
        ),
        **bind(
            parse_int,
            "max_open_files",
            "max_background_compactions",
            "max_background_flushes",
            "table_cache_numshardbits",
            "table_cache_remove_scan_count_limit",
        ),
        **bind(
            parse_uint64,
            "max_total_wal_size",
            "delete_obsolete_files_period_micros",
            "max_manifest_file_size",
            "db_write_buffer_size",
            "bytes_per_sync",
        ),
        **bind(
            parse_size_t,
            "max_log_file_size",
            "log_file_time_to_roll",
            "keep_log_file_num",
            "manifest_preallocation_size",
        ),
        **bind(parse_uint32, "stats_dump_period_sec"),
        **bind(parse_string, "db_log_dir", "wal_dir"),
        "WAL_ttl_seconds": FieldBinding("wal_ttl_seconds", parse_uint64),
        "WAL_size_limit_MB": FieldBinding("wal_size_limit_mb", parse_uint64),
    },
)

DB_UNSUPPORTED = frozenset({"db_paths"})

DB_DISPATCHER: Dispatcher[DBOptions] = Dispatcher(
    domain="db",
    registries=(DB_OPTIONS,),
    unsupported=DB_UNSUPPORTED,
)
