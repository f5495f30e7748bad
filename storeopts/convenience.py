"""Public entry points for applying option strings to options objects.

Each `apply_*` function accepts either a raw option string or an already
tokenized map, plus a base options object, and returns an `OptionsResult`
carrying a new options object or a categorized error. Bases are never mutated.
"""

from __future__ import annotations

from collections.abc import Mapping

from .dispatch import (
    COLUMN_FAMILY_DISPATCHER,
    DB_DISPATCHER,
    MUTABLE_DISPATCHER,
    TABLE_DISPATCHER,
)
from .models.options import (
    BlockBasedTableOptions,
    ColumnFamilyOptions,
    DBOptions,
    MutableCFOptions,
)
from .models.results import OptionsResult
from .tokenizer import RawOptionMap, parse_map

OptionsInput = str | Mapping[str, str]

__all__ = [
    "OptionsInput",
    "RawOptionMap",
    "apply_column_family_options",
    "apply_db_options",
    "apply_engine_options",
    "apply_mutable_options",
    "apply_namespace_options",
    "apply_table_options",
    "parse_map",
]


def apply_db_options(base: DBOptions, options: OptionsInput) -> OptionsResult[DBOptions]:
    """Apply engine-wide options, e.g. `create_if_missing=true;max_open_files=-1`."""

    return DB_DISPATCHER.apply(base, options)


def apply_column_family_options(
    base: ColumnFamilyOptions, options: OptionsInput
) -> OptionsResult[ColumnFamilyOptions]:
    """Apply column family options, including a nested `block_based_table_factory={...}`."""

    return COLUMN_FAMILY_DISPATCHER.apply(base, options)


def apply_table_options(
    base: BlockBasedTableOptions, options: OptionsInput
) -> OptionsResult[BlockBasedTableOptions]:
    """Apply block-based table options, e.g. `block_size=8k;filter_policy=bloomfilter:10:true`."""

    return TABLE_DISPATCHER.apply(base, options)


def apply_mutable_options(
    base: MutableCFOptions, options: OptionsInput
) -> OptionsResult[MutableCFOptions]:
    """Apply options that can change on a live column family.

    Only memtable, compaction, and misc keys are accepted; any other key fails
    as an unsupported dynamic option.
    """

    return MUTABLE_DISPATCHER.apply(base, options)


apply_engine_options = apply_db_options
apply_namespace_options = apply_column_family_options
