"""Registries and dispatchers for column family options.

Responsibilities:
- Declare the keys only full column family options accept, including the
  nested `block_based_table_factory={...}` block.
- Assemble the column family and mutable column family dispatchers from the
  shared registries.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Any

from ..models.components import new_fixed_prefix_transform
from ..models.options import (
    BlockBasedTableOptions,
    ColumnFamilyOptions,
    CompactionOptionsFIFO,
    CompressionOptions,
    MutableCFOptions,
    new_block_based_table_factory,
)
from ..parsing import (
    parse_boolean,
    parse_colon_list,
    parse_compaction_style,
    parse_compression_type,
    parse_fields,
    parse_int,
    parse_tagged,
    parse_uint32,
    parse_uint64,
)
from .bindings import ApplyOutcome, FieldBinding, OptionRegistry, bind
from .dispatcher import Dispatcher
from .shared import SHARED_REGISTRIES
from .table import TABLE_DISPATCHER

FIXED_PREFIX_TAG = "fixed:"


@dataclass(frozen=True, slots=True)
class NestedTableBinding:
    """Parse a nested block as table options and install a table factory.

    The nested block is applied over stock table options, not over the table
    options of the current factory. Errors from the nested parse propagate
    unchanged.
    """

    attribute: str

    def apply(self, target: Any, raw_value: str) -> ApplyOutcome:
        result = TABLE_DISPATCHER.apply(BlockBasedTableOptions(), raw_value)
        if not result.ok:
            return result.error
        setattr(target, self.attribute, new_block_based_table_factory(result.unwrap()))
        return None


COLUMN_FAMILY_OPTIONS = OptionRegistry(
    "column_family",
    {
        "block_based_table_factory": NestedTableBinding("table_factory"),
        **bind(parse_int, "min_write_buffer_number_to_merge", "num_levels"),
        **bind(parse_compression_type, "compression"),
        "compression_per_level": FieldBinding(
            "compression_per_level",
            partial(parse_colon_list, element=parse_compression_type),
        ),
        # <window_bits>:<level>:<strategy>
        "compression_opts": FieldBinding(
            "compression_opts",
            partial(parse_fields, coercers=(parse_int, parse_int, parse_int)),
            build=lambda fields: CompressionOptions(*fields),
        ),
        **bind(
            parse_boolean,
            "purge_redundant_kvs_while_flush",
            "inplace_update_support",
        ),
        **bind(parse_compaction_style, "compaction_style"),
        "compaction_options_fifo": FieldBinding(
            "compaction_options_fifo",
            parse_uint64,
            build=lambda size: CompactionOptionsFIFO(max_table_files_size=size),
        ),
        **bind(parse_uint32, "bloom_locality", "min_partial_merge_operands"),
        "prefix_extractor": FieldBinding(
            "prefix_extractor",
            partial(parse_tagged, tag=FIXED_PREFIX_TAG, coercers=(parse_int,)),
            build=lambda fields: new_fixed_prefix_transform(*fields),
        ),
    },
)

COLUMN_FAMILY_UNSUPPORTED = frozenset({"compaction_options_universal"})

COLUMN_FAMILY_DISPATCHER: Dispatcher[ColumnFamilyOptions] = Dispatcher(
    domain="cf",
    registries=(*SHARED_REGISTRIES, COLUMN_FAMILY_OPTIONS),
    unsupported=COLUMN_FAMILY_UNSUPPORTED,
)

MUTABLE_DISPATCHER: Dispatcher[MutableCFOptions] = Dispatcher(
    domain="mutable",
    registries=SHARED_REGISTRIES,
    unrecognized_label="unsupported dynamic option",
)
