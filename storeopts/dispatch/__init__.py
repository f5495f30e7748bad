"""Per-domain option registries and dispatchers."""

from .bindings import Binding, FieldBinding, OptionRegistry
from .column_family import COLUMN_FAMILY_DISPATCHER, MUTABLE_DISPATCHER, NestedTableBinding
from .db import DB_DISPATCHER
from .dispatcher import Dispatcher
from .shared import COMPACTION_OPTIONS, MEMTABLE_OPTIONS, MISC_OPTIONS
from .table import TABLE_DISPATCHER

__all__ = [
    "Binding",
    "COLUMN_FAMILY_DISPATCHER",
    "COMPACTION_OPTIONS",
    "DB_DISPATCHER",
    "Dispatcher",
    "FieldBinding",
    "MEMTABLE_OPTIONS",
    "MISC_OPTIONS",
    "MUTABLE_DISPATCHER",
    "NestedTableBinding",
    "OptionRegistry",
    "TABLE_DISPATCHER",
]
