"""Top-level package for storeopts.

This package turns `key=value;...` option strings into typed storage engine
options objects. The main entry points are `parse_map` and the `apply_*`
functions in `storeopts.convenience`.
"""

from loguru import logger

from .convenience import (
    apply_column_family_options,
    apply_db_options,
    apply_engine_options,
    apply_mutable_options,
    apply_namespace_options,
    apply_table_options,
    parse_map,
)
from .errors import (
    MalformedGrammarError,
    OptionsError,
    UnrecognizedKeyError,
    UnsupportedKeyError,
    ValueParseError,
)
from .models import (
    BlockBasedTableOptions,
    ColumnFamilyOptions,
    DBOptions,
    MutableCFOptions,
    OptionsResult,
)

logger.disable(__name__)

__all__ = [
    "BlockBasedTableOptions",
    "ColumnFamilyOptions",
    "DBOptions",
    "MalformedGrammarError",
    "MutableCFOptions",
    "OptionsError",
    "OptionsResult",
    "UnrecognizedKeyError",
    "UnsupportedKeyError",
    "ValueParseError",
    "__version__",
    "apply_column_family_options",
    "apply_db_options",
    "apply_engine_options",
    "apply_mutable_options",
    "apply_namespace_options",
    "apply_table_options",
    "parse_map",
]

__version__ = "0.1.0"
