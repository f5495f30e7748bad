"""Unit tests for dynamic (mutable) column family option dispatch."""

from __future__ import annotations

from storeopts import apply_mutable_options
from storeopts.errors import UnrecognizedKeyError, ValueParseError
from storeopts.models import ColumnFamilyOptions, MutableCFOptions


def test_apply_mutable_options_sets_shared_keys() -> None:
    """Memtable, compaction, and misc keys should apply to mutable options."""

    options = apply_mutable_options(
        MutableCFOptions(),
        "write_buffer_size=64m;max_write_buffer_number=4;"
        "disable_auto_compactions=true;level0_stop_writes_trigger=36;"
        "max_bytes_for_level_multiplier_additional=1:2:4;"
        "max_sequential_skip_in_iterations=16",
    ).unwrap()

    assert options.write_buffer_size == 64 << 20
    assert options.max_write_buffer_number == 4
    assert options.disable_auto_compactions is True
    assert options.level0_stop_writes_trigger == 36
    assert options.max_bytes_for_level_multiplier_additional == (1, 2, 4)
    assert options.max_sequential_skip_in_iterations == 16


def test_apply_mutable_options_rejects_static_keys_as_dynamic() -> None:
    """Keys that need a reopen should fail as unsupported dynamic options."""

    result = apply_mutable_options(MutableCFOptions(), "compression=kNoCompression")

    assert isinstance(result.error, UnrecognizedKeyError)
    assert result.error.key == "compression"
    assert result.error.detail == "unsupported dynamic option: compression"


def test_apply_mutable_options_reports_value_errors() -> None:
    """Bad values for dynamic keys should name the key."""

    result = apply_mutable_options(MutableCFOptions(), "max_write_buffer_number=many")

    assert isinstance(result.error, ValueParseError)
    assert result.error.key == "max_write_buffer_number"


def test_from_column_family_extracts_mutable_subset() -> None:
    """Mutable options derived from a full set should copy the shared fields."""

    full = ColumnFamilyOptions(write_buffer_size=1 << 26, soft_rate_limit=0.5)

    mutable = MutableCFOptions.from_column_family(full)

    assert type(mutable) is MutableCFOptions
    assert mutable.write_buffer_size == 1 << 26
    assert mutable.soft_rate_limit == 0.5
    assert mutable.max_sequential_skip_in_iterations == full.max_sequential_skip_in_iterations
