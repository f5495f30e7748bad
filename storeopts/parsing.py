"""Value coercers converting raw option tokens into typed values.

Every coercer takes one raw string and returns either the typed value or a
`CoercionFailure`; none of them raise for malformed input.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from enum import Enum
from typing import Any, TypeVar

from .models.enums import ChecksumType, CompactionStyle, CompressionType, IndexType
from .models.options import UINT64_MAX
from .models.results import Coerced, CoercionFailure

E = TypeVar("E", bound=Enum)

Coercer = Callable[[str], Coerced[Any]]

UINT32_MAX = (1 << 32) - 1
INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1

# C `isspace` set; unicode whitespace is not trimmed.
WHITESPACE = " \t\n\v\f\r"

_TRUE_BOOLEAN_TOKENS = frozenset({"true", "1"})
_FALSE_BOOLEAN_TOKENS = frozenset({"false", "0"})

_UNSIGNED_NUMERAL = re.compile(r"[ \t\n\v\f\r]*\+?([0-9]+)")
_SIGNED_NUMERAL = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]+)")
_FLOATING_NUMERAL = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)

_UNSIGNED_SUFFIX_SHIFTS = {"k": 10, "m": 20, "g": 30, "t": 40}
_SIGNED_SUFFIX_SHIFTS = {"k": 10, "m": 20, "g": 30}

# Digit counts of UINT64_MAX and INT32_MIN; longer numerals cannot fit.
_UINT64_DIGITS = 20
_INT32_DIGITS = 10


def trim(value: str) -> str:
    """Strip C-locale whitespace from both ends; blank input yields `""`."""

    return value.strip(WHITESPACE)


def _suffix_shift(value: str, numeral_end: int, shifts: dict[str, int]) -> int:
    """Return the shift for the unit suffix following a numeral, if any."""

    if numeral_end >= len(value):
        return 0
    return shifts.get(value[numeral_end].lower(), 0)


def parse_boolean(value: str) -> Coerced[bool]:
    """Accept exactly `true`/`1` or `false`/`0`."""

    if value in _TRUE_BOOLEAN_TOKENS:
        return True
    if value in _FALSE_BOOLEAN_TOKENS:
        return False
    return CoercionFailure(f"invalid boolean value: {value!r} (expected true/false/1/0)")


def parse_uint64(value: str) -> Coerced[int]:
    """Parse an unsigned 64-bit magnitude with optional `k/m/g/t` unit suffix.

    The numeral is read up to the first non-digit; only that first trailing
    character is inspected as a unit suffix, anything after it is ignored.
    """

    match = _UNSIGNED_NUMERAL.match(value)
    if match is None:
        return CoercionFailure(f"malformed unsigned integer: {value!r}")
    digits = match.group(1).lstrip("0") or "0"
    if len(digits) > _UINT64_DIGITS:
        return CoercionFailure(f"value out of 64-bit range: {value}")
    number = int(digits)
    number <<= _suffix_shift(value, match.end(), _UNSIGNED_SUFFIX_SHIFTS)
    if number > UINT64_MAX:
        return CoercionFailure(f"value out of 64-bit range: {value}")
    return number


def parse_size_t(value: str) -> Coerced[int]:
    """Parse a size value; sizes share the unsigned 64-bit rules."""

    return parse_uint64(value)


def parse_uint32(value: str) -> Coerced[int]:
    """Parse an unsigned value that must also fit in 32 bits."""

    number = parse_uint64(value)
    if isinstance(number, CoercionFailure):
        return number
    if number > UINT32_MAX:
        return CoercionFailure(f"value out of 32-bit range: {value}")
    return number


def parse_int(value: str) -> Coerced[int]:
    """Parse a signed 32-bit integer with optional `k/m/g` unit suffix."""

    match = _SIGNED_NUMERAL.match(value)
    if match is None:
        return CoercionFailure(f"malformed integer: {value!r}")
    sign, digits = match.group(1), match.group(2).lstrip("0") or "0"
    if len(digits) > _INT32_DIGITS:
        return CoercionFailure(f"value out of int range: {value}")
    number = -int(digits) if sign == "-" else int(digits)
    if not INT32_MIN <= number <= INT32_MAX:
        return CoercionFailure(f"value out of int range: {value}")
    number <<= _suffix_shift(value, match.end(), _SIGNED_SUFFIX_SHIFTS)
    if not INT32_MIN <= number <= INT32_MAX:
        return CoercionFailure(f"value out of int range: {value}")
    return number


def parse_double(value: str) -> Coerced[float]:
    """Parse the leading decimal, exponential, `inf` or `nan` numeral."""

    match = _FLOATING_NUMERAL.match(value)
    if match is None:
        return CoercionFailure(f"malformed floating point value: {value!r}")
    return float(match.group(1))


def parse_string(value: str) -> Coerced[str]:
    """Return the raw value unchanged."""

    return value


def _parse_enum(value: str, enum_type: type[E], kind: str) -> Coerced[E]:
    """Match `value` against the symbol of each member of `enum_type`."""

    for member in enum_type:
        if member.value == value:
            return member
    return CoercionFailure(f"unknown {kind}: {value}")


def parse_compression_type(value: str) -> Coerced[CompressionType]:
    """Map a compression symbol such as `kSnappyCompression`."""

    return _parse_enum(value, CompressionType, "compression type")


def parse_index_type(value: str) -> Coerced[IndexType]:
    """Map an index type symbol such as `kBinarySearch`."""

    return _parse_enum(value, IndexType, "index type")


def parse_checksum_type(value: str) -> Coerced[ChecksumType]:
    """Map a checksum symbol such as `kCRC32c`."""

    return _parse_enum(value, ChecksumType, "checksum type")


def parse_compaction_style(value: str) -> Coerced[CompactionStyle]:
    """Map a compaction style symbol such as `kCompactionStyleLevel`."""

    return _parse_enum(value, CompactionStyle, "compaction style")


def parse_colon_list(value: str, element: Coercer) -> Coerced[tuple[Any, ...]]:
    """Coerce every `:`-separated segment of `value` with `element`.

    Returns:
        Tuple of coerced segments in input order, or the first segment failure.
    """

    items: list[Any] = []
    for segment in value.split(":"):
        item = element(trim(segment))
        if isinstance(item, CoercionFailure):
            return item
        items.append(item)
    return tuple(items)


def parse_fields(value: str, coercers: Sequence[Coercer]) -> Coerced[tuple[Any, ...]]:
    """Coerce exactly `len(coercers)` `:`-separated positional fields."""

    segments = value.split(":")
    if len(segments) != len(coercers):
        return CoercionFailure(
            f"invalid format: expected {len(coercers)} `:`-separated field(s), "
            f"got {len(segments)}: {value}"
        )
    parsed: list[Any] = []
    for segment, coercer in zip(segments, coercers):
        item = coercer(trim(segment))
        if isinstance(item, CoercionFailure):
            return item
        parsed.append(item)
    return tuple(parsed)


def parse_tagged(value: str, tag: str, coercers: Sequence[Coercer]) -> Coerced[tuple[Any, ...]]:
    """Coerce a `tag:field1:field2...` payload after checking its literal tag.

    Args:
        value: Raw option value.
        tag: Required literal prefix, including its trailing `:`.
        coercers: One coercer per positional field following the tag.
    """

    if not value.startswith(tag):
        return CoercionFailure(f"invalid format: expected `{tag}` prefix: {value}")
    return parse_fields(value[len(tag):], coercers)
