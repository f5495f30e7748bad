"""Closed enumerations accepted by option strings.

Each member's value is the exact, case-sensitive symbol used in option strings.
"""

from __future__ import annotations

from enum import Enum


class CompressionType(Enum):
    NO_COMPRESSION = "kNoCompression"
    SNAPPY = "kSnappyCompression"
    ZLIB = "kZlibCompression"
    BZIP2 = "kBZip2Compression"
    LZ4 = "kLZ4Compression"
    LZ4HC = "kLZ4HCCompression"


class IndexType(Enum):
    BINARY_SEARCH = "kBinarySearch"
    HASH_SEARCH = "kHashSearch"


class ChecksumType(Enum):
    NO_CHECKSUM = "kNoChecksum"
    CRC32C = "kCRC32c"
    XXHASH = "kxxHash"


class CompactionStyle(Enum):
    LEVEL = "kCompactionStyleLevel"
    UNIVERSAL = "kCompactionStyleUniversal"
    FIFO = "kCompactionStyleFIFO"
