"""Sizing helpers shared by the compact hash table."""

from __future__ import annotations

from enum import IntEnum

_UINT64_MASK = (1 << 64) - 1

# Width in bytes of a sparse index slot, by size index.
_INDEX_WIDTHS = (1, 2, 4, 8)


class IndexType(IntEnum):
    """Sentinel values stored in the sparse index array."""

    UNUSED = -1
    DUMMY = -2
    PENDING = -3


def next_power_of_2(n: int) -> int:
    """Return the smallest power of two that is at least ``n``, in 64-bit arithmetic.

    Zero yields 1; values above 2**63 wrap to 0 as unsigned 64-bit math does.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return 1
    return (1 << (n - 1).bit_length()) & _UINT64_MASK


def size_index(length: int) -> int:
    """Return 0..3 selecting an 8, 16, 32 or 64-bit signed slot able to hold ``length``."""
    if length > 2147483647:
        return 3
    if length > 32767:
        return 2
    if length > 127:
        return 1
    return 0


def index_width(length: int) -> int:
    """Return the number of bytes a sparse index slot needs for ``length`` entries."""
    return _INDEX_WIDTHS[size_index(length)]