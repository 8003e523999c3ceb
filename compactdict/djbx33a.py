"""The DJBX33A string hash used by the table."""

from __future__ import annotations

DJBX33A_SUFFIX = 0x4E2A3373C
DJBX33A_LENGTH = 10

_UINT64_MASK = (1 << 64) - 1


def djbx33a(key: str | bytes) -> int:
    """Hash ``key`` to an unsigned 64-bit integer.

    Only keys of at most ``DJBX33A_LENGTH`` bytes have their contents mixed in;
    longer keys hash by length alone. The empty key hashes to 0.
    """
    data = key.encode("utf-8") if isinstance(key, str) else bytes(key)
    length = len(data)
    if not length:
        return 0
    value = 5381
    if length <= DJBX33A_LENGTH:
        for byte in data:
            value = ((value << 5) + value + byte) & _UINT64_MASK
    value ^= length
    value ^= DJBX33A_SUFFIX
    return value & _UINT64_MASK