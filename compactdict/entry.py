"""Dense entry storage for the compact hash table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class Entry:
    """A key/value pair tagged with the order in which it was first stored."""

    insert_counter: int
    key: Any
    value: Any


class EntryManager:
    """Fixed number of entry slots, filled in insertion order."""

    def __init__(self, length: int) -> None:
        if length < 0:
            raise ValueError("length must be non-negative")
        self.length = length
        self.used_length = 0
        self.global_insertion_counter = 0
        self.entries: list[Entry | None] = [None] * length

    def __len__(self) -> int:
        return self.length

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(length={self.length}, "
            f"used_length={self.used_length})"
        )


def entry_order(entry: Entry) -> int:
    """Sort key putting entries back in insertion order."""
    return entry.insert_counter