"""Compact, insertion-ordered hash table with a sparse index over dense entries."""

from __future__ import annotations

from array import array
from collections.abc import Callable, Iterator
from typing import Any

from .djbx33a import djbx33a
from .entry import Entry, EntryManager, entry_order
from .linked_list import IntLinkedList
from .quicksort import quicksort
from .util import IndexType, index_width

PERTURB_SHIFT = 5

_TYPECODES = {1: "b", 2: "h", 4: "i", 8: "q"}


class TableFullError(RuntimeError):
    """Raised when the table has no room left for a new key."""


class Table:
    """Hash table whose sparse slots hold small integers pointing into dense entries.

    The sparse index has twice as many slots as there are entries, and each
    slot is only as wide as the entry count requires.
    """

    def __init__(
        self,
        length: int = 8,
        load_factor: float = 0.75,
        hash_function: Callable[[Any], int] = djbx33a,
    ) -> None:
        if length < 1:
            raise ValueError("length must be at least 1")
        self.load_factor = load_factor
        self.hash_function = hash_function
        self._reset(length)

    def _reset(self, length: int) -> None:
        self.length = length
        self._entries = EntryManager(length)
        self._removed = IntLinkedList()
        width = index_width(length)
        if array(_TYPECODES[width]).itemsize != width:
            width = 8
        self._indices = array(_TYPECODES[width], [IndexType.UNUSED] * (length * 2))

    def __len__(self) -> int:
        return self._entries.used_length - len(self._removed)

    def __contains__(self, key: Any) -> bool:
        try:
            return self._probe(key)[1] is not None
        except TableFullError:
            return False

    def __iter__(self) -> Iterator[Any]:
        for entry in self._live_entries():
            yield entry.key

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in dense storage order."""
        for entry in self._live_entries():
            yield entry.key, entry.value

    def get(self, key: Any) -> Any:
        """Return the value stored under ``key``; raise KeyError if it is absent."""
        _, dense = self._probe(key)
        if dense is None:
            raise KeyError(key)
        return self._entries.entries[dense].value

    def update(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any value already there."""
        slot, dense = self._probe(key)
        if dense is not None:
            self._entries.entries[dense].value = value
            return
        manager = self._entries
        if len(self._removed):
            dense = self._removed.pop()
        elif manager.used_length < manager.length:
            dense = manager.used_length
            manager.used_length += 1
        else:
            raise TableFullError("no free entry slot; resize the table")
        manager.entries[dense] = Entry(manager.global_insertion_counter, key, value)
        manager.global_insertion_counter += 1
        self._indices[slot] = dense

    def delete(self, key: Any) -> None:
        """Remove ``key``; raise KeyError if it is absent."""
        slot, dense = self._probe(key)
        if dense is None:
            raise KeyError(key)
        self._entries.entries[dense] = None
        self._removed.push(dense)
        self._indices[slot] = IndexType.DUMMY

    def resize(self) -> None:
        """Double the capacity, reinserting the live entries in insertion order."""
        live = list(self._live_entries())
        quicksort(live, entry_order)
        self._reset(self.length * 2)
        for entry in live:
            self.update(entry.key, entry.value)

    def _live_entries(self) -> Iterator[Entry]:
        manager = self._entries
        for entry in manager.entries[: manager.used_length]:
            if entry is not None:
                yield entry

    def _probe(self, key: Any) -> tuple[int, int | None]:
        """Return the sparse slot for ``key`` and its dense index, or None if absent."""
        slots = len(self._indices)
        mask = slots - 1
        perturb = self.hash_function(key)
        i = perturb & mask
        first_free: int | None = None
        for _ in range(slots):
            dense = self._indices[i]
            if dense == IndexType.UNUSED:
                return (i if first_free is None else first_free), None
            if dense == IndexType.DUMMY:
                if first_free is None:
                    first_free = i
            elif self._entries.entries[dense].key == key:
                return i, dense
            perturb >>= PERTURB_SHIFT
            i = mask & (i * 5 + perturb + 1)
        if first_free is not None:
            return first_free, None
        raise TableFullError("table is full and key is not in it")