"""In-place quicksort over a slice of a list, ordered by an integer key."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any


def quicksort(
    data: MutableSequence[Any],
    key: Callable[[Any], int] | None = None,
    start: int = 0,
    end: int | None = None,
) -> None:
    """Sort ``data[start:end + 1]`` in place by ``key``; ``end`` is inclusive."""
    if end is None:
        end = len(data) - 1
    if start > end:
        return
    if start < 0 or end >= len(data):
        raise IndexError("sort range out of bounds")

    pending = [(start, end)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = _sort_key(key, data[(low + high + 1) // 2])
        left, right = low, high
        while left <= right:
            while _sort_key(key, data[left]) < pivot:
                left += 1
            while _sort_key(key, data[right]) > pivot:
                right -= 1
            if left <= right:
                data[left], data[right] = data[right], data[left]
                left += 1
                right -= 1
        pending.append((low, right))
        pending.append((left, high))


def _sort_key(key: Callable[[Any], int] | None, item: Any) -> Any:
    """Return the value ``item`` is ordered by: ``key(item)``, or the item itself."""
    if key is None:
        return item
    return key(item)