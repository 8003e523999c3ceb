"""Doubly linked list of integers that keeps a pointer to its middle node."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class _Node:
    __slots__ = ("previous", "next", "value")

    def __init__(self, value: int, previous: _Node | None = None, next: _Node | None = None) -> None:
        self.value = value
        self.previous = previous
        self.next = next


def _walk(node: _Node, steps: int) -> _Node:
    while steps > 0:
        node = node.next
        steps -= 1
    while steps < 0:
        node = node.previous
        steps += 1
    return node


class IntLinkedList:
    """Linked list that reaches any index from its start, end or centre node."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._start: _Node | None = None
        self._end: _Node | None = None
        self._center: _Node | None = None
        self._size = 0
        for value in values:
            node = _Node(value, self._end)
            if self._end is None:
                self._start = node
            else:
                self._end.next = node
            self._end = node
            self._size += 1
        self._recenter(self._start, 0)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._start
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._end
        while node is not None:
            yield node.value
            node = node.previous

    def __getitem__(self, idx: int) -> int:
        return self._node_at(self._normalize(idx)).value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def center(self) -> int:
        """Return the value at index ceil(len / 2) - 1."""
        if self._center is None:
            raise IndexError("center of empty list")
        return self._center.value

    def push(self, value: int) -> None:
        """Insert ``value`` at the front."""
        old_center, old_idx = self._center, self._center_index()
        node = _Node(value, None, self._start)
        if self._start is None:
            self._end = node
        else:
            self._start.previous = node
        self._start = node
        self._size += 1
        if old_center is None:
            self._recenter(node, 0)
        else:
            self._recenter(old_center, old_idx + 1)

    def pop(self) -> int:
        """Remove and return the first value."""
        if self._start is None:
            raise IndexError("pop from empty list")
        old_center, old_idx = self._center, self._center_index()
        node = self._start
        self._start = node.next
        if self._start is None:
            self._end = None
        else:
            self._start.previous = None
        self._size -= 1
        if old_center is node:
            self._recenter(self._start, 0)
        else:
            self._recenter(old_center, old_idx - 1)
        return node.value

    def append(self, value: int) -> None:
        """Insert ``value`` at the back."""
        old_center, old_idx = self._center, self._center_index()
        node = _Node(value, self._end, None)
        if self._end is None:
            self._start = node
        else:
            self._end.next = node
        self._end = node
        self._size += 1
        if old_center is None:
            self._recenter(node, 0)
        else:
            self._recenter(old_center, old_idx)

    def remove_tail(self) -> int:
        """Remove and return the last value."""
        if self._end is None:
            raise IndexError("remove from empty list")
        old_center, old_idx = self._center, self._center_index()
        node = self._end
        self._end = node.previous
        if self._end is None:
            self._start = None
        else:
            self._end.next = None
        self._size -= 1
        if old_center is node:
            self._recenter(self._start, 0)
        else:
            self._recenter(old_center, old_idx)
        return node.value

    def remove_at(self, idx: int) -> int:
        """Remove and return the value at ``idx``."""
        idx = self._normalize(idx)
        if idx == 0:
            return self.pop()
        if idx == self._size - 1:
            return self.remove_tail()
        old_center, old_idx = self._center, self._center_index()
        node = self._node_at(idx)
        node.previous.next = node.next
        node.next.previous = node.previous
        self._size -= 1
        if old_center is node:
            self._recenter(node.next, idx)
        elif idx < old_idx:
            self._recenter(old_center, old_idx - 1)
        else:
            self._recenter(old_center, old_idx)
        return node.value

    def insert_at(self, value: int, idx: int) -> None:
        """Insert ``value`` before the node at ``idx``.

        Index 0 pushes to the front; the last index and the length both append
        to the back.
        """
        if idx == 0:
            self.push(value)
            return
        if idx in (self._size - 1, self._size):
            self.append(value)
            return
        if not 0 < idx < self._size - 1:
            raise IndexError("list index out of range")
        old_center, old_idx = self._center, self._center_index()
        node = self._node_at(idx)
        new_node = _Node(value, node.previous, node)
        node.previous.next = new_node
        node.previous = new_node
        self._size += 1
        self._recenter(old_center, old_idx + 1 if idx <= old_idx else old_idx)

    def format_lines(self) -> list[str]:
        """Describe each node from first to last."""
        if not self._size:
            return ["Empty List !!! ..."]
        return [f"Node {i} : {value}" for i, value in enumerate(self)]

    def format_lines_reversed(self) -> list[str]:
        """Describe each node from last to first."""
        if not self._size:
            return ["Empty List !!! ..."]
        return [
            f"Node {self._size - 1 - i} : {value}"
            for i, value in enumerate(reversed(self))
        ]

    def _center_index(self) -> int:
        return (self._size + 1) // 2 - 1 if self._size else 0

    def _recenter(self, anchor: _Node | None, anchor_idx: int) -> None:
        if not self._size or anchor is None:
            self._center = None
            return
        self._center = _walk(anchor, self._center_index() - anchor_idx)

    def _normalize(self, idx: int) -> int:
        if idx < 0:
            idx += self._size
        if not 0 <= idx < self._size:
            raise IndexError("list index out of range")
        return idx

    def _node_at(self, idx: int) -> _Node:
        anchors = (
            (self._start, 0),
            (self._end, self._size - 1),
            (self._center, self._center_index()),
        )
        node, node_idx = min(anchors, key=lambda anchor: abs(idx - anchor[1]))
        return _walk(node, idx - node_idx)