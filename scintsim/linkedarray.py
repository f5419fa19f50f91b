"""A growable array of integers stored as a singly linked chain of nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class _Node:
    value: int = 0
    next: Optional["_Node"] = None


class LinkedArray:
    """Integers addressed by 1-based position; new slots start at zero."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self._first = _Node()
        self._last = self._first
        self._length = 1
        self.extend(size - 1)

    def _node(self, pos: int) -> _Node:
        if not 1 <= pos <= self._length:
            raise IndexError(f"position {pos} outside 1..{self._length}")
        node = self._first
        for _ in range(pos - 1):
            node = node.next
        return node

    def set(self, pos: int, value: int) -> None:
        """Store ``value`` at 1-based position ``pos``."""
        self._node(pos).value = value

    def get(self, pos: int) -> int:
        """The value at 1-based position ``pos``."""
        return self._node(pos).value

    def extend(self, additional: int) -> None:
        """Append ``additional`` zero-valued slots."""
        if additional < 0:
            raise ValueError("additional must not be negative")
        for _ in range(additional):
            node = _Node()
            self._last.next = node
            self._last = node
            self._length += 1

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[int]:
        node: Optional[_Node] = self._first
        while node is not None:
            yield node.value
            node = node.next