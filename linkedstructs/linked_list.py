"""A singly linked list of values."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TextIO, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class _Node(Generic[T]):
    value: T
    next: Optional["_Node[T]"] = None


class LinkedList(Generic[T]):
    """A singly linked list that appends at the tail."""

    def __init__(self) -> None:
        self._root: Optional[_Node[T]] = None

    def add(self, value: T) -> None:
        """Append ``value`` at the end of the list."""
        new_node = _Node(value)
        if self._root is None:
            self._root = new_node
            return
        node = self._root
        while node.next is not None:
            node = node.next
        node.next = new_node

    def remove(self, value: T) -> None:
        """Remove the first node holding ``value``; do nothing if absent."""
        previous: Optional[_Node[T]] = None
        node = self._root
        while node is not None:
            if node.value == value:
                if previous is None:
                    self._root = node.next
                else:
                    previous.next = node.next
                return
            previous, node = node, node.next

    def print(self, file: Optional[TextIO] = None) -> None:
        """Write each value on its own line to ``file`` (stdout by default)."""
        out = sys.stdout if file is None else file
        for value in self:
            print(value, file=out)

    def to_list(self) -> list[T]:
        """Return the values in order as a list."""
        return list(self)

    def __iter__(self) -> Iterator[T]:
        node = self._root
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"LinkedList({self.to_list()!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return self.to_list() == other.to_list()