"""A doubly linked list of values."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, Optional, TextIO, TypeVar

T = TypeVar("T")


@dataclass(eq=False, repr=False)
class Node(Generic[T]):
    """A list node linked to its neighbours in both directions."""

    value: T
    previous: Optional["Node[T]"] = None
    next: Optional["Node[T]"] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class DoublyLinkedList(Generic[T]):
    """A doubly linked list that appends at the tail."""

    def __init__(self) -> None:
        self.head: Optional[Node[T]] = None

    def _nodes(self) -> Iterator[Node[T]]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add(self, value: T) -> None:
        """Append ``value`` at the end of the list."""
        if self.head is None:
            self.head = Node(value)
            return
        tail = self.head
        while tail.next is not None:
            tail = tail.next
        tail.next = Node(value, previous=tail)

    def remove(self, value: T) -> None:
        """Remove the first node holding ``value``; do nothing if absent."""
        for node in self._nodes():
            if node.value != value:
                continue
            if node.previous is None:
                self.head = node.next
            else:
                node.previous.next = node.next
            if node.next is not None:
                node.next.previous = node.previous
            node.previous = node.next = None
            return

    def print_forward(self, file: Optional[TextIO] = None) -> None:
        """Write each value, head to tail, on its own line to ``file``."""
        out = sys.stdout if file is None else file
        for value in self:
            print(value, file=out)

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.value

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"