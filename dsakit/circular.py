"""A circular singly linked list that keeps track of its head and tail."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional

from dsakit.linked import Node


class CircularLinkedList:
    """A singly linked list whose tail links back to its head."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self.tail: Optional[Node] = None
        for value in values:
            self.insert_at_tail(value)

    def _nodes(self) -> Iterator[Node]:
        if self.head is None:
            return
        node = self.head
        while True:
            yield node
            node = node.next
            if node is self.head or node is None:
                break

    def _start(self, node: Node) -> None:
        node.next = node
        self.head = self.tail = node

    def insert_at_head(self, value: Any) -> None:
        node = Node(value)
        if self.head is None:
            self._start(node)
            return
        node.next = self.head
        self.head = node
        self.tail.next = node

    def insert_at_tail(self, value: Any) -> None:
        node = Node(value)
        if self.tail is None:
            self._start(node)
            return
        self.tail.next = node
        self.tail = node
        node.next = self.head

    def insert_at_position(self, position: int, value: Any) -> None:
        """Insert at the 1-based position; positions past the end append."""
        if position < 1:
            raise IndexError(f"position {position} out of range")
        if position == 1:
            self.insert_at_head(value)
            return
        if self.head is None:
            self.insert_at_tail(value)
            return
        before = self.head
        count = 1
        while count < position - 1 and before.next is not self.head:
            before = before.next
            count += 1
        if before.next is self.head:
            self.insert_at_tail(value)
            return
        before.next = Node(value, before.next)

    def insert_after(self, element: Any, value: Any) -> None:
        """Insert value right after the first node holding element.

        On an empty list the value becomes the only node.
        """
        if self.head is None:
            self.insert_at_tail(value)
            return
        for node in self._nodes():
            if node.data == element:
                node.next = Node(value, node.next)
                if node is self.tail:
                    self.tail = node.next
                return
        raise ValueError(f"{element!r} not in list")

    def delete(self, element: Any) -> None:
        """Unlink the first node holding element."""
        if self.head is None:
            raise IndexError("delete from empty list")
        if self.head.data == element:
            removed = self.head
            if self.head is self.tail:
                self.head = self.tail = None
            else:
                self.head = removed.next
                self.tail.next = self.head
            removed.next = None
            return
        previous = self.head
        current = self.head.next
        while current is not self.head:
            if current.data == element:
                previous.next = current.next
                if current is self.tail:
                    self.tail = previous
                current.next = None
                return
            previous, current = current, current.next
        raise ValueError(f"{element!r} not in list")

    def is_circular(self) -> bool:
        """Tell whether the links from the head lead back to it."""
        if self.head is None:
            return False
        node = self.head.next
        while node is not None and node is not self.head:
            node = node.next
        return node is self.head

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"