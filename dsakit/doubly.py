"""A doubly linked list with head and tail references."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False, repr=False)
class DoublyNode:
    """A link holding a value and references to both neighbours."""

    data: Any
    prev: Optional["DoublyNode"] = None
    next: Optional["DoublyNode"] = None

    def __repr__(self) -> str:
        return f"DoublyNode({self.data!r})"


class DoublyLinkedList:
    """A list of doubly linked nodes that keeps track of both ends."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[DoublyNode] = None
        self.tail: Optional[DoublyNode] = None
        for value in values:
            self.insert_at_tail(value)

    def _nodes(self) -> Iterator[DoublyNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, position: int) -> DoublyNode:
        if position >= 1:
            for index, node in enumerate(self._nodes(), start=1):
                if index == position:
                    return node
        raise IndexError(f"position {position} out of range")

    def insert_at_head(self, value: Any) -> None:
        node = DoublyNode(value, None, self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node

    def insert_at_tail(self, value: Any) -> None:
        node = DoublyNode(value, self.tail, None)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node

    def insert_at_position(self, position: int, value: Any) -> None:
        """Insert so that the value ends up at the 1-based position."""
        if position == 1:
            self.insert_at_head(value)
            return
        before = self._node_at(position - 1)
        if before.next is None:
            self.insert_at_tail(value)
            return
        node = DoublyNode(value, before, before.next)
        before.next.prev = node
        before.next = node

    def delete_at_position(self, position: int) -> Any:
        """Unlink the node at the 1-based position and return its value."""
        if self.head is None:
            raise IndexError("delete from empty list")
        node = self._node_at(position)
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self.tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        return node.data

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self.tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"