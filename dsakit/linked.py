"""Singly linked nodes and a head/tail linked list built on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False, repr=False)
class Node:
    """A single link holding a value and a reference to the next node."""

    data: Any
    next: Optional["Node"] = None

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


def build_chain(values: Iterable[Any]) -> Optional[Node]:
    """Link the values into a chain of nodes and return its head."""
    head: Optional[Node] = None
    tail: Optional[Node] = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def _walk(head: Optional[Node]) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


def chain_values(head: Optional[Node]) -> list[Any]:
    """Return the values of an acyclic chain, head first."""
    return [node.data for node in _walk(head)]


def reverse_chain(head: Optional[Node]) -> Optional[Node]:
    """Reverse a chain in place and return the new head."""
    previous: Optional[Node] = None
    current = head
    while current is not None:
        following = current.next
        current.next = previous
        previous = current
        current = following
    return previous


def reverse_in_groups(head: Optional[Node], k: int) -> Optional[Node]:
    """Reverse every run of k nodes in place, the last shorter run included."""
    if k < 1:
        raise ValueError("group size must be at least 1")
    new_head: Optional[Node] = None
    previous_group_tail: Optional[Node] = None
    current = head
    while current is not None:
        group_head = current
        previous: Optional[Node] = None
        for _ in range(k):
            if current is None:
                break
            following = current.next
            current.next = previous
            previous = current
            current = following
        if previous_group_tail is None:
            new_head = previous
        else:
            previous_group_tail.next = previous
        previous_group_tail = group_head
    return new_head


def find_middle(head: Optional[Node]) -> Optional[Node]:
    """Return the middle node; for an even length, the second of the two."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
    return slow


def is_circular(head: Optional[Node]) -> bool:
    """Tell whether following the links from head leads back to head.

    An empty chain counts as circular.
    """
    if head is None:
        return True
    seen = {id(head)}
    node = head.next
    while node is not None and node is not head:
        if id(node) in seen:
            return False
        seen.add(id(node))
        node = node.next
    return node is head


class LinkedList:
    """A singly linked list that keeps track of both ends."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self.tail: Optional[Node] = None
        for value in values:
            self.insert_at_tail(value)

    def insert_at_head(self, value: Any) -> None:
        node = Node(value, self.head)
        self.head = node
        if self.tail is None:
            self.tail = node

    def insert_at_tail(self, value: Any) -> None:
        node = Node(value)
        if self.tail is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            self.tail = node

    def insert_at_position(self, position: int, value: Any) -> None:
        """Insert so that the value ends up at the 1-based position."""
        if position == 1:
            self.insert_at_head(value)
            return
        if position < 1:
            raise IndexError(f"position {position} out of range")
        before = self._node_at(position - 1)
        if before.next is None:
            self.insert_at_tail(value)
            return
        before.next = Node(value, before.next)

    def delete_at_position(self, position: int) -> Any:
        """Unlink the node at the 1-based position and return its value."""
        if self.head is None:
            raise IndexError("delete from empty list")
        if position < 1:
            raise IndexError(f"position {position} out of range")
        if position == 1:
            removed = self.head
            self.head = removed.next
            if self.head is None:
                self.tail = None
        else:
            before = self._node_at(position - 1)
            removed = before.next
            if removed is None:
                raise IndexError(f"position {position} out of range")
            before.next = removed.next
            if removed is self.tail:
                self.tail = before
        removed.next = None
        return removed.data

    def reverse(self) -> None:
        self.tail = self.head
        self.head = reverse_chain(self.head)

    def reverse_in_groups(self, k: int) -> None:
        self.head = reverse_in_groups(self.head, k)
        self.tail = None
        for node in _walk(self.head):
            self.tail = node

    def middle(self) -> Any:
        """Return the middle value; for an even length, the second of the two."""
        node = find_middle(self.head)
        if node is None:
            raise IndexError("middle of empty list")
        return node.data

    def _node_at(self, position: int) -> Node:
        for index, node in enumerate(_walk(self.head), start=1):
            if index == position:
                return node
        raise IndexError(f"position {position} out of range")

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in _walk(self.head))

    def __len__(self) -> int:
        return sum(1 for _ in _walk(self.head))

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"