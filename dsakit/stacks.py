"""Bounded and linked stacks, and several stacks sharing one store."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional

from dsakit.linked import Node


class StackOverflow(OverflowError):
    """Raised when a value is pushed onto a stack that has no room left."""


class StackUnderflow(IndexError):
    """Raised when a value is taken from an empty stack."""


def _check_capacity(capacity: int) -> None:
    if capacity < 1:
        raise ValueError("capacity must be at least 1")


class ArrayStack:
    """A stack holding at most capacity values."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        if len(self._items) >= self.capacity:
            raise StackOverflow("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise StackUnderflow("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        if not self._items:
            raise StackUnderflow("stack underflow")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ArrayStack({self._items!r})"


class LinkedStack:
    """An unbounded stack made of linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[Node] = None
        self._size = 0

    def push(self, value: Any) -> None:
        self._top = Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise StackUnderflow("stack underflow")
        removed = self._top
        self._top = removed.next
        removed.next = None
        self._size -= 1
        return removed.data

    def peek(self) -> Any:
        if self._top is None:
            raise StackUnderflow("stack underflow")
        return self._top.data

    def is_empty(self) -> bool:
        return self._top is None

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from top to bottom."""
        node = self._top
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedStack({list(self)!r})"


class TwoStacks:
    """Two stacks growing towards each other in one store of fixed size."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._first: list[Any] = []
        self._second: list[Any] = []

    def _full(self) -> bool:
        return len(self._first) + len(self._second) >= self.capacity

    def push1(self, value: Any) -> None:
        if self._full():
            raise StackOverflow("stack overflow in stack 1")
        self._first.append(value)

    def push2(self, value: Any) -> None:
        if self._full():
            raise StackOverflow("stack overflow in stack 2")
        self._second.append(value)

    def pop1(self) -> Any:
        if not self._first:
            raise StackUnderflow("stack underflow in stack 1")
        return self._first.pop()

    def pop2(self) -> Any:
        if not self._second:
            raise StackUnderflow("stack underflow in stack 2")
        return self._second.pop()


class NStacks:
    """Several stacks, numbered from 0, sharing a store of fixed size."""

    def __init__(self, count: int, size: int) -> None:
        if count < 1:
            raise ValueError("count must be at least 1")
        _check_capacity(size)
        self.count = count
        self.size = size
        self._stacks: list[list[Any]] = [[] for _ in range(count)]
        self._stored = 0

    def _stack(self, stack_number: int) -> list[Any]:
        if not 0 <= stack_number < self.count:
            raise ValueError(f"invalid stack number {stack_number}")
        return self._stacks[stack_number]

    def push(self, value: Any, stack_number: int) -> None:
        stack = self._stack(stack_number)
        if self._stored >= self.size:
            raise StackOverflow("stack overflow")
        stack.append(value)
        self._stored += 1

    def pop(self, stack_number: int) -> Any:
        stack = self._stack(stack_number)
        if not stack:
            raise StackUnderflow("stack underflow")
        self._stored -= 1
        return stack.pop()

    def peek(self, stack_number: int) -> Any:
        stack = self._stack(stack_number)
        if not stack:
            raise StackUnderflow("stack is empty")
        return stack[-1]