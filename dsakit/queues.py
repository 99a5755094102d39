"""Bounded queues and deques, several queues sharing one store, and queue/stack adapters."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any, Protocol


class QueueOverflow(OverflowError):
    """Raised when a value is added to a queue that has no room left."""


class QueueUnderflow(IndexError):
    """Raised when a value is taken from an empty queue."""


def _check_capacity(capacity: int) -> None:
    if capacity < 1:
        raise ValueError("capacity must be at least 1")


class LinearQueue:
    """A fixed-size queue whose slots are not reused until it runs empty.

    Every enqueue uses up one slot; dequeuing does not free it. Once the
    queue becomes empty all slots are available again.
    """

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: deque[Any] = deque()
        self._used = 0

    def enqueue(self, value: Any) -> None:
        if self._used >= self.capacity:
            raise QueueOverflow("queue overflow")
        self._items.append(value)
        self._used += 1

    def dequeue(self) -> Any:
        if not self._items:
            raise QueueUnderflow("queue underflow")
        value = self._items.popleft()
        if not self._items:
            self._used = 0
        return value

    def front(self) -> Any:
        if not self._items:
            raise QueueUnderflow("queue underflow")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"LinearQueue({list(self._items)!r})"


class CircularQueue:
    """A fixed-size queue that reuses freed slots."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        if len(self._items) >= self.capacity:
            raise QueueOverflow("queue overflow")
        self._items.append(value)

    def dequeue(self) -> Any:
        if not self._items:
            raise QueueUnderflow("queue underflow")
        return self._items.popleft()

    def front(self) -> Any:
        if not self._items:
            raise QueueUnderflow("queue underflow")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"CircularQueue({list(self._items)!r})"


class _Queue(Protocol):
    def enqueue(self, value: Any) -> None: ...

    def dequeue(self) -> Any: ...

    def is_empty(self) -> bool: ...


def reverse_queue(queue: _Queue) -> None:
    """Reverse the order of a queue in place, using a stack."""
    stack = []
    while not queue.is_empty():
        stack.append(queue.dequeue())
    while stack:
        queue.enqueue(stack.pop())


class ArrayDeque:
    """A fixed-size double-ended queue."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def push_front(self, value: Any) -> None:
        if self.is_full():
            raise QueueOverflow("deque overflow")
        self._items.appendleft(value)

    def push_rear(self, value: Any) -> None:
        if self.is_full():
            raise QueueOverflow("deque overflow")
        self._items.append(value)

    def pop_front(self) -> Any:
        if not self._items:
            raise QueueUnderflow("deque underflow")
        return self._items.popleft()

    def pop_rear(self) -> Any:
        if not self._items:
            raise QueueUnderflow("deque underflow")
        return self._items.pop()

    def front(self) -> Any:
        if not self._items:
            raise QueueUnderflow("deque underflow")
        return self._items[0]

    def rear(self) -> Any:
        if not self._items:
            raise QueueUnderflow("deque underflow")
        return self._items[-1]

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ArrayDeque({list(self._items)!r})"


class KQueues:
    """Several FIFO queues, numbered from 1, sharing a store of fixed size."""

    def __init__(self, size: int, count: int) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        if count < 1:
            raise ValueError("count must be at least 1")
        self.size = size
        self.count = count
        self._queues: list[deque[Any]] = [deque() for _ in range(count)]
        self._stored = 0

    def _queue(self, queue_number: int) -> deque[Any]:
        if not 1 <= queue_number <= self.count:
            raise ValueError(f"invalid queue number {queue_number}")
        return self._queues[queue_number - 1]

    def push(self, value: Any, queue_number: int) -> None:
        queue = self._queue(queue_number)
        if self._stored >= self.size:
            raise QueueOverflow("no empty space present")
        queue.append(value)
        self._stored += 1

    def pop(self, queue_number: int) -> Any:
        queue = self._queue(queue_number)
        if not queue:
            raise QueueUnderflow("queue underflow")
        self._stored -= 1
        return queue.popleft()


class QueueUsingStacks:
    """A FIFO queue built from two stacks."""

    def __init__(self) -> None:
        self._inbox: list[Any] = []
        self._outbox: list[Any] = []

    def push(self, value: Any) -> None:
        self._inbox.append(value)

    def _shift(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())

    def pop(self) -> Any:
        if not self._inbox and not self._outbox:
            raise QueueUnderflow("queue is empty")
        self._shift()
        return self._outbox.pop()

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from front to back."""
        return iter([*reversed(self._outbox), *self._inbox])

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)


class StackUsingQueue:
    """A LIFO stack built from a single queue."""

    def __init__(self) -> None:
        self._queue: deque[Any] = deque()

    def push(self, value: Any) -> None:
        self._queue.append(value)
        self._queue.rotate(1)

    def pop(self) -> Any:
        if not self._queue:
            raise IndexError("stack is empty")
        return self._queue.popleft()

    def top(self) -> Any:
        if not self._queue:
            raise IndexError("stack is empty")
        return self._queue[0]

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from top to bottom."""
        return iter(list(self._queue))

    def __len__(self) -> int:
        return len(self._queue)