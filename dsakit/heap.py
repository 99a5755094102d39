"""A fixed-capacity binary max-heap stored in a list."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class MaxHeap:
    """A max-heap holding at most capacity values."""

    def __init__(self, capacity: int = 100) -> None:
        self.capacity = capacity
        self._items: list[Any] = []

    def insert(self, value: Any) -> None:
        """Add a value and sift it up to its place."""
        if len(self._items) >= self.capacity:
            raise OverflowError("heap overflow")
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] < items[index]:
                items[parent], items[index] = items[index], items[parent]
                index = parent
            else:
                break

    def delete_root(self) -> Any:
        """Remove and return the largest value."""
        items = self._items
        if not items:
            raise IndexError("delete from empty heap")
        root = items[0]
        last = items.pop()
        if not items:
            return root
        items[0] = last
        size = len(items)
        index = 0
        while True:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and items[child] > items[largest]:
                    largest = child
            if largest == index:
                break
            items[index], items[largest] = items[largest], items[index]
            index = largest
        return root

    def __iter__(self) -> Iterator[Any]:
        """Yield the values in storage order."""
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"MaxHeap({self._items!r})"