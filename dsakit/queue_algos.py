"""Queue-based algorithms over sequences and streams."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Sequence
from typing import Any, Optional


def circular_tour(petrol: Sequence[int], distance: Sequence[int]) -> Optional[int]:
    """Return the pump index from which a full round trip is possible, or None."""
    if len(petrol) != len(distance):
        raise ValueError("petrol and distance must have the same length")
    balance = 0
    deficit = 0
    start = 0
    for index, (fuel, cost) in enumerate(zip(petrol, distance)):
        balance += fuel - cost
        if balance < 0:
            start = index + 1
            deficit += balance
            balance = 0
    return start if balance + deficit >= 0 else None


def first_non_repeating(stream: Iterable[str]) -> str:
    """For each prefix of the stream, give its first unrepeated character or '#'."""
    counts: Counter[str] = Counter()
    pending: deque[str] = deque()
    answer = []
    for ch in stream:
        counts[ch] += 1
        pending.append(ch)
        while pending and counts[pending[0]] > 1:
            pending.popleft()
        answer.append(pending[0] if pending else "#")
    return "".join(answer)


def _check_window(values: Sequence[Any], k: int) -> None:
    if not 1 <= k <= len(values):
        raise ValueError(f"window size {k} out of range for {len(values)} values")


def first_negatives(values: Sequence[int], k: int) -> list[int]:
    """Return the first negative value of each window of size k, 0 if none."""
    _check_window(values, k)
    negatives: deque[int] = deque()
    result = []
    for index, value in enumerate(values):
        if negatives and index - negatives[0] >= k:
            negatives.popleft()
        if value < 0:
            negatives.append(index)
        if index >= k - 1:
            result.append(values[negatives[0]] if negatives else 0)
    return result


def reverse_first_k(queue: Iterable[Any], k: int) -> list[Any]:
    """Return the queue's values with the first k reversed and the rest in order."""
    items = deque(queue)
    if not 0 <= k <= len(items):
        raise ValueError(f"cannot reverse {k} of {len(items)} values")
    stack = [items.popleft() for _ in range(k)]
    rest = len(items)
    while stack:
        items.append(stack.pop())
    items.rotate(-rest)
    return list(items)


def sum_of_window_extremes(values: Sequence[int], k: int) -> int:
    """Sum the maximum plus the minimum of every window of size k."""
    _check_window(values, k)
    maxima: deque[int] = deque()
    minima: deque[int] = deque()
    total = 0
    for index, value in enumerate(values):
        while maxima and index - maxima[0] >= k:
            maxima.popleft()
        while minima and index - minima[0] >= k:
            minima.popleft()
        while maxima and values[maxima[-1]] <= value:
            maxima.pop()
        while minima and values[minima[-1]] >= value:
            minima.pop()
        maxima.append(index)
        minima.append(index)
        if index >= k - 1:
            total += values[maxima[0]] + values[minima[0]]
    return total