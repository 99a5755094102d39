"""Stack-based algorithms over sequences, strings and matrices.

Stacks are plain lists with the bottom first and the top last.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Optional

_OPERATORS = frozenset("+-*/")
_PAIRS = {")": "(", "}": "{", "]": "["}


def find_celebrity(matrix: Sequence[Sequence[int]]) -> Optional[int]:
    """Return the person known by all others who knows nobody, or None.

    matrix[a][b] == 1 means that a knows b.
    """
    n = len(matrix)
    if n == 0:
        raise ValueError("matrix is empty")
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    candidates = list(range(n))
    while len(candidates) > 1:
        a = candidates.pop()
        b = candidates.pop()
        candidates.append(b if matrix[a][b] == 1 else a)
    person = candidates[0]
    if any(value != 0 for value in matrix[person]):
        return None
    if sum(1 for row in matrix if row[person] == 1) != n - 1:
        return None
    return person


def delete_middle(stack: list[Any]) -> Any:
    """Remove the middle element in place and return it.

    The middle is the element size // 2 places down from the top.
    """
    if not stack:
        raise IndexError("delete from empty stack")
    return stack.pop(len(stack) - 1 - len(stack) // 2)


def insert_at_bottom(stack: list[Any], value: Any) -> None:
    """Put value underneath every element of the stack."""
    stack.insert(0, value)


def reverse_stack(stack: list[Any]) -> None:
    """Reverse the stack in place, so that the bottom becomes the top."""
    stack.reverse()


def sort_stack(stack: list[Any]) -> None:
    """Sort the stack in place so that the smallest value is on top."""
    stack.sort(reverse=True)


def has_redundant_brackets(expression: str) -> bool:
    """Tell whether some pair of brackets encloses no operator."""
    pending: list[str] = []
    for ch in expression:
        if ch == "(" or ch in _OPERATORS:
            pending.append(ch)
        elif ch == ")":
            redundant = True
            while pending and pending[-1] != "(":
                if pending.pop() in _OPERATORS:
                    redundant = False
            if not pending:
                raise ValueError("unmatched ')' in expression")
            if redundant:
                return True
            pending.pop()
    return False


def is_valid_parentheses(text: str) -> bool:
    """Tell whether the text is a balanced sequence of (), {} and [].

    Any character other than an opening bracket must close the latest one.
    """
    pending: list[str] = []
    for ch in text:
        if ch in "({[":
            pending.append(ch)
        elif pending and _PAIRS.get(ch) == pending[-1]:
            pending.pop()
        else:
            return False
    return not pending


def next_smaller_elements(values: Sequence[Any]) -> list[Any]:
    """For each value give the next smaller one to its right, or -1."""
    result: list[Any] = [-1] * len(values)
    pending: list[Any] = []
    for index in range(len(values) - 1, -1, -1):
        current = values[index]
        while pending and pending[-1] >= current:
            pending.pop()
        if pending:
            result[index] = pending[-1]
        pending.append(current)
    return result


def _smaller_bounds(heights: Sequence[int]) -> tuple[list[int], list[int]]:
    n = len(heights)
    previous = [-1] * n
    following = [n] * n
    pending: list[int] = []
    for index, height in enumerate(heights):
        while pending and heights[pending[-1]] >= height:
            pending.pop()
        previous[index] = pending[-1] if pending else -1
        pending.append(index)
    pending.clear()
    for index in range(n - 1, -1, -1):
        while pending and heights[pending[-1]] >= heights[index]:
            pending.pop()
        following[index] = pending[-1] if pending else n
        pending.append(index)
    return previous, following


def largest_histogram_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle under the histogram."""
    if not heights:
        raise ValueError("histogram is empty")
    previous, following = _smaller_bounds(heights)
    return max(
        height * (after - before - 1)
        for height, before, after in zip(heights, previous, following)
    )


def largest_rectangle_of_ones(matrix: Sequence[Sequence[int]]) -> int:
    """Return the area of the largest all-ones rectangle in a 0/1 matrix."""
    if not matrix or not matrix[0]:
        raise ValueError("matrix is empty")
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError("matrix rows must have equal length")
    heights = list(matrix[0])
    best = largest_histogram_area(heights)
    for row in matrix[1:]:
        heights = [h + cell if cell != 0 else 0 for h, cell in zip(heights, row)]
        best = max(best, largest_histogram_area(heights))
    return best


def min_cost_to_balance(text: str) -> Optional[int]:
    """Return how many braces must be flipped to balance the text, or None.

    An odd-length text cannot be balanced.
    """
    if len(text) % 2 == 1:
        return None
    pending: list[str] = []
    for ch in text:
        if ch == "{":
            pending.append(ch)
        elif ch == "}":
            if pending and pending[-1] == "{":
                pending.pop()
            else:
                pending.append(ch)
    opens = pending.count("{")
    closes = len(pending) - opens
    return (opens + 1) // 2 + (closes + 1) // 2


def reverse_string(text: str) -> str:
    """Return the text with its characters in reverse order."""
    stack = list(text)
    return "".join(stack.pop() for _ in range(len(stack)))