"""Classic recursive algorithms: searching, sorting, counting and backtracking."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise
from typing import Any

DIGIT_WORDS = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
)

KEYPAD = ("", "", "abc", "def", "ghi", "jkl", "mno", "pqr", "stuv", "wxyz")

# Moves tried from each maze cell, in this order.
_MOVES = (("D", 1, 0), ("U", -1, 0), ("R", 0, 1), ("L", 0, -1))


def _require_non_negative(n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"{what} must not be negative")


def binary_search(values: Sequence[Any], key: Any) -> bool:
    """Tell whether key is in the ascending sequence."""

    def search(start: int, end: int) -> bool:
        if start > end:
            return False
        mid = start + (end - start) // 2
        if values[mid] == key:
            return True
        if values[mid] > key:
            return search(start, mid - 1)
        return search(mid + 1, end)

    return search(0, len(values) - 1)


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, sorted by repeated bubbling passes."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for i in range(end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, moving the largest to the end each pass."""
    items = list(values)
    for end in range(len(items), 1, -1):
        largest = max(range(end), key=items.__getitem__)
        if largest != end - 1:
            items[end - 1], items[largest] = items[largest], items[end - 1]
    return items


def count_ways(n: int) -> int:
    """Count the ways to climb n stairs taking one or two steps at a time."""
    if n < 0:
        return 0
    before, current = 0, 1
    for _ in range(n):
        before, current = current, before + current
    return current


def count_ways_three(n: int) -> int:
    """Count the ways to climb n stairs taking one, two or three steps at a time."""
    if n < 0:
        return 0
    a, b, c = 0, 0, 1
    for _ in range(n):
        a, b, c = b, c, a + b + c
    return c


def count_up(n: int) -> list[int]:
    """Return the numbers from 1 up to n."""
    _require_non_negative(n, "n")
    return list(range(1, n + 1))


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, counting from fibonacci(0) == 0."""
    _require_non_negative(n, "n")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def fibonacci_series(n: int) -> list[int]:
    """Return the Fibonacci numbers from the 0th to the n-th."""
    _require_non_negative(n, "n")
    series = [0, 1][: n + 1]
    while len(series) <= n:
        series.append(series[-1] + series[-2])
    return series


def power(a: int, b: int) -> int:
    """Raise a to the non-negative power b by repeated squaring."""
    _require_non_negative(b, "exponent")
    if b == 0 or a == 1:
        return 1
    half = power(a, b // 2)
    if b % 2 == 0:
        return half * half
    return half * half * a


def subsets(values: Iterable[Any]) -> list[list[Any]]:
    """Return every subset, each keeping the input order.

    At each element the branch without it comes before the branch with it,
    so the empty subset is first and the whole input last.
    """
    items = list(values)
    result: list[list[Any]] = []

    def solve(index: int, chosen: list[Any]) -> None:
        if index >= len(items):
            result.append(list(chosen))
            return
        solve(index + 1, chosen)
        chosen.append(items[index])
        solve(index + 1, chosen)
        chosen.pop()

    solve(0, [])
    return result


def subsequences(text: str) -> list[str]:
    """Return every non-empty subsequence of the text, in the order of subsets()."""
    return ["".join(chosen) for chosen in subsets(text) if chosen]


def is_sorted(values: Iterable[Any]) -> bool:
    """Tell whether the values never decrease."""
    return all(a <= b for a, b in pairwise(values))


def linear_search(values: Iterable[Any], key: Any) -> bool:
    """Tell whether key is among the values."""
    return any(value == key for value in values)


def is_palindrome(text: str) -> bool:
    """Tell whether the text reads the same both ways, case included."""

    def check(start: int, end: int) -> bool:
        if start > end:
            return True
        if text[start] != text[end]:
            return False
        return check(start + 1, end - 1)

    return check(0, len(text) - 1)


def permutations(values: Iterable[Any]) -> list[list[Any]]:
    """Return every ordering of the values, generated by swapping in place."""
    items = list(values)
    result: list[list[Any]] = []

    def solve(index: int) -> None:
        if index >= len(items):
            result.append(list(items))
            return
        for j in range(index, len(items)):
            items[index], items[j] = items[j], items[index]
            solve(index + 1)
            items[index], items[j] = items[j], items[index]

    solve(0)
    return result


def phone_keypad(digits: str) -> list[str]:
    """Return every letter combination the digits spell on a phone keypad.

    Digits 0 and 1 carry no letters, so any combination through them is lost.
    """
    if any(ch not in "0123456789" for ch in digits):
        raise ValueError(f"not a digit string: {digits!r}")
    result: list[str] = []

    def solve(index: int, output: str) -> None:
        if index >= len(digits):
            result.append(output)
            return
        for letter in KEYPAD[int(digits[index])]:
            solve(index + 1, output + letter)

    solve(0, "")
    return result


def pre_in_post(n: int) -> list[str]:
    """Trace a call that recurses twice, labelling before, between and after."""
    _require_non_negative(n, "n")
    lines: list[str] = []

    def visit(level: int) -> None:
        if level == 0:
            return
        lines.append(f"pre {level}")
        visit(level - 1)
        lines.append(f"in {level}")
        visit(level - 1)
        lines.append(f"post {level}")

    visit(n)
    return lines


def rat_in_maze(grid: Sequence[Sequence[int]]) -> list[str]:
    """Return, sorted, every path of D/U/R/L moves over 1-cells from corner to corner."""
    n = len(grid)
    if n == 0 or any(len(row) != n for row in grid):
        raise ValueError("maze must be a non-empty square grid")
    if grid[0][0] == 0:
        return []
    visited = [[False] * n for _ in range(n)]
    paths: list[str] = []

    def solve(x: int, y: int, path: str) -> None:
        if x == n - 1 and y == n - 1:
            paths.append(path)
            return
        visited[x][y] = True
        for move, dx, dy in _MOVES:
            nx, ny = x + dx, y + dy
            if 0 <= nx < n and 0 <= ny < n and not visited[nx][ny] and grid[nx][ny] == 1:
                solve(nx, ny, path + move)
        visited[x][y] = False

    solve(0, 0, "")
    return sorted(paths)


def reverse_string(text: str) -> str:
    """Return the text with its characters in reverse order."""
    chars = list(text)

    def swap(start: int, end: int) -> None:
        if start >= end:
            return
        chars[start], chars[end] = chars[end], chars[start]
        swap(start + 1, end - 1)

    swap(0, len(chars) - 1)
    return "".join(chars)


def say_digits(n: int) -> list[str]:
    """Spell out the decimal digits of n; zero gives no words."""
    _require_non_negative(n, "n")
    if n == 0:
        return []
    return [DIGIT_WORDS[int(ch)] for ch in str(n)]


def src_to_dest(src: int, dest: int) -> list[tuple[int, int]]:
    """Return the (position, destination) pairs passed while stepping from src to dest."""
    if src > dest:
        raise ValueError("source lies beyond the destination")
    return [(position, dest) for position in range(src, dest + 1)]


def sum_values(values: Iterable[Any]) -> Any:
    """Return the sum of the values."""
    return sum(values)