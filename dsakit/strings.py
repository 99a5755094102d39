"""Small string and number utilities."""

from __future__ import annotations

_UPPER_TO_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def is_valid_palindrome(text: str) -> bool:
    """Tell whether the text reads the same both ways, ignoring ASCII letter case."""
    folded = text.translate(_UPPER_TO_LOWER)
    return folded == folded[::-1]


def primes_below(n: int) -> list[int]:
    """Return the primes from 2 up to but not including n."""
    if n <= 2:
        return []
    sieve = bytearray([1]) * n
    sieve[0] = sieve[1] = 0
    for candidate in range(2, int(n**0.5) + 1):
        if sieve[candidate]:
            sieve[candidate * candidate :: candidate] = bytes(
                len(range(candidate * candidate, n, candidate))
            )
    return [number for number, flag in enumerate(sieve) if flag]


def reverse_words(text: str) -> str:
    """Reverse each space-separated word in place, keeping every space where it is."""
    return " ".join(word[::-1] for word in text.split(" "))