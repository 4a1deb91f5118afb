"""Classic recursive routines: factorial, power, palindromes and counting."""

from __future__ import annotations

from collections.abc import Iterator


def factorial(n: int) -> int:
    """Return ``n!``; negative ``n`` raises :class:`ValueError`."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def power(x: int, n: int) -> int:
    """Return ``x`` raised to the non-negative integer ``n`` by repeated multiplication."""
    if n < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    for _ in range(n):
        result *= x
    return result


def is_palindrome(text: str) -> bool:
    """Return True if ``text`` reads the same from both ends."""
    left, right = 0, len(text) - 1
    while left < right:
        if text[left] != text[right]:
            return False
        left += 1
        right -= 1
    return True


def count_up(n: int) -> Iterator[int]:
    """Yield 1, 2, ..., n."""
    if n < 0:
        raise ValueError("n must be non-negative")
    yield from range(1, n + 1)


def count_down(n: int) -> Iterator[int]:
    """Yield n, n-1, ..., 1."""
    if n < 0:
        raise ValueError("n must be non-negative")
    yield from range(n, 0, -1)