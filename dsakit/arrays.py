"""Array manipulations: reversal, pairwise swapping and finding the unpaired element."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any, TypeVar

T = TypeVar("T")


def reversed_copy(items: Iterable[T]) -> list[T]:
    """Return a new list holding the items in reverse order."""
    return list(items)[::-1]


def reverse_in_place(items: MutableSequence[T]) -> MutableSequence[T]:
    """Reverse ``items`` by swapping from both ends; return the same sequence."""
    if items:
        reverse_range(items, 0, len(items) - 1)
    return items


def reverse_range(items: MutableSequence[T], left: int, right: int) -> MutableSequence[T]:
    """Reverse the inclusive slice ``items[left:right + 1]`` in place.

    Nothing happens when ``left >= right``. Indices outside the sequence
    raise :class:`IndexError`.
    """
    if left >= right:
        return items
    if left < 0 or right >= len(items):
        raise IndexError(f"range [{left}, {right}] outside sequence of length {len(items)}")
    while left < right:
        items[left], items[right] = items[right], items[left]
        left += 1
        right -= 1
    return items


def swap_alternate(items: MutableSequence[T]) -> MutableSequence[T]:
    """Swap each pair of neighbours (0 with 1, 2 with 3, ...) in place.

    With an odd length the last item has no partner and stays put.
    """
    for i in range(0, len(items) - 1, 2):
        items[i], items[i + 1] = items[i + 1], items[i]
    return items


def unique_element(items: Iterable[Any]) -> Any:
    """Return the one value that does not occur as a pair.

    The values are sorted and compared two at a time; the first position
    where a pair breaks holds the unpaired value. Raises :class:`ValueError`
    when every value is paired (including an empty input).
    """
    ordered = sorted(items)
    pairs = iter(ordered)
    for first in pairs:
        second = next(pairs, _MISSING)
        if second is _MISSING or first != second:
            return first
    raise ValueError("every element occurs in pairs; no unique element")


_MISSING = object()