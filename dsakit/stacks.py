"""Stacks: a fixed-capacity stack and operations on list-based stacks (top at the end)."""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence
from typing import Any, TypeVar

T = TypeVar("T")


class StackOverflow(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflow(IndexError):
    """Raised when removing from an empty stack."""


class BoundedStack:
    """A stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Push ``value``; raise :class:`StackOverflow` when full."""
        if len(self._items) >= self.capacity:
            raise StackOverflow("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Pop and return the top value; raise :class:`StackUnderflow` when empty."""
        if not self._items:
            raise StackUnderflow("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise StackUnderflow("stack underflow")
        return self._items[-1]

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from bottom to top."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"BoundedStack(capacity={self.capacity}, items={self._items!r})"


def delete_middle(stack: MutableSequence[T]) -> MutableSequence[T]:
    """Remove the middle item, the one ``len(stack) // 2`` places below the top.

    The stack is modified in place and returned. An empty stack raises
    :class:`StackUnderflow`.
    """
    if not stack:
        raise StackUnderflow("cannot delete the middle of an empty stack")
    held: list[T] = [stack.pop() for _ in range(len(stack) // 2)]
    stack.pop()
    while held:
        stack.append(held.pop())
    return stack


def insert_at_bottom(stack: MutableSequence[T], item: T) -> MutableSequence[T]:
    """Place ``item`` beneath every other item; modify in place and return."""
    stack.insert(0, item)
    return stack


def sort_stack(stack: list[T]) -> list[T]:
    """Sort in place so the smallest item ends on top; return the stack."""
    stack.sort(reverse=True)
    return stack


def reverse_string(text: str) -> str:
    """Return ``text`` reversed by pushing its characters and popping them off."""
    chars = list(text)
    return "".join(chars.pop() for _ in range(len(chars)))