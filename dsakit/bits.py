"""Bit manipulation helpers: formatting, testing, setting, clearing and counting bits."""

from __future__ import annotations

_WORD_MASK = 0xFFFFFFFF


def _check_index(i: int) -> None:
    if i < 0:
        raise ValueError("bit index must be non-negative")


def to_binary(num: int, width: int = 11) -> str:
    """Return the lowest ``width`` bits of ``num``, most significant first."""
    if width <= 0:
        raise ValueError("width must be positive")
    return "".join(str((num >> i) & 1) for i in range(width - 1, -1, -1))


def is_bit_set(num: int, i: int) -> bool:
    """Return True if bit ``i`` of ``num`` is 1."""
    _check_index(i)
    return (num & (1 << i)) != 0


def set_bit(num: int, i: int) -> int:
    """Return ``num`` with bit ``i`` set."""
    _check_index(i)
    return num | (1 << i)


def clear_bit(num: int, i: int) -> int:
    """Return ``num`` with bit ``i`` cleared."""
    _check_index(i)
    return num & ~(1 << i)


def toggle_bit(num: int, i: int) -> int:
    """Return ``num`` with bit ``i`` flipped."""
    _check_index(i)
    return num ^ (1 << i)


def count_set_bits(num: int) -> int:
    """Count the 1 bits among the low 32 bits of ``num`` (two's complement)."""
    return bin(num & _WORD_MASK).count("1")