"""Helpers for splitting integers into fixed-width digits and joining them."""

from __future__ import annotations

from collections.abc import Iterable

BITS = 32
HALF_BITS = BITS // 2
HALF = (1 << HALF_BITS) - 1
MAX = (1 << BITS) - 1
DOUBLE_MAX = (1 << (2 * BITS)) - 1


def _check_digit(value: int, name: str = "digit") -> None:
    if not 0 <= value <= MAX:
        raise ValueError(f"{name} {value} does not fit in {BITS} bits")


def from_double_digit(n: int) -> tuple[int, int]:
    """Split a double-width value into its ``(hi, lo)`` digits."""
    if not 0 <= n <= DOUBLE_MAX:
        raise ValueError(f"value {n} does not fit in {2 * BITS} bits")
    return n >> BITS, n & MAX


def to_double_digit(hi: int, lo: int) -> int:
    """Join ``hi`` and ``lo`` digits into one double-width value."""
    _check_digit(hi, "high digit")
    _check_digit(lo, "low digit")
    return (hi << BITS) | lo


def split_digits(value: int) -> list[int]:
    """Return the little-endian digits of a non-negative integer, without trailing zeros."""
    if value < 0:
        raise ValueError("cannot split a negative integer into digits")
    digits = []
    while value:
        digits.append(value & MAX)
        value >>= BITS
    return digits


def join_digits(digits: Iterable[int]) -> int:
    """Return the integer whose little-endian digits are ``digits``."""
    result = 0
    for digit in reversed(list(digits)):
        _check_digit(digit)
        result = (result << BITS) | digit
    return result