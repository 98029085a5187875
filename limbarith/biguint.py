"""Unsigned big integers stored as little-endian 32-bit digits, with subtraction."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import total_ordering

from .digits import BITS, MAX, join_digits, split_digits

_UNDERFLOW = "Cannot subtract b from a because b is larger than a."


def sbb(borrow: int, a: int, b: int) -> tuple[int, int]:
    """Subtract ``b`` and an incoming ``borrow`` from ``a``.

    Returns ``(borrow_out, digit)`` where ``digit`` is the wrapped difference.
    """
    diff = a - b - borrow
    return (1 if diff < 0 else 0), diff & MAX


def sub2(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the digits of ``a - b``, keeping the length of ``a``.

    Raises :class:`OverflowError` when ``b`` is larger than ``a``.
    """
    result = []
    borrow = 0
    for x, y in zip(a, b):
        borrow, digit = sbb(borrow, x, y)
        result.append(digit)
    for x in a[len(b):]:
        borrow, digit = sbb(borrow, x, 0)
        result.append(digit)
    if borrow or any(b[len(a):]):
        raise OverflowError(_UNDERFLOW)
    return result


def sub2rev(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the digits of ``a - b`` where ``b`` has at least as many digits as ``a``.

    Raises :class:`OverflowError` when ``b`` is larger than ``a``.
    """
    if len(a) > len(b):
        raise ValueError("the subtrahend must have at least as many digits as the minuend")
    result = []
    borrow = 0
    for x, y in zip(a, b):
        borrow, digit = sbb(borrow, x, y)
        result.append(digit)
    if borrow or any(b[len(a):]):
        raise OverflowError(_UNDERFLOW)
    return result


def _normalized(digits: Iterable[int]) -> tuple[int, ...]:
    values = list(digits)
    while values and values[-1] == 0:
        values.pop()
    return tuple(values)


@total_ordering
class BigUint:
    """An immutable arbitrary-precision unsigned integer."""

    __slots__ = ("_digits",)

    def __init__(self, digits: Iterable[int] = ()) -> None:
        values = list(digits)
        for digit in values:
            if not 0 <= digit <= MAX:
                raise ValueError(f"digit {digit} does not fit in {BITS} bits")
        self._digits = _normalized(values)

    @classmethod
    def from_slice(cls, digits: Iterable[int]) -> BigUint:
        """Build a value from little-endian 32-bit digits."""
        return cls(digits)

    @classmethod
    def from_int(cls, value: int) -> BigUint:
        """Build a value from a non-negative Python integer."""
        return cls(split_digits(value))

    @property
    def digits(self) -> tuple[int, ...]:
        """The little-endian 32-bit digits, without trailing zeros."""
        return self._digits

    def __int__(self) -> int:
        return join_digits(self._digits)

    def __index__(self) -> int:
        return int(self)

    def __bool__(self) -> bool:
        return bool(self._digits)

    @staticmethod
    def _operand(other: object) -> tuple[int, ...] | None:
        if isinstance(other, BigUint):
            return other._digits
        if isinstance(other, int):
            return tuple(split_digits(other))
        return None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BigUint):
            return self._digits == other._digits
        if isinstance(other, int):
            return int(self) == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, (BigUint, int)):
            return int(self) < int(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(int(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"

    def __str__(self) -> str:
        return str(int(self))

    def __sub__(self, other: object) -> BigUint:
        digits = self._operand(other)
        if digits is None:
            return NotImplemented
        return BigUint(sub2(self._digits, digits))

    def __rsub__(self, other: object) -> BigUint:
        minuend = self._operand(other)
        if minuend is None:
            return NotImplemented
        subtrahend = self._digits
        count = len(subtrahend)
        if count < len(minuend):
            borrow = 0
            low = []
            for x, y in zip(minuend, subtrahend):
                borrow, digit = sbb(borrow, x, y)
                low.append(digit)
            high = list(minuend[count:])
            if borrow:
                high = sub2(high, [1])
            return BigUint(low + high)
        return BigUint(sub2rev(minuend, subtrahend))

    def __isub__(self, other: object) -> BigUint:
        # Values are immutable, so augmented subtraction rebinds to a new one.
        return self.__sub__(other)

    def checked_sub(self, other: BigUint | int) -> BigUint | None:
        """Return ``self - other``, or ``None`` when the result would be negative."""
        digits = self._operand(other)
        if digits is None:
            raise TypeError(f"unsupported operand type: {type(other).__name__}")
        rhs = BigUint(digits)
        if self < rhs:
            return None
        if self == rhs:
            return BigUint()
        return BigUint(sub2(self._digits, rhs._digits))