# limbarith

Arbitrary-precision unsigned integers kept as little-endian 32-bit limbs,
with exact, borrow-propagating subtraction.

## Installation

```
pip install limbarith
```

The package has no runtime dependencies. To run the test suite:

```
pip install "limbarith[test]"
pytest
```

## Usage

```python
from limbarith.biguint import BigUint

a = BigUint.from_slice([0, 0, 1])   # 2**64
b = BigUint.from_int(1)

c = a - b
print(c.digits)        # (4294967295, 4294967295)
print(int(c))          # 18446744073709551615
print(c)               # 18446744073709551615
print(repr(b))         # BigUint(1)

# Plain non-negative ints work on either side of the operator.
print(int(10 - BigUint.from_int(3)))   # 7

c -= 5                 # rebinds c to a new value
print(int(c))          # 18446744073709551610

# Subtracting a larger value raises instead of wrapping around.
try:
    BigUint.from_int(1) - 2
except OverflowError as exc:
    print(exc)         # Cannot subtract b from a because b is larger than a.

# checked_sub returns None when the result would be negative.
print(BigUint.from_int(1).checked_sub(BigUint.from_int(2)))   # None
```

`BigUint` values are immutable and hashable. They compare with each other
and with plain ints (`==`, `<`, `<=`, `>`, `>=`), convert with `int()`, can
be used wherever an index is expected, and are false only when zero.
Trailing zero limbs are dropped, so `BigUint([1, 0, 0]) == BigUint([1])`.
A limb outside `0 .. 2**32 - 1` raises `ValueError`.

### Limb routines

`limbarith.biguint` also exposes the subtraction routines that work on limb
sequences directly:

- `sbb(borrow, a, b)` returns `(borrow_out, digit)` for one limb.
- `sub2(a, b)` returns the limbs of `a - b`, with the length of `a`.
- `sub2rev(a, b)` returns the limbs of `a - b` when `b` has at least as many
  limbs as `a` (otherwise `ValueError`).

Both `sub2` and `sub2rev` raise `OverflowError` when `b` is larger than `a`.

### Limb helpers

`limbarith.digits` converts between Python integers and limbs:

```python
from limbarith.digits import split_digits, join_digits, from_double_digit, to_double_digit

split_digits(2**64)            # [0, 0, 1]
join_digits([0, 0, 1])         # 18446744073709551616
from_double_digit(2**32 + 5)   # (1, 5)  -> (hi, lo)
to_double_digit(1, 5)          # 4294967301
```

Negative values, limbs wider than 32 bits and double limbs wider than
64 bits raise `ValueError`.

### Errors

`limbarith.errors` defines `ParseBigIntError` (a `ValueError`) with the kinds
`BigIntErrorKind.EMPTY` and `BigIntErrorKind.INVALID_DIGIT`, built with
`ParseBigIntError.empty()` and `ParseBigIntError.invalid()`, and
`TryFromBigIntError` (a `ValueError`), which keeps the value that could not
be converted (`into_original()`). They are provided for callers to raise;
nothing else in the package raises them.

## What the package does not do

`BigUint` supports subtraction, comparison and conversion to and from
Python integers and limb lists. It has no addition, multiplication,
division, shifts or bitwise operations of its own, no signed big-integer
type, and no parsing from text in other radixes or formatting other than
decimal.