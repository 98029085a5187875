import pytest

from limbarith.digits import (
    BITS,
    DOUBLE_MAX,
    HALF,
    HALF_BITS,
    MAX,
    from_double_digit,
    join_digits,
    split_digits,
    to_double_digit,
)


def test_constants_are_consistent():
    assert HALF_BITS * 2 == BITS
    assert to_double_digit(MAX, MAX) == DOUBLE_MAX
    assert from_double_digit(HALF) == (0, HALF)
    assert from_double_digit(1 << BITS) == (1, 0)
    assert join_digits([0, 1]) == 1 << BITS
    assert split_digits(MAX) == [MAX]


def test_from_double_digit_max():
    assert from_double_digit(DOUBLE_MAX) == (MAX, MAX)


def test_from_double_digit_zero():
    assert from_double_digit(0) == (0, 0)


@pytest.mark.parametrize("n", [0, 1, MAX, MAX + 1, 0x0123456789ABCDEF, DOUBLE_MAX])
def test_double_digit_round_trip(n):
    hi, lo = from_double_digit(n)
    assert 0 <= hi <= MAX and 0 <= lo <= MAX
    assert to_double_digit(hi, lo) == n


def test_to_double_digit_places_high_digit():
    assert to_double_digit(1, 0) == MAX + 1
    assert to_double_digit(0, MAX) == MAX


@pytest.mark.parametrize("n", [-1, DOUBLE_MAX + 1])
def test_from_double_digit_out_of_range(n):
    with pytest.raises(ValueError):
        from_double_digit(n)


@pytest.mark.parametrize("hi, lo", [(MAX + 1, 0), (0, MAX + 1), (-1, 0), (0, -1)])
def test_to_double_digit_out_of_range(hi, lo):
    with pytest.raises(ValueError):
        to_double_digit(hi, lo)


def test_split_zero_is_empty():
    assert split_digits(0) == []


@pytest.mark.parametrize("value", [1, MAX, MAX + 1, 2**100 + 7, 3**200, 1 << (BITS * 5)])
def test_split_join_round_trip(value):
    digits = split_digits(value)
    assert all(0 <= d <= MAX for d in digits)
    assert digits[-1] != 0
    assert join_digits(digits) == value


def test_split_digit_count():
    assert len(split_digits(1 << (BITS * 3))) == 4
    assert len(split_digits((1 << (BITS * 3)) - 1)) == 3


def test_join_ignores_trailing_zeros():
    assert join_digits([5, 0, 0]) == join_digits([5])


def test_join_accepts_generator():
    assert join_digits(d for d in [0, 1]) == MAX + 1


def test_split_negative_raises():
    with pytest.raises(ValueError):
        split_digits(-1)


def test_join_rejects_oversized_digit():
    with pytest.raises(ValueError):
        join_digits([MAX + 1])