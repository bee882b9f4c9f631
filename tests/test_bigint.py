import random

import pytest
from hypothesis import given, strategies as st

from limbint.bigint import BigInt

medium = st.integers(min_value=-(10**60), max_value=10**60)
nonzero = medium.filter(lambda n: n != 0)
long_positive = st.integers(min_value=10**900, max_value=10**909 - 1)


@given(medium)
def test_int_round_trip(n):
    assert int(BigInt(n)) == n


@given(medium)
def test_string_round_trip(n):
    assert str(BigInt(str(n))) == str(n)
    assert BigInt(str(n)) == BigInt(n)


def test_limb_boundaries_print_with_padding():
    value = 10**18 + 5
    assert str(BigInt(value)) == str(value)
    assert str(BigInt(-value)) == str(-value)


def test_num_digits_counts_limbs():
    assert BigInt(10**9).num_digits() == 2
    assert BigInt(10**9 - 1).num_digits() == 1
    assert BigInt(0).num_digits() == 1


def test_from_limbs_builds_value():
    assert int(BigInt.from_limbs([5, 1])) == 1 * 10**9 + 5
    assert int(BigInt.from_limbs([5, 1], negative=True)) == -(10**9 + 5)


def test_from_limbs_strips_high_zeros():
    assert BigInt.from_limbs([7, 0, 0]) == BigInt(7)


@pytest.mark.parametrize("limbs", [[10**9], [-1], [1, 10**9 + 3]])
def test_from_limbs_rejects_out_of_range(limbs):
    with pytest.raises(ValueError):
        BigInt.from_limbs(limbs)


@pytest.mark.parametrize("text", ["", "-", "12a", "1.5", " 12", "--3"])
def test_invalid_strings_rejected(text):
    with pytest.raises(ValueError):
        BigInt(text)


def test_unsupported_type_rejected():
    with pytest.raises(TypeError):
        BigInt(1.5)


def test_negative_zero_normalised():
    assert str(BigInt("-0")) == "0"
    assert str(BigInt(-5) - BigInt(-5)) == "0"
    assert BigInt("-000") == BigInt(0)


def test_leading_zeros_in_string():
    assert BigInt("0000000000000123") == BigInt(123)


@given(medium, medium)
def test_addition_matches_int(a, b):
    assert int(BigInt(a) + BigInt(b)) == a + b


@given(medium, medium)
def test_subtraction_matches_int(a, b):
    assert int(BigInt(a) - BigInt(b)) == a - b


@given(medium, medium)
def test_multiplication_matches_int(a, b):
    assert int(BigInt(a) * BigInt(b)) == a * b


@given(long_positive, long_positive, st.booleans(), st.booleans())
def test_long_multiplication_matches_int(a, b, neg_a, neg_b):
    a = -a if neg_a else a
    b = -b if neg_b else b
    assert int(BigInt(a) * BigInt(b)) == a * b


@given(medium, nonzero)
def test_division_invariant(a, b):
    q = BigInt(a) // BigInt(b)
    r = BigInt(a) % BigInt(b)
    assert int(q) * b + int(r) == a
    assert abs(int(r)) < abs(b)
    assert int(r) == 0 or (int(r) < 0) == (a < 0)


@given(long_positive, st.integers(min_value=2, max_value=10**400))
def test_long_division_invariant(a, b):
    q = BigInt(a) // BigInt(b)
    r = BigInt(a) % BigInt(b)
    assert q * BigInt(b) + r == BigInt(a)
    assert BigInt(0) <= r < BigInt(b)


def test_division_truncates_toward_zero():
    assert BigInt(-7) // BigInt(2) == BigInt(-3)
    assert BigInt(-7) % BigInt(2) == BigInt(-1)


def test_division_equal_magnitudes():
    assert BigInt(-12345678901234) // BigInt(12345678901234) == BigInt(-1)
    assert BigInt(-12345678901234) % BigInt(12345678901234) == BigInt(0)


def test_smaller_dividend_keeps_value_as_remainder():
    assert BigInt(-5) // BigInt(10**20) == BigInt(0)
    assert BigInt(-5) % BigInt(10**20) == BigInt(-5)


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        BigInt(5) // BigInt(0)
    with pytest.raises(ZeroDivisionError):
        BigInt(5) % 0


@given(medium, medium)
def test_ordering_matches_int(a, b):
    x, y = BigInt(a), BigInt(b)
    assert (x < y) == (a < b)
    assert (x <= y) == (a <= b)
    assert (x > y) == (a > b)
    assert (x >= y) == (a >= b)
    assert (x == y) == (a == b)


@given(medium)
def test_hash_matches_int(n):
    assert hash(BigInt(n)) == hash(n)


def test_mixed_operands_with_int():
    assert BigInt(10**30) + 1 == 10**30 + 1
    assert BigInt(3) * 4 == BigInt(12)


def test_comparison_with_other_type():
    assert (BigInt(1) == "1") is False
    with pytest.raises(TypeError):
        BigInt(1) < "1"


def test_copy_constructor_and_repr():
    original = BigInt(-98765432109876543210)
    copy = BigInt(original)
    assert copy == original
    assert repr(copy) == "BigInt('-98765432109876543210')"