# tests/test_arith.py

import random

import pytest

from eafcal.core.arith import INT32, INT64, IntWidth, int_width, quotient, remainder, tdiv, tmod


def test_euclidean_division_small():
    assert (quotient(7, 4), remainder(7, 4)) == (1, 3)
    assert (quotient(-1, 4), remainder(-1, 4)) == (-1, 3)
    assert (quotient(-4, 4), remainder(-4, 4)) == (-1, 0)
    assert (quotient(-5, 4), remainder(-5, 4)) == (-2, 3)


def test_euclidean_division_matches_divmod():
    random.seed(7)
    for _ in range(5000):
        n = random.randint(-10**12, 10**12)
        d = random.choice([4, 5, 100, 153, 1461, 146097, random.randint(1, 10**6)])
        q, r = quotient(n, d), remainder(n, d)
        assert q * d + r == n
        assert 0 <= r < d
        assert (q, r) == divmod(n, d)


def test_non_positive_divisor_rejected():
    with pytest.raises(ValueError):
        quotient(1, 0)
    with pytest.raises(ValueError):
        remainder(1, -3)


def test_truncating_division():
    assert tdiv(-7, 2) == -3
    assert tmod(-7, 2) == -1
    assert tdiv(7, -2) == -3
    assert tmod(7, -2) == 1
    assert tdiv(-2147483648, 1461) == -1469872


def test_int_width_ranges():
    assert (INT32.min, INT32.max, INT32.umax) == (-2**31, 2**31 - 1, 2**32 - 1)
    assert (INT64.min, INT64.max, INT64.umax) == (-2**63, 2**63 - 1, 2**64 - 1)
    assert int_width(32) is INT32
    assert INT32.contains(-2**31) and not INT32.contains(2**31)


def test_int_width_wrapping():
    assert INT32.wrap_unsigned(-1) == 2**32 - 1
    assert INT32.wrap_unsigned(2**32 + 5) == 5
    assert INT32.wrap_signed(2**31) == -2**31
    assert INT32.wrap_signed(2**32 - 1) == -1
    assert INT64.wrap_signed(2**63 + 1) == -2**63 + 1


def test_int_width_rejects_other_sizes():
    with pytest.raises(ValueError):
        IntWidth(16)
