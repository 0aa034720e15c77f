"""Property test: Euclidean ring invariants.

Uses hypothesis to verify the division identity, remainder bounds and
gcd/lcm laws across integral, fractional, Gaussian and Number kinds.
"""

import math
from decimal import Decimal
from fractions import Fraction

from hypothesis import assume, given, settings, strategies as st

from src.core.algebra import (
    BIG_DECIMAL_RING,
    BIG_INT_RING,
    DOUBLE_RING,
    INT_RING,
    NUMBER_RING,
    RATIONAL_RING,
    gaussian_ring,
)
from src.core.numbers import INT32_MAX, INT32_MIN, Gaussian, Int32, Number

big_ints = st.integers(min_value=-(10**12), max_value=10**12)
int32s = st.integers(min_value=INT32_MIN, max_value=INT32_MAX).map(Int32)
fractions = st.fractions(min_value=-1000, max_value=1000, max_denominator=100)
doubles = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False)
decimals = st.decimals(
    min_value=Decimal("-100000"),
    max_value=Decimal("100000"),
    places=3,
    allow_nan=False,
    allow_infinity=False,
)
gaussians = st.builds(
    Gaussian,
    st.integers(min_value=-(10**6), max_value=10**6),
    st.integers(min_value=-(10**6), max_value=10**6),
)


def _sign(x) -> int:
    return (x > 0) - (x < 0)


# =============================================================================
# INTEGRAL KINDS
# =============================================================================


@given(a=big_ints, b=big_ints)
@settings(max_examples=200)
def test_big_int_division_identity(a, b):
    """a == quot(a, b) * b + mod(a, b); остаток со знаком делимого."""
    assume(b != 0)
    q, r = BIG_INT_RING.quotmod(a, b)
    assert q * b + r == a
    assert abs(r) < abs(b)
    assert r == 0 or _sign(r) == _sign(a)


@given(a=int32s, b=int32s)
@settings(max_examples=200)
def test_int32_division_identity_wraps(a, b):
    """Тождество деления выполняется в арифметике по модулю 2**32."""
    assume(b != 0)
    q, r = INT_RING.quotmod(a, b)
    assert INT_RING.plus(INT_RING.times(q, b), r) == a
    assert type(q) is Int32
    assert type(r) is Int32


@given(a=int32s, b=int32s)
def test_int32_gcd_commutative(a, b):
    assert INT_RING.gcd(a, b) == INT_RING.gcd(b, a)


@given(a=big_ints, b=big_ints)
@settings(max_examples=200)
def test_big_int_gcd_divides_both(a, b):
    assume(a != 0 or b != 0)
    g = BIG_INT_RING.gcd(a, b)
    assert g > 0
    assert a % g == 0
    assert b % g == 0
    assert g == BIG_INT_RING.gcd(b, a)


@given(a=big_ints, b=big_ints)
def test_big_int_lcm_times_gcd(a, b):
    """|lcm(a, b)| * gcd(a, b) == |a * b|"""
    assume(a != 0 or b != 0)
    g = BIG_INT_RING.gcd(a, b)
    m = BIG_INT_RING.lcm(a, b)
    assert abs(m) * g == abs(a * b)


# =============================================================================
# FRACTIONAL KINDS
# =============================================================================


@given(a=fractions, b=fractions)
@settings(max_examples=200)
def test_rational_division_identity(a, b):
    """quot — целое с усечением, остаток меньше делителя."""
    assume(b != 0)
    q, r = RATIONAL_RING.quotmod(a, b)
    assert q.denominator == 1
    assert q * b + r == a
    assert abs(r) < abs(b)
    assert r == 0 or _sign(r) == _sign(a)


@given(a=fractions, b=fractions)
@settings(max_examples=200)
def test_rational_gcd_floored_at_one(a, b):
    g = RATIONAL_RING.gcd(a, b)
    assert g >= 1
    if abs(a) < 1 or (b != 0 and abs(b) < 1):
        assert g == 1


@given(a=doubles, b=doubles)
@settings(max_examples=200)
def test_double_mod_bounds(a, b):
    """fmod: |r| < |b|, знак остатка совпадает со знаком делимого."""
    assume(b != 0.0)
    r = DOUBLE_RING.mod(a, b)
    assert abs(r) < abs(b)
    assert r == 0.0 or math.copysign(1.0, r) == math.copysign(1.0, a)


@given(a=doubles, b=doubles)
@settings(max_examples=200)
def test_double_gcd_floored_at_one(a, b):
    g = DOUBLE_RING.gcd(a, b)
    assert g >= 1.0
    if abs(a) < 1.0:
        assert g == 1.0


@given(a=decimals, b=decimals)
@settings(max_examples=200)
def test_decimal_gcd_floored_at_one(a, b):
    g = BIG_DECIMAL_RING.gcd(a, b)
    assert g >= 1
    if abs(a) < 1:
        assert g == 1


@given(a=decimals, b=decimals)
def test_decimal_division_identity(a, b):
    assume(b != 0)
    q, r = BIG_DECIMAL_RING.quotmod(a, b)
    assert q == q.to_integral_value()
    assert q * b + r == a
    assert abs(r) < abs(b)


# =============================================================================
# GAUSSIAN
# =============================================================================


@given(a=gaussians, b=gaussians)
@settings(max_examples=200)
def test_gaussian_remainder_norm_halves(a, b):
    """2 * N(a mod b) <= N(b): алгоритм Евклида сходится."""
    ring = gaussian_ring()
    assume(b != ring.zero)
    q, r = ring.quotmod(a, b)
    assert ring.plus(ring.times(q, b), r) == a
    assert 2 * ring.norm(r) <= ring.norm(b)


@given(a=gaussians, b=gaussians)
@settings(max_examples=100)
def test_gaussian_gcd_divides_both(a, b):
    ring = gaussian_ring()
    assume(a != ring.zero or b != ring.zero)
    g = ring.gcd(a, b)
    assert ring.mod(a, g) == ring.zero
    assert ring.mod(b, g) == ring.zero


# =============================================================================
# NUMBER
# =============================================================================


@given(a=st.one_of(big_ints, fractions), b=fractions)
@settings(max_examples=200)
def test_number_matches_rational_ring(a, b):
    """Смешанные INTEGER/RATIONAL операнды делегируются RATIONAL_RING."""
    assume(b != 0)
    expected = RATIONAL_RING.quotmod(Fraction(a), b)
    q, r = NUMBER_RING.quotmod(Number.of(a), Number.of(b))
    assert (q.value, r.value) == expected


@given(a=big_ints, b=big_ints)
def test_number_integer_gcd_matches_big_int(a, b):
    """Обобщённый Евклид совпадает с math.gcd с точностью до знака."""
    g = NUMBER_RING.gcd(Number.of(a), Number.of(b))
    assert abs(g.value) == BIG_INT_RING.gcd(a, b)
