"""
Тесты для Fixed-Width & Safe Numeric Kinds

Проверяет:
1. Two's complement wrap для Int32/Int64
2. Округление Float32 до binary32 (включая overflow → inf)
3. SafeLong как отдельный вид без ограничения разрядности
"""

import math

import pytest

from src.core.numbers import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    Float32,
    Int32,
    Int64,
    SafeLong,
    round_to_float32,
    wrap_signed,
)

# =============================================================================
# WRAP
# =============================================================================


class TestWrapSigned:
    """Тесты wrap_signed"""

    def test_in_range_unchanged(self) -> None:
        """Значения в диапазоне не меняются"""
        assert wrap_signed(0, 32) == 0
        assert wrap_signed(-1, 32) == -1
        assert wrap_signed(INT32_MAX, 32) == INT32_MAX
        assert wrap_signed(INT32_MIN, 32) == INT32_MIN

    def test_overflow_wraps(self) -> None:
        """Переполнение заворачивается по модулю 2**bits"""
        assert wrap_signed(INT32_MAX + 1, 32) == INT32_MIN
        assert wrap_signed(INT32_MIN - 1, 32) == INT32_MAX
        assert wrap_signed(255, 8) == -1
        assert wrap_signed(2**64 + 5, 64) == 5


class TestInt32:
    """Тесты Int32"""

    def test_constructor_wraps(self) -> None:
        assert Int32(2**31) == INT32_MIN
        assert Int32(2**32 + 5) == 5
        assert Int32(-(2**31) - 1) == INT32_MAX

    def test_is_int(self) -> None:
        """Int32 — подкласс int"""
        value = Int32(7)
        assert isinstance(value, int)
        assert type(value) is Int32

    def test_repr(self) -> None:
        assert repr(Int32(-3)) == "Int32(-3)"


class TestInt64:
    """Тесты Int64"""

    def test_constructor_wraps(self) -> None:
        assert Int64(2**63) == INT64_MIN
        assert Int64(2**63 - 1) == INT64_MAX
        assert Int64(2**64) == 0

    def test_repr(self) -> None:
        assert repr(Int64(10)) == "Int64(10)"


# =============================================================================
# FLOAT32
# =============================================================================


class TestFloat32:
    """Тесты Float32 и round_to_float32"""

    def test_rounds_to_binary32(self) -> None:
        """0.1 не представимо точно: берётся ближайшее binary32"""
        assert Float32(0.1) == 0.10000000149011612
        assert Float32(0.1) != 0.1

    def test_exact_values_unchanged(self) -> None:
        assert Float32(1.5) == 1.5
        assert Float32(-0.25) == -0.25

    def test_overflow_to_infinity(self) -> None:
        """Конечные значения за пределами binary32 → ±inf"""
        assert round_to_float32(1e39) == math.inf
        assert round_to_float32(-1e39) == -math.inf
        assert Float32(1e300) == math.inf

    def test_max_float32_preserved(self) -> None:
        max_f32 = 3.4028234663852886e38
        assert Float32(max_f32) == max_f32

    def test_nan_preserved(self) -> None:
        assert math.isnan(Float32(math.nan))

    def test_type(self) -> None:
        value = Float32(2.0)
        assert isinstance(value, float)
        assert type(value) is Float32
        assert repr(value) == "Float32(2.0)"


# =============================================================================
# SAFELONG
# =============================================================================


class TestSafeLong:
    """Тесты SafeLong"""

    def test_arbitrary_precision(self) -> None:
        """SafeLong не переполняется"""
        big = 10**30
        assert SafeLong(big) == big
        assert type(SafeLong(big)) is SafeLong

    def test_distinct_from_int(self) -> None:
        assert type(SafeLong(1)) is not int
        assert repr(SafeLong(5)) == "SafeLong(5)"

    @pytest.mark.parametrize("value", [0, -1, 2**100, -(2**100)])
    def test_value_roundtrip(self, value: int) -> None:
        assert int(SafeLong(value)) == value
