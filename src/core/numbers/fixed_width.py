"""
Fixed-Width & Safe Numeric Kinds

Python `int` и `float` не различают разрядность, поэтому машинные виды
представлены тонкими подклассами:
- Int32 / Int64 — знаковые целые с two's complement переполнением (wrap)
- Float32 — IEEE-754 binary32 (округление при создании)
- SafeLong — целое произвольной точности, отдельный вид для ring lookup

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Конструктор всегда нормализует значение в диапазон вида
2. Арифметика самих подклассов возвращает plain int/float; разрядность
   восстанавливает ring (см. src.core.algebra.ring)
"""

import math
import struct
from typing import Final

# =============================================================================
# ГРАНИЦЫ ДИАПАЗОНОВ
# =============================================================================

INT32_BITS: Final[int] = 32
INT64_BITS: Final[int] = 64

INT32_MIN: Final[int] = -(2 ** (INT32_BITS - 1))
INT32_MAX: Final[int] = 2 ** (INT32_BITS - 1) - 1
INT64_MIN: Final[int] = -(2 ** (INT64_BITS - 1))
INT64_MAX: Final[int] = 2 ** (INT64_BITS - 1) - 1


# =============================================================================
# WRAP / ROUND
# =============================================================================


def wrap_signed(value: int, bits: int) -> int:
    """
    Приведение целого к знаковому диапазону заданной разрядности.

    Эквивалент two's complement переполнения машинного целого.

    Args:
        value: Исходное целое (произвольной величины)
        bits: Разрядность (32, 64, ...)

    Returns:
        Значение в [-2**(bits-1), 2**(bits-1) - 1]

    Examples:
        >>> wrap_signed(2**31, 32)
        -2147483648
        >>> wrap_signed(-1, 32)
        -1
    """
    half = 1 << (bits - 1)
    return ((value + half) % (1 << bits)) - half


def round_to_float32(value: float) -> float:
    """
    Округление float до ближайшего IEEE-754 binary32.

    Конечные значения за пределами диапазона binary32 превращаются в ±inf,
    NaN сохраняется.

    Examples:
        >>> round_to_float32(0.1)
        0.10000000149011612
        >>> round_to_float32(1e39)
        inf
    """
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


# =============================================================================
# ВИДЫ
# =============================================================================


class Int32(int):
    """Знаковое 32-битное целое."""

    __slots__ = ()

    def __new__(cls, value: int = 0) -> "Int32":
        return super().__new__(cls, wrap_signed(int(value), INT32_BITS))

    def __repr__(self) -> str:
        return f"Int32({int(self)})"


class Int64(int):
    """Знаковое 64-битное целое."""

    __slots__ = ()

    def __new__(cls, value: int = 0) -> "Int64":
        return super().__new__(cls, wrap_signed(int(value), INT64_BITS))

    def __repr__(self) -> str:
        return f"Int64({int(self)})"


class SafeLong(int):
    """
    Целое произвольной точности как отдельный вид.

    По значению совпадает с `int`, но резолвится в собственный ring
    (SafeLongIsEuclideanRing).
    """

    __slots__ = ()

    def __new__(cls, value: int = 0) -> "SafeLong":
        return super().__new__(cls, int(value))

    def __repr__(self) -> str:
        return f"SafeLong({int(self)})"


class Float32(float):
    """IEEE-754 binary32 число."""

    __slots__ = ()

    def __new__(cls, value: float = 0.0) -> "Float32":
        return super().__new__(cls, round_to_float32(float(value)))

    def __repr__(self) -> str:
        return f"Float32({float(self)!r})"
