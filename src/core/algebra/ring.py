"""
Ring — базовая алгебраическая capability

Ring над числовым видом A: zero, one, plus, times, negate, minus, pow,
from_int, eqv. Плюс конверсия from_float, которой пользуется operator
sugar (src.core.algebra.ops).

Иерархия:
- Ring                       — абстрактная capability
- IntegralRing (mixin)       — целочисленные виды: signum
- FractionalRing (mixin)     — дробные виды: div, truncate, lt
- <Kind>IsRing               — конкретные виды (Int32, Int64, BigInt,
                               SafeLong, Float32, Double, BigDecimal, Rational)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ring stateless (кроме неизменяемой конфигурации) — безопасен для
   конкурентного использования без блокировок
2. Fixed-width виды нормализуют КАЖДЫЙ результат к своей разрядности
3. Ошибки нативной арифметики (деление на ноль и т.п.) не перехватываются
"""

import math
from abc import ABC, abstractmethod
from decimal import ROUND_DOWN, Decimal
from fractions import Fraction
from typing import Any, ClassVar

from src.core.algebra.config import RingConfig
from src.core.numbers.fixed_width import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    Float32,
    Int32,
    Int64,
    SafeLong,
)

# =============================================================================
# RING
# =============================================================================


class Ring(ABC):
    """
    Абстрактный ring над числовым видом `kind`.

    Подклассы обязаны определить zero, one, plus, times, negate, from_int.
    """

    kind: ClassVar[type] = object

    @property
    @abstractmethod
    def zero(self) -> Any:
        """Аддитивная единица."""

    @property
    @abstractmethod
    def one(self) -> Any:
        """Мультипликативная единица."""

    @abstractmethod
    def plus(self, a: Any, b: Any) -> Any:
        ...

    @abstractmethod
    def times(self, a: Any, b: Any) -> Any:
        ...

    @abstractmethod
    def negate(self, a: Any) -> Any:
        ...

    @abstractmethod
    def from_int(self, n: int) -> Any:
        """Вложение целого числа в ring."""

    def from_float(self, x: float) -> Any:
        """Вложение float в ring (по умолчанию не поддерживается)."""
        raise TypeError(f"{type(self).__name__} cannot embed float {x!r}")

    def minus(self, a: Any, b: Any) -> Any:
        return self.plus(a, self.negate(b))

    def eqv(self, a: Any, b: Any) -> bool:
        return a == b

    def is_zero(self, a: Any) -> bool:
        return self.eqv(a, self.zero)

    def pow(self, a: Any, n: int) -> Any:
        """
        Возведение в неотрицательную целую степень (square-and-multiply).

        Raises:
            ValueError: если n < 0
        """
        if n < 0:
            raise ValueError(f"Exponent must be non-negative, got {n}")

        result = self.one
        base = a
        while n:
            if n & 1:
                result = self.times(result, base)
            n >>= 1
            if n:
                base = self.times(base, base)
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class IntegralRing(Ring):
    """Ring над целочисленным видом."""

    def signum(self, a: Any) -> int:
        return (a > 0) - (a < 0)


class FractionalRing(Ring):
    """Ring над дробным видом (field): деление, усечение, порядок."""

    @abstractmethod
    def div(self, a: Any, b: Any) -> Any:
        """Деление в поле."""

    @abstractmethod
    def truncate(self, a: Any) -> Any:
        """Отбрасывание дробной части (к нулю), результат того же вида."""

    def lt(self, a: Any, b: Any) -> bool:
        return a < b


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ ВИДЫ
# =============================================================================


class _FixedWidthIsRing(IntegralRing):
    """Общая реализация для Int32/Int64: wrap каждого результата."""

    min_value: ClassVar[int]
    max_value: ClassVar[int]

    @property
    def zero(self) -> Any:
        return self.kind(0)

    @property
    def one(self) -> Any:
        return self.kind(1)

    def plus(self, a: Any, b: Any) -> Any:
        return self.kind(a + b)

    def times(self, a: Any, b: Any) -> Any:
        return self.kind(a * b)

    def negate(self, a: Any) -> Any:
        return self.kind(-a)

    def minus(self, a: Any, b: Any) -> Any:
        return self.kind(a - b)

    def from_int(self, n: int) -> Any:
        return self.kind(n)

    def from_float(self, x: float) -> Any:
        # Насыщающая конверсия: NaN → 0, за пределами диапазона → MIN/MAX
        if math.isnan(x):
            return self.kind(0)
        if x >= self.max_value:
            return self.kind(self.max_value)
        if x <= self.min_value:
            return self.kind(self.min_value)
        return self.kind(math.trunc(x))


class IntIsRing(_FixedWidthIsRing):
    kind = Int32
    min_value = INT32_MIN
    max_value = INT32_MAX


class LongIsRing(_FixedWidthIsRing):
    kind = Int64
    min_value = INT64_MIN
    max_value = INT64_MAX


class BigIntIsRing(IntegralRing):
    kind = int

    @property
    def zero(self) -> int:
        return 0

    @property
    def one(self) -> int:
        return 1

    def plus(self, a: int, b: int) -> int:
        return a + b

    def times(self, a: int, b: int) -> int:
        return a * b

    def negate(self, a: int) -> int:
        return -a

    def minus(self, a: int, b: int) -> int:
        return a - b

    def from_int(self, n: int) -> int:
        return int(n)

    def from_float(self, x: float) -> int:
        return math.trunc(x)


class SafeLongIsRing(IntegralRing):
    kind = SafeLong

    @property
    def zero(self) -> SafeLong:
        return SafeLong(0)

    @property
    def one(self) -> SafeLong:
        return SafeLong(1)

    def plus(self, a: SafeLong, b: SafeLong) -> SafeLong:
        return SafeLong(a + b)

    def times(self, a: SafeLong, b: SafeLong) -> SafeLong:
        return SafeLong(a * b)

    def negate(self, a: SafeLong) -> SafeLong:
        return SafeLong(-a)

    def minus(self, a: SafeLong, b: SafeLong) -> SafeLong:
        return SafeLong(a - b)

    def from_int(self, n: int) -> SafeLong:
        return SafeLong(n)

    def from_float(self, x: float) -> SafeLong:
        return SafeLong(math.trunc(x))


# =============================================================================
# ДРОБНЫЕ ВИДЫ
# =============================================================================


def ieee_divide(a: float, b: float) -> float:
    """
    Деление float по правилам IEEE-754.

    В отличие от оператора `/`, деление на ноль не бросает исключение:
        x / ±0 → ±inf (знак по правилу знаков), 0 / 0 → nan, nan / 0 → nan

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


class _FloatingIsRing(FractionalRing):
    """Общая реализация для Float32/Double: kind() округляет результат."""

    @property
    def zero(self) -> Any:
        return self.kind(0.0)

    @property
    def one(self) -> Any:
        return self.kind(1.0)

    def plus(self, a: Any, b: Any) -> Any:
        return self.kind(a + b)

    def times(self, a: Any, b: Any) -> Any:
        return self.kind(a * b)

    def negate(self, a: Any) -> Any:
        return self.kind(-a)

    def minus(self, a: Any, b: Any) -> Any:
        return self.kind(a - b)

    def from_int(self, n: int) -> Any:
        return self.kind(float(n))

    def from_float(self, x: float) -> Any:
        return self.kind(x)

    def div(self, a: Any, b: Any) -> Any:
        return self.kind(ieee_divide(a, b))

    def truncate(self, a: Any) -> Any:
        if not math.isfinite(a):
            return a
        # copysign сохраняет -0.0 для отрицательных дробей
        return self.kind(math.copysign(float(math.trunc(a)), a))


class FloatIsRing(_FloatingIsRing):
    kind = Float32


class DoubleIsRing(_FloatingIsRing):
    kind = float


class BigDecimalIsRing(FractionalRing):
    """
    Ring над Decimal.

    Вся арифметика выполняется через методы decimal.Context, построенного
    из RingConfig, независимо от thread-local контекста вызывающего кода.
    """

    kind = Decimal

    def __init__(self, config: RingConfig | None = None):
        self.config = config or RingConfig()
        self.context = self.config.decimal_context()

    @property
    def zero(self) -> Decimal:
        return Decimal(0)

    @property
    def one(self) -> Decimal:
        return Decimal(1)

    def plus(self, a: Decimal, b: Decimal) -> Decimal:
        return self.context.add(a, b)

    def times(self, a: Decimal, b: Decimal) -> Decimal:
        return self.context.multiply(a, b)

    def negate(self, a: Decimal) -> Decimal:
        return self.context.minus(a)

    def minus(self, a: Decimal, b: Decimal) -> Decimal:
        return self.context.subtract(a, b)

    def from_int(self, n: int) -> Decimal:
        return self.context.create_decimal(n)

    def from_float(self, x: float) -> Decimal:
        return self.context.create_decimal_from_float(x)

    def div(self, a: Decimal, b: Decimal) -> Decimal:
        return self.context.divide(a, b)

    def truncate(self, a: Decimal) -> Decimal:
        return a.to_integral_value(rounding=ROUND_DOWN, context=self.context)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(precision={self.config.decimal_precision}, "
            f"rounding={self.config.decimal_rounding})"
        )


class RationalIsRing(FractionalRing):
    kind = Fraction

    @property
    def zero(self) -> Fraction:
        return Fraction(0)

    @property
    def one(self) -> Fraction:
        return Fraction(1)

    def plus(self, a: Fraction, b: Fraction) -> Fraction:
        return a + b

    def times(self, a: Fraction, b: Fraction) -> Fraction:
        return a * b

    def negate(self, a: Fraction) -> Fraction:
        return -a

    def minus(self, a: Fraction, b: Fraction) -> Fraction:
        return a - b

    def from_int(self, n: int) -> Fraction:
        return Fraction(n)

    def from_float(self, x: float) -> Fraction:
        return Fraction(x)

    def div(self, a: Fraction, b: Fraction) -> Fraction:
        return a / b

    def truncate(self, a: Fraction) -> Fraction:
        return Fraction(math.trunc(a))
