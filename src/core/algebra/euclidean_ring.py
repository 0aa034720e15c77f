"""
EuclideanRing — truncating division, remainder, gcd/lcm

Расширяет Ring операциями quot и mod и выводит из них:
    quotmod(a, b) = (quot(a, b), mod(a, b))
    gcd(a, b)     = алгоритм Евклида: (a, b) → (b, mod(a, b)) пока b != zero
    lcm(a, b)     = times(quot(a, gcd(a, b)), b)

Виды со своим gcd:
- Int32/Int64/BigInt/SafeLong — нативный math.gcd (результат ≥ 0)
- Float32/Double/BigDecimal/Rational — Евклид с "полом на единице":
  как только модуль одного из операндов меньше `one`, ответ — `one`

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. a == plus(times(quot(a, b), b), mod(a, b)) для любого b != zero
   в пределах представимого диапазона
2. gcd(a, b) делит и a, и b (с оговорками о точности дробных видов)
3. Деление на ноль следует нативной семантике вида:
   int/Fraction/Decimal — исключение, float — IEEE (nan)
4. Пороги "пола на единице" фиксированы и не конфигурируются
"""

import logging
import math
from abc import abstractmethod
from decimal import Decimal
from fractions import Fraction
from typing import Any

from src.core.algebra.config import RingConfig
from src.core.algebra.ring import (
    BigDecimalIsRing,
    BigIntIsRing,
    DoubleIsRing,
    FloatIsRing,
    IntIsRing,
    LongIsRing,
    Ring,
    RationalIsRing,
    SafeLongIsRing,
)
from src.core.numbers.fixed_width import SafeLong

logger = logging.getLogger(__name__)

# =============================================================================
# EUCLIDEAN RING
# =============================================================================


class EuclideanRing(Ring):
    """Ring с truncating division и remainder."""

    @abstractmethod
    def quot(self, a: Any, b: Any) -> Any:
        """Частное с усечением."""

    @abstractmethod
    def mod(self, a: Any, b: Any) -> Any:
        """Остаток, согласованный с quot."""

    def quotmod(self, a: Any, b: Any) -> tuple[Any, Any]:
        return self.quot(a, b), self.mod(a, b)

    def gcd(self, a: Any, b: Any) -> Any:
        return self.euclid(a, b)

    def lcm(self, a: Any, b: Any) -> Any:
        return self.times(self.quot(a, self.gcd(a, b)), b)

    def euclid(self, a: Any, b: Any) -> Any:
        """
        Классический алгоритм Евклида.

        Для целочисленных видов модуль остатка строго убывает, поэтому
        цикл конечен. gcd(zero, zero) == zero (цикл не выполняется).
        """
        while not self.eqv(b, self.zero):
            a, b = b, self.mod(a, b)
        return a


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def truncated_divmod(a: int, b: int) -> tuple[int, int]:
    """
    Целочисленное деление с усечением к нулю.

    В отличие от divmod (floor), знак остатка совпадает со знаком делимого.

    Raises:
        ZeroDivisionError: если b == 0

    Examples:
        >>> truncated_divmod(17, 5)
        (3, 2)
        >>> truncated_divmod(-17, 5)
        (-3, -2)
        >>> truncated_divmod(17, -5)
        (-3, 2)
    """
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


def ieee_fmod(a: float, b: float) -> float:
    """
    Остаток float по правилам IEEE/C fmod.

    Знак результата совпадает со знаком делимого. В отличие от
    math.fmod, не бросает ValueError: fmod(x, 0) и fmod(±inf, y) → nan.

    Examples:
        >>> ieee_fmod(5.5, 2.0)
        1.5
        >>> ieee_fmod(-5.5, 2.0)
        -1.5
        >>> ieee_fmod(1.0, 0.0)
        nan
    """
    if b == 0.0 or math.isinf(a) or math.isnan(a) or math.isnan(b):
        return math.nan
    return math.fmod(a, b)


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ ВИДЫ
# =============================================================================


class _IntegralIsEuclideanRing(EuclideanRing):
    """quot/mod через truncated_divmod, gcd через math.gcd."""

    def quot(self, a: Any, b: Any) -> Any:
        return self.from_int(truncated_divmod(a, b)[0])

    def mod(self, a: Any, b: Any) -> Any:
        return self.from_int(truncated_divmod(a, b)[1])

    def quotmod(self, a: Any, b: Any) -> tuple[Any, Any]:
        q, r = truncated_divmod(a, b)
        return self.from_int(q), self.from_int(r)

    def gcd(self, a: Any, b: Any) -> Any:
        return self.from_int(math.gcd(a, b))


class IntIsEuclideanRing(IntIsRing, _IntegralIsEuclideanRing):
    """Int32: MIN // -1 переполняется обратно в MIN."""

    pass


class LongIsEuclideanRing(LongIsRing, _IntegralIsEuclideanRing):
    pass


class BigIntIsEuclideanRing(BigIntIsRing, _IntegralIsEuclideanRing):
    pass


class SafeLongIsEuclideanRing(SafeLongIsRing, _IntegralIsEuclideanRing):
    def gcd(self, a: SafeLong, b: SafeLong) -> SafeLong:
        # Считаем gcd над plain int и возвращаемся в SafeLong
        return SafeLong(math.gcd(int(a), int(b)))


# =============================================================================
# FLOATING-POINT ВИДЫ
# =============================================================================


class _FloatingIsEuclideanRing(EuclideanRing):
    """
    quot(a, b) = (a - fmod(a, b)) / b
    mod(a, b)  = fmod(a, b)

    gcd: Евклид над |a|, |b| с полом на 1.0 — величины меньше единицы
    считаются взаимно простыми и дают ответ 1.0.
    Если в цикле появляется nan, результат nan.
    """

    def quot(self, a: Any, b: Any) -> Any:
        return self.kind(self.div(self.minus(a, self.mod(a, b)), b))

    def mod(self, a: Any, b: Any) -> Any:
        return self.kind(ieee_fmod(a, b))

    def gcd(self, a: Any, b: Any) -> Any:
        a, b = self.kind(abs(a)), self.kind(abs(b))
        while True:
            # inf превращается в nan после первого fmod; nan не сходится
            if math.isnan(a) or math.isnan(b):
                return self.kind(math.nan)
            if a < 1.0:
                return self.one
            if b == 0.0:
                return a
            if b < 1.0:
                return self.one
            a, b = b, self.mod(a, b)


class FloatIsEuclideanRing(FloatIsRing, _FloatingIsEuclideanRing):
    pass


class DoubleIsEuclideanRing(DoubleIsRing, _FloatingIsEuclideanRing):
    pass


# =============================================================================
# DECIMAL / RATIONAL
# =============================================================================


class BigDecimalIsEuclideanRing(BigDecimalIsRing, EuclideanRing):
    """
    quot — Decimal divide-integer (усечение), mod — Decimal remainder.

    gcd: пол ровно на `one` (Decimal(1)), а не на 1.0.
    """

    def quot(self, a: Decimal, b: Decimal) -> Decimal:
        return self.context.divide_int(a, b)

    def mod(self, a: Decimal, b: Decimal) -> Decimal:
        return self.context.remainder(a, b)

    def gcd(self, a: Decimal, b: Decimal) -> Decimal:
        a, b = self.context.abs(a), self.context.abs(b)
        one = self.one
        while True:
            if a < one:
                return one
            if b.is_zero():
                return a
            if b < one:
                return one
            a, b = b, self.mod(a, b)


class RationalIsEuclideanRing(RationalIsRing, EuclideanRing):
    """
    quot(a, b) = trunc(a / b), mod(a, b) = a - quot(a, b) * b.

    gcd: пол на точной единице Fraction(1).
    """

    def quot(self, a: Fraction, b: Fraction) -> Fraction:
        return Fraction(math.trunc(a / b))

    def mod(self, a: Fraction, b: Fraction) -> Fraction:
        return a - self.quot(a, b) * b

    def quotmod(self, a: Fraction, b: Fraction) -> tuple[Fraction, Fraction]:
        q = self.quot(a, b)
        return q, a - q * b

    def gcd(self, a: Fraction, b: Fraction) -> Fraction:
        a, b = abs(a), abs(b)
        one = self.one
        while True:
            if a < one:
                return one
            if b == 0:
                return a
            if b < one:
                return one
            a, b = b, self.mod(a, b)


# =============================================================================
# SINGLETONS
# =============================================================================

INT_RING = IntIsEuclideanRing()
LONG_RING = LongIsEuclideanRing()
FLOAT_RING = FloatIsEuclideanRing()
DOUBLE_RING = DoubleIsEuclideanRing()
BIG_INT_RING = BigIntIsEuclideanRing()
BIG_DECIMAL_RING = BigDecimalIsEuclideanRing()
RATIONAL_RING = RationalIsEuclideanRing()
SAFE_LONG_RING = SafeLongIsEuclideanRing()


def big_decimal_ring(config: RingConfig | None = None) -> BigDecimalIsEuclideanRing:
    """BigDecimal ring с заданной точностью/округлением."""
    if config is None:
        return BIG_DECIMAL_RING
    ring = BigDecimalIsEuclideanRing(config)
    logger.debug("Created %r", ring)
    return ring
