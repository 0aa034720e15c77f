"""
NumberIsEuclideanRing — ring над tagged numeric union

Каждая операция:
1. Выбирает более широкий вид операндов (INTEGER < RATIONAL < FLOAT < DECIMAL)
2. Продвигает оба значения к этому виду
3. Делегирует операцию ring'у вида и тегирует результат

gcd — обобщённый алгоритм Евклида поверх делегированного mod; для FLOAT
появление nan завершает цикл результатом nan.
"""

import math
from fractions import Fraction
from typing import Any, Callable

from src.core.algebra.euclidean_ring import (
    BIG_DECIMAL_RING,
    BIG_INT_RING,
    DOUBLE_RING,
    RATIONAL_RING,
    EuclideanRing,
)
from src.core.numbers.number import Number, NumberKind

KIND_RINGS: dict[NumberKind, EuclideanRing] = {
    NumberKind.INTEGER: BIG_INT_RING,
    NumberKind.RATIONAL: RATIONAL_RING,
    NumberKind.FLOAT: DOUBLE_RING,
    NumberKind.DECIMAL: BIG_DECIMAL_RING,
}


def promote(n: Number, kind: NumberKind) -> Any:
    """
    Значение Number в представлении вида `kind` (kind не уже n.kind).

    Raises:
        ValueError: при попытке сузить представление

    Examples:
        >>> promote(Number.of(3), NumberKind.RATIONAL)
        Fraction(3, 1)
        >>> promote(Number.of(Fraction(1, 4)), NumberKind.FLOAT)
        0.25
    """
    if n.kind is kind:
        return n.value
    if kind.rank < n.kind.rank:
        raise ValueError(f"Cannot narrow {n.kind.value} to {kind.value}")

    if kind is NumberKind.RATIONAL:
        return Fraction(n.value)
    if kind is NumberKind.FLOAT:
        return float(n.value)

    # DECIMAL
    if n.kind is NumberKind.RATIONAL:
        return BIG_DECIMAL_RING.div(
            BIG_DECIMAL_RING.from_int(n.value.numerator),
            BIG_DECIMAL_RING.from_int(n.value.denominator),
        )
    if n.kind is NumberKind.FLOAT:
        return BIG_DECIMAL_RING.from_float(n.value)
    return BIG_DECIMAL_RING.from_int(n.value)


def _widest(a: Number, b: Number) -> NumberKind:
    return a.kind if a.kind.rank >= b.kind.rank else b.kind


def _is_nan(x: Any) -> bool:
    return x != x


class NumberIsEuclideanRing(EuclideanRing):
    """Euclidean ring над Number с динамическим продвижением видов."""

    kind = Number

    @property
    def zero(self) -> Number:
        return Number(NumberKind.INTEGER, 0)

    @property
    def one(self) -> Number:
        return Number(NumberKind.INTEGER, 1)

    def _apply(
        self,
        op: Callable[[EuclideanRing], Callable[[Any, Any], Any]],
        a: Number,
        b: Number,
    ) -> Number:
        kind = _widest(a, b)
        return Number(kind, op(KIND_RINGS[kind])(promote(a, kind), promote(b, kind)))

    def plus(self, a: Number, b: Number) -> Number:
        return self._apply(lambda r: r.plus, a, b)

    def minus(self, a: Number, b: Number) -> Number:
        return self._apply(lambda r: r.minus, a, b)

    def times(self, a: Number, b: Number) -> Number:
        return self._apply(lambda r: r.times, a, b)

    def quot(self, a: Number, b: Number) -> Number:
        return self._apply(lambda r: r.quot, a, b)

    def mod(self, a: Number, b: Number) -> Number:
        return self._apply(lambda r: r.mod, a, b)

    def quotmod(self, a: Number, b: Number) -> tuple[Number, Number]:
        kind = _widest(a, b)
        q, r = KIND_RINGS[kind].quotmod(promote(a, kind), promote(b, kind))
        return Number(kind, q), Number(kind, r)

    def gcd(self, a: Number, b: Number) -> Number:
        """
        Обобщённый алгоритм Евклида.

        Для FLOAT nan прерывает цикл: fmod с nan снова даёт nan и
        остаток никогда не станет zero.
        """
        if _widest(a, b) is not NumberKind.FLOAT:
            return self.euclid(a, b)
        while True:
            if _is_nan(a.value) or _is_nan(b.value):
                return Number(NumberKind.FLOAT, math.nan)
            if self.eqv(b, self.zero):
                return a
            a, b = b, self.mod(a, b)

    def negate(self, a: Number) -> Number:
        return Number(a.kind, KIND_RINGS[a.kind].negate(a.value))

    def from_int(self, n: int) -> Number:
        return Number(NumberKind.INTEGER, int(n))

    def from_float(self, x: float) -> Number:
        return Number(NumberKind.FLOAT, float(x))


NUMBER_RING = NumberIsEuclideanRing()
