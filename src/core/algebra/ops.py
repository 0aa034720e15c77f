"""
Operator sugar для EuclideanRing

    ops(Int32(17)) // 5         → Int32(3)
    ops(17) % Number.of(2.5)    → Number(float, 2.0)
    divmod(ops(Fraction(7, 2)), 1) → (Fraction(3, 1), Fraction(1, 2))

Правый операнд может быть:
- значением вида ring'а        → прямое делегирование
- int (не bool)                → ring.from_int
- float                        → ring.from_float
- Number                       → Number.of(lhs), затем NUMBER_RING
"""

from typing import Any

from src.core.algebra.euclidean_ring import EuclideanRing
from src.core.algebra.number_ring import NUMBER_RING
from src.core.algebra.registry import ring_of
from src.core.numbers.number import Number


class EuclideanRingOps:
    """Обёртка над значением lhs с инфиксными quot / mod / quotmod."""

    __slots__ = ("lhs", "ring")

    def __init__(self, lhs: Any, ring: EuclideanRing | None = None):
        self.lhs = lhs
        self.ring = ring if ring is not None else ring_of(lhs)

    def _coerce(self, rhs: Any) -> tuple[EuclideanRing, Any, Any]:
        """(ring, lhs, rhs) после приведения rhs к виду операции."""
        if isinstance(rhs, Number):
            return NUMBER_RING, Number.of(self.lhs), rhs
        if isinstance(rhs, self.ring.kind) and not isinstance(rhs, bool):
            return self.ring, self.lhs, rhs
        if isinstance(rhs, int) and not isinstance(rhs, bool):
            return self.ring, self.lhs, self.ring.from_int(rhs)
        if isinstance(rhs, float):
            return self.ring, self.lhs, self.ring.from_float(rhs)
        raise TypeError(
            f"Unsupported operand for {type(self.ring).__name__}: "
            f"{rhs!r} ({type(rhs).__name__})"
        )

    def quot(self, rhs: Any) -> Any:
        ring, a, b = self._coerce(rhs)
        return ring.quot(a, b)

    def mod(self, rhs: Any) -> Any:
        ring, a, b = self._coerce(rhs)
        return ring.mod(a, b)

    def quotmod(self, rhs: Any) -> tuple[Any, Any]:
        ring, a, b = self._coerce(rhs)
        return ring.quotmod(a, b)

    __floordiv__ = quot
    __mod__ = mod
    __divmod__ = quotmod

    def __repr__(self) -> str:
        return f"ops({self.lhs!r})"


def ops(lhs: Any, ring: EuclideanRing | None = None) -> EuclideanRingOps:
    """
    Инфиксная обёртка для значения.

    Args:
        lhs: Левый операнд
        ring: Явный ring (по умолчанию ring_of(lhs))

    Raises:
        RingNotFoundError: если ring не указан и вид lhs не зарегистрирован
    """
    return EuclideanRingOps(lhs, ring)
