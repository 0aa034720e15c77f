"""
Registry — capability lookup по числовому виду

Явная таблица экземпляров: вид (Python type) → EuclideanRing singleton.

    ring_for(Int32)          → INT_RING
    ring_for(Fraction)       → RATIONAL_RING
    ring_of(Decimal("2.5"))  → BIG_DECIMAL_RING
    ring_of(Complex(Fraction(1), Fraction(2))) → complex_ring(RATIONAL_RING)

Поиск по типу: сначала точный тип, затем MRO (подклассы наследуют ring
ближайшего зарегистрированного предка).
"""

import logging
from decimal import Decimal
from fractions import Fraction
from typing import Any

from src.core.algebra.complex_rings import complex_ring, gaussian_ring
from src.core.algebra.euclidean_ring import (
    BIG_DECIMAL_RING,
    BIG_INT_RING,
    DOUBLE_RING,
    FLOAT_RING,
    INT_RING,
    LONG_RING,
    RATIONAL_RING,
    SAFE_LONG_RING,
    EuclideanRing,
)
from src.core.algebra.number_ring import NUMBER_RING
from src.core.numbers.complex_number import Complex, Gaussian
from src.core.numbers.fixed_width import Float32, Int32, Int64, SafeLong
from src.core.numbers.number import Number

logger = logging.getLogger(__name__)


class RingNotFoundError(LookupError):
    """Для числового вида не зарегистрирован EuclideanRing."""

    pass


_REGISTRY: dict[type, EuclideanRing] = {}


def register_ring(kind: type, ring: EuclideanRing) -> None:
    """
    Регистрация (или замена) ring'а для числового вида.

    Args:
        kind: Python type значений вида
        ring: EuclideanRing над этим видом
    """
    previous = _REGISTRY.get(kind)
    _REGISTRY[kind] = ring
    if previous is not None and previous is not ring:
        logger.debug("Replaced ring for %s: %r -> %r", kind.__name__, previous, ring)
    else:
        logger.debug("Registered ring for %s: %r", kind.__name__, ring)


def ring_for(kind: type) -> EuclideanRing:
    """
    EuclideanRing для числового вида.

    Raises:
        RingNotFoundError: если ни тип, ни его предки не зарегистрированы,
            а также для bool (не числовой вид, хотя и подкласс int)
    """
    if issubclass(kind, bool):
        raise RingNotFoundError("bool is not a numeric kind")

    ring = _REGISTRY.get(kind)
    if ring is not None:
        return ring

    for ancestor in kind.__mro__[1:]:
        ring = _REGISTRY.get(ancestor)
        if ring is not None:
            return ring

    raise RingNotFoundError(f"No EuclideanRing registered for {kind.__name__}")


def ring_of(value: Any) -> EuclideanRing:
    """
    EuclideanRing для конкретного значения.

    Для Complex и Gaussian базовый ring выводится из типа компоненты real.

    Raises:
        RingNotFoundError: если вид значения не зарегистрирован
    """
    if isinstance(value, Complex):
        return complex_ring(ring_for(type(value.real)))
    if isinstance(value, Gaussian):
        return gaussian_ring(ring_for(type(value.real)))
    return ring_for(type(value))


# =============================================================================
# ВСТРОЕННЫЕ ЭКЗЕМПЛЯРЫ
# =============================================================================

register_ring(Int32, INT_RING)
register_ring(Int64, LONG_RING)
register_ring(Float32, FLOAT_RING)
register_ring(float, DOUBLE_RING)
register_ring(int, BIG_INT_RING)
register_ring(Decimal, BIG_DECIMAL_RING)
register_ring(Fraction, RATIONAL_RING)
register_ring(SafeLong, SAFE_LONG_RING)
register_ring(Complex, complex_ring())
register_ring(Gaussian, gaussian_ring())
register_ring(Number, NUMBER_RING)
