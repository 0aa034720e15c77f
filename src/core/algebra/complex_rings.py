"""
Complex & Gaussian Euclidean rings

Ring'и над двухкомпонентными видами, параметризованные базовым ring'ом:
- complex_ring(base)  — base: FractionalRing (Double, Float32, BigDecimal, Rational)
- gaussian_ring(base) — base: целочисленный EuclideanRing (BigInt, Int32, Int64, SafeLong)

Экземпляр создаётся один раз на каждый base (кэш фабрики по identity base).

Complex:
    quot(a, b) — покомпонентное усечение a / b
    mod(a, b)  — a - quot(a, b) * b
    gcd        — Евклид с полом на единице: если |a| < 1 или |b| < 1 → one;
                 если N(a mod b) >= N(b) (нет прогресса) → one

Gaussian:
    quot(a, b) — покомпонентное округление a·conj(b) / N(b) к ближайшему
                 (половина — вверх), N(b) = b.real² + b.imag²
    mod(a, b)  — a - quot(a, b) * b, N(mod) ≤ N(b) / 2
    gcd        — обобщённый алгоритм Евклида (результат с точностью до
                 единицы ±1, ±i)
"""

import logging
from typing import Any

from src.core.algebra.euclidean_ring import BIG_INT_RING, DOUBLE_RING, EuclideanRing
from src.core.algebra.ring import FractionalRing, IntegralRing
from src.core.numbers.complex_number import Complex, Gaussian

logger = logging.getLogger(__name__)


def _is_nan(x: Any) -> bool:
    return x != x


# =============================================================================
# COMPLEX
# =============================================================================


class ComplexIsEuclideanRing(EuclideanRing):
    """Euclidean ring над Complex с дробным базовым видом."""

    kind = Complex

    def __init__(self, base: FractionalRing):
        self.base = base

    @property
    def zero(self) -> Complex:
        return Complex(self.base.zero, self.base.zero)

    @property
    def one(self) -> Complex:
        return Complex(self.base.one, self.base.zero)

    def plus(self, a: Complex, b: Complex) -> Complex:
        f = self.base
        return Complex(f.plus(a.real, b.real), f.plus(a.imag, b.imag))

    def minus(self, a: Complex, b: Complex) -> Complex:
        f = self.base
        return Complex(f.minus(a.real, b.real), f.minus(a.imag, b.imag))

    def times(self, a: Complex, b: Complex) -> Complex:
        f = self.base
        return Complex(
            f.minus(f.times(a.real, b.real), f.times(a.imag, b.imag)),
            f.plus(f.times(a.real, b.imag), f.times(a.imag, b.real)),
        )

    def negate(self, a: Complex) -> Complex:
        return Complex(self.base.negate(a.real), self.base.negate(a.imag))

    def from_int(self, n: int) -> Complex:
        return Complex(self.base.from_int(n), self.base.zero)

    def from_float(self, x: float) -> Complex:
        return Complex(self.base.from_float(x), self.base.zero)

    def eqv(self, a: Complex, b: Complex) -> bool:
        return self.base.eqv(a.real, b.real) and self.base.eqv(a.imag, b.imag)

    def conjugate(self, a: Complex) -> Complex:
        return Complex(a.real, self.base.negate(a.imag))

    def norm(self, a: Complex) -> Any:
        """Квадрат модуля: real² + imag²."""
        f = self.base
        return f.plus(f.times(a.real, a.real), f.times(a.imag, a.imag))

    def div(self, a: Complex, b: Complex) -> Complex:
        f = self.base
        n = self.times(a, self.conjugate(b))
        d = self.norm(b)
        return Complex(f.div(n.real, d), f.div(n.imag, d))

    def quot(self, a: Complex, b: Complex) -> Complex:
        d = self.div(a, b)
        return Complex(self.base.truncate(d.real), self.base.truncate(d.imag))

    def mod(self, a: Complex, b: Complex) -> Complex:
        return self.minus(a, self.times(self.quot(a, b), b))

    def quotmod(self, a: Complex, b: Complex) -> tuple[Complex, Complex]:
        q = self.quot(a, b)
        return q, self.minus(a, self.times(q, b))

    def gcd(self, a: Complex, b: Complex) -> Complex:
        f = self.base
        while True:
            na, nb = self.norm(a), self.norm(b)
            if _is_nan(na) or _is_nan(nb):
                nan = na if _is_nan(na) else nb
                return Complex(nan, nan)
            # |z| < 1  ⇔  |z|² < 1
            if f.lt(na, f.one):
                return self.one
            if self.eqv(b, self.zero):
                return a
            if f.lt(nb, f.one):
                return self.one
            r = self.mod(a, b)
            nr = self.norm(r)
            # Усечение quot не гарантирует N(r) < N(b): без убывания нормы
            # пара (a, b) может повторяться бесконечно
            if not _is_nan(nr) and not f.lt(nr, nb):
                return self.one
            a, b = b, r

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base={self.base!r})"


# =============================================================================
# GAUSSIAN
# =============================================================================


class GaussianIsEuclideanRing(EuclideanRing):
    """Euclidean ring над Gaussian с целочисленным базовым видом."""

    kind = Gaussian

    def __init__(self, base: EuclideanRing):
        self.base = base

    @property
    def zero(self) -> Gaussian:
        return Gaussian(self.base.zero, self.base.zero)

    @property
    def one(self) -> Gaussian:
        return Gaussian(self.base.one, self.base.zero)

    def plus(self, a: Gaussian, b: Gaussian) -> Gaussian:
        z = self.base
        return Gaussian(z.plus(a.real, b.real), z.plus(a.imag, b.imag))

    def minus(self, a: Gaussian, b: Gaussian) -> Gaussian:
        z = self.base
        return Gaussian(z.minus(a.real, b.real), z.minus(a.imag, b.imag))

    def times(self, a: Gaussian, b: Gaussian) -> Gaussian:
        z = self.base
        return Gaussian(
            z.minus(z.times(a.real, b.real), z.times(a.imag, b.imag)),
            z.plus(z.times(a.real, b.imag), z.times(a.imag, b.real)),
        )

    def negate(self, a: Gaussian) -> Gaussian:
        return Gaussian(self.base.negate(a.real), self.base.negate(a.imag))

    def from_int(self, n: int) -> Gaussian:
        return Gaussian(self.base.from_int(n), self.base.zero)

    def from_float(self, x: float) -> Gaussian:
        return Gaussian(self.base.from_float(x), self.base.zero)

    def eqv(self, a: Gaussian, b: Gaussian) -> bool:
        return self.base.eqv(a.real, b.real) and self.base.eqv(a.imag, b.imag)

    def conjugate(self, a: Gaussian) -> Gaussian:
        return Gaussian(a.real, self.base.negate(a.imag))

    def norm(self, a: Gaussian) -> Any:
        z = self.base
        return z.plus(z.times(a.real, a.real), z.times(a.imag, a.imag))

    def _round_div(self, n: Any, d: Any) -> Any:
        """floor((2n + d) / 2d) для d > 0 — деление с округлением half-up."""
        z = self.base
        two_d = z.plus(d, d)
        q, r = z.quotmod(z.plus(z.plus(n, n), d), two_d)
        if z.signum(r) < 0:
            q = z.minus(q, z.one)
        return q

    def quot(self, a: Gaussian, b: Gaussian) -> Gaussian:
        n = self.times(a, self.conjugate(b))
        d = self.norm(b)
        return Gaussian(self._round_div(n.real, d), self._round_div(n.imag, d))

    def mod(self, a: Gaussian, b: Gaussian) -> Gaussian:
        return self.minus(a, self.times(self.quot(a, b), b))

    def quotmod(self, a: Gaussian, b: Gaussian) -> tuple[Gaussian, Gaussian]:
        q = self.quot(a, b)
        return q, self.minus(a, self.times(q, b))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base={self.base!r})"


# =============================================================================
# ФАБРИКИ
# =============================================================================


_COMPLEX_RINGS: dict[FractionalRing, ComplexIsEuclideanRing] = {}
_GAUSSIAN_RINGS: dict[EuclideanRing, GaussianIsEuclideanRing] = {}


def complex_ring(base: FractionalRing = DOUBLE_RING) -> ComplexIsEuclideanRing:
    """
    Complex ring над дробным базовым ring'ом.

    Raises:
        ValueError: если base не FractionalRing
    """
    if not isinstance(base, FractionalRing):
        raise ValueError(f"Complex ring requires a fractional base ring, got {base!r}")
    ring = _COMPLEX_RINGS.get(base)
    if ring is not None:
        return ring
    ring = _COMPLEX_RINGS[base] = ComplexIsEuclideanRing(base)
    logger.debug("Created %r", ring)
    return ring


def gaussian_ring(base: EuclideanRing = BIG_INT_RING) -> GaussianIsEuclideanRing:
    """
    Gaussian ring над целочисленным базовым ring'ом.

    Raises:
        ValueError: если base не целочисленный EuclideanRing
    """
    if not (isinstance(base, IntegralRing) and isinstance(base, EuclideanRing)):
        raise ValueError(f"Gaussian ring requires an integral Euclidean base ring, got {base!r}")
    ring = _GAUSSIAN_RINGS.get(base)
    if ring is not None:
        return ring
    ring = _GAUSSIAN_RINGS[base] = GaussianIsEuclideanRing(base)
    logger.debug("Created %r", ring)
    return ring
