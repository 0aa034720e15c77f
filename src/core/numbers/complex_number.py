"""
Complex & Gaussian — двухкомпонентные числовые виды

- Complex: комплексное число над дробным (fractional) видом
  (float, Float32, Decimal, Fraction)
- Gaussian: гауссово целое над целочисленным (integral) видом
  (int, Int32, Int64, SafeLong)

Значения immutable и не несут арифметики: все операции выполняет
соответствующий ring (src.core.algebra.complex_rings), параметризованный
базовым ring'ом компонент.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Complex:
    """Комплексное число real + imag·i над дробным видом."""

    real: Any
    imag: Any

    def __repr__(self) -> str:
        return f"Complex({self.real!r}, {self.imag!r})"


@dataclass(frozen=True)
class Gaussian:
    """Гауссово целое real + imag·i над целочисленным видом."""

    real: Any
    imag: Any

    def __repr__(self) -> str:
        return f"Gaussian({self.real!r}, {self.imag!r})"
