"""
Numeric kinds для Euclidean ring иерархии.

Value types для видов, которых нет среди встроенных типов Python.
Встроенные виды: int (BigInt), float (Double), Decimal (BigDecimal),
Fraction (Rational).
"""

from src.core.numbers.complex_number import Complex, Gaussian
from src.core.numbers.fixed_width import (
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
from src.core.numbers.number import Number, NumberKind, NumberKindError

__all__ = [
    # Constants
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    # Fixed-width kinds
    "Float32",
    "Int32",
    "Int64",
    "SafeLong",
    "round_to_float32",
    "wrap_signed",
    # Two-component kinds
    "Complex",
    "Gaussian",
    # Tagged union
    "Number",
    "NumberKind",
    "NumberKindError",
]
