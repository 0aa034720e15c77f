"""
Number — tagged numeric union

Значение, помнящее своё внутреннее представление:
- INTEGER  → int (произвольной точности)
- RATIONAL → fractions.Fraction
- FLOAT    → float (binary64)
- DECIMAL  → decimal.Decimal

При смешивании видов операнд продвигается к более широкому виду
в порядке INTEGER < RATIONAL < FLOAT < DECIMAL (см. NumberIsEuclideanRing).

Сравнение и hash используют нативные кросс-типовые правила Python,
которые точны для int/Fraction/float/Decimal: Number(1) == Number(1.0).
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any

from src.core.numbers.fixed_width import Float32, Int32, Int64, SafeLong


class NumberKindError(TypeError):
    """Значение не может быть представлено как Number."""

    pass


class NumberKind(str, Enum):
    """Внутреннее представление Number."""

    INTEGER = "integer"
    RATIONAL = "rational"
    FLOAT = "float"
    DECIMAL = "decimal"

    @property
    def rank(self) -> int:
        """Позиция в порядке продвижения (больше = шире)."""
        return _PROMOTION_ORDER.index(self)


_PROMOTION_ORDER = (
    NumberKind.INTEGER,
    NumberKind.RATIONAL,
    NumberKind.FLOAT,
    NumberKind.DECIMAL,
)


@dataclass(frozen=True, eq=False)
class Number:
    """
    Числовое значение с тегом представления.

    Создаётся через Number.of(value); прямой конструктор не проверяет
    соответствие kind и value.
    """

    kind: NumberKind
    value: Any

    @classmethod
    def of(cls, value: Any) -> "Number":
        """
        Тегирование Python-значения.

        Args:
            value: int / Int32 / Int64 / SafeLong / Fraction / float / Float32
                / Decimal / Number

        Returns:
            Number с нормализованным value (plain int, plain float)

        Raises:
            NumberKindError: bool или неподдерживаемый тип

        Examples:
            >>> Number.of(Int32(7))
            Number(integer, 7)
            >>> Number.of(Fraction(1, 2)).kind
            <NumberKind.RATIONAL: 'rational'>
        """
        if isinstance(value, Number):
            return value
        if isinstance(value, bool):
            raise NumberKindError("bool is not a Number")
        if isinstance(value, (Int32, Int64, SafeLong, int)):
            return cls(NumberKind.INTEGER, int(value))
        if isinstance(value, Fraction):
            return cls(NumberKind.RATIONAL, value)
        if isinstance(value, (Float32, float)):
            return cls(NumberKind.FLOAT, float(value))
        if isinstance(value, Decimal):
            return cls(NumberKind.DECIMAL, value)
        raise NumberKindError(f"Unsupported value for Number: {value!r} ({type(value).__name__})")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Number):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"Number({self.kind.value}, {self.value!r})"
