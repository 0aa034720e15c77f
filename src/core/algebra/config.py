"""
RingConfig — конфигурация параметризованных ring'ов

Immutable Pydantic модель. Сейчас параметризует только
BigDecimal ring: точность и режим округления decimal-арифметики.

Default precision = 34 значащих цифры (IEEE-754 decimal128).
"""

import decimal
from typing import Final

from pydantic import BaseModel, Field, field_validator

# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_DECIMAL_PRECISION: Final[int] = 34

DEFAULT_DECIMAL_ROUNDING: Final[str] = decimal.ROUND_HALF_EVEN

DECIMAL_ROUNDING_MODES: Final[frozenset[str]] = frozenset(
    {
        decimal.ROUND_CEILING,
        decimal.ROUND_DOWN,
        decimal.ROUND_FLOOR,
        decimal.ROUND_HALF_DOWN,
        decimal.ROUND_HALF_EVEN,
        decimal.ROUND_HALF_UP,
        decimal.ROUND_UP,
        decimal.ROUND_05UP,
    }
)


# =============================================================================
# CONFIG
# =============================================================================


class RingConfig(BaseModel):
    """
    Конфигурация ring'ов.

    Immutable модель (frozen=True): один экземпляр конфигурации
    разделяется ring'ом на всё время жизни процесса.
    """

    decimal_precision: int = Field(
        DEFAULT_DECIMAL_PRECISION, ge=1, description="Количество значащих цифр Decimal"
    )
    decimal_rounding: str = Field(
        DEFAULT_DECIMAL_ROUNDING, description="Режим округления (имя константы decimal)"
    )

    model_config = {"frozen": True}

    @field_validator("decimal_rounding")
    @classmethod
    def validate_rounding(cls, v: str) -> str:
        """Режим округления должен быть одним из режимов модуля decimal."""
        if v not in DECIMAL_ROUNDING_MODES:
            raise ValueError(
                f"decimal_rounding must be one of {sorted(DECIMAL_ROUNDING_MODES)}, got {v!r}"
            )
        return v

    def decimal_context(self) -> decimal.Context:
        """Новый decimal.Context для этой конфигурации."""
        return decimal.Context(prec=self.decimal_precision, rounding=self.decimal_rounding)
