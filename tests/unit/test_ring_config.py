"""
Тесты для RingConfig

Проверяет:
1. Значения по умолчанию (decimal128: 34 цифры, ROUND_HALF_EVEN)
2. Валидацию точности и режима округления
3. Immutability (frozen=True)
4. Построение decimal.Context и параметризацию BigDecimal ring
"""

import decimal
import logging
from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.core.algebra import (
    BIG_DECIMAL_RING,
    DEFAULT_DECIMAL_PRECISION,
    DEFAULT_DECIMAL_ROUNDING,
    RingConfig,
    big_decimal_ring,
)


class TestRingConfigValidation:
    """Тесты валидации RingConfig"""

    def test_defaults(self) -> None:
        config = RingConfig()
        assert config.decimal_precision == DEFAULT_DECIMAL_PRECISION == 34
        assert config.decimal_rounding == DEFAULT_DECIMAL_ROUNDING == decimal.ROUND_HALF_EVEN

    def test_precision_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            RingConfig(decimal_precision=0)

    def test_unknown_rounding_rejected(self) -> None:
        with pytest.raises(ValidationError, match="decimal_rounding"):
            RingConfig(decimal_rounding="ROUND_RANDOM")

    def test_all_decimal_rounding_modes_accepted(self) -> None:
        for mode in (decimal.ROUND_DOWN, decimal.ROUND_HALF_UP, decimal.ROUND_05UP):
            assert RingConfig(decimal_rounding=mode).decimal_rounding == mode

    def test_frozen(self) -> None:
        config = RingConfig()
        with pytest.raises(ValidationError):
            config.decimal_precision = 10


class TestDecimalContext:
    """Тесты decimal_context и big_decimal_ring"""

    def test_context_parameters(self) -> None:
        config = RingConfig(decimal_precision=12, decimal_rounding=decimal.ROUND_DOWN)
        context = config.decimal_context()
        assert context.prec == 12
        assert context.rounding == decimal.ROUND_DOWN

    def test_default_ring_is_singleton(self) -> None:
        assert big_decimal_ring() is BIG_DECIMAL_RING

    def test_configured_ring(self) -> None:
        config = RingConfig(decimal_precision=4, decimal_rounding=decimal.ROUND_DOWN)
        ring = big_decimal_ring(config)
        assert ring.config is config
        assert ring.div(Decimal(2), Decimal(3)) == Decimal("0.6666")

    def test_thread_context_ignored(self) -> None:
        """Арифметика ring'а не зависит от thread-local контекста"""
        with decimal.localcontext() as ctx:
            ctx.prec = 3
            third = BIG_DECIMAL_RING.div(Decimal(1), Decimal(3))
        assert len(third.as_tuple().digits) == 34

    def test_configured_ring_creation_logged(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.core.algebra.euclidean_ring"):
            big_decimal_ring(RingConfig(decimal_precision=8))
        assert "Created" in caplog.text
        assert "precision=8" in caplog.text
