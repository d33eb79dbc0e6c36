"""Тесты конверсии сумм между точностями деномов.

Coverage:
- Понижение точности (усечение в remainder)
- Повышение точности (без remainder)
- Равные точности
- Свойства: target * factor + remainder == amount, remainder < factor
- Ошибки: непредставимый factor, переполнение uint128, сумма вне uint128
"""

import pytest

from trading_bridge.core.domain import UINT128_MAX, Denom
from trading_bridge.core.errors import ConversionError
from trading_bridge.core.math import MAX_PRECISION_DIFF, convert_denom, precision_factor


def denom(name: str, precision: int) -> Denom:
    return Denom(name=name, precision=precision)


class TestSourcePrecisionGreater:
    """p_src > p_tgt: усечение."""

    def setup_method(self):
        self.source = denom("source", 4)
        self.target = denom("target", 1)

    @pytest.mark.parametrize(
        "amount, expected_target, expected_remainder",
        [
            (123456789, 123456, 789),
            (1000, 1, 0),
            (1101, 1, 101),
            (123, 0, 123),
            (0, 0, 0),
        ],
    )
    def test_truncates_into_remainder(self, amount, expected_target, expected_remainder):
        result = convert_denom(amount, self.source, self.target)

        assert result.source_amount == amount
        assert result.target_amount == expected_target
        assert result.remainder == expected_remainder

    def test_example_use_case(self):
        """trading(6) → deposit(2)."""
        result = convert_denom(987123456, denom("trading", 6), denom("deposit", 2))

        assert result.target_amount == 98712
        assert result.remainder == 3456

    def test_reconstruction_property(self):
        """target * factor + remainder == amount, remainder < factor."""
        factor = 10**3
        for amount in (0, 1, 999, 1000, 1001, 987654321, UINT128_MAX):
            result = convert_denom(amount, self.source, self.target)
            assert result.target_amount * factor + result.remainder == amount
            assert result.remainder < factor

    def test_converted_source_amount_excludes_remainder(self):
        result = convert_denom(1101, self.source, self.target)

        assert result.converted_source_amount == 1000


class TestSourcePrecisionLower:
    """p_src < p_tgt: дописываются нули, remainder всегда 0."""

    def setup_method(self):
        self.source = denom("source", 1)
        self.target = denom("target", 4)

    @pytest.mark.parametrize(
        "amount, expected_target",
        [
            (123456789, 123456789000),
            (2, 2000),
            (0, 0),
        ],
    )
    def test_scales_up_without_remainder(self, amount, expected_target):
        result = convert_denom(amount, self.source, self.target)

        assert result.target_amount == expected_target
        assert result.remainder == 0

    def test_overflow_raises_conversion_error(self):
        """Переполнение uint128 не оборачивается."""
        with pytest.raises(ConversionError, match="overflows uint128"):
            convert_denom(UINT128_MAX, self.source, self.target)

    def test_largest_non_overflowing_amount(self):
        amount = UINT128_MAX // 1000
        result = convert_denom(amount, self.source, self.target)

        assert result.target_amount == amount * 1000
        assert result.target_amount <= UINT128_MAX


class TestEqualPrecision:
    @pytest.mark.parametrize("amount", [0, 6, 123456789, UINT128_MAX])
    def test_identity(self, amount):
        result = convert_denom(amount, denom("source", 3), denom("target", 3))

        assert result.target_amount == amount
        assert result.remainder == 0

    def test_same_denom_is_identity(self):
        d = denom("same", 18)
        result = convert_denom(42, d, d)

        assert (result.target_amount, result.remainder) == (42, 0)


class TestConversionErrors:
    def test_precision_diff_too_large(self):
        with pytest.raises(ConversionError, match="too large a difference"):
            convert_denom(1, denom("source", MAX_PRECISION_DIFF + 1), denom("target", 0))

    def test_max_precision_diff_is_supported(self):
        result = convert_denom(UINT128_MAX, denom("source", MAX_PRECISION_DIFF), denom("target", 0))

        assert result.target_amount == UINT128_MAX // 10**MAX_PRECISION_DIFF
        assert result.remainder == UINT128_MAX % 10**MAX_PRECISION_DIFF

    @pytest.mark.parametrize("amount", [-1, UINT128_MAX + 1])
    def test_amount_outside_uint128(self, amount):
        with pytest.raises(ConversionError, match="not a valid uint128"):
            convert_denom(amount, denom("source", 2), denom("target", 1))

    def test_precision_factor(self):
        assert precision_factor(2, 5) == 1000
        assert precision_factor(5, 2) == 1000
        assert precision_factor(3, 3) == 1


def test_conversion_is_referentially_transparent():
    """Одинаковые входы → одинаковые выходы."""
    source, target = denom("a", 9), denom("b", 3)

    assert convert_denom(123456789012, source, target) == convert_denom(123456789012, source, target)
