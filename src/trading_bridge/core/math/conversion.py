"""
Denom Conversion — конверсия сумм между точностями

Единственный допустимый способ перевода суммы из одного денома в другой.
Чистая функция без side-effects: одинаковые входы → одинаковые выходы.

Правила (diff = |p_src - p_tgt|, factor = 10^diff):
- p_src > p_tgt: target = amount // factor, remainder = amount % factor
- p_src < p_tgt: target = amount * factor, remainder = 0
- p_src == p_tgt: target = amount, remainder = 0

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. target * factor + remainder == amount при понижении точности
2. remainder < factor
3. Переполнение uint128 никогда не оборачивается (ConversionError)
"""

from typing import Final

from trading_bridge.core.domain.denom import UINT128_MAX, Denom, DenomConversion
from trading_bridge.core.errors import ConversionError

# 10^38 < 2^128 < 10^39: максимальная разница точностей с представимым factor
MAX_PRECISION_DIFF: Final[int] = 38


def precision_factor(source_precision: int, target_precision: int) -> int:
    """
    Множитель 10^|p_src - p_tgt|.

    Raises:
        ConversionError: Если factor не помещается в uint128
    """
    precision_diff = abs(source_precision - target_precision)
    if precision_diff > MAX_PRECISION_DIFF:
        raise ConversionError(
            f"source precision [{source_precision}] and target precision "
            f"[{target_precision}] have too large a difference to convert"
        )
    return 10**precision_diff


def convert_denom(source_amount: int, source_denom: Denom, target_denom: Denom) -> DenomConversion:
    """
    Конверсия суммы source_denom → target_denom.

    Args:
        source_amount: Сумма в минимальных единицах source_denom (uint128)
        source_denom: Исходный деном
        target_denom: Целевой деном

    Returns:
        DenomConversion(source_amount, target_amount, remainder)

    Raises:
        ConversionError: Сумма вне uint128, слишком большая разница точностей
            или переполнение при повышении точности

    Examples:
        >>> convert_denom(123456789, Denom(name="src", precision=4), Denom(name="tgt", precision=1))
        DenomConversion(source_amount=123456789, target_amount=123456, remainder=789)
    """
    if source_amount < 0 or source_amount > UINT128_MAX:
        raise ConversionError(f"amount [{source_amount}] is not a valid uint128 value")

    source_precision = source_denom.precision
    target_precision = target_denom.precision
    factor = precision_factor(source_precision, target_precision)

    if source_precision > target_precision:
        # Понижение точности: хвост усекается в remainder
        target_amount, remainder = divmod(source_amount, factor)
    elif source_precision < target_precision:
        # Повышение точности: остатка нет, но возможно переполнение
        target_amount = source_amount * factor
        remainder = 0
        if target_amount > UINT128_MAX:
            raise ConversionError(
                f"converting [{source_amount}{source_denom.name}] to [{target_denom.name}] "
                f"overflows uint128"
            )
    else:
        target_amount = source_amount
        remainder = 0

    return DenomConversion(
        source_amount=source_amount,
        target_amount=target_amount,
        remainder=remainder,
    )
