"""
Denom — Модель денома с точностью

Immutable Pydantic модели:
- Denom: имя денома + количество десятичных знаков (precision)
- DenomConversion: результат конверсии суммы между точностями

Суммы — целые uint128 (в минимальных единицах денома).
"""

from typing import Final

from pydantic import BaseModel, Field

from trading_bridge.core.errors import ValidationError

# Верхняя граница uint128 для всех сумм
UINT128_MAX: Final[int] = 2**128 - 1

# Верхняя граница uint64 для precision
UINT64_MAX: Final[int] = 2**64 - 1


class Denom(BaseModel):
    """
    Деном с настроенной точностью.

    Пустое имя допускается на уровне модели и отклоняется self_validate(),
    чтобы ошибка пришла в таксономии контракта с контекстом поля.
    """

    name: str = Field(..., description="Идентификатор денома (marker denom)")
    precision: int = Field(
        ..., ge=0, le=UINT64_MAX, description="Количество десятичных знаков"
    )

    model_config = {"frozen": True}

    def self_validate(self) -> None:
        """
        Raises:
            ValidationError: Если имя пустое
        """
        if not self.name:
            raise ValidationError("name cannot be empty")


class DenomConversion(BaseModel):
    """
    Результат конверсии.

    Инвариант: target_amount и remainder однозначно определяются
    source_amount и разницей точностей; remainder < 10^diff при усечении,
    иначе 0.
    """

    source_amount: int = Field(..., ge=0, le=UINT128_MAX)
    target_amount: int = Field(..., ge=0, le=UINT128_MAX)
    remainder: int = Field(..., ge=0, le=UINT128_MAX)

    model_config = {"frozen": True}

    @property
    def converted_source_amount(self) -> int:
        """Часть source_amount, которая реально конвертируется (без остатка)."""
        return self.source_amount - self.remainder
