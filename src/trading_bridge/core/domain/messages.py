"""
Messages — типизированные запросы к контракту

Instantiate / Execute / Query / Migrate. Execute — tagged union из пяти
команд; на wire представлен snake_case объектом с единственным ключом:

    {"fund_trading": {"trade_amount": "100"}}

decode_* функции: JSON Schema проверка wire формы → Pydantic модель.
Любая ошибка декодирования поднимается как ValidationError контракта.
Семантические проверки полей — в self_validate() каждого сообщения.
"""

from typing import Annotated, Any, Literal, Optional, Union

import pydantic
from jsonschema import ValidationError as SchemaValidationError
from pydantic import BaseModel, Field, TypeAdapter

from trading_bridge.core.contracts import (
    validate_execute_msg,
    validate_instantiate_msg,
)
from trading_bridge.core.errors import ValidationError

from .denom import UINT128_MAX, Denom


# =============================================================================
# INSTANTIATE
# =============================================================================


class InstantiateMsg(BaseModel):
    """Запрос на создание инстанса контракта."""

    contract_name: str
    deposit_marker: Denom
    trading_marker: Denom
    required_deposit_attributes: list[str] = Field(default_factory=list)
    required_withdraw_attributes: list[str] = Field(default_factory=list)
    name_to_bind: Optional[str] = None

    model_config = {"frozen": True}

    def self_validate(self) -> None:
        if not self.contract_name:
            raise ValidationError("contract name cannot be empty")
        try:
            self.deposit_marker.self_validate()
        except ValidationError as e:
            raise ValidationError(f"deposit marker: {e.message}") from e
        try:
            self.trading_marker.self_validate()
        except ValidationError as e:
            raise ValidationError(f"trading marker: {e.message}") from e
        if any(not attr for attr in self.required_deposit_attributes):
            raise ValidationError("all required deposit attributes must be non-empty values")
        if any(not attr for attr in self.required_withdraw_attributes):
            raise ValidationError("all required withdraw attributes must be non-empty values")
        if self.name_to_bind is not None and not self.name_to_bind:
            raise ValidationError("contract name cannot be specified as empty string")


# =============================================================================
# EXECUTE
# =============================================================================


def _require_non_empty_attributes(attributes: list[str]) -> None:
    if any(not attr for attr in attributes):
        raise ValidationError("all specified attributes must be non-empty values")


def _require_positive_amount(trade_amount: int) -> None:
    if trade_amount == 0:
        raise ValidationError("trade amount must be greater than zero")


class AdminUpdateAdmin(BaseModel):
    kind: Literal["admin_update_admin"] = "admin_update_admin"
    new_admin_address: str

    model_config = {"frozen": True}

    def self_validate(self) -> None:
        if not self.new_admin_address:
            raise ValidationError("new_admin_address param must be supplied")


class AdminUpdateDepositRequiredAttributes(BaseModel):
    kind: Literal["admin_update_deposit_required_attributes"] = (
        "admin_update_deposit_required_attributes"
    )
    attributes: list[str]

    model_config = {"frozen": True}

    def self_validate(self) -> None:
        _require_non_empty_attributes(self.attributes)


class AdminUpdateWithdrawRequiredAttributes(BaseModel):
    kind: Literal["admin_update_withdraw_required_attributes"] = (
        "admin_update_withdraw_required_attributes"
    )
    attributes: list[str]

    model_config = {"frozen": True}

    def self_validate(self) -> None:
        _require_non_empty_attributes(self.attributes)


class FundTrading(BaseModel):
    """Обмен deposit → trading."""

    kind: Literal["fund_trading"] = "fund_trading"
    trade_amount: int = Field(..., ge=0, le=UINT128_MAX)

    model_config = {"frozen": True}

    def self_validate(self) -> None:
        _require_positive_amount(self.trade_amount)


class WithdrawTrading(BaseModel):
    """Обмен trading → deposit."""

    kind: Literal["withdraw_trading"] = "withdraw_trading"
    trade_amount: int = Field(..., ge=0, le=UINT128_MAX)

    model_config = {"frozen": True}

    def self_validate(self) -> None:
        _require_positive_amount(self.trade_amount)


ExecuteMsg = Annotated[
    Union[
        AdminUpdateAdmin,
        AdminUpdateDepositRequiredAttributes,
        AdminUpdateWithdrawRequiredAttributes,
        FundTrading,
        WithdrawTrading,
    ],
    Field(discriminator="kind"),
]

_EXECUTE_ADAPTER: TypeAdapter = TypeAdapter(ExecuteMsg)


# =============================================================================
# QUERY / MIGRATE
# =============================================================================


class QueryContractState(BaseModel):
    kind: Literal["query_contract_state"] = "query_contract_state"

    model_config = {"frozen": True}

    def self_validate(self) -> None:
        pass


class ContractUpgrade(BaseModel):
    kind: Literal["contract_upgrade"] = "contract_upgrade"

    model_config = {"frozen": True}

    def self_validate(self) -> None:
        pass


# =============================================================================
# WIRE DECODING
# =============================================================================


def format_pydantic_error(error: pydantic.ValidationError) -> str:
    """Первая ошибка pydantic в виде "loc: msg" для сообщений ValidationError."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "<root>"
    return f"{location}: {first['msg']}"


def decode_instantiate_msg(payload: dict[str, Any]) -> InstantiateMsg:
    """
    Декодирование wire формы InstantiateMsg.

    Raises:
        ValidationError: Если payload не соответствует схеме
    """
    try:
        validate_instantiate_msg(payload)
    except SchemaValidationError as e:
        raise ValidationError(f"malformed instantiate msg: {e.message}") from e
    try:
        return InstantiateMsg.model_validate(payload)
    except pydantic.ValidationError as e:
        raise ValidationError(f"malformed instantiate msg: {format_pydantic_error(e)}") from e


def decode_execute_msg(payload: dict[str, Any]) -> ExecuteMsg:
    """
    Декодирование tagged wire формы Execute в конкретную команду.

    Raises:
        ValidationError: Если payload не соответствует схеме
    """
    try:
        validate_execute_msg(payload)
    except SchemaValidationError as e:
        raise ValidationError(f"malformed execute msg: {e.message}") from e
    ((tag, body),) = payload.items()
    try:
        return _EXECUTE_ADAPTER.validate_python({"kind": tag, **body})
    except pydantic.ValidationError as e:
        raise ValidationError(f"malformed execute msg: {format_pydantic_error(e)}") from e
