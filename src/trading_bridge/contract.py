"""
BridgeContract — точки входа контракта

instantiate / execute / query / migrate. Каждая точка входа сначала
вызывает self_validate() сообщения, затем делегирует компоненту:
- Admin* → AdminController
- FundTrading / WithdrawTrading → ExchangeOrchestrator
- QueryContractState → ConfigurationStore
- ContractUpgrade → migrate_contract (MigrationGate)

Хост гарантирует сериализацию вызовов и атомарность: ошибка в любом
месте отбрасывает все мутации вызова.
"""

import logging
from typing import Any, Optional

import pydantic

from trading_bridge.admin.controller import AdminController
from trading_bridge.core.config import BridgeConfig
from trading_bridge.core.contracts import validate_contract_state
from trading_bridge.core.domain.contract_state import ContractState
from trading_bridge.core.domain.context import Env, MessageInfo
from trading_bridge.core.domain.messages import (
    AdminUpdateAdmin,
    AdminUpdateDepositRequiredAttributes,
    AdminUpdateWithdrawRequiredAttributes,
    ContractUpgrade,
    ExecuteMsg,
    FundTrading,
    InstantiateMsg,
    QueryContractState,
    WithdrawTrading,
    format_pydantic_error,
)
from trading_bridge.core.domain.response import ContractResponse
from trading_bridge.core.errors import ValidationError
from trading_bridge.core.naming import bind_name_instruction
from trading_bridge.core.ports import Querier, StateStorage
from trading_bridge.exchange.orchestrator import ExchangeOrchestrator
from trading_bridge.gatekeeper.access_gate import check_funds_empty
from trading_bridge.migration.state_machine import migrate_contract
from trading_bridge.store.configuration_store import ConfigurationStore

logger = logging.getLogger(__name__)


class BridgeContract:
    """Контракт моста deposit ↔ trading поверх injected capabilities."""

    def __init__(
        self,
        storage: StateStorage,
        querier: Querier,
        config: Optional[BridgeConfig] = None,
    ):
        """
        Args:
            storage: key-value persistence хоста
            querier: balance/attribute/marker capabilities хоста
            config: конфигурация (default: BridgeConfig())
        """
        self.config = config or BridgeConfig()
        self.store = ConfigurationStore(storage, self.config)
        self.admin = AdminController(self.store)
        self.exchange = ExchangeOrchestrator(self.store, querier, self.config)

    # =========================================================================
    # INSTANTIATE
    # =========================================================================

    def instantiate(self, env: Env, info: MessageInfo, msg: InstantiateMsg) -> ContractResponse:
        """Создание ContractState; sender становится admin.

        Raises:
            ValidationError: некорректное сообщение или пустой sender
            InvalidFundsError: attached funds
            InvalidFormatError: некорректное name_to_bind
            StorageError: состояние уже создано
        """
        msg.self_validate()
        check_funds_empty(info.funds)

        try:
            state = ContractState(
                admin=info.sender,
                contract_name=msg.contract_name,
                contract_type=self.config.contract_type,
                contract_version=self.config.contract_version,
                deposit_marker=msg.deposit_marker,
                trading_marker=msg.trading_marker,
                required_deposit_attributes=list(msg.required_deposit_attributes),
                required_withdraw_attributes=list(msg.required_withdraw_attributes),
            )
        except pydantic.ValidationError as e:
            raise ValidationError(f"invalid contract state: {format_pydantic_error(e)}") from e
        instructions = []
        attributes = [
            ("action", "instantiate"),
            ("contract_name", msg.contract_name),
            ("deposit_marker_name", msg.deposit_marker.name),
            ("trading_marker_name", msg.trading_marker.name),
        ]
        if msg.name_to_bind is not None:
            instructions.append(
                bind_name_instruction(msg.name_to_bind, env.contract_address, restricted=True)
            )
            attributes.append(("contract_bound_with_name", msg.name_to_bind))

        self.store.initialize(state)
        return ContractResponse(instructions=tuple(instructions), attributes=tuple(attributes))

    # =========================================================================
    # EXECUTE
    # =========================================================================

    def execute(self, env: Env, info: MessageInfo, msg: ExecuteMsg) -> ContractResponse:
        """Dispatch execute команды.

        Raises:
            ValidationError: некорректное сообщение или неизвестная команда
            ContractError: ошибки соответствующего компонента
        """
        msg.self_validate()
        logger.debug("execute: kind=%s, sender=%s", msg.kind, info.sender)

        if isinstance(msg, AdminUpdateAdmin):
            return self.admin.update_admin(env, info, msg.new_admin_address)
        if isinstance(msg, AdminUpdateDepositRequiredAttributes):
            return self.admin.update_required_deposit_attributes(env, info, msg.attributes)
        if isinstance(msg, AdminUpdateWithdrawRequiredAttributes):
            return self.admin.update_required_withdraw_attributes(env, info, msg.attributes)
        if isinstance(msg, FundTrading):
            return self.exchange.fund_trading(env, info, msg.trade_amount)
        if isinstance(msg, WithdrawTrading):
            return self.exchange.withdraw_trading(env, info, msg.trade_amount)

        raise ValidationError(f"unsupported execute msg [{type(msg).__name__}]")

    # =========================================================================
    # QUERY
    # =========================================================================

    def query(self, msg: QueryContractState) -> dict[str, Any]:
        """JSON-снапшот ContractState (проверен против contract_state.json).

        Raises:
            StorageError: ContractState недоступен
        """
        msg.self_validate()
        snapshot = self.store.load().model_dump(mode="json")
        validate_contract_state(snapshot)
        return snapshot

    # =========================================================================
    # MIGRATE
    # =========================================================================

    def migrate(self, msg: ContractUpgrade) -> ContractResponse:
        """
        Raises:
            MigrationError: миграция отклонена
            StorageError: ContractState недоступен
        """
        return migrate_contract(self.store, msg, self.config)
