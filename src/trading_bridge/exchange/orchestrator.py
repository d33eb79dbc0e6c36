"""
ExchangeOrchestrator — обмен deposit ↔ trading

Два направления, состояние между вызовами не хранится:

fund_trading (deposit → trading):
1. GATE 0: attached funds запрещены
2. GATE 1: sender держит trade_amount deposit денома
3. GATE 2: sender имеет required_deposit_attributes
4. Конверсия; target_amount == 0 → InvalidFundsError
5. Инструкции: Transfer(deposit, sender → contract) → Mint(trading)
   → Withdraw(trading, contract → sender)

withdraw_trading (trading → deposit):
1-4. То же для trading денома и required_withdraw_attributes
5. Lookup адреса marker аккаунта trading денома (NotFoundError)
6. Инструкции: Transfer(trading, sender → marker) → Transfer(deposit,
   contract → sender) → Burn(trading)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Вся валидация завершается до формирования первой инструкции
2. Mint строго после сбора deposit и строго до его выдачи
3. Burn строго после staging trading монет на marker аккаунте
4. Remainder (усечённая часть) никогда не списывается с sender
"""

import logging
from typing import Optional

from trading_bridge.core.config import BridgeConfig
from trading_bridge.core.domain.contract_state import ContractState
from trading_bridge.core.domain.context import Env, MessageInfo
from trading_bridge.core.domain.denom import Denom, DenomConversion
from trading_bridge.core.domain.instructions import Burn, Coin, Mint, Transfer, Withdraw
from trading_bridge.core.domain.response import ContractResponse
from trading_bridge.core.errors import InvalidFundsError, NotFoundError
from trading_bridge.core.math.conversion import convert_denom
from trading_bridge.core.ports import Querier
from trading_bridge.gatekeeper.access_gate import AccessGate
from trading_bridge.store.configuration_store import ConfigurationStore

logger = logging.getLogger(__name__)


class ExchangeOrchestrator:
    """Построение упорядоченных settlement инструкций для обмена."""

    def __init__(
        self,
        store: ConfigurationStore,
        querier: Querier,
        config: Optional[BridgeConfig] = None,
    ):
        """
        Args:
            store: доступ к ContractState
            querier: balance/attribute/marker capabilities хоста
            config: конфигурация (default: BridgeConfig())
        """
        self.store = store
        self.querier = querier
        self.config = config or BridgeConfig()
        self.access_gate = AccessGate(querier, querier, self.config)

    # =========================================================================
    # FUND TRADING
    # =========================================================================

    def fund_trading(self, env: Env, info: MessageInfo, trade_amount: int) -> ContractResponse:
        """Обмен deposit денома на trading деном.

        Args:
            env: окружение контракта
            info: sender и attached funds
            trade_amount: сумма deposit денома (минимальные единицы)

        Returns:
            ContractResponse: [Transfer, Mint, Withdraw] + attribute trail

        Raises:
            InvalidFundsError: attached funds, нет баланса, конверсия в ноль
            InvalidAccountError: недостаточный баланс или нет атрибутов
            ConversionError: разница точностей непредставима
            StorageError: ContractState недоступен
        """
        self.access_gate.check_funds_empty(info.funds)
        state = self.store.load()
        deposit = state.deposit_marker
        trading = state.trading_marker

        self.access_gate.check_has_enough_balance(info.sender, deposit.name, trade_amount)
        self.access_gate.check_has_all_attributes(info.sender, state.required_deposit_attributes)
        conversion = self._convert_nonzero(trade_amount, deposit, trading)

        transferred_amount = conversion.converted_source_amount
        contract_address = env.contract_address
        minted_coin = Coin(denom=trading.name, amount=conversion.target_amount)

        instructions = [
            # Сначала собираем обеспечение с sender
            Transfer(
                amount=Coin(denom=deposit.name, amount=transferred_amount),
                administrator=contract_address,
                from_address=info.sender,
                to_address=contract_address,
            ),
            # Выпуск trading монет, эквивалентных собранному deposit
            Mint(amount=minted_coin, administrator=contract_address),
            # Выдача выпущенных монет sender
            Withdraw(
                denom=trading.name,
                amount=minted_coin,
                administrator=contract_address,
                to_address=info.sender,
            ),
        ]
        attributes = self._contract_attributes("fund_trading", env, state) + [
            ("deposit_input_denom", deposit.name),
            ("deposit_requested_amount", str(trade_amount)),
            ("deposit_actual_amount", str(transferred_amount)),
            ("received_denom", trading.name),
            ("received_amount", str(conversion.target_amount)),
        ]
        attributes += self._remainder_attributes(deposit, conversion)

        logger.info(
            "fund_trading: sender=%s, deposit=%d%s, minted=%d%s, remainder=%d",
            info.sender,
            transferred_amount,
            deposit.name,
            conversion.target_amount,
            trading.name,
            conversion.remainder,
        )
        return ContractResponse(instructions=tuple(instructions), attributes=tuple(attributes))

    # =========================================================================
    # WITHDRAW TRADING
    # =========================================================================

    def withdraw_trading(self, env: Env, info: MessageInfo, trade_amount: int) -> ContractResponse:
        """Обмен trading денома обратно на deposit деном.

        Args:
            env: окружение контракта
            info: sender и attached funds
            trade_amount: сумма trading денома (минимальные единицы)

        Returns:
            ContractResponse: [Transfer, Transfer, Burn] + attribute trail

        Raises:
            InvalidFundsError: attached funds, нет баланса, конверсия в ноль
            InvalidAccountError: недостаточный баланс или нет атрибутов
            NotFoundError: marker аккаунт trading денома не найден
            ConversionError: разница точностей непредставима
            StorageError: ContractState недоступен
        """
        self.access_gate.check_funds_empty(info.funds)
        state = self.store.load()
        deposit = state.deposit_marker
        trading = state.trading_marker

        self.access_gate.check_has_enough_balance(info.sender, trading.name, trade_amount)
        self.access_gate.check_has_all_attributes(info.sender, state.required_withdraw_attributes)
        conversion = self._convert_nonzero(trade_amount, trading, deposit)

        collected_amount = conversion.converted_source_amount
        marker_address = self._resolve_marker_address(trading.name)
        contract_address = env.contract_address
        collected_coin = Coin(denom=trading.name, amount=collected_amount)

        instructions = [
            # Staging trading монет на marker аккаунте для последующего burn
            Transfer(
                amount=collected_coin,
                administrator=contract_address,
                from_address=info.sender,
                to_address=marker_address,
            ),
            # Выдача deposit эквивалента sender
            Transfer(
                amount=Coin(denom=deposit.name, amount=conversion.target_amount),
                administrator=contract_address,
                from_address=contract_address,
                to_address=info.sender,
            ),
            Burn(amount=collected_coin, administrator=contract_address),
        ]
        attributes = self._contract_attributes("withdraw_trading", env, state) + [
            ("withdraw_input_denom", trading.name),
            ("withdraw_requested_amount", str(trade_amount)),
            ("withdraw_actual_amount", str(collected_amount)),
            ("received_denom", deposit.name),
            ("received_amount", str(conversion.target_amount)),
        ]
        attributes += self._remainder_attributes(trading, conversion)

        logger.info(
            "withdraw_trading: sender=%s, burned=%d%s, released=%d%s, remainder=%d",
            info.sender,
            collected_amount,
            trading.name,
            conversion.target_amount,
            deposit.name,
            conversion.remainder,
        )
        return ContractResponse(instructions=tuple(instructions), attributes=tuple(attributes))

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _convert_nonzero(self, amount: int, source: Denom, target: Denom) -> DenomConversion:
        conversion = convert_denom(amount, source, target)
        if conversion.target_amount == 0:
            raise InvalidFundsError(
                f"sent [{amount}{source.name}], but that is not enough to convert "
                f"to at least one [{target.name}]"
            )
        return conversion

    def _resolve_marker_address(self, denom: str) -> str:
        marker_address = self.querier.get_marker_admin_address(denom)
        if not marker_address:
            raise NotFoundError(f"unable to resolve marker account for denom [{denom}]")
        return marker_address

    def _contract_attributes(
        self, action: str, env: Env, state: ContractState
    ) -> list[tuple[str, str]]:
        return [
            ("action", action),
            ("contract_address", env.contract_address),
            ("contract_type", state.contract_type),
            ("contract_name", state.contract_name),
        ]

    @staticmethod
    def _remainder_attributes(
        source: Denom, conversion: DenomConversion
    ) -> list[tuple[str, str]]:
        if conversion.remainder == 0:
            return []
        return [
            ("remainder_denom", source.name),
            ("remainder_amount", str(conversion.remainder)),
        ]
