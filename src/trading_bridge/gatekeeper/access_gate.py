"""AccessGate — авторизация и допуск операций

Композиция GATE 0-2. Каждый check вызывает gate и при блокировке поднимает
ошибку таксономии контракта:
- GATE 0 funds_attached → InvalidFundsError
- GATE 1 no_balance → InvalidFundsError
- GATE 1 insufficient_balance → InvalidAccountError
- GATE 2 (любая блокировка) → InvalidAccountError
"""

from typing import Optional, Sequence

from trading_bridge.core.config import BridgeConfig
from trading_bridge.core.domain.instructions import Coin
from trading_bridge.core.errors import InvalidAccountError, InvalidFundsError
from trading_bridge.core.ports import AttributeQuerier, BalanceQuerier
from trading_bridge.gatekeeper.gates.gate_00_funds_empty import Gate00FundsEmpty, Gate00Result
from trading_bridge.gatekeeper.gates.gate_01_balance import Gate01Balance, Gate01Result
from trading_bridge.gatekeeper.gates.gate_02_required_attributes import (
    Gate02RequiredAttributes,
    Gate02Result,
)


def check_funds_empty(funds: Sequence[Coin]) -> Gate00Result:
    """
    Raises:
        InvalidFundsError: Если к вызову приложены funds
    """
    result = Gate00FundsEmpty().evaluate(funds)
    if not result.entry_allowed:
        raise InvalidFundsError("funds provided but empty funds required")
    return result


class AccessGate:
    """Проверки допуска поверх injected querier capabilities."""

    def __init__(
        self,
        balance_querier: BalanceQuerier,
        attribute_querier: AttributeQuerier,
        config: Optional[BridgeConfig] = None,
    ):
        self.config = config or BridgeConfig()
        self.gate00 = Gate00FundsEmpty()
        self.gate01 = Gate01Balance(balance_querier)
        self.gate02 = Gate02RequiredAttributes(attribute_querier, self.config)

    def check_funds_empty(self, funds: Sequence[Coin]) -> Gate00Result:
        return check_funds_empty(funds)

    def check_has_enough_balance(
        self, account: str, denom: str, required_amount: int
    ) -> Gate01Result:
        """
        Raises:
            InvalidFundsError: Записи о балансе нет
            InvalidAccountError: Баланс меньше required_amount
        """
        result = self.gate01.evaluate(account, denom, required_amount)
        if result.block_reason == "no_balance":
            raise InvalidFundsError(result.details)
        if not result.entry_allowed:
            raise InvalidAccountError(result.details)
        return result

    def check_has_all_attributes(self, account: str, required: Sequence[str]) -> Gate02Result:
        """
        Raises:
            InvalidAccountError: Не все обязательные атрибуты найдены
        """
        result = self.gate02.evaluate(account, required)
        if not result.entry_allowed:
            raise InvalidAccountError("account does not have all required attributes")
        return result
