"""GATE 1: Balance Sufficiency

Проверяет, что аккаунт держит не меньше required_amount денома:
- Нет записи о балансе вообще → блокировка no_balance
- balance < required_amount → блокировка insufficient_balance

Баланс запрашивается через injected BalanceQuerier (синхронно).
"""

import logging
from dataclasses import dataclass
from typing import Optional

from trading_bridge.core.ports import BalanceQuerier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Gate01Result:
    """Результат GATE 1."""

    entry_allowed: bool
    block_reason: str

    account: str
    denom: str
    required_amount: int
    held_amount: Optional[int]

    details: str


class Gate01Balance:
    """GATE 1: достаточность баланса."""

    def __init__(self, balance_querier: BalanceQuerier):
        """
        Args:
            balance_querier: capability запроса баланса
        """
        self.balance_querier = balance_querier

    def evaluate(self, account: str, denom: str, required_amount: int) -> Gate01Result:
        """Оценка GATE 1.

        Args:
            account: адрес аккаунта
            denom: деном, баланс которого проверяется
            required_amount: требуемая сумма (минимальные единицы)

        Returns:
            Gate01Result с решением о допуске
        """
        balance = self.balance_querier.get_balance(account, denom)

        if balance is None:
            logger.debug("GATE 1 blocked: account=%s has no %s balance", account, denom)
            return Gate01Result(
                entry_allowed=False,
                block_reason="no_balance",
                account=account,
                denom=denom,
                required_amount=required_amount,
                held_amount=None,
                details=f"account [{account}] has no [{denom}] balance",
            )

        if balance.amount < required_amount:
            logger.debug(
                "GATE 1 blocked: account=%s holds %d%s, required %d",
                account,
                balance.amount,
                denom,
                required_amount,
            )
            return Gate01Result(
                entry_allowed=False,
                block_reason="insufficient_balance",
                account=account,
                denom=denom,
                required_amount=required_amount,
                held_amount=balance.amount,
                details=f"required [{required_amount}], but account only holds [{balance.amount}]",
            )

        return Gate01Result(
            entry_allowed=True,
            block_reason="",
            account=account,
            denom=denom,
            required_amount=required_amount,
            held_amount=balance.amount,
            details=f"PASS: holds {balance.amount}{denom} >= {required_amount}{denom}",
        )
