"""GATE 0: Funds Empty

Первый gate любой мутирующей операции:
- Протокол двигает value только через marker инструкции
  (transfer/mint/burn/withdraw), никогда через attached funds
- Любые приложенные к вызову native funds → блокировка

Gate stateless, внешних запросов не делает.
"""

import logging
from dataclasses import dataclass
from typing import Sequence

from trading_bridge.core.domain.instructions import Coin

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Gate00Result:
    """Результат GATE 0."""

    entry_allowed: bool
    block_reason: str

    # Входные параметры для диагностики
    funds_count: int

    # Детали
    details: str


class Gate00FundsEmpty:
    """GATE 0: проверка отсутствия attached funds."""

    def __init__(self):
        """GATE 0 не требует зависимостей (stateless)."""
        pass

    def evaluate(self, funds: Sequence[Coin]) -> Gate00Result:
        """Оценка GATE 0.

        Args:
            funds: native funds, приложенные к вызову

        Returns:
            Gate00Result с решением о допуске
        """
        if funds:
            logger.debug("GATE 0 blocked: %d coin(s) attached", len(funds))
            return Gate00Result(
                entry_allowed=False,
                block_reason="funds_attached",
                funds_count=len(funds),
                details=f"Attached funds: {', '.join(str(coin) for coin in funds)}",
            )

        return Gate00Result(
            entry_allowed=True,
            block_reason="",
            funds_count=0,
            details="PASS: no attached funds",
        )
