"""GATE 2: Required Attributes

Проверяет наличие у аккаунта всех обязательных атрибутов (по имени,
значения не инспектируются).

Порядок:
1. Пустой список required → PASS без запросов к хосту
2. Постраничный запрос атрибутов; каждая страница вычёркивает
   найденные имена из рабочего множества remaining
3. Следующая страница запрашивается, пока она есть и remaining не пуст
4. Страницы кончились, remaining не пуст → блокировка

Число страниц ограничено BridgeConfig.max_attribute_pages: хост может
ошибочно сообщать next_key, цикл обязан завершиться. Достижение границы
трактуется как исчерпание страниц.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from trading_bridge.core.config import BridgeConfig
from trading_bridge.core.ports import AttributeQuerier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Gate02Result:
    """Результат GATE 2."""

    entry_allowed: bool
    block_reason: str

    account: str
    missing_attributes: tuple[str, ...]
    pages_fetched: int

    details: str


class Gate02RequiredAttributes:
    """GATE 2: наличие обязательных атрибутов."""

    def __init__(
        self,
        attribute_querier: AttributeQuerier,
        config: Optional[BridgeConfig] = None,
    ):
        """
        Args:
            attribute_querier: capability постраничного запроса атрибутов
            config: конфигурация (default: BridgeConfig())
        """
        self.attribute_querier = attribute_querier
        self.config = config or BridgeConfig()

    def evaluate(self, account: str, required: Sequence[str]) -> Gate02Result:
        """Оценка GATE 2.

        Args:
            account: адрес аккаунта
            required: имена обязательных атрибутов (дубли и порядок не важны)

        Returns:
            Gate02Result с решением о допуске
        """
        if not required:
            return Gate02Result(
                entry_allowed=True,
                block_reason="",
                account=account,
                missing_attributes=(),
                pages_fetched=0,
                details="PASS: no attributes required",
            )

        remaining = set(required)
        limit = self.config.attribute_page_limit
        page = self.attribute_querier.get_attributes(account, None, limit)
        pages_fetched = 1

        while True:
            remaining.difference_update(attr.name for attr in page.attributes)
            if not remaining:
                return Gate02Result(
                    entry_allowed=True,
                    block_reason="",
                    account=account,
                    missing_attributes=(),
                    pages_fetched=pages_fetched,
                    details=f"PASS: all {len(set(required))} required attribute(s) present",
                )

            if not page.has_next:
                return self._blocked(
                    account, required, remaining, pages_fetched, "missing_required_attributes"
                )

            if pages_fetched >= self.config.max_attribute_pages:
                logger.warning(
                    "Attribute pagination bound reached: account=%s, pages=%d",
                    account,
                    pages_fetched,
                )
                return self._blocked(
                    account, required, remaining, pages_fetched, "attribute_page_limit_reached"
                )

            page = self.attribute_querier.get_attributes(account, page.next_key, limit)
            pages_fetched += 1

    def _blocked(
        self,
        account: str,
        required: Sequence[str],
        remaining: set[str],
        pages_fetched: int,
        block_reason: str,
    ) -> Gate02Result:
        # Порядок missing: как в списке required, без дублей
        missing = tuple(dict.fromkeys(name for name in required if name in remaining))
        logger.debug(
            "GATE 2 blocked: account=%s, reason=%s, missing=%s",
            account,
            block_reason,
            ",".join(missing),
        )
        return Gate02Result(
            entry_allowed=False,
            block_reason=block_reason,
            account=account,
            missing_attributes=missing,
            pages_fetched=pages_fetched,
            details=f"Missing attributes after {pages_fetched} page(s): {', '.join(missing)}",
        )
