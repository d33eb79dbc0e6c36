"""
In-memory host fakes для детерминированных тестов

InMemoryQuerier реализует BalanceQuerier, AttributeQuerier и MarkerQuerier
поверх dict; attribute pagination эмулирует хост (next_key = offset).
"""

from typing import Iterable, Optional

from trading_bridge.core.domain.instructions import Coin
from trading_bridge.core.ports import AccountAttribute, AttributePage


class InMemoryQuerier:
    """Fake querier хоста."""

    def __init__(self):
        self.balances: dict[tuple[str, str], int] = {}
        self.attributes: dict[str, list[AccountAttribute]] = {}
        self.marker_addresses: dict[str, str] = {}

        # Журнал запросов атрибутов: (account, page_key, limit)
        self.attribute_requests: list[tuple[str, Optional[bytes], int]] = []

    # Setup ------------------------------------------------------------------

    def set_balance(self, account: str, denom: str, amount: int) -> None:
        self.balances[(account, denom)] = amount

    def set_attributes(self, account: str, names: Iterable[str]) -> None:
        self.attributes[account] = [AccountAttribute(name=name) for name in names]

    def set_marker_address(self, denom: str, address: str) -> None:
        self.marker_addresses[denom] = address

    # BalanceQuerier ---------------------------------------------------------

    def get_balance(self, account: str, denom: str) -> Optional[Coin]:
        amount = self.balances.get((account, denom))
        if amount is None:
            return None
        return Coin(denom=denom, amount=amount)

    # AttributeQuerier -------------------------------------------------------

    def get_attributes(
        self, account: str, page_key: Optional[bytes], limit: int
    ) -> AttributePage:
        self.attribute_requests.append((account, page_key, limit))
        all_attributes = self.attributes.get(account, [])
        offset = int(page_key.decode()) if page_key else 0
        page = all_attributes[offset : offset + limit]
        next_offset = offset + limit
        next_key = str(next_offset).encode() if next_offset < len(all_attributes) else None
        return AttributePage(attributes=tuple(page), next_key=next_key)

    # MarkerQuerier ----------------------------------------------------------

    def get_marker_admin_address(self, denom: str) -> Optional[str]:
        return self.marker_addresses.get(denom)


class EndlessAttributeQuerier(InMemoryQuerier):
    """Хост, который всегда сообщает о следующей странице (некорректная пагинация)."""

    def get_attributes(
        self, account: str, page_key: Optional[bytes], limit: int
    ) -> AttributePage:
        self.attribute_requests.append((account, page_key, limit))
        return AttributePage(
            attributes=(AccountAttribute(name="unrelated.attribute"),),
            next_key=b"again",
        )
