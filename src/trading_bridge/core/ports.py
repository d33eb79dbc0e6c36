"""
Ports — capability интерфейсы внешних коллабораторов

Ядро зависит только от этих протоколов:
- BalanceQuerier: баланс (account, denom)
- AttributeQuerier: атрибуты аккаунта постранично
- MarkerQuerier: адрес marker аккаунта денома
- StateStorage: key-value persistence

Все вызовы синхронные и блокирующие; таймаутов ядро не видит.
"""

from dataclasses import dataclass, field
from typing import Optional, Protocol, runtime_checkable

from trading_bridge.core.domain.instructions import Coin


@dataclass(frozen=True)
class AccountAttribute:
    """Атрибут аккаунта. Для гейтинга важно только name."""

    name: str
    value: bytes = b""


@dataclass(frozen=True)
class AttributePage:
    """Страница атрибутов; next_key None/пустой — страниц больше нет."""

    attributes: tuple[AccountAttribute, ...] = field(default_factory=tuple)
    next_key: Optional[bytes] = None

    @property
    def has_next(self) -> bool:
        return bool(self.next_key)


@runtime_checkable
class BalanceQuerier(Protocol):
    def get_balance(self, account: str, denom: str) -> Optional[Coin]:
        """Баланс аккаунта; None если записи о балансе нет вообще."""
        ...


@runtime_checkable
class AttributeQuerier(Protocol):
    def get_attributes(
        self, account: str, page_key: Optional[bytes], limit: int
    ) -> AttributePage:
        """Страница атрибутов аккаунта начиная с page_key (None — первая)."""
        ...


@runtime_checkable
class MarkerQuerier(Protocol):
    def get_marker_admin_address(self, denom: str) -> Optional[str]:
        """Адрес marker аккаунта денома; None если marker не найден."""
        ...


@runtime_checkable
class Querier(BalanceQuerier, AttributeQuerier, MarkerQuerier, Protocol):
    """Агрегированный querier хоста."""


@runtime_checkable
class StateStorage(Protocol):
    def get(self, key: str) -> Optional[bytes]:
        ...

    def set(self, key: str, value: bytes) -> None:
        ...
