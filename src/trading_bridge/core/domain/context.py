"""Host call context: окружение контракта и информация о сообщении."""

from dataclasses import dataclass, field

from .instructions import Coin


@dataclass(frozen=True)
class Env:
    """Окружение контракта на момент вызова."""

    contract_address: str


@dataclass(frozen=True)
class MessageInfo:
    """Отправитель и приложенные к вызову native funds."""

    sender: str
    funds: tuple[Coin, ...] = field(default_factory=tuple)
