"""
BridgeConfig — статическая конфигурация моста

Не путать с ContractState (persisted запись контракта): BridgeConfig
описывает развёрнутый код (тип/версия) и лимиты запросов к хосту.
"""

from dataclasses import dataclass
from typing import Final

# Тип и версия кода контракта; используются при instantiate и migrate
CONTRACT_TYPE: Final[str] = "funding_trading_bridge_smart_contract"
CONTRACT_VERSION: Final[str] = "1.0.1"

# Ключ записи ContractState в key-value storage
STATE_KEY_V1: Final[str] = "contract_state_v1"


@dataclass(frozen=True)
class BridgeConfig:
    """Конфигурация моста.

    - contract_type / contract_version: идентичность кода для MigrationGate
    - attribute_page_limit: размер страницы при запросе атрибутов аккаунта
    - max_attribute_pages: жёсткая граница числа страниц (хост может
      неверно сообщать next_key, цикл обязан завершиться)
    - state_key: ключ ContractState в storage
    """

    contract_type: str = CONTRACT_TYPE
    contract_version: str = CONTRACT_VERSION

    # Attribute pagination
    attribute_page_limit: int = 25
    max_attribute_pages: int = 100

    state_key: str = STATE_KEY_V1

    def __post_init__(self):
        if not self.contract_type:
            raise ValueError("contract_type must be non-empty")
        if self.attribute_page_limit <= 0:
            raise ValueError(
                f"attribute_page_limit must be positive, got {self.attribute_page_limit}"
            )
        if self.max_attribute_pages <= 0:
            raise ValueError(
                f"max_attribute_pages must be positive, got {self.max_attribute_pages}"
            )
