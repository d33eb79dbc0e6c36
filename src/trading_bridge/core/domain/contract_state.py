"""
ContractState — singleton запись конфигурации контракта

Создаётся ровно один раз при instantiate, изменяется AdminController
(admin, списки атрибутов) и MigrationGate (contract_version), никогда
не удаляется. Единственный долгоживущий владелец — ConfigurationStore.

Модель immutable: каждая мутация создаёт новый экземпляр через
model_copy(update=...).
"""

from pydantic import BaseModel, Field

from .denom import Denom


class ContractState(BaseModel):
    """
    Конфигурация контракта (версия записи v1).

    Списки required_*_attributes семантически — множества, но хранятся
    как списки и при admin-замене сохраняются дословно (порядок и дубли).
    """

    admin: str = Field(..., min_length=1, description="Адрес администратора контракта")
    contract_name: str = Field(..., min_length=1, description="Имя инстанса контракта")
    contract_type: str = Field(..., min_length=1, description="Тип кода контракта")
    contract_version: str = Field(
        ..., min_length=1, description="Семантическая версия кода контракта"
    )

    deposit_marker: Denom = Field(..., description="Деном депозита (публичный)")
    trading_marker: Denom = Field(..., description="Деном торговли (restricted)")

    required_deposit_attributes: list[str] = Field(
        default_factory=list, description="Атрибуты, обязательные для fund_trading"
    )
    required_withdraw_attributes: list[str] = Field(
        default_factory=list, description="Атрибуты, обязательные для withdraw_trading"
    )

    model_config = {"frozen": True}

    def with_admin(self, admin: str) -> "ContractState":
        return self.model_copy(update={"admin": admin})

    def with_required_deposit_attributes(self, attributes: list[str]) -> "ContractState":
        return self.model_copy(update={"required_deposit_attributes": list(attributes)})

    def with_required_withdraw_attributes(self, attributes: list[str]) -> "ContractState":
        return self.model_copy(update={"required_withdraw_attributes": list(attributes)})

    def with_contract_version(self, contract_version: str) -> "ContractState":
        return self.model_copy(update={"contract_version": contract_version})
