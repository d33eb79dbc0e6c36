"""
Contract Errors — таксономия ошибок моста

Каждая ошибка терминальна для текущего вызова: нет локальных retry,
нет частичного восстановления. Первый проваленный check прерывает
операцию целиком, без инструкций и без записи состояния.

Строковое представление: "<prefix>: <message>", tag — машиночитаемый
идентификатор для адаптера (wire response).
"""

from typing import ClassVar


class ContractError(Exception):
    """Базовая ошибка контракта (tag + свободное диагностическое сообщение)."""

    tag: ClassVar[str] = "contract_error"
    prefix: ClassVar[str] = "contract error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.prefix}: {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r})"


class ValidationError(ContractError):
    """Некорректные поля запроса."""

    tag = "validation_error"
    prefix = "validation failed"


class InvalidFormatError(ContractError):
    """Некорректный формат значения (например, имя для bind)."""

    tag = "invalid_format_error"
    prefix = "invalid format"


class InvalidFundsError(ContractError):
    """Приложены funds там, где они запрещены, или конверсия даёт ноль."""

    tag = "invalid_funds_error"
    prefix = "invalid funds"


class InvalidAccountError(ContractError):
    """Недостаточный баланс или отсутствует обязательный атрибут."""

    tag = "invalid_account_error"
    prefix = "invalid account"


class NotAuthorizedError(ContractError):
    """Не-admin вызывает admin-only операцию."""

    tag = "not_authorized_error"
    prefix = "not authorized"


class NotFoundError(ContractError):
    """Промах marker lookup (адрес администратора не найден)."""

    tag = "not_found_error"
    prefix = "not found"


class ConversionError(ContractError):
    """Арифметика разницы точностей не представима в uint128."""

    tag = "conversion_error"
    prefix = "conversion failure"


class MigrationError(ContractError):
    """Несовпадение contract_type или неубывающая версия."""

    tag = "migration_error"
    prefix = "migration error occurred"


class StorageError(ContractError):
    """Ошибка чтения/записи persistent store."""

    tag = "storage_error"
    prefix = "storage error occurred"
