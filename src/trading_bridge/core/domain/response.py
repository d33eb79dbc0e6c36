"""
ContractResponse — результат успешного вызова

- instructions: упорядоченные side-effects (Transfer/Mint/Withdraw/Burn/BindName)
- attributes: плоский лог (key, value) для observability/audit
- data: JSON-снапшот (только migrate)

Handlers собирают инструкции и атрибуты обычными списками в порядке
исполнения и замораживают их в кортежи.
"""

from dataclasses import dataclass
from typing import Any, Optional

from .instructions import Instruction


@dataclass(frozen=True)
class ContractResponse:
    """Ответ контракта."""

    instructions: tuple[Instruction, ...] = ()
    attributes: tuple[tuple[str, str], ...] = ()
    data: Optional[dict[str, Any]] = None

    def attribute(self, key: str) -> str:
        """
        Значение атрибута по ключу (первое вхождение).

        Raises:
            KeyError: Если атрибута нет в ответе
        """
        for attr_key, value in self.attributes:
            if attr_key == key:
                return value
        raise KeyError(f"expected attributes to contain key [{key}]")

    def has_attribute(self, key: str) -> bool:
        return any(attr_key == key for attr_key, _ in self.attributes)

    def attributes_dict(self) -> dict[str, str]:
        return dict(self.attributes)
