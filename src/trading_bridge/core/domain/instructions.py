"""
Instructions — упорядоченные side-effects для хоста (settlement)

Tagged варианты (discriminator kind):
- Transfer: marker transfer from_address → to_address (administrator)
- Mint: выпуск монет денома под администратором
- Withdraw: вывод монет из marker аккаунта на to_address
- Burn: сжигание монет денома под администратором
- BindName: привязка имени к адресу контракта (instantiate)

Порядок инструкций в ответе — часть контракта и проверяется тестами.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from .denom import UINT128_MAX


class Coin(BaseModel):
    """Сумма денома (amount в минимальных единицах)."""

    denom: str = Field(..., min_length=1)
    amount: int = Field(..., ge=0, le=UINT128_MAX)

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"{self.amount}{self.denom}"


class Transfer(BaseModel):
    kind: Literal["transfer"] = "transfer"
    amount: Coin
    administrator: str
    from_address: str
    to_address: str

    model_config = {"frozen": True}


class Mint(BaseModel):
    kind: Literal["mint"] = "mint"
    amount: Coin
    administrator: str

    model_config = {"frozen": True}


class Withdraw(BaseModel):
    kind: Literal["withdraw"] = "withdraw"
    denom: str
    amount: Coin
    administrator: str
    to_address: str

    model_config = {"frozen": True}


class Burn(BaseModel):
    kind: Literal["burn"] = "burn"
    amount: Coin
    administrator: str

    model_config = {"frozen": True}


class NameRecord(BaseModel):
    name: str
    address: str
    restricted: bool

    model_config = {"frozen": True}


class BindName(BaseModel):
    kind: Literal["bind_name"] = "bind_name"
    record: NameRecord
    parent: Optional[NameRecord] = None

    model_config = {"frozen": True}


Instruction = Annotated[
    Union[Transfer, Mint, Withdraw, Burn, BindName],
    Field(discriminator="kind"),
]
