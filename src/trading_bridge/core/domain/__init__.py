"""
Domain models and value objects.

Contains fundamental domain entities: Denom, ContractState, messages,
settlement instructions and the contract response.
"""

from trading_bridge.core.domain.contract_state import ContractState
from trading_bridge.core.domain.context import Env, MessageInfo
from trading_bridge.core.domain.denom import (
    UINT64_MAX,
    UINT128_MAX,
    Denom,
    DenomConversion,
)
from trading_bridge.core.domain.instructions import (
    BindName,
    Burn,
    Coin,
    Instruction,
    Mint,
    NameRecord,
    Transfer,
    Withdraw,
)
from trading_bridge.core.domain.messages import (
    AdminUpdateAdmin,
    AdminUpdateDepositRequiredAttributes,
    AdminUpdateWithdrawRequiredAttributes,
    ContractUpgrade,
    ExecuteMsg,
    FundTrading,
    InstantiateMsg,
    QueryContractState,
    WithdrawTrading,
    decode_execute_msg,
    decode_instantiate_msg,
)
from trading_bridge.core.domain.response import ContractResponse

__all__ = [
    # Denom module
    "UINT64_MAX",
    "UINT128_MAX",
    "Denom",
    "DenomConversion",
    # Contract state
    "ContractState",
    # Host context
    "Env",
    "MessageInfo",
    # Instructions
    "Coin",
    "Transfer",
    "Mint",
    "Withdraw",
    "Burn",
    "NameRecord",
    "BindName",
    "Instruction",
    # Messages
    "InstantiateMsg",
    "ExecuteMsg",
    "AdminUpdateAdmin",
    "AdminUpdateDepositRequiredAttributes",
    "AdminUpdateWithdrawRequiredAttributes",
    "FundTrading",
    "WithdrawTrading",
    "QueryContractState",
    "ContractUpgrade",
    "decode_instantiate_msg",
    "decode_execute_msg",
    # Response
    "ContractResponse",
]
