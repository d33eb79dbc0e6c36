"""
Contract Validation Module

Модуль для валидации JSON контрактов моста (state snapshot и wire сообщения).
"""

from .validators import (
    ContractStateValidator,
    ContractValidator,
    ExecuteMsgValidator,
    InstantiateMsgValidator,
    SchemaLoader,
    validate_contract_state,
    validate_execute_msg,
    validate_instantiate_msg,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ContractStateValidator",
    "InstantiateMsgValidator",
    "ExecuteMsgValidator",
    # Functions
    "validate_contract_state",
    "validate_instantiate_msg",
    "validate_execute_msg",
]
