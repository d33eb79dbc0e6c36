"""Gatekeeper — система гейтов допуска операций моста.

Фиксированный порядок для обменов: GATE 0 → GATE 1 → GATE 2.
Admin операции используют только GATE 0 + проверку admin.
"""

from .access_gate import AccessGate, check_funds_empty
from .gates import (
    Gate00FundsEmpty,
    Gate00Result,
    Gate01Balance,
    Gate01Result,
    Gate02RequiredAttributes,
    Gate02Result,
)

__all__ = [
    "AccessGate",
    "check_funds_empty",
    "Gate00FundsEmpty",
    "Gate00Result",
    "Gate01Balance",
    "Gate01Result",
    "Gate02RequiredAttributes",
    "Gate02Result",
]
