"""Gates — индивидуальные гейты допуска операций.

- GATE 0: Funds Empty (attached funds запрещены)
- GATE 1: Balance Sufficiency
- GATE 2: Required Attributes (постраничный запрос атрибутов)
"""

from .gate_00_funds_empty import Gate00FundsEmpty, Gate00Result
from .gate_01_balance import Gate01Balance, Gate01Result
from .gate_02_required_attributes import Gate02RequiredAttributes, Gate02Result

__all__ = [
    "Gate00FundsEmpty",
    "Gate00Result",
    "Gate01Balance",
    "Gate01Result",
    "Gate02RequiredAttributes",
    "Gate02Result",
]
