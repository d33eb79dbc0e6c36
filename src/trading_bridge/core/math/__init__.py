"""
Core math modules для trading_bridge

Целочисленная конверсия сумм между точностями деномов.
"""

from trading_bridge.core.math.conversion import (
    MAX_PRECISION_DIFF,
    convert_denom,
    precision_factor,
)

__all__ = [
    "MAX_PRECISION_DIFF",
    "convert_denom",
    "precision_factor",
]
