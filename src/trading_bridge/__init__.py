"""
trading_bridge — мост между deposit и trading деномами

Конверсия балансов 1:1 по value (с точностью до усечения) между двумя
деномами разной точности, с допуском по атрибутам аккаунта и
admin-управляемой конфигурацией.
"""

from trading_bridge.contract import BridgeContract
from trading_bridge.core.config import CONTRACT_TYPE, CONTRACT_VERSION, BridgeConfig

__version__ = CONTRACT_VERSION

__all__ = [
    "BridgeContract",
    "BridgeConfig",
    "CONTRACT_TYPE",
    "CONTRACT_VERSION",
]
