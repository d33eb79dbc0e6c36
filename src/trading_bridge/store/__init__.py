"""Store — persistence ContractState поверх injected key-value storage."""

from .configuration_store import ConfigurationStore
from .memory import InMemoryStorage

__all__ = [
    "ConfigurationStore",
    "InMemoryStorage",
]
