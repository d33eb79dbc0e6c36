"""Admin — admin-gated управление конфигурацией контракта."""

from .controller import AdminController

__all__ = [
    "AdminController",
]
