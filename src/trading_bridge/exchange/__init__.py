"""Exchange — оркестрация обмена deposit ↔ trading."""

from .orchestrator import ExchangeOrchestrator

__all__ = [
    "ExchangeOrchestrator",
]
