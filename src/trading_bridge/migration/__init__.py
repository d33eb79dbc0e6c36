"""Migration — допуск и выполнение миграций контракта.

- Строгое повышение semver версии
- Совпадение contract_type
"""

from .state_machine import (
    MigrationGate,
    MigrationState,
    MigrationTransitionResult,
    migrate_contract,
    parse_version,
)

__all__ = [
    "MigrationGate",
    "MigrationState",
    "MigrationTransitionResult",
    "migrate_contract",
    "parse_version",
]
