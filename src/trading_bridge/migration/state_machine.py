"""Migration State Machine — допуск миграций ContractState.

Состояния (терминальные, одно на вызов):
- TYPE_MISMATCH: stored contract_type != целевой тип кода
- VERSION_TOO_LOW: stored version >= целевой (downgrade и no-op запрещены)
- ACCEPTED: строгое повышение версии

Версии сравниваются как semver. Единственная мутация при миграции —
contract_version := target_version.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import semver

from trading_bridge.core.config import BridgeConfig
from trading_bridge.core.domain.contract_state import ContractState
from trading_bridge.core.domain.messages import ContractUpgrade
from trading_bridge.core.domain.response import ContractResponse
from trading_bridge.core.errors import MigrationError
from trading_bridge.store.configuration_store import ConfigurationStore

logger = logging.getLogger(__name__)


class MigrationState(str, Enum):
    """Исход проверки миграции."""

    TYPE_MISMATCH = "TYPE_MISMATCH"
    VERSION_TOO_LOW = "VERSION_TOO_LOW"
    ACCEPTED = "ACCEPTED"


@dataclass(frozen=True)
class MigrationTransitionResult:
    """Результат оценки миграции."""

    new_state: MigrationState
    stored_type: str
    target_type: str
    stored_version: str
    target_version: str

    # Диагностика
    details: str

    @property
    def accepted(self) -> bool:
        return self.new_state == MigrationState.ACCEPTED


def parse_version(version: str) -> semver.Version:
    """
    Raises:
        MigrationError: Если строка не является semver
    """
    try:
        return semver.Version.parse(version)
    except (ValueError, TypeError) as e:
        raise MigrationError(f"unable to parse contract version [{version}]: {e}") from e


class MigrationGate:
    """Проверка type/version совместимости перед миграцией."""

    def evaluate(
        self, stored: ContractState, target_type: str, target_version: str
    ) -> MigrationTransitionResult:
        """Оценка миграции (чистая функция).

        Args:
            stored: текущий ContractState
            target_type: тип нового кода
            target_version: версия нового кода

        Returns:
            MigrationTransitionResult

        Raises:
            MigrationError: Если одна из версий не парсится как semver
        """
        if stored.contract_type != target_type:
            return self._create_result(
                MigrationState.TYPE_MISMATCH,
                stored,
                target_type,
                target_version,
                details=(
                    f"target migration contract type [{target_type}] does not match "
                    f"stored contract type [{stored.contract_type}]"
                ),
            )

        stored_version = parse_version(stored.contract_version)
        new_version = parse_version(target_version)
        if stored_version >= new_version:
            return self._create_result(
                MigrationState.VERSION_TOO_LOW,
                stored,
                target_type,
                target_version,
                details=(
                    f"target migration contract version [{target_version}] is too low to use. "
                    f"stored contract version is [{stored_version}]"
                ),
            )

        return self._create_result(
            MigrationState.ACCEPTED,
            stored,
            target_type,
            target_version,
            details=f"Migration accepted: {stored_version} → {new_version}",
        )

    def validate_migration(
        self, stored: ContractState, target_type: str, target_version: str
    ) -> MigrationTransitionResult:
        """
        Raises:
            MigrationError: TYPE_MISMATCH, VERSION_TOO_LOW или невалидный semver
        """
        result = self.evaluate(stored, target_type, target_version)
        if not result.accepted:
            logger.debug("Migration rejected: %s (%s)", result.new_state.value, result.details)
            raise MigrationError(result.details)
        return result

    @staticmethod
    def _create_result(
        new_state: MigrationState,
        stored: ContractState,
        target_type: str,
        target_version: str,
        details: str,
    ) -> MigrationTransitionResult:
        return MigrationTransitionResult(
            new_state=new_state,
            stored_type=stored.contract_type,
            target_type=target_type,
            stored_version=stored.contract_version,
            target_version=target_version,
            details=details,
        )


def migrate_contract(
    store: ConfigurationStore,
    msg: ContractUpgrade,
    config: Optional[BridgeConfig] = None,
) -> ContractResponse:
    """Миграция ContractState на версию развёрнутого кода.

    Returns:
        ContractResponse с attributes {action: migrate, new_version} и
        JSON-снапшотом обновлённого состояния в data

    Raises:
        MigrationError: миграция отклонена
        StorageError: ContractState недоступен
    """
    config = config or BridgeConfig()
    msg.self_validate()
    state = store.load()
    MigrationGate().validate_migration(state, config.contract_type, config.contract_version)

    migrated = state.with_contract_version(config.contract_version)
    store.save(migrated)
    logger.info(
        "Contract migrated: %s %s -> %s",
        migrated.contract_type,
        state.contract_version,
        migrated.contract_version,
    )
    return ContractResponse(
        attributes=(
            ("action", "migrate"),
            ("new_version", config.contract_version),
        ),
        data=migrated.model_dump(mode="json"),
    )
