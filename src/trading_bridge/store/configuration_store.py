"""
ConfigurationStore — persistence singleton записи ContractState

Чтение один раз за вызов, мутация в памяти, запись не более одного раза.
Формат записи: JSON (Pydantic) + проверка против contract_state.json
при чтении. Любая ошибка чтения/записи → StorageError.
"""

import json
import logging
from typing import Optional

import pydantic
from jsonschema import ValidationError as SchemaValidationError

from trading_bridge.core.config import BridgeConfig
from trading_bridge.core.contracts import validate_contract_state
from trading_bridge.core.domain.contract_state import ContractState
from trading_bridge.core.errors import StorageError
from trading_bridge.core.ports import StateStorage

logger = logging.getLogger(__name__)


class ConfigurationStore:
    """Доступ к ContractState через injected StateStorage."""

    def __init__(self, storage: StateStorage, config: Optional[BridgeConfig] = None):
        self.storage = storage
        self.config = config or BridgeConfig()

    def exists(self) -> bool:
        try:
            return self.storage.get(self.config.state_key) is not None
        except Exception as e:
            raise StorageError(f"failed to read contract state: {e!r}") from e

    def load(self) -> ContractState:
        """
        Raises:
            StorageError: Запись отсутствует, повреждена или чтение упало
        """
        try:
            raw = self.storage.get(self.config.state_key)
        except Exception as e:
            raise StorageError(f"failed to read contract state: {e!r}") from e
        if raw is None:
            raise StorageError(f"contract state not found under key [{self.config.state_key}]")

        try:
            data = json.loads(raw)
            validate_contract_state(data)
            return ContractState.model_validate(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise StorageError(f"contract state is not valid JSON: {e}") from e
        except SchemaValidationError as e:
            raise StorageError(f"contract state violates schema: {e.message}") from e
        except pydantic.ValidationError as e:
            raise StorageError(f"contract state failed model validation: {e}") from e

    def save(self, state: ContractState) -> None:
        """
        Запись проверяется той же схемой, что и при load(): состояние,
        которое нельзя прочитать, не записывается.

        Raises:
            StorageError: Если состояние нарушает схему или запись не удалась
        """
        # model_copy(update=...) не валидирует поля
        try:
            validate_contract_state(state.model_dump(mode="json"))
        except SchemaValidationError as e:
            raise StorageError(f"refusing to write invalid contract state: {e.message}") from e

        payload = state.model_dump_json().encode("utf-8")
        try:
            self.storage.set(self.config.state_key, payload)
        except Exception as e:
            raise StorageError(f"failed to write contract state: {e!r}") from e
        logger.debug("Contract state saved: key=%s, bytes=%d", self.config.state_key, len(payload))

    def initialize(self, state: ContractState) -> None:
        """
        Первичное создание записи (instantiate).

        Raises:
            StorageError: Если запись уже существует
        """
        if self.exists():
            raise StorageError("contract state already exists; instantiate may only run once")
        self.save(state)
        logger.info(
            "Contract state created: name=%s, type=%s, version=%s",
            state.contract_name,
            state.contract_type,
            state.contract_version,
        )
