"""
JSON Schema Contract Validators

Проверка JSON форм моста против схем, поставляемых как package data
(core/contracts/schema/):
- contract_state.json: persisted/queried ContractState
- instantiate_msg.json: wire форма InstantiateMsg
- execute_msg.json: wire форма ExecuteMsg (tagged union)

Схема загружается и проходит meta-validation один раз; скомпилированный
Draft202012Validator переиспользуется всеми вызовами validate_*.
"""

import json
from pathlib import Path
from typing import Any, ClassVar, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Загрузка схем по имени с кэшем и meta-validation."""

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Args:
            schema_name: имя файла схемы без .json (например, 'contract_state')

        Raises:
            FileNotFoundError: Файла схемы нет
            ValueError: Схема не проходит meta-validation Draft 2020-12
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        schema = json.loads(schema_path.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Валидатор одной схемы; подклассы задают schema_name.

    Скомпилированный Draft202012Validator хранится на уровне класса.
    """

    schema_name: ClassVar[str]
    _compiled: ClassVar[Optional[Draft202012Validator]] = None

    @classmethod
    def _validator(cls) -> Draft202012Validator:
        if cls.__dict__.get("_compiled") is None:
            cls._compiled = Draft202012Validator(_SCHEMA_LOADER.load_schema(cls.schema_name))
        return cls._compiled

    @classmethod
    def validate(cls, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Данные не соответствуют схеме (первое нарушение)
        """
        cls._validator().validate(data)


class ContractStateValidator(ContractValidator):
    schema_name = "contract_state"


class InstantiateMsgValidator(ContractValidator):
    schema_name = "instantiate_msg"


class ExecuteMsgValidator(ContractValidator):
    schema_name = "execute_msg"


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_contract_state(data: Dict[str, Any]) -> None:
    """JSON снапшот ContractState (store load/save, query)."""
    ContractStateValidator.validate(data)


def validate_instantiate_msg(data: Dict[str, Any]) -> None:
    InstantiateMsgValidator.validate(data)


def validate_execute_msg(data: Dict[str, Any]) -> None:
    ExecuteMsgValidator.validate(data)


__all__ = [
    "ValidationError",
    "SCHEMA_DIR",
    "SchemaLoader",
    "ContractValidator",
    "ContractStateValidator",
    "InstantiateMsgValidator",
    "ExecuteMsgValidator",
    "validate_contract_state",
    "validate_instantiate_msg",
    "validate_execute_msg",
]
