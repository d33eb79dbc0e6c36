"""
Tests for JSON Schema Contract Validators

- Валидность самих схем (meta-validation)
- Валидация правильных данных
- Детекция нарушений required полей, типов и constraints
- Интеграция с Pydantic моделями (model_dump проходит схему)
"""

import json
from pathlib import Path

import pytest
from jsonschema import Draft202012Validator, ValidationError

from trading_bridge.core.contracts import (
    ContractStateValidator,
    ExecuteMsgValidator,
    InstantiateMsgValidator,
    SchemaLoader,
    validate_contract_state,
    validate_execute_msg,
    validate_instantiate_msg,
)
from trading_bridge.core.domain import ContractState, Denom


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_contract_state():
    return {
        "admin": "admin-address",
        "contract_name": "bridge",
        "contract_type": "funding_trading_bridge_smart_contract",
        "contract_version": "1.0.1",
        "deposit_marker": {"name": "deposit.coin", "precision": 2},
        "trading_marker": {"name": "trading.coin", "precision": 6},
        "required_deposit_attributes": ["kyc.pb"],
        "required_withdraw_attributes": [],
    }


@pytest.fixture
def valid_instantiate_msg():
    return {
        "contract_name": "bridge",
        "deposit_marker": {"name": "deposit.coin", "precision": "2"},
        "trading_marker": {"name": "trading.coin", "precision": 6},
        "required_deposit_attributes": ["kyc.pb"],
        "required_withdraw_attributes": ["kyc.pb"],
        "name_to_bind": "bridge.pb",
    }


# =============================================================================
# SCHEMA LOADING
# =============================================================================


class TestSchemaLoading:
    @pytest.mark.parametrize("schema_name", ["contract_state", "instantiate_msg", "execute_msg"])
    def test_schemas_are_valid_draft_2020_12(self, schema_name):
        schema = SchemaLoader().load_schema(schema_name)

        Draft202012Validator.check_schema(schema)

    def test_loader_caches_schemas(self):
        loader = SchemaLoader()

        assert loader.load_schema("contract_state") is loader.load_schema("contract_state")

    def test_unknown_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_schema_directory(self, tmp_path: Path):
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "missing")

    def test_invalid_schema_rejected(self, tmp_path: Path):
        (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# CONTRACT STATE
# =============================================================================


class TestContractStateSchema:
    def test_valid(self, valid_contract_state):
        validate_contract_state(valid_contract_state)

    @pytest.mark.parametrize(
        "field",
        ["admin", "contract_name", "contract_type", "contract_version", "deposit_marker"],
    )
    def test_required_fields(self, valid_contract_state, field):
        del valid_contract_state[field]

        with pytest.raises(ValidationError):
            validate_contract_state(valid_contract_state)

    def test_negative_precision(self, valid_contract_state):
        valid_contract_state["trading_marker"]["precision"] = -1

        with pytest.raises(ValidationError):
            ContractStateValidator.validate(valid_contract_state)

    def test_empty_attribute_rejected(self, valid_contract_state):
        valid_contract_state["required_deposit_attributes"] = [""]

        with pytest.raises(ValidationError) as exc_info:
            validate_contract_state(valid_contract_state)

        assert list(exc_info.value.absolute_path) == ["required_deposit_attributes", 0]

    def test_pydantic_dump_conforms(self):
        state = ContractState(
            admin="admin-address",
            contract_name="bridge",
            contract_type="funding_trading_bridge_smart_contract",
            contract_version="1.0.1",
            deposit_marker=Denom(name="deposit.coin", precision=2),
            trading_marker=Denom(name="trading.coin", precision=6),
        )

        validate_contract_state(state.model_dump(mode="json"))


# =============================================================================
# INSTANTIATE MSG
# =============================================================================


class TestInstantiateMsgSchema:
    def test_valid(self, valid_instantiate_msg):
        validate_instantiate_msg(valid_instantiate_msg)

    def test_optional_fields(self, valid_instantiate_msg):
        for field in ("required_deposit_attributes", "required_withdraw_attributes", "name_to_bind"):
            del valid_instantiate_msg[field]

        InstantiateMsgValidator.validate(valid_instantiate_msg)

    def test_null_name_to_bind(self, valid_instantiate_msg):
        valid_instantiate_msg["name_to_bind"] = None

        validate_instantiate_msg(valid_instantiate_msg)

    @pytest.mark.parametrize("precision", ["-1", "1.5", -1, 1.5, None])
    def test_invalid_precision(self, valid_instantiate_msg, precision):
        valid_instantiate_msg["deposit_marker"]["precision"] = precision

        with pytest.raises(ValidationError):
            validate_instantiate_msg(valid_instantiate_msg)

    def test_unknown_field(self, valid_instantiate_msg):
        valid_instantiate_msg["admin"] = "someone"

        with pytest.raises(ValidationError):
            validate_instantiate_msg(valid_instantiate_msg)


# =============================================================================
# EXECUTE MSG
# =============================================================================


class TestExecuteMsgSchema:
    @pytest.mark.parametrize(
        "payload",
        [
            {"admin_update_admin": {"new_admin_address": "new-admin"}},
            {"admin_update_deposit_required_attributes": {"attributes": ["a", "b"]}},
            {"admin_update_withdraw_required_attributes": {"attributes": []}},
            {"fund_trading": {"trade_amount": "100"}},
            {"withdraw_trading": {"trade_amount": 100}},
        ],
    )
    def test_valid_commands(self, payload):
        validate_execute_msg(payload)

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"fund_trading": {"trade_amount": "100"}, "withdraw_trading": {"trade_amount": "1"}},
            {"fund_trading": {"trade_amount": "1e5"}},
            {"fund_trading": {"trade_amount": -1}},
            {"fund_trading": {"trade_amount": "1", "extra": True}},
            {"admin_update_admin": {}},
            {"query_contract_state": {}},
        ],
    )
    def test_invalid_commands(self, payload):
        with pytest.raises(ValidationError):
            ExecuteMsgValidator.validate(payload)
