"""Тесты Migration State Machine.

Coverage:
- ACCEPTED: строгое повышение версии при совпадении типа
- VERSION_TOO_LOW: равная или меньшая версия
- TYPE_MISMATCH: другой contract_type (проверяется до версий)
- Невалидный semver → MigrationError
- migrate_contract: единственная мутация — contract_version
"""

import pytest

from trading_bridge.core.config import CONTRACT_TYPE, BridgeConfig
from trading_bridge.core.domain import ContractState, ContractUpgrade, Denom
from trading_bridge.core.errors import MigrationError, StorageError
from trading_bridge.migration import MigrationGate, MigrationState, migrate_contract, parse_version
from trading_bridge.store import ConfigurationStore, InMemoryStorage


def make_state(contract_type: str = CONTRACT_TYPE, contract_version: str = "0.0.1") -> ContractState:
    return ContractState(
        admin="admin-address",
        contract_name="bridge",
        contract_type=contract_type,
        contract_version=contract_version,
        deposit_marker=Denom(name="deposit.coin", precision=2),
        trading_marker=Denom(name="trading.coin", precision=6),
        required_deposit_attributes=["deposit.attribute"],
        required_withdraw_attributes=["withdraw.attribute"],
    )


@pytest.fixture
def gate():
    return MigrationGate()


class TestMigrationGate:
    def test_version_increase_accepted(self, gate):
        result = gate.evaluate(make_state(contract_version="0.0.1"), CONTRACT_TYPE, "1.0.0")

        assert result.new_state == MigrationState.ACCEPTED
        assert result.accepted
        assert result.stored_version == "0.0.1"
        assert result.target_version == "1.0.0"

    @pytest.mark.parametrize("target_version", ["1.0.0", "0.9.9", "1.0.0-rc.1"])
    def test_not_greater_version_rejected(self, gate, target_version):
        result = gate.evaluate(make_state(contract_version="1.0.0"), CONTRACT_TYPE, target_version)

        assert result.new_state == MigrationState.VERSION_TOO_LOW
        assert not result.accepted

    def test_prerelease_ordering(self, gate):
        """1.0.0-rc.1 < 1.0.0 по semver."""
        result = gate.evaluate(make_state(contract_version="1.0.0-rc.1"), CONTRACT_TYPE, "1.0.0")

        assert result.accepted

    def test_type_mismatch_rejected(self, gate):
        result = gate.evaluate(make_state(contract_type="other_contract"), CONTRACT_TYPE, "9.0.0")

        assert result.new_state == MigrationState.TYPE_MISMATCH
        assert "does not match stored contract type [other_contract]" in result.details

    def test_type_checked_before_version_parsing(self, gate):
        stored = make_state(contract_type="other_contract", contract_version="not-a-version")

        result = gate.evaluate(stored, CONTRACT_TYPE, "1.0.0")

        assert result.new_state == MigrationState.TYPE_MISMATCH

    def test_validate_migration_raises_with_details(self, gate):
        with pytest.raises(MigrationError, match=r"\[999.999.999\]"):
            gate.validate_migration(
                make_state(contract_version="999.999.999"), CONTRACT_TYPE, "1.0.0"
            )

    @pytest.mark.parametrize("bad_version", ["", "1.0", "v1.0.0", "one.two.three"])
    def test_unparsable_version(self, gate, bad_version):
        with pytest.raises(MigrationError, match="unable to parse contract version"):
            gate.evaluate(make_state(contract_version="0.0.1"), CONTRACT_TYPE, bad_version)


def test_parse_version():
    assert parse_version("1.2.3") > parse_version("1.2.2")
    assert parse_version("1.10.0") > parse_version("1.9.0")


# =============================================================================
# migrate_contract
# =============================================================================


class TestMigrateContract:
    @pytest.fixture
    def store(self):
        store = ConfigurationStore(InMemoryStorage())
        store.initialize(make_state(contract_version="0.0.1"))
        return store

    def test_successful_migration(self, store):
        before = store.load()

        response = migrate_contract(store, ContractUpgrade(), BridgeConfig(contract_version="1.0.0"))

        after = store.load()
        assert after.contract_version == "1.0.0"
        assert after == before.with_contract_version("1.0.0")
        assert response.attributes == (("action", "migrate"), ("new_version", "1.0.0"))
        assert response.data == after.model_dump(mode="json")

    def test_default_config_targets_current_version(self, store):
        migrate_contract(store, ContractUpgrade())

        assert store.load().contract_version == BridgeConfig().contract_version

    def test_rejected_migration_leaves_state(self, store):
        before = store.load()

        with pytest.raises(MigrationError, match="too low"):
            migrate_contract(store, ContractUpgrade(), BridgeConfig(contract_version="0.0.1"))

        assert store.load() == before

    def test_type_mismatch(self, store):
        config = BridgeConfig(contract_type="other_contract", contract_version="9.9.9")

        with pytest.raises(MigrationError, match="does not match"):
            migrate_contract(store, ContractUpgrade(), config)

    def test_missing_state(self):
        with pytest.raises(StorageError):
            migrate_contract(ConfigurationStore(InMemoryStorage()), ContractUpgrade())
