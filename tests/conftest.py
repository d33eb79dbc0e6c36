"""Общие fixtures: in-memory хост и контракт с дефолтной конфигурацией."""

import pytest

from trading_bridge.contract import BridgeContract
from trading_bridge.core.config import BridgeConfig
from trading_bridge.core.domain import Denom, Env, InstantiateMsg, MessageInfo
from trading_bridge.store import InMemoryStorage
from trading_bridge.testing import InMemoryQuerier

DEFAULT_ADMIN = "admin-address"
DEFAULT_SENDER = "sender-address"
DEFAULT_CONTRACT_ADDRESS = "contract-address"
DEFAULT_MARKER_ADDRESS = "trading-marker-address"
DEFAULT_CONTRACT_NAME = "Funding Trading Bridge"
DEFAULT_DEPOSIT_DENOM_NAME = "deposit.coin"
DEFAULT_TRADING_DENOM_NAME = "trading.coin"
DEFAULT_REQUIRED_DEPOSIT_ATTRIBUTE = "deposit.attribute"
DEFAULT_REQUIRED_WITHDRAW_ATTRIBUTE = "withdraw.attribute"
DEFAULT_BOUND_NAME = "bridge.pb"


def make_instantiate_msg(
    deposit_precision: int = 2,
    trading_precision: int = 6,
    **overrides,
) -> InstantiateMsg:
    fields = dict(
        contract_name=DEFAULT_CONTRACT_NAME,
        deposit_marker=Denom(name=DEFAULT_DEPOSIT_DENOM_NAME, precision=deposit_precision),
        trading_marker=Denom(name=DEFAULT_TRADING_DENOM_NAME, precision=trading_precision),
        required_deposit_attributes=[DEFAULT_REQUIRED_DEPOSIT_ATTRIBUTE],
        required_withdraw_attributes=[DEFAULT_REQUIRED_WITHDRAW_ATTRIBUTE],
        name_to_bind=DEFAULT_BOUND_NAME,
    )
    fields.update(overrides)
    return InstantiateMsg(**fields)


@pytest.fixture
def env():
    return Env(contract_address=DEFAULT_CONTRACT_ADDRESS)


@pytest.fixture
def admin_info():
    return MessageInfo(sender=DEFAULT_ADMIN)


@pytest.fixture
def sender_info():
    return MessageInfo(sender=DEFAULT_SENDER)


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def querier():
    """Хост: sender имеет оба атрибута, marker адрес trading денома известен."""
    q = InMemoryQuerier()
    q.set_attributes(
        DEFAULT_SENDER,
        [DEFAULT_REQUIRED_DEPOSIT_ATTRIBUTE, DEFAULT_REQUIRED_WITHDRAW_ATTRIBUTE],
    )
    q.set_marker_address(DEFAULT_TRADING_DENOM_NAME, DEFAULT_MARKER_ADDRESS)
    return q


@pytest.fixture
def config():
    return BridgeConfig()


@pytest.fixture
def make_contract(storage, querier, config, env, admin_info):
    """Фабрика: инстанциированный контракт с заданными точностями."""

    def _make(deposit_precision: int = 2, trading_precision: int = 6, **overrides):
        contract = BridgeContract(storage, querier, config)
        contract.instantiate(
            env,
            admin_info,
            make_instantiate_msg(deposit_precision, trading_precision, **overrides),
        )
        return contract

    return _make


@pytest.fixture
def contract(make_contract):
    return make_contract()
