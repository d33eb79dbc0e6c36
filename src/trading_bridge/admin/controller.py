"""
AdminController — admin-gated мутации ContractState

Все операции:
1. Проверка новых значений (ValidationError), как в self_validate() сообщений
2. GATE 0: attached funds запрещены
3. sender == state.admin, иначе NotAuthorizedError
4. Замена поля целиком (не merge), одна запись в store

Ответ содержит предыдущее и новое значения в attributes; инструкций нет.
"""

import logging
from typing import Callable

from trading_bridge.core.domain.contract_state import ContractState
from trading_bridge.core.domain.context import Env, MessageInfo
from trading_bridge.core.domain.messages import (
    AdminUpdateAdmin,
    AdminUpdateDepositRequiredAttributes,
    AdminUpdateWithdrawRequiredAttributes,
)
from trading_bridge.core.domain.response import ContractResponse
from trading_bridge.core.errors import NotAuthorizedError
from trading_bridge.gatekeeper.access_gate import check_funds_empty
from trading_bridge.store.configuration_store import ConfigurationStore

logger = logging.getLogger(__name__)


class AdminController:
    """Admin операции над ContractState."""

    def __init__(self, store: ConfigurationStore):
        self.store = store

    def update_admin(self, env: Env, info: MessageInfo, new_admin_address: str) -> ContractResponse:
        """Смена администратора контракта.

        Raises:
            ValidationError: пустой new_admin_address
            InvalidFundsError: attached funds
            NotAuthorizedError: sender не admin
        """
        AdminUpdateAdmin(new_admin_address=new_admin_address).self_validate()
        state = self._load_authorized(info, "only the contract admin may change the admin")
        previous_admin = state.admin
        self.store.save(state.with_admin(new_admin_address))

        logger.info("Admin changed: %s -> %s", previous_admin, new_admin_address)
        attributes = self._contract_attributes("admin_update_admin", env, state) + [
            ("previous_admin", previous_admin),
            ("new_admin", new_admin_address),
        ]
        return ContractResponse(attributes=tuple(attributes))

    def update_required_deposit_attributes(
        self, env: Env, info: MessageInfo, attributes: list[str]
    ) -> ContractResponse:
        """Замена списка атрибутов, обязательных для fund_trading."""
        AdminUpdateDepositRequiredAttributes(attributes=attributes).self_validate()
        return self._replace_attributes(
            env,
            info,
            attributes,
            action="admin_update_deposit_required_attributes",
            current=lambda state: state.required_deposit_attributes,
            replace=ContractState.with_required_deposit_attributes,
        )

    def update_required_withdraw_attributes(
        self, env: Env, info: MessageInfo, attributes: list[str]
    ) -> ContractResponse:
        """Замена списка атрибутов, обязательных для withdraw_trading."""
        AdminUpdateWithdrawRequiredAttributes(attributes=attributes).self_validate()
        return self._replace_attributes(
            env,
            info,
            attributes,
            action="admin_update_withdraw_required_attributes",
            current=lambda state: state.required_withdraw_attributes,
            replace=ContractState.with_required_withdraw_attributes,
        )

    def _replace_attributes(
        self,
        env: Env,
        info: MessageInfo,
        attributes: list[str],
        action: str,
        current: Callable[[ContractState], list[str]],
        replace: Callable[[ContractState, list[str]], ContractState],
    ) -> ContractResponse:
        state = self._load_authorized(info, "only the contract admin may update attributes")
        previous_attributes = list(current(state))
        updated = replace(state, attributes)
        self.store.save(updated)

        logger.info(
            "%s: [%s] -> [%s]", action, ",".join(previous_attributes), ",".join(current(updated))
        )
        response_attributes = self._contract_attributes(action, env, state) + [
            ("previous_attributes", ",".join(previous_attributes)),
            ("new_attributes", ",".join(current(updated))),
        ]
        return ContractResponse(attributes=tuple(response_attributes))

    def _load_authorized(self, info: MessageInfo, denial_message: str) -> ContractState:
        check_funds_empty(info.funds)
        state = self.store.load()
        if info.sender != state.admin:
            logger.debug("Admin check failed: sender=%s", info.sender)
            raise NotAuthorizedError(denial_message)
        return state

    @staticmethod
    def _contract_attributes(action: str, env: Env, state: ContractState) -> list[tuple[str, str]]:
        return [
            ("action", action),
            ("contract_address", env.contract_address),
            ("contract_type", state.contract_type),
            ("contract_name", state.contract_name),
        ]
