"""Set the admin address once and keep track of the deployed version."""

from __future__ import annotations

from collections.abc import Callable

import structlog
from sqlalchemy.orm import Session

from .. import CONTRACT_NAME, __version__
from ..addresses.address_validator import validate_address
from ..exceptions import NotFoundError
from ..storage.state_store import StateStore
from ..storage.unit_of_work import TransactionManager
from .instance_models import Config, ContractInfo

logger = structlog.get_logger(__name__)

CONFIG_KEY = "config"
CONTRACT_INFO_KEY = "contract_info"


class InstanceService:
    """Own the config singleton; nothing else writes it."""

    def __init__(
        self,
        transactions: TransactionManager,
        state: StateStore,
        address_validator: Callable[[str], str] = validate_address,
    ) -> None:
        self._transactions = transactions
        self._state = state
        self._validate_address = address_validator

    def instantiate(
        self,
        admin_address: str,
        *,
        contract: str = CONTRACT_NAME,
        version: str = __version__,
    ) -> Config:
        """Store the admin address unless the instance is already initialized.

        The contract info is refreshed whenever the deployed version changes.
        """
        self._validate_address(admin_address)
        with self._transactions.begin() as uow:
            existing = self.config_in(uow.session)
            if existing is None:
                config = Config(admin_address=admin_address)
                self._state.upsert(uow.session, CONFIG_KEY, {"admin_address": admin_address})
                logger.info("instance.instantiated", admin=admin_address)
            else:
                config = existing
                if existing.admin_address != admin_address:
                    logger.warning(
                        "instance.admin.ignored",
                        configured=existing.admin_address,
                        requested=admin_address,
                    )

            info = self._contract_info_in(uow.session)
            if info is None or info != ContractInfo(contract=contract, version=version):
                self._state.upsert(
                    uow.session,
                    CONTRACT_INFO_KEY,
                    {"contract": contract, "version": version},
                )
                logger.info(
                    "instance.version.recorded",
                    contract=contract,
                    version=version,
                    previous=info.version if info else None,
                )
            uow.commit()
        return config

    def get_config(self) -> Config:
        with self._transactions.begin() as uow:
            config = self.config_in(uow.session)
        if config is None:
            raise NotFoundError("instance has not been initialized")
        return config

    def get_contract_info(self) -> ContractInfo:
        with self._transactions.begin() as uow:
            info = self._contract_info_in(uow.session)
        if info is None:
            raise NotFoundError("contract info has not been recorded")
        return info

    def config_in(self, session: Session) -> Config | None:
        """Read the config inside an already open unit of work."""
        payload = self._state.read(session, CONFIG_KEY)
        if payload is None:
            return None
        return Config(admin_address=payload["admin_address"])

    def require_config_in(self, session: Session) -> Config:
        config = self.config_in(session)
        if config is None:
            raise NotFoundError("instance has not been initialized")
        return config

    def _contract_info_in(self, session: Session) -> ContractInfo | None:
        payload = self._state.read(session, CONTRACT_INFO_KEY)
        if payload is None:
            return None
        return ContractInfo(contract=payload["contract"], version=payload["version"])
