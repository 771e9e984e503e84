"""Dependency wiring helpers."""

from __future__ import annotations

from fastapi import FastAPI

from .addresses.address_validator import AddressValidator
from .api.errors import install_error_handlers
from .auth.auth_service import AuthService
from .config import AppConfig
from .exceptions import NotFoundError
from .instance.instance_api import router as instance_router
from .instance.instance_service import InstanceService
from .rankings.rankings_api import router as rankings_router
from .rankings.rankings_repository import RankingRepository, build_ranking_store
from .storage.id_allocator import IdAllocator
from .storage.state_store import StateStore
from .storage.unit_of_work import TransactionManager
from .templates.templates_api import router as templates_router
from .templates.templates_catalog import TemplateCatalog, build_template_store


def include_routers(app: FastAPI, config: AppConfig) -> None:
    """Mount module routers and attach services."""
    transactions = TransactionManager(config.session_factory)
    state = StateStore()
    address_validator = AddressValidator(prefix=config.address_prefix)

    instance_service = InstanceService(transactions, state, address_validator)
    if config.admin_address:
        instance_service.instantiate(config.admin_address)
    else:
        try:
            instance_service.get_config()
        except NotFoundError as exc:
            raise RuntimeError("ADMIN_ADDRESS is not configured") from exc

    template_store = build_template_store()
    template_catalog = TemplateCatalog(
        transactions,
        template_store,
        IdAllocator(state),
        instance_service,
        limits=config.page_limits,
    )
    ranking_repo = RankingRepository(
        transactions,
        build_ranking_store(),
        template_store,
        limits=config.page_limits,
    )
    auth_service = AuthService.from_settings(
        signing_key=config.auth.jwt_signing_key,
        token_ttl_hours=config.auth.token_ttl_hours,
        address_validator=address_validator,
    )

    app.state.config = config
    app.state.address_validator = address_validator
    app.state.instance_service = instance_service
    app.state.template_catalog = template_catalog
    app.state.ranking_repo = ranking_repo
    app.state.auth_service = auth_service

    install_error_handlers(app)
    app.include_router(instance_router)
    app.include_router(templates_router)
    app.include_router(rankings_router)
