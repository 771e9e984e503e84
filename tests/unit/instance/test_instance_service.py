from __future__ import annotations

import pytest

from src.tierlist import CONTRACT_NAME, __version__
from src.tierlist.exceptions import MalformedAddressError, NotFoundError
from src.tierlist.instance.instance_models import Config, ContractInfo
from tests.helpers.tierlist import ADMIN, USER_1, build_services


def test_instantiate_stores_admin_and_contract_info() -> None:
    services = build_services(admin=None)

    config = services.instance.instantiate(ADMIN)

    assert config == Config(admin_address=ADMIN)
    assert services.instance.get_config() == Config(admin_address=ADMIN)
    assert services.instance.get_contract_info() == ContractInfo(
        contract=CONTRACT_NAME, version=__version__
    )


def test_admin_is_never_overwritten() -> None:
    services = build_services(admin=ADMIN)

    config = services.instance.instantiate(USER_1)

    assert config.admin_address == ADMIN
    assert services.instance.get_config().admin_address == ADMIN


def test_version_is_refreshed_on_upgrade() -> None:
    services = build_services(admin=ADMIN)

    services.instance.instantiate(ADMIN, version="9.9.9")

    assert services.instance.get_contract_info().version == "9.9.9"


def test_uninitialized_instance_has_no_config() -> None:
    services = build_services(admin=None)

    with pytest.raises(NotFoundError):
        services.instance.get_config()
    with pytest.raises(NotFoundError):
        services.instance.get_contract_info()


def test_malformed_admin_address_is_rejected() -> None:
    services = build_services(admin=None)

    with pytest.raises(MalformedAddressError):
        services.instance.instantiate("admin")

    with pytest.raises(NotFoundError):
        services.instance.get_config()
