"""Initialize the tierlist database and record the admin address."""

import os

from src.tierlist.addresses.address_validator import AddressValidator
from src.tierlist.config import load_config
from src.tierlist.instance.instance_service import InstanceService
from src.tierlist.storage.state_store import StateStore
from src.tierlist.storage.unit_of_work import TransactionManager


def main() -> None:
    config = load_config()
    admin_address = config.admin_address or os.getenv("ADMIN_ADDRESS")
    if not admin_address:
        raise SystemExit("ADMIN_ADDRESS is not configured")
    service = InstanceService(
        TransactionManager(config.session_factory),
        StateStore(),
        AddressValidator(prefix=config.address_prefix),
    )
    stored = service.instantiate(admin_address)
    print(f"Database initialized. Admin: {stored.admin_address}")


if __name__ == "__main__":
    main()
