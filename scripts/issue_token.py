"""Issue a bearer token for an address (operator tooling)."""

import argparse

from src.tierlist.addresses.address_validator import AddressValidator
from src.tierlist.auth.auth_service import AuthService
from src.tierlist.config import load_config


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("address")
    parser.add_argument("--ttl-hours", type=int, default=None)
    args = parser.parse_args()

    config = load_config()
    service = AuthService.from_settings(
        signing_key=config.auth.jwt_signing_key,
        token_ttl_hours=args.ttl_hours or config.auth.token_ttl_hours,
        address_validator=AddressValidator(prefix=config.address_prefix),
    )
    token, expires_in = service.issue_token(args.address)
    print(token)
    print(f"expires_in={expires_in}")


if __name__ == "__main__":
    main()
