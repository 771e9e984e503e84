"""Address syntax validation."""

from .address_validator import AddressValidator, validate_address

__all__ = ["AddressValidator", "validate_address"]
