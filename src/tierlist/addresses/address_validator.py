"""Syntax checks for bech32-style account addresses."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..exceptions import MalformedAddressError

BECH32_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
MIN_LENGTH = 8
MAX_LENGTH = 90
MIN_DATA_LENGTH = 6

_HRP_RE = re.compile(r"^[a-z0-9]+$")


def validate_address(address: str, *, prefix: str | None = None) -> str:
    """Return ``address`` unchanged if well formed, else raise.

    An address is ``<hrp>1<data>``: the human readable part is lowercase
    alphanumerics, the last ``1`` separates it from at least six characters of
    the bech32 data alphabet. Mixed case is rejected.
    """

    if not isinstance(address, str) or not address:
        raise MalformedAddressError("address must be a non-empty string")
    if not MIN_LENGTH <= len(address) <= MAX_LENGTH:
        raise MalformedAddressError(
            f"address length must be between {MIN_LENGTH} and {MAX_LENGTH} characters"
        )
    if address.lower() != address:
        raise MalformedAddressError("address must be lowercase")

    hrp, sep, data = address.rpartition("1")
    if not sep or not hrp:
        raise MalformedAddressError("address is missing the human readable prefix")
    if not _HRP_RE.match(hrp):
        raise MalformedAddressError("address prefix contains invalid characters")
    if len(data) < MIN_DATA_LENGTH:
        raise MalformedAddressError("address data part is too short")
    if any(char not in BECH32_CHARSET for char in data):
        raise MalformedAddressError("address data part contains invalid characters")
    if prefix is not None and hrp != prefix:
        raise MalformedAddressError(f"address prefix must be '{prefix}'")
    return address


@dataclass(slots=True)
class AddressValidator:
    """Address validator bound to the deployment's expected prefix."""

    prefix: str | None = None

    def __call__(self, address: str) -> str:
        return validate_address(address, prefix=self.prefix)
