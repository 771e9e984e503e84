"""Bearer tokens binding a request to the caller's address."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable

import jwt
import structlog
from jwt import ExpiredSignatureError
from jwt import InvalidTokenError as PyJWTInvalidTokenError

from ..addresses.address_validator import validate_address

logger = structlog.get_logger(__name__)


def _utcnow() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(tz=timezone.utc)


class AuthError(Exception):
    """Base class for auth failures."""


class InvalidTokenError(AuthError):
    """Raised when token cannot be decoded."""


class TokenExpiredError(AuthError):
    """Raised when token is expired."""


@dataclass(slots=True)
class AuthService:
    """Issue and verify HS256 tokens whose subject is an address."""

    signing_key: str
    token_ttl: timedelta
    address_validator: Callable[[str], str] = validate_address

    @classmethod
    def from_settings(
        cls,
        signing_key: str,
        token_ttl_hours: int,
        address_validator: Callable[[str], str] = validate_address,
    ) -> "AuthService":
        if not signing_key:
            raise RuntimeError("JWT_SIGNING_KEY is not configured")
        return cls(
            signing_key=signing_key,
            token_ttl=timedelta(hours=token_ttl_hours),
            address_validator=address_validator,
        )

    def issue_token(self, address: str) -> tuple[str, int]:
        """Return a signed token for ``address`` and its ttl in seconds."""
        self.address_validator(address)
        issued_at = _utcnow()
        payload: dict[str, Any] = {
            "sub": address,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self.token_ttl).timestamp()),
        }
        token = jwt.encode(payload, self.signing_key, algorithm="HS256")
        expires_in = int(self.token_ttl.total_seconds())
        logger.info("auth.token.issued", address=address, expires_in=expires_in)
        return token, expires_in

    def authenticate(self, token: str) -> str:
        """Decode ``token`` and return the caller address it was issued for."""
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self.signing_key,
                algorithms=["HS256"],
                options={"require": ["exp", "iat", "sub"]},
            )
        except ExpiredSignatureError as exc:
            raise TokenExpiredError("Token expired") from exc
        except PyJWTInvalidTokenError as exc:
            raise InvalidTokenError("Invalid token") from exc
        return self.address_validator(str(payload["sub"]))


__all__ = [
    "AuthError",
    "AuthService",
    "InvalidTokenError",
    "TokenExpiredError",
]
