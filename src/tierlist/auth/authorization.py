"""Creator/admin permission check for template mutations."""

from __future__ import annotations

from ..exceptions import UnauthorizedError


def check_template_permission(actor: str, creator: str, admin: str) -> None:
    """Allow ``actor`` only if it created the template or is the admin."""
    if actor != creator and actor != admin:
        raise UnauthorizedError(f"address '{actor}' may not modify this template")
