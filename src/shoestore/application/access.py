"""Authorization guards, called by handlers before they touch anything."""

from __future__ import annotations

from shoestore.domain.exceptions import AccessDeniedError
from shoestore.domain.model.user import Principal


def require_admin(principal: Principal) -> None:
    if not principal.is_admin:
        raise AccessDeniedError("Administrator access required")


def require_owner_or_admin(principal: Principal, owner_id: int) -> None:
    if principal.is_admin or principal.owns(owner_id):
        return
    raise AccessDeniedError("Access denied")
