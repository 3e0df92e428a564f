"""Role checks performed at the boundary before invoking a use case."""

from __future__ import annotations

from oms.domain.exceptions import AccessDenied
from oms.domain.model.user import Principal, Role


def require_role(principal: Principal, *allowed: Role) -> None:
    """Raise AccessDenied unless ``principal`` has one of ``allowed``."""
    if principal.role not in allowed:
        names = " or ".join(r.value for r in allowed)
        raise AccessDenied(f"Access denied: requires {names} role")
