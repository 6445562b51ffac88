"""Access decisions built on resolved permissions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fieldops.permissions.resolver import ResolvedPermissions

FIELD_HOME = "/field"


class AccessOutcome(str, Enum):
    PENDING = "pending"
    GRANTED = "granted"
    DENIED = "denied"


class AccessDeniedError(Exception):
    """Raised when a caller lacks a required permission."""

    def __init__(self, permission: str, role: str):
        self.permission = permission
        self.role = role
        super().__init__(denial_message(role))


def denial_message(role: str) -> str:
    return (
        f"Your role ({role or 'unknown'}) doesn't have permission to access this page. "
        "Contact an administrator to update your permissions."
    )


@dataclass(frozen=True)
class AccessDecision:
    """Outcome of checking one permission.

    PENDING means the underlying data is still loading and nothing should be
    shown yet, neither the page nor a denial.
    """

    outcome: AccessOutcome
    permission: str
    role: str = ""

    @property
    def granted(self) -> bool:
        return self.outcome is AccessOutcome.GRANTED

    @property
    def message(self) -> str | None:
        if self.outcome is AccessOutcome.DENIED:
            return denial_message(self.role)
        return None

    def raise_for_denial(self) -> None:
        if self.outcome is AccessOutcome.DENIED:
            raise AccessDeniedError(self.permission, self.role)


def check_access(resolved: ResolvedPermissions, permission: str) -> AccessDecision:
    if resolved.loading:
        return AccessDecision(AccessOutcome.PENDING, permission)
    if resolved.can(permission):
        return AccessDecision(AccessOutcome.GRANTED, permission, resolved.role.display)
    return AccessDecision(AccessOutcome.DENIED, permission, resolved.role.display)


def field_redirect(resolved: ResolvedPermissions) -> str | None:
    """Field-only callers are sent to the field view instead of being denied."""
    if resolved.loading:
        return None
    if not resolved.can("dashboard.view") and resolved.can("field.view"):
        return FIELD_HOME
    return None
