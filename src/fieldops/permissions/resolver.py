"""Effective permission resolution for a signed-in caller."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol

from fieldops.permissions.preview import RolePreview, can_preview
from fieldops.permissions.registry import ALL_PERMISSIONS, get_default_template
from fieldops.permissions.roles import RoleName

logger = logging.getLogger(__name__)


class EmployeeRecord(Protocol):
    email: str | None
    role: str | None


class RolePermissionsRecord(Protocol):
    role: str
    permissions: Sequence[str]


class FallbackPolicy(str, Enum):
    """What a role that matches nothing is granted."""

    FULL_ACCESS = "full-access"
    NO_ACCESS = "no-access"


class PermissionSource(str, Enum):
    """Where an effective permission set came from."""

    STORED = "stored"
    TEMPLATE = "template"
    FALLBACK = "fallback"
    LOADING = "loading"


@dataclass(frozen=True)
class ResolvedPermissions:
    """Result of resolving a caller's permissions.

    While loading, can() answers False for everything; callers that make
    access-denial decisions must check `loading` first.
    """

    role: RoleName
    real_role: RoleName
    permissions: frozenset[str]
    source: PermissionSource
    employee: Any = None
    preview_role: str | None = None

    @property
    def loading(self) -> bool:
        return self.source is PermissionSource.LOADING

    @property
    def is_previewing(self) -> bool:
        return self.preview_role is not None

    def can(self, permission: str) -> bool:
        """Check if the caller has a specific permission."""
        return permission in self.permissions


def _identity_email(identity: Any) -> str | None:
    if identity is None or isinstance(identity, str):
        return identity
    return getattr(identity, "email", None)


def find_employee(identity: Any, employees: Iterable[EmployeeRecord]) -> EmployeeRecord | None:
    """Employee whose email equals the identity's email exactly."""
    email = _identity_email(identity)
    if not email:
        return None
    for employee in employees:
        if employee.email == email:
            return employee
    return None


def fallback_permissions(policy: FallbackPolicy) -> frozenset[str]:
    """Permission set for a caller whose role matches no stored record or template.

    Full access keeps a first-run owner from being locked out of Settings
    before any role configuration exists.
    """
    if policy is FallbackPolicy.FULL_ACCESS:
        return frozenset(ALL_PERMISSIONS)
    return frozenset()


def permissions_for_role(
    role: RoleName,
    stored_role_permissions: Iterable[RolePermissionsRecord],
    fallback: FallbackPolicy = FallbackPolicy.FULL_ACCESS,
) -> tuple[frozenset[str], PermissionSource]:
    """Stored record, then default template, then the fallback policy."""
    for record in stored_role_permissions:
        if RoleName.of(record.role) == role:
            return frozenset(record.permissions), PermissionSource.STORED

    template = get_default_template(role.key)
    if template is not None:
        return frozenset(template.permissions), PermissionSource.TEMPLATE

    logger.info(
        "Role %r matches no stored permissions or template; applying %s fallback",
        role.display,
        fallback.value,
    )
    return fallback_permissions(fallback), PermissionSource.FALLBACK


def resolve_permissions(
    identity: Any,
    employees: Sequence[EmployeeRecord] | None,
    stored_role_permissions: Sequence[RolePermissionsRecord] | None,
    preview_role: str | None = None,
    fallback: FallbackPolicy = FallbackPolicy.FULL_ACCESS,
) -> ResolvedPermissions:
    """Resolve the effective role and permission set for a caller.

    Args:
        identity: Email string, or an object with an `email` attribute
        employees: Employee records, or None while still loading
        stored_role_permissions: Persisted role permission records, or None
            while still loading
        preview_role: Role being previewed in this session, if any; ignored
            unless the real role may preview
        fallback: Policy applied when the role matches nothing

    Returns:
        ResolvedPermissions for the caller
    """
    if employees is None or stored_role_permissions is None:
        empty = RoleName.of(preview_role)
        return ResolvedPermissions(
            role=empty,
            real_role=RoleName.of(""),
            permissions=frozenset(),
            source=PermissionSource.LOADING,
            preview_role=preview_role,
        )

    employee = find_employee(identity, employees)
    real_role = RoleName.of(employee.role if employee is not None else "")
    if preview_role is not None and not can_preview(real_role):
        logger.warning(
            "Ignoring preview as %r for caller with role %r", preview_role, real_role.display
        )
        preview_role = None
    role = RoleName.of(preview_role) if preview_role is not None else real_role

    permissions, source = permissions_for_role(role, stored_role_permissions, fallback)
    return ResolvedPermissions(
        role=role,
        real_role=real_role,
        permissions=permissions,
        source=source,
        employee=employee,
        preview_role=preview_role,
    )


@dataclass
class PermissionState:
    """Latest snapshots of the collections the resolver reads.

    Snapshots may arrive in any order; resolve() recomputes from scratch
    each time and reports loading until both collections have arrived.
    """

    identity: Any = None
    preview: RolePreview | None = None
    fallback: FallbackPolicy = FallbackPolicy.FULL_ACCESS
    employees: list[Any] | None = field(default=None)
    role_permissions: list[Any] | None = field(default=None)

    def update_employees(self, employees: Iterable[Any]) -> None:
        self.employees = list(employees)

    def update_role_permissions(self, records: Iterable[Any]) -> None:
        self.role_permissions = list(records)

    def resolve(self) -> ResolvedPermissions:
        preview_role = self.preview.preview_role if self.preview is not None else None
        return resolve_permissions(
            self.identity,
            self.employees,
            self.role_permissions,
            preview_role=preview_role,
            fallback=self.fallback,
        )

    def can(self, permission: str) -> bool:
        return self.resolve().can(permission)
