"""Permission modules, actions and default role templates.

Each permission is a "<module>.<action>" string such as "time-tracking.view".
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from fieldops.permissions.roles import role_key


@dataclass(frozen=True)
class PermissionAction:
    id: str
    label: str


@dataclass(frozen=True)
class PermissionModule:
    """A module of the application and the actions it exposes."""

    id: str
    label: str
    actions: tuple[PermissionAction, ...]

    @property
    def permissions(self) -> list[str]:
        return [f"{self.id}.{action.id}" for action in self.actions]


def _module(module_id: str, label: str, *actions: tuple[str, str]) -> PermissionModule:
    return PermissionModule(
        id=module_id,
        label=label,
        actions=tuple(PermissionAction(id=a, label=lbl) for a, lbl in actions),
    )


PERMISSION_MODULES: tuple[PermissionModule, ...] = (
    _module("dashboard", "Dashboard", ("view", "View dashboard")),
    _module(
        "time-tracking",
        "Time Tracking",
        ("view", "View time entries"),
        ("create", "Create time entries"),
        ("edit", "Edit time entries"),
        ("delete", "Delete time entries"),
        ("approve", "Approve / reject entries"),
        ("export", "Export data"),
    ),
    _module(
        "dispatch",
        "Dispatch",
        ("view", "View dispatch board"),
        ("create", "Create assignments"),
        ("edit", "Edit assignments"),
        ("delete", "Delete assignments"),
    ),
    _module(
        "projects",
        "Projects",
        ("view", "View projects"),
        ("create", "Create projects"),
        ("edit", "Edit projects"),
        ("delete", "Delete projects"),
    ),
    _module(
        "employees",
        "Employees",
        ("view", "View employees"),
        ("create", "Add employees"),
        ("edit", "Edit employees"),
        ("delete", "Remove employees"),
    ),
    _module(
        "equipment",
        "Equipment",
        ("view", "View equipment"),
        ("create", "Add equipment"),
        ("edit", "Edit equipment"),
        ("delete", "Delete equipment"),
    ),
    _module(
        "daily-reports",
        "Daily Reports",
        ("view", "View reports"),
        ("create", "Create reports"),
        ("edit", "Edit reports"),
        ("delete", "Delete reports"),
    ),
    _module(
        "safety",
        "Safety",
        ("view", "View safety forms"),
        ("create", "Create safety forms"),
        ("edit", "Edit safety forms"),
        ("delete", "Delete safety forms"),
    ),
    _module(
        "settings",
        "Settings",
        ("view", "View settings"),
        ("edit", "Edit settings"),
        ("manage-roles", "Manage roles & permissions"),
    ),
    _module(
        "field",
        "Field View",
        ("view", "Access field view"),
        ("view-others", "View other employees' data"),
    ),
    _module(
        "vendors",
        "Vendors",
        ("view", "View vendors"),
        ("create", "Add vendors"),
        ("edit", "Edit vendors"),
        ("delete", "Delete vendors"),
    ),
    _module(
        "payables",
        "Payables",
        ("view", "View invoices"),
        ("create", "Upload invoices"),
        ("approve", "Approve / reject invoices"),
        ("delete", "Delete invoices"),
    ),
)

ALL_PERMISSIONS: tuple[str, ...] = tuple(
    permission for module in PERMISSION_MODULES for permission in module.permissions
)

_PERMISSION_ORDER = {permission: index for index, permission in enumerate(ALL_PERMISSIONS)}


class UnknownPermissionError(Exception):
    """Raised when a permission key is not part of the registry."""

    def __init__(self, permissions: Iterable[str]):
        self.permissions = sorted(permissions)
        super().__init__(f"Unknown permission(s): {', '.join(self.permissions)}")


def is_known_permission(permission: str) -> bool:
    return permission in _PERMISSION_ORDER


def validate_permissions(permissions: Iterable[str]) -> list[str]:
    """Return permissions de-duplicated in registry order.

    Raises:
        UnknownPermissionError: If any key is not in the registry
    """
    requested = set(permissions)
    unknown = requested - _PERMISSION_ORDER.keys()
    if unknown:
        raise UnknownPermissionError(unknown)
    return sorted(requested, key=_PERMISSION_ORDER.__getitem__)


def get_module(module_id: str) -> PermissionModule | None:
    for module in PERMISSION_MODULES:
        if module.id == module_id:
            return module
    return None


def module_permissions(module_id: str) -> list[str]:
    module = get_module(module_id)
    return module.permissions if module else []


def toggle_module(current: Iterable[str], module_id: str) -> set[str]:
    """Remove every action of a module if all are present, else add them all."""
    result = set(current)
    module_perms = module_permissions(module_id)
    if all(p in result for p in module_perms):
        result.difference_update(module_perms)
    else:
        result.update(module_perms)
    return result


# ============================================================================
# Default role templates
# ============================================================================


@dataclass(frozen=True)
class RoleTemplate:
    """Compiled-in permission set used when no stored override exists."""

    role: str
    permissions: tuple[str, ...]
    description: str

    @property
    def key(self) -> str:
        return role_key(self.role)


ADMIN_PERMISSIONS = ALL_PERMISSIONS

# Everything except role management
PM_PERMISSIONS = tuple(p for p in ALL_PERMISSIONS if p != "settings.manage-roles")

FOREMAN_PERMISSIONS = (
    "dashboard.view",
    "time-tracking.view",
    "time-tracking.create",
    "time-tracking.edit",
    "time-tracking.approve",
    "time-tracking.export",
    "dispatch.view",
    "projects.view",
    "employees.view",
    "equipment.view",
    "daily-reports.view",
    "daily-reports.create",
    "daily-reports.edit",
    "safety.view",
    "safety.create",
    "safety.edit",
    "field.view",
    "field.view-others",
    "vendors.view",
    "payables.view",
    "payables.create",
)

OPERATOR_PERMISSIONS = (
    "dashboard.view",
    "time-tracking.view",
    "time-tracking.create",
    "time-tracking.edit",
    "dispatch.view",
    "projects.view",
    "employees.view",
    "equipment.view",
    "daily-reports.view",
    "daily-reports.create",
    "safety.view",
    "safety.create",
    "field.view",
    "vendors.view",
    "payables.view",
    "payables.create",
)

LABOURER_PERMISSIONS = (
    "dashboard.view",
    "time-tracking.view",
    "time-tracking.create",
    "dispatch.view",
    "projects.view",
    "equipment.view",
    "safety.view",
    "safety.create",
    "field.view",
    "vendors.view",
)

SAFETY_OFFICER_PERMISSIONS = (
    "dashboard.view",
    "time-tracking.view",
    "dispatch.view",
    "projects.view",
    "employees.view",
    "equipment.view",
    "daily-reports.view",
    "daily-reports.create",
    "daily-reports.edit",
    "safety.view",
    "safety.create",
    "safety.edit",
    "safety.delete",
    "field.view",
    "vendors.view",
    "payables.view",
)

DEFAULT_ROLE_TEMPLATES: tuple[RoleTemplate, ...] = (
    RoleTemplate("Admin", ADMIN_PERMISSIONS, "Full access to all features and settings"),
    RoleTemplate(
        "PM",
        PM_PERMISSIONS,
        "Project management with broad access, no role management",
    ),
    RoleTemplate(
        "Foreman",
        FOREMAN_PERMISSIONS,
        "Operational access: manage crew time, dispatch, and reports",
    ),
    RoleTemplate(
        "Operator",
        OPERATOR_PERMISSIONS,
        "Log time, view dispatch and equipment, submit reports",
    ),
    RoleTemplate("Labourer", LABOURER_PERMISSIONS, "Basic access: log own time, view schedule"),
    RoleTemplate(
        "Safety Officer",
        SAFETY_OFFICER_PERMISSIONS,
        "Full safety management, read-only on other modules",
    ),
)

_TEMPLATES_BY_KEY = {template.key: template for template in DEFAULT_ROLE_TEMPLATES}


def get_default_template(role: str | None) -> RoleTemplate | None:
    """Default template for a role, matched case-insensitively."""
    return _TEMPLATES_BY_KEY.get(role_key(role))


def matches_default(role: str, permissions: Iterable[str]) -> bool:
    """True when permissions equal the role's default template exactly."""
    template = get_default_template(role)
    if template is None:
        return False
    return set(permissions) == set(template.permissions)
