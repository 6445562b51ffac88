"""Role and permission resolution."""

from fieldops.permissions.guard import (
    AccessDecision,
    AccessDeniedError,
    AccessOutcome,
    check_access,
    field_redirect,
)
from fieldops.permissions.preview import (
    PreviewNotAllowedError,
    PreviewRegistry,
    RolePreview,
    can_preview,
)
from fieldops.permissions.registry import (
    ALL_PERMISSIONS,
    DEFAULT_ROLE_TEMPLATES,
    PERMISSION_MODULES,
    RoleTemplate,
    UnknownPermissionError,
    get_default_template,
)
from fieldops.permissions.resolver import (
    FallbackPolicy,
    PermissionSource,
    PermissionState,
    ResolvedPermissions,
    resolve_permissions,
)
from fieldops.permissions.roles import RoleName, role_key

__all__ = [
    "ALL_PERMISSIONS",
    "AccessDecision",
    "AccessDeniedError",
    "AccessOutcome",
    "DEFAULT_ROLE_TEMPLATES",
    "FallbackPolicy",
    "PERMISSION_MODULES",
    "PermissionSource",
    "PermissionState",
    "PreviewNotAllowedError",
    "PreviewRegistry",
    "ResolvedPermissions",
    "RoleName",
    "RolePreview",
    "RoleTemplate",
    "UnknownPermissionError",
    "can_preview",
    "check_access",
    "field_redirect",
    "get_default_template",
    "resolve_permissions",
    "role_key",
]
