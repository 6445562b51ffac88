"""Store-backed services."""

from fieldops.services.directory_service import DirectoryService, DirectorySnapshot, PaySchedule
from fieldops.services.role_permission_service import RolePermissionService, RoleSummary

__all__ = [
    "DirectoryService",
    "DirectorySnapshot",
    "PaySchedule",
    "RolePermissionService",
    "RoleSummary",
]
