"""SQLAlchemy models."""

from fieldops.models.base import Base, TimestampMixin, new_id
from fieldops.models.company import DEFAULT_PROFILE_ID, CompanyProfile, RolePermissions
from fieldops.models.employee import Employee, TimeEntry

__all__ = [
    "Base",
    "CompanyProfile",
    "DEFAULT_PROFILE_ID",
    "Employee",
    "RolePermissions",
    "TimeEntry",
    "TimestampMixin",
    "new_id",
]
