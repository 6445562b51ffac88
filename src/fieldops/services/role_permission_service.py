"""Administration of stored role permission sets."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fieldops.models import RolePermissions
from fieldops.permissions.registry import (
    DEFAULT_ROLE_TEMPLATES,
    get_default_template,
    matches_default,
    validate_permissions,
)
from fieldops.permissions.roles import RoleName, role_record_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoleSummary:
    """A role as shown in the permissions settings screen."""

    role: str
    description: str
    permissions: list[str]
    stored: bool
    is_default: bool


class RolePermissionService:
    """Create, update and reset stored role permission records.

    A stored record supersedes the role's default template. Roles are matched
    case-insensitively, so "foreman" and "Foreman" share one record.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_record(self, role: str) -> RolePermissions | None:
        key = RoleName.of(role)
        result = await self.session.execute(select(RolePermissions))
        for record in result.scalars().all():
            if RoleName.of(record.role) == key:
                return record
        return None

    async def list_roles(self) -> list[RoleSummary]:
        """Every template role plus any extra stored role, templates first."""
        result = await self.session.execute(select(RolePermissions).order_by(RolePermissions.role))
        stored = {RoleName.of(r.role): r for r in result.scalars().all()}

        summaries: list[RoleSummary] = []
        for template in DEFAULT_ROLE_TEMPLATES:
            record = stored.pop(RoleName.of(template.role), None)
            permissions = list(record.permissions) if record else list(template.permissions)
            summaries.append(
                RoleSummary(
                    role=template.role,
                    description=template.description,
                    permissions=permissions,
                    stored=record is not None,
                    is_default=matches_default(template.role, permissions),
                )
            )
        for record in stored.values():
            summaries.append(
                RoleSummary(
                    role=record.role,
                    description=record.description,
                    permissions=list(record.permissions),
                    stored=True,
                    is_default=False,
                )
            )
        return summaries

    async def save_role_permissions(
        self,
        role: str,
        permissions: Iterable[str],
    ) -> RolePermissions:
        """Store the permission set for a role.

        Raises:
            UnknownPermissionError: If any permission is not in the registry
            ValueError: If role is blank
        """
        if not role or not role.strip():
            raise ValueError("Role must not be empty")
        role = role.strip()
        ordered = validate_permissions(permissions)

        record = await self.get_record(role)
        if record is not None:
            record.permissions = ordered
        else:
            template = get_default_template(role)
            record = RolePermissions(
                id=role_record_id(role),
                role=role,
                permissions=ordered,
                description=template.description if template else "",
            )
            self.session.add(record)

        await self.session.flush()
        logger.info("Saved %d permission(s) for role %r", len(ordered), record.role)
        return record

    async def reset_role_permissions(self, role: str) -> bool:
        """Delete the stored override so the default template applies again.

        Returns True if a record was removed.
        """
        record = await self.get_record(role)
        if record is None:
            return False
        await self.session.delete(record)
        await self.session.flush()
        logger.info("Reset role %r to its default permissions", record.role)
        return True
