"""FastAPI dependencies for dependency injection."""

from collections.abc import AsyncGenerator, Awaitable, Callable
from typing import Annotated

from fastapi import Depends, Header, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from fieldops.config import Settings, get_settings
from fieldops.database import init_db
from fieldops.permissions import (
    AccessOutcome,
    PreviewRegistry,
    ResolvedPermissions,
    RolePreview,
    check_access,
    resolve_permissions,
)
from fieldops.services import DirectoryService


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency."""
    _, factory = init_db()
    async with factory() as session:
        try:
            yield session
        finally:
            await session.close()


async def get_caller_email(
    x_user_email: Annotated[str | None, Header()] = None
) -> str | None:
    """Email of the authenticated caller, as forwarded by the auth proxy."""
    return x_user_email or None


def get_preview_registry(request: Request) -> PreviewRegistry:
    return request.app.state.preview_registry


async def get_session_id(
    x_session_id: Annotated[str | None, Header()] = None
) -> str | None:
    return x_session_id or None


async def get_role_preview(
    registry: Annotated[PreviewRegistry, Depends(get_preview_registry)],
    session_id: Annotated[str | None, Depends(get_session_id)],
    email: Annotated[str | None, Depends(get_caller_email)],
) -> RolePreview:
    """Preview state of the caller's own session."""
    return registry.get(session_id, email)


# Type aliases for cleaner dependency injection
DbSession = Annotated[AsyncSession, Depends(get_db_session)]
CallerEmail = Annotated[str | None, Depends(get_caller_email)]
SessionId = Annotated[str | None, Depends(get_session_id)]
Registry = Annotated[PreviewRegistry, Depends(get_preview_registry)]
AppSettings = Annotated[Settings, Depends(get_settings)]
Preview = Annotated[RolePreview, Depends(get_role_preview)]


async def get_directory(db: DbSession, app_settings: AppSettings) -> DirectoryService:
    return DirectoryService(db, default_cadence=app_settings.default_pay_period_type)


Directory = Annotated[DirectoryService, Depends(get_directory)]


async def get_permissions(
    directory: Directory,
    email: CallerEmail,
    preview: Preview,
    app_settings: AppSettings,
) -> ResolvedPermissions:
    """Resolve the caller's permissions from a fresh snapshot."""
    snapshot = await directory.load_snapshot()
    return resolve_permissions(
        email,
        snapshot.employees,
        snapshot.role_permissions,
        preview_role=preview.preview_role,
        fallback=app_settings.fallback_policy,
    )


CallerPermissions = Annotated[ResolvedPermissions, Depends(get_permissions)]


def require_permission(
    permission: str,
) -> Callable[[ResolvedPermissions], Awaitable[ResolvedPermissions]]:
    """Dependency factory that rejects callers lacking a permission."""

    async def dependency(resolved: CallerPermissions) -> ResolvedPermissions:
        decision = check_access(resolved, permission)
        if decision.outcome is AccessOutcome.PENDING:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Permissions are still loading",
            )
        decision.raise_for_denial()
        return resolved

    return dependency
