"""Permission, preview and role administration endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status

from fieldops.api.dependencies import (
    CallerEmail,
    CallerPermissions,
    DbSession,
    Registry,
    SessionId,
    require_permission,
)
from fieldops.api.schemas import (
    ErrorResponse,
    PermissionsResponse,
    PreviewRequest,
    PreviewResponse,
    ResetResponse,
    RolePermissionsResponse,
    RolePermissionsUpdate,
    RoleSummaryResponse,
    RoleTemplateResponse,
)
from fieldops.permissions import (
    ALL_PERMISSIONS,
    DEFAULT_ROLE_TEMPLATES,
    PreviewNotAllowedError,
    ResolvedPermissions,
    RolePreview,
    UnknownPermissionError,
    field_redirect,
)
from fieldops.services import RolePermissionService

router = APIRouter(tags=["permissions"])

CanViewSettings = Annotated[ResolvedPermissions, Depends(require_permission("settings.view"))]
CanManageRoles = Annotated[
    ResolvedPermissions, Depends(require_permission("settings.manage-roles"))
]


def _preview_response(preview: RolePreview) -> PreviewResponse:
    return PreviewResponse(
        preview_role=preview.preview_role,
        is_previewing=preview.is_previewing,
    )


# ============================================================================
# Caller permissions
# ============================================================================


@router.get("/me/permissions", response_model=PermissionsResponse)
async def my_permissions(resolved: CallerPermissions) -> PermissionsResponse:
    """Effective role and permissions of the caller."""
    return PermissionsResponse(
        role=resolved.role.display,
        real_role=resolved.real_role.display,
        is_previewing=resolved.is_previewing,
        source=resolved.source.value,
        permissions=[p for p in ALL_PERMISSIONS if resolved.can(p)],
        redirect=field_redirect(resolved),
    )


# ============================================================================
# Role preview
# ============================================================================


@router.post(
    "/preview",
    response_model=PreviewResponse,
    responses={403: {"model": ErrorResponse}},
)
async def start_preview(
    payload: PreviewRequest,
    resolved: CallerPermissions,
    registry: Registry,
    session_id: SessionId,
    email: CallerEmail,
) -> PreviewResponse:
    """Preview the application as another role."""
    try:
        preview = registry.start(session_id, email, payload.role, resolved.real_role)
    except PreviewNotAllowedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return _preview_response(preview)


@router.delete("/preview", response_model=PreviewResponse)
async def stop_preview(
    registry: Registry,
    session_id: SessionId,
    email: CallerEmail,
) -> PreviewResponse:
    """Return to the caller's real role and forget the session's preview."""
    registry.end_session(session_id, email)
    return _preview_response(registry.get(session_id, email))


# ============================================================================
# Role administration
# ============================================================================


@router.get("/roles/templates", response_model=list[RoleTemplateResponse])
async def list_role_templates() -> list[RoleTemplateResponse]:
    """Compiled-in default role templates."""
    return [
        RoleTemplateResponse(
            role=t.role,
            permissions=list(t.permissions),
            description=t.description,
        )
        for t in DEFAULT_ROLE_TEMPLATES
    ]


@router.get(
    "/roles",
    response_model=list[RoleSummaryResponse],
    responses={403: {"model": ErrorResponse}},
)
async def list_roles(db: DbSession, _: CanViewSettings) -> list[RoleSummaryResponse]:
    """Every role with its effective permission set."""
    summaries = await RolePermissionService(db).list_roles()
    return [RoleSummaryResponse.model_validate(s) for s in summaries]


@router.put(
    "/roles/{role}",
    response_model=RolePermissionsResponse,
    responses={400: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)
async def save_role_permissions(
    db: DbSession,
    _: CanManageRoles,
    role: Annotated[str, Path(min_length=1)],
    payload: RolePermissionsUpdate,
) -> RolePermissionsResponse:
    """Store a permission set that supersedes the role's template."""
    service = RolePermissionService(db)
    try:
        record = await service.save_role_permissions(role, payload.permissions)
    except (UnknownPermissionError, ValueError) as e:
        await db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    await db.commit()
    return RolePermissionsResponse.model_validate(record)


@router.delete(
    "/roles/{role}",
    response_model=ResetResponse,
    responses={403: {"model": ErrorResponse}},
)
async def reset_role_permissions(
    db: DbSession,
    _: CanManageRoles,
    role: Annotated[str, Path(min_length=1)],
) -> ResetResponse:
    """Drop the stored override so the default template applies again."""
    removed = await RolePermissionService(db).reset_role_permissions(role)
    await db.commit()
    return ResetResponse(role=role, removed=removed)
