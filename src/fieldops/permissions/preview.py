"""Admin "preview as role" sessions.

A preview only changes which role permission resolution uses. It never
touches the caller's identity or any stored record, and it lives in memory
only.
"""

from __future__ import annotations

import logging
import threading

from fieldops.permissions.roles import RoleName

logger = logging.getLogger(__name__)


class PreviewNotAllowedError(Exception):
    """Raised when a caller who is not an admin tries to preview a role."""

    def __init__(self, real_role: str, requested_role: str):
        self.real_role = real_role
        self.requested_role = requested_role
        super().__init__(
            f"Role '{real_role}' cannot preview other roles (requested '{requested_role}')"
        )


def can_preview(real_role: str | RoleName | None) -> bool:
    """Admins and unconfigured owners (empty role) may preview."""
    role = real_role if isinstance(real_role, RoleName) else RoleName.of(real_role)
    return role.is_empty or role.is_admin


class RolePreview:
    """Preview state for a single session."""

    def __init__(self) -> None:
        self._preview_role: str | None = None

    @property
    def preview_role(self) -> str | None:
        return self._preview_role

    @property
    def is_previewing(self) -> bool:
        return self._preview_role is not None

    def start_preview(self, role: str, real_role: str | RoleName | None) -> None:
        """Start previewing as role.

        Raises:
            PreviewNotAllowedError: If real_role is neither Admin nor empty
            ValueError: If role is blank
        """
        if not role or not role.strip():
            raise ValueError("Preview role must not be empty")
        if not can_preview(real_role):
            raise PreviewNotAllowedError(str(real_role or ""), role)
        self._preview_role = role.strip()
        logger.info("Started role preview as %r", self._preview_role)

    def stop_preview(self) -> None:
        if self._preview_role is not None:
            logger.info("Stopped role preview as %r", self._preview_role)
        self._preview_role = None


class PreviewRegistry:
    """In-memory preview state keyed by session id and caller email.

    Entries exist only between a successful start() and the matching
    end_session(). A preview is never visible to a different caller, even one
    presenting the same session id.
    """

    def __init__(self) -> None:
        self._sessions: dict[tuple[str, str], RolePreview] = {}
        self._lock = threading.Lock()

    def get(self, session_id: str | None, owner: str | None) -> RolePreview:
        """Preview for a session; unknown sessions get a throwaway, unstored one."""
        if not session_id:
            return RolePreview()
        with self._lock:
            preview = self._sessions.get((session_id, owner or ""))
        return preview if preview is not None else RolePreview()

    def start(
        self,
        session_id: str | None,
        owner: str | None,
        role: str,
        real_role: str | RoleName | None,
    ) -> RolePreview:
        """Start previewing role in a session owned by owner.

        Raises:
            PreviewNotAllowedError: If real_role is neither Admin nor empty
            ValueError: If role is blank or there is no session id
        """
        if not session_id:
            raise ValueError("A session id is required to preview a role")
        preview = RolePreview()
        preview.start_preview(role, real_role)
        with self._lock:
            self._sessions[(session_id, owner or "")] = preview
        return preview

    def end_session(self, session_id: str | None, owner: str | None) -> bool:
        """Drop a session's preview; returns True if one was stored."""
        if not session_id:
            return False
        with self._lock:
            preview = self._sessions.pop((session_id, owner or ""), None)
        if preview is None:
            return False
        preview.stop_preview()
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
