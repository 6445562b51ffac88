"""Role name normalization.

Roles are compared by a lower-cased key everywhere while the stored casing is
kept for display.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

ADMIN_ROLE = "Admin"

_WHITESPACE = re.compile(r"\s+")


def role_key(role: str | None) -> str:
    """Normalized comparison key for a role name."""
    return (role or "").strip().lower()


def role_record_id(role: str) -> str:
    """Id used for a newly stored role permission record, e.g. 'role-safety-officer'."""
    return f"role-{_WHITESPACE.sub('-', role.strip().lower())}"


@dataclass(frozen=True)
class RoleName:
    """A role with its display casing; equality uses the normalized key."""

    display: str = field(compare=False)
    key: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "key", role_key(self.display))

    @classmethod
    def of(cls, role: str | None) -> RoleName:
        return cls(role or "")

    @property
    def is_empty(self) -> bool:
        return not self.key

    @property
    def is_admin(self) -> bool:
        return self.key == role_key(ADMIN_ROLE)

    def __str__(self) -> str:
        return self.display
