"""Company profile and role permission models."""

from __future__ import annotations

from sqlalchemy import JSON, CheckConstraint, String
from sqlalchemy.orm import Mapped, mapped_column

from fieldops.models.base import Base, DocumentIdMixin, TimestampMixin

DEFAULT_PROFILE_ID = "default"


class CompanyProfile(Base, TimestampMixin):
    """Company details plus the pay period cadence and anchor."""

    __tablename__ = "company_profile"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=DEFAULT_PROFILE_ID)
    name: Mapped[str] = mapped_column(String, nullable=False, default="")
    address: Mapped[str] = mapped_column(String, nullable=False, default="")
    city: Mapped[str] = mapped_column(String, nullable=False, default="")
    province: Mapped[str] = mapped_column(String, nullable=False, default="")
    postal_code: Mapped[str] = mapped_column(String, nullable=False, default="")
    phone: Mapped[str] = mapped_column(String, nullable=False, default="")
    email: Mapped[str] = mapped_column(String, nullable=False, default="")
    website: Mapped[str] = mapped_column(String, nullable=False, default="")
    logo_url: Mapped[str] = mapped_column(String, nullable=False, default="")
    pay_period_type: Mapped[str] = mapped_column(String, nullable=False, default="bi-weekly")
    # Anchor for weekly / bi-weekly periods, ISO date string or ""
    pay_period_start_date: Mapped[str] = mapped_column(String, nullable=False, default="")

    __table_args__ = (
        CheckConstraint(
            "pay_period_type IN ('weekly', 'bi-weekly', 'semi-monthly', 'monthly')",
            name="company_profile_pay_period_type_check",
        ),
    )


class RolePermissions(Base, DocumentIdMixin, TimestampMixin):
    """Stored permission set for a role; supersedes the default template."""

    __tablename__ = "role_permissions"

    role: Mapped[str] = mapped_column(String, nullable=False)
    permissions: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    description: Mapped[str] = mapped_column(String, nullable=False, default="")
