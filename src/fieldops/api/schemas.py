"""Pydantic schemas for API request/response models."""

from datetime import date
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from fieldops.periods.types import PayPeriodType


# ============================================================================
# Pay period schemas
# ============================================================================


class PayPeriodResponse(BaseModel):
    """Schema for a computed pay period."""

    model_config = ConfigDict(from_attributes=True)

    start: date
    end: date
    label: str


class PayPeriodContextResponse(PayPeriodResponse):
    """Pay period together with the cadence and anchor used to compute it."""

    cadence: PayPeriodType
    anchor_date: str


# ============================================================================
# Permission schemas
# ============================================================================


class PermissionsResponse(BaseModel):
    """Schema for the caller's resolved permissions."""

    role: str
    real_role: str
    is_previewing: bool
    source: str
    permissions: list[str]
    redirect: str | None = None


class PreviewRequest(BaseModel):
    """Schema for starting a role preview."""

    role: str = Field(min_length=1)


class PreviewResponse(BaseModel):
    """Schema for the session's preview state."""

    preview_role: str | None
    is_previewing: bool


class RoleTemplateResponse(BaseModel):
    """Schema for a compiled-in role template."""

    model_config = ConfigDict(from_attributes=True)

    role: str
    permissions: list[str]
    description: str


class RoleSummaryResponse(BaseModel):
    """Schema for a role in the permissions settings screen."""

    model_config = ConfigDict(from_attributes=True)

    role: str
    description: str
    permissions: list[str]
    stored: bool
    is_default: bool


class RolePermissionsUpdate(BaseModel):
    """Schema for replacing a role's permission set."""

    permissions: list[str]


class RolePermissionsResponse(BaseModel):
    """Schema for a stored role permission record."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    role: str
    permissions: list[str]
    description: str


class ResetResponse(BaseModel):
    role: str
    removed: bool


# ============================================================================
# Payroll schemas
# ============================================================================


class HoursResponse(BaseModel):
    """Hours split by approval status."""

    model_config = ConfigDict(from_attributes=True)

    approved: Decimal
    pending: Decimal
    rejected: Decimal
    total: Decimal


class DayHoursResponse(HoursResponse):
    """Hours for a single day."""

    day: date


class EmployeeHoursResponse(BaseModel):
    """Schema for one employee row of the payroll view."""

    employee_id: str
    name: str
    days: list[DayHoursResponse]
    total: HoursResponse
    missing_weekdays: list[date]


class PayrollSummaryResponse(BaseModel):
    """Schema for the payroll hours summary of a period."""

    period: PayPeriodResponse
    dates: list[date]
    rows: list[EmployeeHoursResponse]
    day_totals: list[DayHoursResponse]
    grand_total: HoursResponse
    employee_count: int


# ============================================================================
# Error schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Schema for error response."""

    detail: Any
    code: str | None = None
