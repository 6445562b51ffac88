"""Fresh snapshots of the collections permission and pay period logic read."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fieldops.models import DEFAULT_PROFILE_ID, CompanyProfile, Employee, RolePermissions, TimeEntry
from fieldops.periods.types import PayPeriod, PayPeriodType


@dataclass(frozen=True)
class PaySchedule:
    """Cadence and anchor taken from the company profile."""

    cadence: PayPeriodType
    anchor_date: str


@dataclass(frozen=True)
class DirectorySnapshot:
    employees: list[Employee]
    role_permissions: list[RolePermissions]
    profile: CompanyProfile | None


class DirectoryService:
    """Reads employees, role permissions and the company profile.

    Every call queries the store again; nothing is cached between calls.
    """

    def __init__(
        self,
        session: AsyncSession,
        default_cadence: PayPeriodType = PayPeriodType.BI_WEEKLY,
    ):
        self.session = session
        self.default_cadence = default_cadence

    async def list_employees(self) -> list[Employee]:
        result = await self.session.execute(select(Employee).order_by(Employee.name))
        return list(result.scalars().all())

    async def list_role_permissions(self) -> list[RolePermissions]:
        result = await self.session.execute(select(RolePermissions).order_by(RolePermissions.role))
        return list(result.scalars().all())

    async def get_company_profile(self) -> CompanyProfile | None:
        return await self.session.get(CompanyProfile, DEFAULT_PROFILE_ID)

    async def load_snapshot(self) -> DirectorySnapshot:
        return DirectorySnapshot(
            employees=await self.list_employees(),
            role_permissions=await self.list_role_permissions(),
            profile=await self.get_company_profile(),
        )

    async def get_pay_schedule(self) -> PaySchedule:
        """Company cadence and anchor, or the configured default with no anchor."""
        profile = await self.get_company_profile()
        if profile is None:
            return PaySchedule(cadence=self.default_cadence, anchor_date="")
        return PaySchedule(
            cadence=PayPeriodType.parse(profile.pay_period_type),
            anchor_date=profile.pay_period_start_date or "",
        )

    async def list_time_entries(self, period: PayPeriod) -> list[TimeEntry]:
        result = await self.session.execute(
            select(TimeEntry)
            .where(TimeEntry.work_date >= period.start, TimeEntry.work_date <= period.end)
            .order_by(TimeEntry.work_date)
        )
        return list(result.scalars().all())
