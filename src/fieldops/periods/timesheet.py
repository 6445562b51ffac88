"""Payroll hours summary for a pay period."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, timedelta
from decimal import Decimal
from typing import Any, Protocol

from fieldops.periods.types import HoursByStatus, PayPeriod

SATURDAY = 5


class TimeEntryLike(Protocol):
    """Anything with the fields of a time entry."""

    work_date: date
    employee_id: str
    hours: Any
    approval: str


class EmployeeLike(Protocol):
    id: str
    name: str
    status: str


@dataclass
class EmployeeHours:
    """One payroll row: an active employee's hours across the period."""

    employee_id: str
    name: str
    days: dict[date, HoursByStatus] = field(default_factory=dict)
    total: HoursByStatus = field(default_factory=HoursByStatus)
    missing_weekdays: list[date] = field(default_factory=list)

    def cell(self, day: date) -> HoursByStatus:
        return self.days.get(day) or HoursByStatus()


@dataclass
class PayrollSummary:
    """Hours by employee and day for one pay period."""

    period: PayPeriod
    dates: list[date]
    rows: list[EmployeeHours]
    day_totals: list[HoursByStatus]
    grand_total: HoursByStatus

    @property
    def employee_count(self) -> int:
        return len(self.rows)


def period_dates(period: PayPeriod) -> list[date]:
    """Every day of the period, in order."""
    return [period.start + timedelta(days=i) for i in range(period.days)]


def summarize_payroll(
    entries: Iterable[TimeEntryLike],
    period: PayPeriod,
    employees: Iterable[EmployeeLike],
) -> PayrollSummary:
    """Group time entries of a period by employee and day.

    Rows are produced for active employees only. Entries for other employees
    still count towards day totals and the grand total. Entries outside the
    period are ignored.
    """
    dates = period_dates(period)
    hours: dict[str, dict[date, HoursByStatus]] = defaultdict(dict)
    grand_total = HoursByStatus()

    for entry in entries:
        if not period.contains(entry.work_date):
            continue
        amount = Decimal(str(entry.hours))
        cell = hours[entry.employee_id].setdefault(entry.work_date, HoursByStatus())
        cell.add(entry.approval, amount)
        grand_total.add(entry.approval, amount)

    rows: list[EmployeeHours] = []
    for employee in employees:
        if employee.status != "active":
            continue
        days = hours.get(employee.id, {})
        row = EmployeeHours(employee_id=employee.id, name=employee.name, days=dict(days))
        for cell in days.values():
            row.total.merge(cell)
        row.missing_weekdays = [
            d for d in dates if d.weekday() < SATURDAY and row.cell(d).is_empty
        ]
        rows.append(row)

    day_totals: list[HoursByStatus] = []
    for d in dates:
        total = HoursByStatus()
        for days in hours.values():
            if d in days:
                total.merge(days[d])
        day_totals.append(total)

    return PayrollSummary(
        period=period,
        dates=dates,
        rows=rows,
        day_totals=day_totals,
        grand_total=grand_total,
    )
