"""Payroll hours summary endpoint."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from fieldops.api.dependencies import Directory, require_permission
from fieldops.api.schemas import (
    DayHoursResponse,
    EmployeeHoursResponse,
    ErrorResponse,
    HoursResponse,
    PayPeriodResponse,
    PayrollSummaryResponse,
)
from fieldops.periods import HoursByStatus, PayPeriod, compute_period, custom_range, summarize_payroll
from fieldops.permissions import ResolvedPermissions

router = APIRouter(prefix="/payroll", tags=["payroll"])

CanViewTime = Annotated[ResolvedPermissions, Depends(require_permission("time-tracking.view"))]


def _hours(cell: HoursByStatus) -> HoursResponse:
    return HoursResponse.model_validate(cell)


def _day(day: date, cell: HoursByStatus) -> DayHoursResponse:
    return DayHoursResponse(
        day=day,
        approved=cell.approved,
        pending=cell.pending,
        rejected=cell.rejected,
        total=cell.total,
    )


@router.get(
    "",
    response_model=PayrollSummaryResponse,
    responses={400: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)
async def payroll_summary(
    directory: Directory,
    _: CanViewTime,
    start: date | None = None,
    end: date | None = None,
) -> PayrollSummaryResponse:
    """Hours by employee and day for a range, or the current pay period."""
    if (start is None) != (end is None):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="start and end must be given together",
        )

    period: PayPeriod
    if start is not None and end is not None:
        period = custom_range(start, end)
    else:
        schedule = await directory.get_pay_schedule()
        period = compute_period(date.today(), schedule.cadence, schedule.anchor_date)

    entries = await directory.list_time_entries(period)
    employees = await directory.list_employees()
    summary = summarize_payroll(entries, period, employees)

    return PayrollSummaryResponse(
        period=PayPeriodResponse(start=period.start, end=period.end, label=period.label),
        dates=summary.dates,
        rows=[
            EmployeeHoursResponse(
                employee_id=row.employee_id,
                name=row.name,
                days=[_day(d, row.cell(d)) for d in summary.dates],
                total=_hours(row.total),
                missing_weekdays=row.missing_weekdays,
            )
            for row in summary.rows
        ],
        day_totals=[_day(d, t) for d, t in zip(summary.dates, summary.day_totals)],
        grand_total=_hours(summary.grand_total),
        employee_count=summary.employee_count,
    )
