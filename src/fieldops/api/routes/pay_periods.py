"""Pay period API endpoints."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from fieldops.api.dependencies import Directory
from fieldops.api.schemas import ErrorResponse, PayPeriodContextResponse, PayPeriodResponse
from fieldops.periods import (
    PayPeriod,
    PayPeriodType,
    compute_period,
    month_range,
    next_period,
    previous_period,
)
from fieldops.services import DirectoryService, PaySchedule

router = APIRouter(prefix="/pay-periods", tags=["pay-periods"])


async def _schedule(
    directory: DirectoryService,
    cadence: PayPeriodType | None,
    anchor: str | None,
) -> PaySchedule:
    """Explicit query values win over the company profile."""
    schedule = await directory.get_pay_schedule()
    return PaySchedule(
        cadence=cadence or schedule.cadence,
        anchor_date=schedule.anchor_date if anchor is None else anchor,
    )


def _response(period: PayPeriod, schedule: PaySchedule) -> PayPeriodContextResponse:
    return PayPeriodContextResponse(
        start=period.start,
        end=period.end,
        label=period.label,
        cadence=schedule.cadence,
        anchor_date=schedule.anchor_date,
    )


def _period_from_query(start: date, end: date) -> PayPeriod:
    if start > end:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="start must not be after end",
        )
    return PayPeriod(start=start, end=end)


@router.get("/current", response_model=PayPeriodContextResponse)
async def current_pay_period(
    directory: Directory,
    reference_date: Annotated[date | None, Query(alias="date")] = None,
    cadence: PayPeriodType | None = None,
    anchor: str | None = None,
) -> PayPeriodContextResponse:
    """Pay period containing a date (today by default)."""
    schedule = await _schedule(directory, cadence, anchor)
    period = compute_period(reference_date or date.today(), schedule.cadence, schedule.anchor_date)
    return _response(period, schedule)


@router.get(
    "/next",
    response_model=PayPeriodContextResponse,
    responses={400: {"model": ErrorResponse}},
)
async def following_pay_period(
    directory: Directory,
    start: date,
    end: date,
    cadence: PayPeriodType | None = None,
    anchor: str | None = None,
) -> PayPeriodContextResponse:
    """Pay period after the given one."""
    schedule = await _schedule(directory, cadence, anchor)
    period = next_period(_period_from_query(start, end), schedule.cadence, schedule.anchor_date)
    return _response(period, schedule)


@router.get(
    "/previous",
    response_model=PayPeriodContextResponse,
    responses={400: {"model": ErrorResponse}},
)
async def preceding_pay_period(
    directory: Directory,
    start: date,
    end: date,
    cadence: PayPeriodType | None = None,
    anchor: str | None = None,
) -> PayPeriodContextResponse:
    """Pay period before the given one."""
    schedule = await _schedule(directory, cadence, anchor)
    period = previous_period(_period_from_query(start, end), schedule.cadence, schedule.anchor_date)
    return _response(period, schedule)


@router.get("/month", response_model=PayPeriodResponse)
async def month_view(
    reference_date: Annotated[date | None, Query(alias="date")] = None,
) -> PayPeriodResponse:
    """Whole calendar month containing a date."""
    period = month_range(reference_date or date.today())
    return PayPeriodResponse(start=period.start, end=period.end, label=period.label)
