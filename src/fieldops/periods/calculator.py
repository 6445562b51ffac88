"""Pay period boundary calculation.

Every period is computed from the reference date and the anchor. Navigation
recomputes from the day just outside the current period instead of adding a
period length to it, so repeated next/previous calls cannot drift away from
the anchor.
"""

from __future__ import annotations

import calendar
import logging
from datetime import date, datetime, timedelta

from fieldops.periods.types import PayPeriod, PayPeriodType

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)
MONDAY = 0


def parse_anchor(value: str | date | datetime | None) -> date | None:
    """Parse an anchor date, returning None when absent or malformed."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = value.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        logger.debug("Ignoring malformed pay period anchor %r", value)
        return None


def start_of_week(day: date) -> date:
    """Monday of the week containing day."""
    return day - timedelta(days=day.weekday() - MONDAY)


def end_of_month(day: date) -> date:
    return day.replace(day=calendar.monthrange(day.year, day.month)[1])


def compute_period(
    reference_date: date | datetime,
    cadence: PayPeriodType | str,
    anchor_date: str | date | None = None,
) -> PayPeriod:
    """Compute the pay period containing reference_date.

    Args:
        reference_date: Any calendar date
        cadence: One of the four pay period types
        anchor_date: Optional ISO anchor; only weekly and bi-weekly use it

    Returns:
        The PayPeriod whose interval contains reference_date
    """
    if isinstance(reference_date, datetime):
        reference_date = reference_date.date()
    cadence = PayPeriodType.parse(cadence)
    anchor = parse_anchor(anchor_date)

    if cadence is PayPeriodType.WEEKLY:
        return _weekly_period(reference_date, anchor)
    if cadence is PayPeriodType.BI_WEEKLY:
        return _bi_weekly_period(reference_date, anchor)
    if cadence is PayPeriodType.SEMI_MONTHLY:
        return _semi_monthly_period(reference_date)
    assert cadence is PayPeriodType.MONTHLY, f"unhandled cadence {cadence}"
    return _monthly_period(reference_date)


def next_period(
    current: PayPeriod,
    cadence: PayPeriodType | str,
    anchor_date: str | date | None = None,
) -> PayPeriod:
    """The period immediately after current."""
    return compute_period(current.end + ONE_DAY, cadence, anchor_date)


def previous_period(
    current: PayPeriod,
    cadence: PayPeriodType | str,
    anchor_date: str | date | None = None,
) -> PayPeriod:
    """The period immediately before current."""
    return compute_period(current.start - ONE_DAY, cadence, anchor_date)


def _weekly_period(reference_date: date, anchor: date | None) -> PayPeriod:
    anchor = anchor or start_of_week(reference_date)
    anchor_weekday = anchor.weekday()

    start = reference_date
    while start.weekday() != anchor_weekday:
        start -= ONE_DAY
    if start > reference_date:
        start -= timedelta(days=7)

    return make_period(start, start + timedelta(days=6))


def _bi_weekly_period(reference_date: date, anchor: date | None) -> PayPeriod:
    anchor = anchor or start_of_week(reference_date)

    weeks_diff = (reference_date - anchor).days // 7
    period_index = weeks_diff // 2
    start = anchor + timedelta(weeks=period_index * 2)
    if start > reference_date:
        start -= timedelta(weeks=2)

    return make_period(start, start + timedelta(days=13))


def _semi_monthly_period(reference_date: date) -> PayPeriod:
    if reference_date.day <= 15:
        return make_period(reference_date.replace(day=1), reference_date.replace(day=15))
    return make_period(reference_date.replace(day=16), end_of_month(reference_date))


def _monthly_period(reference_date: date) -> PayPeriod:
    return make_period(reference_date.replace(day=1), end_of_month(reference_date))


# ============================================================================
# Labels
# ============================================================================


def _short(day: date) -> str:
    return f"{day:%b} {day.day}"


def period_label(start: date, end: date) -> str:
    """Label like 'Jan 19 – Feb 1, 2026'."""
    return f"{_short(start)} – {_short(end)}, {end.year}"


def make_period(start: date, end: date) -> PayPeriod:
    return PayPeriod(start=start, end=end, label=period_label(start, end))


# ============================================================================
# Month views and custom ranges
# ============================================================================


def month_range(reference_date: date | datetime) -> PayPeriod:
    """Whole calendar month containing reference_date, labelled 'January 2026'."""
    if isinstance(reference_date, datetime):
        reference_date = reference_date.date()
    start = reference_date.replace(day=1)
    return PayPeriod(start=start, end=end_of_month(start), label=f"{start:%B %Y}")


def _shift_month(day: date, months: int) -> date:
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def next_month(current: PayPeriod) -> PayPeriod:
    return month_range(_shift_month(current.start, 1))


def previous_month(current: PayPeriod) -> PayPeriod:
    return month_range(_shift_month(current.start, -1))


def custom_range(start: date, end: date) -> PayPeriod:
    """Arbitrary inclusive range, labelled 'Jan 3, 2026 – Feb 9, 2026'."""
    if start > end:
        start, end = end, start
    return PayPeriod(
        start=start,
        end=end,
        label=f"{_short(start)}, {start.year} – {_short(end)}, {end.year}",
    )
