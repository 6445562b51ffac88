"""Pay period calculation."""

from fieldops.periods.calculator import (
    compute_period,
    custom_range,
    month_range,
    next_month,
    next_period,
    parse_anchor,
    previous_month,
    previous_period,
)
from fieldops.periods.navigator import PayPeriodNavigator
from fieldops.periods.timesheet import PayrollSummary, summarize_payroll
from fieldops.periods.types import (
    ApprovalStatus,
    HoursByStatus,
    NavigationMode,
    PayPeriod,
    PayPeriodType,
)

__all__ = [
    "ApprovalStatus",
    "HoursByStatus",
    "NavigationMode",
    "PayPeriod",
    "PayPeriodNavigator",
    "PayPeriodType",
    "PayrollSummary",
    "compute_period",
    "custom_range",
    "month_range",
    "next_month",
    "next_period",
    "parse_anchor",
    "previous_month",
    "previous_period",
    "summarize_payroll",
]
