"""Stateful pay period navigation for time tracking and payroll screens."""

from __future__ import annotations

from datetime import date

from fieldops.periods.calculator import (
    compute_period,
    custom_range,
    month_range,
    next_month,
    next_period,
    previous_month,
    previous_period,
)
from fieldops.periods.types import NavigationMode, PayPeriod, PayPeriodType


class PayPeriodNavigator:
    """Tracks the period currently selected in a pay period picker.

    Modes:
    - pay-period: steps through the company's pay periods
    - month: steps through calendar months
    - custom: holds an arbitrary range and does not step

    Changing cadence or mode always lands on the natural period containing
    today rather than translating the current selection.
    """

    def __init__(
        self,
        cadence: PayPeriodType | str = PayPeriodType.BI_WEEKLY,
        anchor_date: str | date | None = None,
        today: date | None = None,
    ):
        self.cadence = PayPeriodType.parse(cadence)
        self.anchor_date = anchor_date
        self.mode = NavigationMode.PAY_PERIOD
        self.period: PayPeriod = compute_period(today or date.today(), self.cadence, anchor_date)

    def next(self) -> PayPeriod:
        if self.mode is NavigationMode.PAY_PERIOD:
            self.period = next_period(self.period, self.cadence, self.anchor_date)
        elif self.mode is NavigationMode.MONTH:
            self.period = next_month(self.period)
        return self.period

    def previous(self) -> PayPeriod:
        if self.mode is NavigationMode.PAY_PERIOD:
            self.period = previous_period(self.period, self.cadence, self.anchor_date)
        elif self.mode is NavigationMode.MONTH:
            self.period = previous_month(self.period)
        return self.period

    def switch_mode(self, mode: NavigationMode | str, today: date | None = None) -> PayPeriod:
        """Switch mode; custom keeps the current range until one is picked."""
        self.mode = NavigationMode(mode)
        today = today or date.today()
        if self.mode is NavigationMode.MONTH:
            self.period = month_range(today)
        elif self.mode is NavigationMode.PAY_PERIOD:
            self.period = compute_period(today, self.cadence, self.anchor_date)
        return self.period

    def set_cadence(
        self,
        cadence: PayPeriodType | str,
        anchor_date: str | date | None = None,
        today: date | None = None,
    ) -> PayPeriod:
        """Adopt a new cadence and reset to its period containing today."""
        self.cadence = PayPeriodType.parse(cadence)
        self.anchor_date = anchor_date
        self.mode = NavigationMode.PAY_PERIOD
        self.period = compute_period(today or date.today(), self.cadence, anchor_date)
        return self.period

    def set_custom_range(self, start: date, end: date) -> PayPeriod:
        self.mode = NavigationMode.CUSTOM
        self.period = custom_range(start, end)
        return self.period
