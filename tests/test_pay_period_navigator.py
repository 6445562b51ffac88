"""Tests for the stateful pay period navigator."""

from datetime import date

from fieldops.periods import NavigationMode, PayPeriod, PayPeriodNavigator, PayPeriodType

TODAY = date(2026, 1, 20)
ANCHOR = "2026-01-05"


def _navigator() -> PayPeriodNavigator:
    return PayPeriodNavigator("bi-weekly", ANCHOR, today=TODAY)


class TestPayPeriodMode:
    """Stepping through pay periods."""

    def test_starts_on_period_containing_today(self):
        nav = _navigator()

        assert nav.mode is NavigationMode.PAY_PERIOD
        assert nav.cadence is PayPeriodType.BI_WEEKLY
        assert nav.period == PayPeriod(date(2026, 1, 19), date(2026, 2, 1))

    def test_next_and_previous(self):
        nav = _navigator()

        assert nav.next() == PayPeriod(date(2026, 2, 2), date(2026, 2, 15))
        assert nav.previous() == PayPeriod(date(2026, 1, 19), date(2026, 2, 1))
        assert nav.previous() == PayPeriod(date(2026, 1, 5), date(2026, 1, 18))

    def test_set_cadence_resets_to_today(self):
        nav = _navigator()
        nav.next()
        nav.next()

        period = nav.set_cadence("semi-monthly", today=TODAY)

        assert period == PayPeriod(date(2026, 1, 16), date(2026, 1, 31))
        assert nav.cadence is PayPeriodType.SEMI_MONTHLY
        assert nav.mode is NavigationMode.PAY_PERIOD

    def test_set_cadence_leaves_custom_mode(self):
        nav = _navigator()
        nav.set_custom_range(date(2026, 3, 1), date(2026, 3, 9))

        nav.set_cadence(PayPeriodType.WEEKLY, today=TODAY)

        assert nav.mode is NavigationMode.PAY_PERIOD
        assert nav.period == PayPeriod(date(2026, 1, 19), date(2026, 1, 25))


class TestMonthMode:
    """Stepping through calendar months."""

    def test_switch_to_month_uses_today(self):
        nav = _navigator()
        nav.next()

        period = nav.switch_mode("month", today=TODAY)

        assert period == PayPeriod(date(2026, 1, 1), date(2026, 1, 31))
        assert period.label == "January 2026"

    def test_month_steps(self):
        nav = _navigator()
        nav.switch_mode(NavigationMode.MONTH, today=TODAY)

        assert nav.next().label == "February 2026"
        assert nav.previous().label == "January 2026"
        assert nav.previous().label == "December 2025"

    def test_back_to_pay_period_mode(self):
        nav = _navigator()
        nav.switch_mode("month", today=TODAY)
        nav.next()

        period = nav.switch_mode("pay-period", today=TODAY)

        assert period == PayPeriod(date(2026, 1, 19), date(2026, 2, 1))


class TestCustomMode:
    """Custom ranges hold still."""

    def test_custom_range_does_not_step(self):
        nav = _navigator()
        chosen = nav.set_custom_range(date(2026, 2, 9), date(2026, 1, 3))

        assert nav.mode is NavigationMode.CUSTOM
        assert chosen == PayPeriod(date(2026, 1, 3), date(2026, 2, 9))
        assert nav.next() == chosen
        assert nav.previous() == chosen

    def test_switch_to_custom_keeps_current_range(self):
        nav = _navigator()
        before = nav.period

        assert nav.switch_mode("custom", today=TODAY) == before
