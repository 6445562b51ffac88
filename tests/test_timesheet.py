"""Tests for the payroll hours summary."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

import pytest

from fieldops.periods import HoursByStatus, PayPeriod, summarize_payroll

PERIOD = PayPeriod(date(2026, 1, 19), date(2026, 2, 1))


@dataclass
class Entry:
    work_date: date
    employee_id: str
    hours: float | Decimal
    approval: str


@dataclass
class Person:
    id: str
    name: str
    status: str = "active"


@pytest.fixture
def summary():
    employees = [
        Person("alice", "Alice"),
        Person("bob", "Bob"),
        Person("carl", "Carl", status="inactive"),
    ]
    entries = [
        Entry(date(2026, 1, 19), "alice", 8, "approved"),
        Entry(date(2026, 1, 19), "alice", 2, "pending"),
        Entry(date(2026, 1, 20), "alice", Decimal("8.00"), "rejected"),
        Entry(date(2026, 1, 21), "bob", 7.5, "approved"),
        Entry(date(2026, 1, 22), "carl", 4, "pending"),
        Entry(date(2026, 2, 2), "bob", 8, "approved"),
    ]
    return summarize_payroll(entries, PERIOD, employees)


class TestSummarizePayroll:
    """Grouping time entries by employee and day."""

    def test_dates_cover_period(self, summary):
        assert len(summary.dates) == 14
        assert summary.dates[0] == PERIOD.start
        assert summary.dates[-1] == PERIOD.end

    def test_rows_only_for_active_employees(self, summary):
        assert [row.name for row in summary.rows] == ["Alice", "Bob"]
        assert summary.employee_count == 2

    def test_cells_split_by_status(self, summary):
        alice = summary.rows[0]
        cell = alice.cell(date(2026, 1, 19))

        assert cell.approved == Decimal("8")
        assert cell.pending == Decimal("2")
        assert cell.total == Decimal("10")
        assert alice.cell(date(2026, 1, 20)).rejected == Decimal("8.00")
        assert alice.cell(date(2026, 1, 23)).is_empty

    def test_row_totals(self, summary):
        alice, bob = summary.rows

        assert alice.total.total == Decimal("18")
        assert alice.total.approved == Decimal("8")
        assert bob.total.total == Decimal("7.5")

    def test_missing_weekdays(self, summary):
        alice, bob = summary.rows

        assert len(alice.missing_weekdays) == 8
        assert date(2026, 1, 19) not in alice.missing_weekdays
        assert len(bob.missing_weekdays) == 9
        assert all(d.weekday() < 5 for d in bob.missing_weekdays)

    def test_inactive_hours_count_in_totals(self, summary):
        assert summary.day_totals[3].pending == Decimal("4")
        assert summary.grand_total.total == Decimal("29.5")
        assert summary.grand_total.pending == Decimal("6")
        assert summary.grand_total.rejected == Decimal("8.00")

    def test_entries_outside_period_ignored(self, summary):
        assert summary.grand_total.approved == Decimal("15.5")

    def test_empty_period(self):
        result = summarize_payroll([], PERIOD, [Person("alice", "Alice")])

        assert result.grand_total.is_empty
        assert len(result.rows[0].missing_weekdays) == 10
        assert all(total.is_empty for total in result.day_totals)


class TestHoursByStatus:
    """Status-split hour sums."""

    def test_add_and_merge(self):
        first = HoursByStatus()
        first.add("approved", Decimal("3"))
        second = HoursByStatus()
        second.add("rejected", Decimal("1.25"))

        first.merge(second)

        assert first.total == Decimal("4.25")
        assert first.rejected == Decimal("1.25")

    def test_unknown_status_rejected(self):
        with pytest.raises(ValueError):
            HoursByStatus().add("lost", Decimal("1"))
