"""Type definitions for pay period calculations."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum


class PayPeriodType(str, Enum):
    """Pay period cadences."""

    WEEKLY = "weekly"
    BI_WEEKLY = "bi-weekly"
    SEMI_MONTHLY = "semi-monthly"
    MONTHLY = "monthly"

    @classmethod
    def parse(cls, value: str | PayPeriodType) -> PayPeriodType:
        """Parse a cadence string, raising ValueError for unknown values."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown pay period type {value!r}; "
                f"expected one of {', '.join(t.value for t in cls)}"
            )


class NavigationMode(str, Enum):
    """What a pay period navigator steps through."""

    PAY_PERIOD = "pay-period"
    MONTH = "month"
    CUSTOM = "custom"


class ApprovalStatus(str, Enum):
    """Time entry approval states."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


@dataclass(frozen=True)
class PayPeriod:
    """An inclusive date interval with a display label.

    Equality and hashing use (start, end) only.
    """

    start: date
    end: date
    label: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"Period start {self.start} is after end {self.end}")

    @property
    def days(self) -> int:
        """Number of days in the period, both ends included."""
        return (self.end - self.start).days + 1

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


@dataclass
class HoursByStatus:
    """Hour sums split by approval status."""

    approved: Decimal = Decimal("0")
    pending: Decimal = Decimal("0")
    rejected: Decimal = Decimal("0")
    total: Decimal = Decimal("0")

    def add(self, status: ApprovalStatus | str, hours: Decimal) -> None:
        status = ApprovalStatus(status)
        setattr(self, status.value, getattr(self, status.value) + hours)
        self.total += hours

    def merge(self, other: HoursByStatus) -> None:
        self.approved += other.approved
        self.pending += other.pending
        self.rejected += other.rejected
        self.total += other.total

    @property
    def is_empty(self) -> bool:
        return self.total == 0
