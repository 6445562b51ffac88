"""Employee and time entry models."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import CheckConstraint, Date, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fieldops.models.base import Base, DocumentIdMixin, TimestampMixin


class Employee(Base, DocumentIdMixin, TimestampMixin):
    """Employee record; `role` drives permission resolution."""

    __tablename__ = "employee"

    name: Mapped[str] = mapped_column(String, nullable=False)
    role: Mapped[str] = mapped_column(String, nullable=False, default="")
    phone: Mapped[str] = mapped_column(String, nullable=False, default="")
    email: Mapped[str] = mapped_column(String, nullable=False, default="", index=True)
    status: Mapped[str] = mapped_column(String, nullable=False, default="active")
    uid: Mapped[str | None] = mapped_column(String, nullable=True)

    __table_args__ = (
        CheckConstraint("status IN ('active', 'inactive')", name="employee_status_check"),
    )

    # Relationships
    time_entries: Mapped[list[TimeEntry]] = relationship(back_populates="employee")


class TimeEntry(Base, DocumentIdMixin, TimestampMixin):
    """Hours logged by an employee on one day."""

    __tablename__ = "time_entry"

    work_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    employee_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("employee.id", ondelete="CASCADE"),
        nullable=False,
    )
    project_id: Mapped[str] = mapped_column(String, nullable=False, default="")
    cost_code_id: Mapped[str] = mapped_column(String, nullable=False, default="")
    work_type: Mapped[str] = mapped_column(String, nullable=False, default="tm")
    hours: Mapped[Decimal] = mapped_column(Numeric(6, 2), nullable=False)
    notes: Mapped[str] = mapped_column(String, nullable=False, default="")
    approval: Mapped[str] = mapped_column(String, nullable=False, default="pending")

    __table_args__ = (
        CheckConstraint("work_type IN ('lump-sum', 'tm')", name="time_entry_work_type_check"),
        CheckConstraint(
            "approval IN ('pending', 'approved', 'rejected')",
            name="time_entry_approval_check",
        ),
        CheckConstraint("hours >= 0", name="time_entry_hours_check"),
    )

    # Relationships
    employee: Mapped[Employee] = relationship(back_populates="time_entries")
