"""Employee (field technician) model."""

from __future__ import annotations

from datetime import date

from sqlalchemy import Boolean, Date, Index, String, UniqueConstraint, true
from sqlalchemy.orm import Mapped, mapped_column, validates

from app.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin


class Employee(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    Technician who can be assigned to service requests.

    Fields
    ------
    first_name, last_name : str
        Person names.
    email : str
        Work email, unique and stored lowercase.
    phone : str | None
        Contact number.
    specialization : str | None
        Trade (``Plumbing``, ``HVAC``...), used for filtering.
    hire_date : date | None
        First working day.
    is_active : bool
        Whether the employee currently takes work.
    """

    __tablename__ = "employees"

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(254), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    specialization: Mapped[str | None] = mapped_column(String(100), nullable=True)
    hire_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=true()
    )

    __table_args__ = (
        UniqueConstraint("email", name="uq_employees_email"),
        Index("ix_employees_specialization", "specialization"),
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @validates("email")
    def _normalize_email(self, key: str, value: str) -> str:
        if not value or not isinstance(value, str):
            raise ValueError("Email is required.")
        return value.strip().lower()
