"""Service request model: a business asking for a catalog service."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin

if TYPE_CHECKING:
    from .business import Business
    from .employee import Employee
    from .service import Service

DEFAULT_STATUS = "Pending"


class ServiceRequest(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    Work order linking a business, a requested service and (later) an employee.

    ``status`` is stored as its display string; transitions are computed by
    :mod:`app.services.service_requests.lifecycle` and never set freely by
    the API layer.
    """

    __tablename__ = "service_requests"

    business_id: Mapped[int] = mapped_column(
        ForeignKey("businesses.id", ondelete="RESTRICT"), nullable=False
    )
    service_id: Mapped[int] = mapped_column(
        ForeignKey("services.id", ondelete="RESTRICT"), nullable=False
    )
    employee_id: Mapped[int | None] = mapped_column(
        ForeignKey("employees.id", ondelete="SET NULL"), nullable=True
    )
    status: Mapped[str] = mapped_column(String(50), nullable=False, default=DEFAULT_STATUS)
    requested_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    scheduled_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    completed_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    estimated_cost: Mapped[Decimal | None] = mapped_column(Numeric(18, 2), nullable=True)
    actual_cost: Mapped[Decimal | None] = mapped_column(Numeric(18, 2), nullable=True)

    business: Mapped[Business] = relationship(lazy="joined")
    service: Mapped[Service] = relationship(lazy="joined")
    employee: Mapped[Employee | None] = relationship(lazy="joined")

    __table_args__ = (
        Index("ix_service_requests_business_id", "business_id"),
        Index("ix_service_requests_employee_id", "employee_id"),
        Index("ix_service_requests_status", "status"),
    )
