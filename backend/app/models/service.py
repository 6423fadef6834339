"""Catalog entry for a maintenance service offered to businesses."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import Boolean, CheckConstraint, Numeric, String, Text, true
from sqlalchemy.orm import Mapped, mapped_column

from app.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin


class Service(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    Maintenance service that can be requested (e.g. ``Boiler inspection``).

    Fields
    ------
    name : str
        Catalog name.
    description : str | None
        Longer explanation for customers.
    base_price : Decimal
        List price before any quote adjustment.
    is_active : bool
        Inactive services are hidden from the ``active`` listing.
    """

    __tablename__ = "services"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    base_price: Mapped[Decimal] = mapped_column(
        Numeric(18, 2), nullable=False, default=Decimal("0.00")
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=true()
    )

    __table_args__ = (CheckConstraint("base_price >= 0", name="base_price_non_negative"),)
