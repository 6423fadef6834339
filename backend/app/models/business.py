"""Business (customer) model."""

from __future__ import annotations

from sqlalchemy import Boolean, String, true
from sqlalchemy.orm import Mapped, mapped_column

from app.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin


class Business(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    Customer site that requests maintenance services.

    Fields
    ------
    name : str
        Trading name.
    address, city, state, zip_code : str | None
        Postal address of the site.
    contact_email, contact_phone, contact_person : str | None
        Point of contact for scheduling.
    is_active : bool
        Inactive businesses are hidden from the ``active`` listing.
    """

    __tablename__ = "businesses"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    address: Mapped[str | None] = mapped_column(String(300), nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    state: Mapped[str | None] = mapped_column(String(50), nullable=True)
    zip_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    contact_email: Mapped[str | None] = mapped_column(String(254), nullable=True)
    contact_phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    contact_person: Mapped[str | None] = mapped_column(String(150), nullable=True)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=true()
    )
