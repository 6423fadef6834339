"""Role model and the account/role association table."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, String, Table, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, validates

from app.core.extensions import db

from .base import PKMixin, ReprMixin

account_roles = Table(
    "account_roles",
    db.metadata,
    Column("user_id", ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("role_id", ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True),
)


class Role(PKMixin, ReprMixin, db.Model):
    """
    Named permission group granted to accounts.

    Roles are additive: they are created on demand at registration or by the
    seed command and never deleted by the application.

    Fields
    ------
    name : str
        Unique role name (``Admin``, ``Manager``, ``Employee``, ``User``...).
    description : str | None
        Free-text description.
    created_at : datetime
        Creation timestamp.
    """

    __tablename__ = "roles"

    name: Mapped[str] = mapped_column(String(64), nullable=False)
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    __table_args__ = (UniqueConstraint("name", name="uq_roles_name"),)

    @validates("name")
    def _normalize_name(self, key: str, value: str) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("Role name is required.")
        return value.strip()
