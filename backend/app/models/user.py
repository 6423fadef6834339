"""Account model: login identity, role membership and the live refresh token."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import Boolean, DateTime, Index, String, UniqueConstraint, true
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from app.core import passwords
from app.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin, as_aware_utc
from .role import account_roles

if TYPE_CHECKING:
    from .role import Role


class User(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    Account able to sign in to the API.

    A session is not a table of its own: it is represented by the single
    refresh token stored on the account. Logging in again overwrites it, so
    an account has at most one live refresh token.

    Fields
    ------
    email : str
        Login email. Stored normalized (lowercase, trimmed).
    username : str
        Display handle; equals the email at registration.
    first_name, last_name : str
        Person names shown on the profile.
    password_hash : str
        Hashed password (write-only setter via ``password``).
    is_active : bool
        Inactive accounts cannot log in.
    refresh_token : str | None
        Current opaque refresh token, ``None`` when signed out.
    refresh_token_expires_at : datetime | None
        Expiry of ``refresh_token``.
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(254), nullable=False)
    username: Mapped[str] = mapped_column(String(254), nullable=False)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    last_name: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    password_hash: Mapped[str] = mapped_column(String(254), nullable=False)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=true()
    )
    refresh_token: Mapped[str | None] = mapped_column(String(128), nullable=True)
    refresh_token_expires_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    roles: Mapped[list[Role]] = relationship(
        secondary=account_roles, lazy="selectin", order_by="Role.name"
    )

    __table_args__ = (
        UniqueConstraint("email", name="uq_users_email"),
        UniqueConstraint("refresh_token", name="uq_users_refresh_token"),
        Index("ix_users_email", "email"),
    )

    # -------------------- Password API --------------------
    @property
    def password(self) -> Any:
        """
        Disallow reading passwords.

        :raises AttributeError: Always, to ensure password is write-only.
        """
        raise AttributeError("Password is write-only.")

    @password.setter
    def password(self, raw: str) -> None:
        self.password_hash = passwords.hash_password(raw)

    def verify_password(self, raw: str) -> bool:
        """
        Verify a password against the stored hash.

        :param raw: Plain text password candidate.
        :type raw: str
        :returns: ``True`` if it matches; otherwise ``False``.
        :rtype: bool
        """
        return passwords.verify_password(self.password_hash, raw)

    # -------------------- Roles & session helpers --------------------
    @property
    def role_names(self) -> list[str]:
        """Sorted names of the roles granted to the account."""
        return sorted(role.name for role in self.roles)

    def refresh_token_expired(self, now: datetime) -> bool:
        """
        Tell whether the stored refresh token is unusable at ``now``.

        A token expiring exactly at ``now`` counts as expired.

        :param now: Timezone-aware reference instant.
        :type now: datetime
        :returns: ``True`` when there is no expiry or it is ``<= now``.
        :rtype: bool
        """
        expires_at = as_aware_utc(self.refresh_token_expires_at)
        return expires_at is None or expires_at <= now

    # -------------------- Validators --------------------
    @validates("email")
    def _normalize_email(self, key: str, value: str) -> str:
        """
        Normalize and validate email.

        :raises ValueError: If email is missing or malformed.
        """
        if not value or not isinstance(value, str):
            raise ValueError("Email is required.")
        v = value.strip().lower()
        # Minimal sanity check; full validation happens at API layer.
        if "@" not in v or "." not in v.split("@")[-1]:
            raise ValueError("Email format looks invalid.")
        return v

    @validates("username")
    def _normalize_username(self, key: str, value: str) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("Username is required.")
        return value.strip()
