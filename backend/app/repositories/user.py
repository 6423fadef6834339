"""Account repository: lookups by email and by refresh token."""

from __future__ import annotations

from datetime import datetime
from typing import cast

from sqlalchemy import select

from app.models.user import User
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Persistence-only repository for :class:`User`.

    It stores and clears refresh tokens but never mints them; token issuance
    belongs to the auth service.
    """

    model = User

    # ---------------------------- Whitelists ----------------------------

    def _sortable_fields(self):
        return {
            "id": User.id,
            "email": User.email,
            "created_at": User.created_at,
        }

    def _filterable_fields(self):
        return {
            "email": User.email,
            "is_active": User.is_active,
        }

    # ---------------------------- Lookup helpers ----------------------------

    def get_by_email(self, email: str) -> User | None:
        """Fetch an account by email (case-insensitive).

        :param email: Email address to normalise and search.
        :type email: str
        :returns: User instance or ``None`` when not found.
        :rtype: User | None
        """
        stmt = select(User).where(User.email == email.lower().strip())
        return cast(User | None, self.session.execute(stmt).scalars().first())

    def exists_by_email(self, email: str) -> bool:
        """Return ``True`` when an account with the provided email exists."""
        stmt = select(User.id).where(User.email == email.lower().strip())
        return self.session.execute(stmt).first() is not None

    def get_by_refresh_token(self, token: str, *, for_update: bool = False) -> User | None:
        """Fetch the account currently holding ``token``.

        :param token: Opaque refresh token (exact match).
        :type token: str
        :param for_update: Lock the row so concurrent rotations serialise.
        :type for_update: bool
        :returns: Matching account or ``None``.
        :rtype: User | None
        """
        if not token:
            return None
        stmt = select(User).where(User.refresh_token == token)
        if for_update:
            stmt = stmt.with_for_update(of=User)
        return cast(User | None, self.session.execute(stmt).scalars().first())

    # ---------------------------- Refresh token ops ----------------------------

    def store_refresh_token(self, user: User, token: str, expires_at: datetime) -> User:
        """Overwrite the account's refresh token and expiry, then flush."""
        user.refresh_token = token
        user.refresh_token_expires_at = expires_at
        self.flush()
        return user

    def clear_refresh_token(self, user: User) -> User:
        """Remove the account's refresh token and expiry, then flush."""
        user.refresh_token = None
        user.refresh_token_expires_at = None
        self.flush()
        return user
