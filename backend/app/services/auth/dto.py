# app/services/auth/dto.py
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class LoginIn:
    """
    Input DTO for login.

    :param email: Account email (case-insensitive).
    :type email: str
    :param password: Raw password (to be verified).
    :type password: str
    """

    email: str
    password: str


@dataclass(frozen=True, slots=True)
class RegisterIn:
    """
    Input DTO for self-registration.

    :param email: Account email; also becomes the username.
    :type email: str
    :param password: Raw password (already policy-checked by the schema).
    :type password: str
    :param first_name: Given name.
    :type first_name: str
    :param last_name: Family name.
    :type last_name: str
    :param role: Role to grant; the configured default role when ``None``.
    :type role: str | None
    """

    email: str
    password: str
    first_name: str
    last_name: str
    role: str | None = None


@dataclass(frozen=True, slots=True)
class RefreshIn:
    """
    Input DTO for token refresh.

    :param refresh_token: Opaque refresh token from a previous session.
    :type refresh_token: str
    """

    refresh_token: str


@dataclass(frozen=True, slots=True)
class LogoutIn:
    refresh_token: str


# --------------------------- Output DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class AccountProfileOut:
    """Public profile embedded in every session response."""

    id: int
    first_name: str
    last_name: str
    email: str
    username: str
    is_active: bool
    roles: list[str]


@dataclass(frozen=True, slots=True)
class SessionOut:
    """
    Output DTO for login, register and refresh.

    :param access_token: Signed JWT, valid until ``access_expires_at``.
    :type access_token: str
    :param refresh_token: Opaque refresh token (single use).
    :type refresh_token: str
    :param access_expires_at: Access token expiry (UTC).
    :type access_expires_at: datetime
    :param account: Profile of the signed-in account.
    :type account: AccountProfileOut
    :param token_type: Authorization scheme for the access token.
    :type token_type: str
    """

    access_token: str
    refresh_token: str
    access_expires_at: datetime
    account: AccountProfileOut
    token_type: str = "Bearer"


# ------------------------ Config DTO -------------------------------------- #


@dataclass(frozen=True, slots=True)
class AuthTokenConfig:
    """
    Token emission configuration.

    :param access_expires: Access token lifetime.
    :type access_expires: timedelta
    :param refresh_expires: Refresh token lifetime.
    :type refresh_expires: timedelta
    :param refresh_token_bytes: Random bytes per refresh token.
    :type refresh_token_bytes: int
    :param default_role: Role granted when registration names none.
    :type default_role: str
    """

    access_expires: timedelta = timedelta(hours=1)
    refresh_expires: timedelta = timedelta(days=7)
    refresh_token_bytes: int = 64
    default_role: str = "User"

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> AuthTokenConfig:
        """Build from a Flask config, keeping defaults for absent keys."""
        defaults = cls()
        return cls(
            access_expires=config.get("JWT_ACCESS_TOKEN_EXPIRES", defaults.access_expires),
            refresh_expires=config.get("REFRESH_TOKEN_EXPIRES", defaults.refresh_expires),
            refresh_token_bytes=int(
                config.get("REFRESH_TOKEN_BYTES", defaults.refresh_token_bytes)
            ),
            default_role=config.get("DEFAULT_ROLE", defaults.default_role),
        )
