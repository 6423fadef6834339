"""Stateless minting of access and refresh credentials."""

from __future__ import annotations

import base64
import secrets
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import uuid4

from app.models.user import User
from app.services._shared.ports.token_provider import TokenProvider
from app.services.auth.dto import AuthTokenConfig


@dataclass(frozen=True, slots=True)
class IssuedToken:
    token: str
    expires_at: datetime


class TokenIssuer:
    """
    Produce the two halves of a session.

    The access token is a JWT signed by the :class:`TokenProvider`; the
    refresh token is random bytes with no structure. Their lifetimes are
    independent.
    """

    def __init__(self, provider: TokenProvider, cfg: AuthTokenConfig) -> None:
        self.provider = provider
        self.cfg = cfg

    def issue_access_token(self, account: User, roles: Sequence[str]) -> IssuedToken:
        """
        Sign an access token for ``account``.

        Claims: ``sub`` (account id), ``username``, ``email``, ``roles`` and a
        fresh ``jti`` so two tokens issued in the same second never collide.
        The reported expiry is the token's own ``exp`` claim.

        :param account: Account the token identifies.
        :type account: User
        :param roles: Role names to embed.
        :type roles: Sequence[str]
        :returns: Token and its expiry.
        :rtype: IssuedToken
        """
        claims = {
            "jti": uuid4().hex,
            "username": account.username,
            "email": account.email,
            "roles": list(roles),
        }
        token = self.provider.create_access_token(
            identity=str(account.id),
            additional_claims=claims,
            expires_delta=self.cfg.access_expires,
        )
        exp = self.provider.decode(token)["exp"]
        return IssuedToken(token=token, expires_at=datetime.fromtimestamp(exp, tz=UTC))

    def issue_refresh_token(self, *, now: datetime) -> IssuedToken:
        """Generate an opaque, base64-encoded refresh token."""
        raw = secrets.token_bytes(self.cfg.refresh_token_bytes)
        return IssuedToken(
            token=base64.b64encode(raw).decode("ascii"),
            expires_at=now + self.cfg.refresh_expires,
        )
