# app/services/auth/service.py
from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.exc import IntegrityError

from app.core import passwords
from app.models.user import User
from app.services._shared.base import BaseService
from app.services._shared.errors import AuthenticationError, ConflictError, violates
from app.services._shared.ports.token_provider import TokenProvider
from app.services.auth.dto import (
    AccountProfileOut,
    AuthTokenConfig,
    LoginIn,
    LogoutIn,
    RefreshIn,
    RegisterIn,
    SessionOut,
)
from app.services.auth.tokens import TokenIssuer
from app.uow.sqlalchemy_uow import SQLAlchemyUnitOfWork

log = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password."
INVALID_REFRESH_TOKEN = "Invalid or expired refresh token."


class AuthService(BaseService):
    """
    Session lifecycle service (login / register / refresh / logout).

    A session is the pair (access JWT, opaque refresh token). The refresh
    token is stored on the account row, one per account: login overwrites
    it, refresh rotates it, logout clears it. Each operation runs in a single
    read-write unit of work, so a failure anywhere persists nothing.
    """

    def __init__(
        self,
        *,
        token_provider: TokenProvider,
        token_cfg: AuthTokenConfig | None = None,
    ) -> None:
        """
        Initialize the service with its dependencies.

        :param token_provider: Adapter for signing JWTs.
        :param token_cfg: Lifetimes, refresh entropy and default role.
        """
        super().__init__()
        self.cfg = token_cfg or AuthTokenConfig()
        self.issuer = TokenIssuer(token_provider, self.cfg)

    # ------------------------------------------------------------------ #
    # Login
    # ------------------------------------------------------------------ #

    def login(self, dto: LoginIn) -> SessionOut:
        """
        Authenticate credentials and open a new session.

        Any previously issued refresh token of the account stops working.

        :param dto: Login input.
        :returns: New session.
        :raises AuthenticationError: Unknown email, inactive account or wrong
            password, all with the same message.
        """
        with self.rw_uow() as uow:
            user = uow.users.get_by_email(dto.email)
            if user is not None and user.is_active:
                authenticated = user.verify_password(dto.password)
            else:
                authenticated = passwords.verify_dummy_password(dto.password)
            if not authenticated:
                log.warning(
                    "auth.login.rejected",
                    extra={"event": "auth.login.rejected", "status": _rejection_reason(user)},
                )
                raise AuthenticationError(INVALID_CREDENTIALS)

            session = self._open_session(uow, user)

        log.info(
            "auth.login.succeeded",
            extra={"event": "auth.login", "account_id": session.account.id},
        )
        return session

    # ------------------------------------------------------------------ #
    # Registration
    # ------------------------------------------------------------------ #

    def register(self, dto: RegisterIn) -> SessionOut:
        """
        Create an account, grant its role and open a session.

        A role that does not exist yet is created with the description
        ``"{role} role"``.

        :param dto: Registration input.
        :returns: Session of the new account.
        :raises ConflictError: If the email is already registered.
        """
        role_name = (dto.role or "").strip() or self.cfg.default_role

        with self.rw_uow() as uow:
            if uow.users.exists_by_email(dto.email):
                raise ConflictError("User", "email is already registered")

            role, created = uow.roles.get_or_create(role_name)
            if created:
                log.info("auth.role.created", extra={"event": "auth.role.created"})

            user = User(
                email=dto.email,
                username=dto.email.strip().lower(),
                first_name=dto.first_name.strip(),
                last_name=dto.last_name.strip(),
                is_active=True,
            )
            user.password = dto.password
            user.roles.append(role)
            try:
                uow.users.add(user)
            except IntegrityError as exc:
                # Lost a race against a concurrent registration
                if violates(exc, "uq_users_email") or violates(exc, "users.email"):
                    raise ConflictError("User", "email is already registered") from exc
                raise

            session = self._open_session(uow, user)

        log.info(
            "auth.register.succeeded",
            extra={"event": "auth.register", "account_id": session.account.id},
        )
        return session

    # ------------------------------------------------------------------ #
    # Refresh with rotation
    # ------------------------------------------------------------------ #

    def refresh(self, dto: RefreshIn) -> SessionOut:
        """
        Exchange a refresh token for a brand-new session.

        The presented token is replaced, so it can never be used again. A
        token whose expiry equals the current instant is already expired.

        :param dto: Refresh input.
        :returns: New session.
        :raises AuthenticationError: Unknown, rotated, cleared or expired token.
        """
        with self.rw_uow() as uow:
            user = uow.users.get_by_refresh_token(dto.refresh_token, for_update=True)
            now = self.now_utc()
            if user is None or user.refresh_token_expired(now):
                log.warning(
                    "auth.refresh.rejected",
                    extra={
                        "event": "auth.refresh.rejected",
                        "status": "unknown" if user is None else "expired",
                    },
                )
                raise AuthenticationError(INVALID_REFRESH_TOKEN)

            session = self._open_session(uow, user, now=now)

        log.info(
            "auth.refresh.succeeded",
            extra={"event": "auth.refresh", "account_id": session.account.id},
        )
        return session

    # ------------------------------------------------------------------ #
    # Logout
    # ------------------------------------------------------------------ #

    def logout(self, dto: LogoutIn) -> bool:
        """
        Clear the stored refresh token matching ``dto.refresh_token``.

        :returns: ``True`` when a session was closed, ``False`` when the token
            matched no account (nothing is changed).
        """
        with self.rw_uow() as uow:
            user = uow.users.get_by_refresh_token(dto.refresh_token, for_update=True)
            if user is None:
                return False
            uow.users.clear_refresh_token(user)
            account_id = user.id

        log.info("auth.logout", extra={"event": "auth.logout", "account_id": account_id})
        return True

    # ------------------------------------------------------------------ #
    # Internals
    # ------------------------------------------------------------------ #

    def _open_session(
        self, uow: SQLAlchemyUnitOfWork, user: User, *, now: datetime | None = None
    ) -> SessionOut:
        """Mint both tokens, store the refresh token and build the response."""
        now = now or self.now_utc()
        roles = user.role_names
        access = self.issuer.issue_access_token(user, roles)
        refresh = self.issuer.issue_refresh_token(now=now)
        uow.users.store_refresh_token(user, refresh.token, refresh.expires_at)

        return SessionOut(
            access_token=access.token,
            refresh_token=refresh.token,
            access_expires_at=access.expires_at,
            account=AccountProfileOut(
                id=user.id,
                first_name=user.first_name,
                last_name=user.last_name,
                email=user.email,
                username=user.username,
                is_active=user.is_active,
                roles=roles,
            ),
        )


def _rejection_reason(user: User | None) -> str:
    """Server-side label for a failed login; never sent to the client."""
    if user is None:
        return "unknown_email"
    if not user.is_active:
        return "inactive"
    return "bad_password"
