"""Authentication endpoints using the service layer."""

from __future__ import annotations

from flask import Blueprint, current_app

from app.api.deps import json_response, load_json, require_auth, timing
from app.infra.jwt.flask_jwt_token_provider import JWTTokenProvider
from app.schemas import LoginSchema, RefreshTokenSchema, RegisterSchema, SessionSchema
from app.services.auth.dto import AuthTokenConfig, LoginIn, LogoutIn, RefreshIn, RegisterIn
from app.services.auth.service import AuthService

bp = Blueprint("auth", __name__)

register_schema = RegisterSchema()
login_schema = LoginSchema()
refresh_schema = RefreshTokenSchema()
session_schema = SessionSchema()


def _service() -> AuthService:
    return AuthService(
        token_provider=JWTTokenProvider(),
        token_cfg=AuthTokenConfig.from_mapping(current_app.config),
    )


@bp.post("/register")
@timing
def register():
    """Create an account and open its first session."""

    payload = load_json(register_schema)
    session = _service().register(RegisterIn(**payload))
    return json_response({"data": session_schema.dump(session)}, status=201)


@bp.post("/login")
@timing
def login():
    """Authenticate credentials and open a session."""

    payload = load_json(login_schema)
    session = _service().login(LoginIn(**payload))
    return json_response({"data": session_schema.dump(session)})


@bp.post("/refresh")
@timing
def refresh():
    """Rotate a refresh token into a new session."""

    payload = load_json(refresh_schema)
    session = _service().refresh(RefreshIn(**payload))
    return json_response({"data": session_schema.dump(session)})


@bp.post("/logout")
@require_auth
@timing
def logout():
    """Revoke the given refresh token; unknown tokens are not an error."""

    payload = load_json(refresh_schema)
    revoked = _service().logout(LogoutIn(**payload))
    return json_response({"message": "Logged out successfully", "revoked": revoked})
