# app/infra/jwt/flask_jwt_token_provider.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any, cast

from flask_jwt_extended import create_access_token as _create_access
from flask_jwt_extended import decode_token as _decode

from app.services._shared.ports import TokenProvider


@dataclass(slots=True)
class JWTTokenProvider(TokenProvider):
    """
    Adapter for Flask-JWT-Extended.

    Signing key, algorithm, issuer and audience come from the app config
    (``JWT_SECRET_KEY``, ``JWT_ALGORITHM``, ``JWT_ENCODE_ISSUER``,
    ``JWT_ENCODE_AUDIENCE``). Decoding enforces the same issuer, audience,
    signature and expiry with zero leeway.

    .. note::
       Requires an active Flask app context.
    """

    def create_access_token(
        self,
        *,
        identity: str,
        additional_claims: dict[str, Any] | None = None,
        expires_delta: timedelta | None = None,
    ) -> str:
        claims = dict(additional_claims or {})
        token = cast(
            str,
            _create_access(
                identity=identity,
                additional_claims=claims,
                expires_delta=expires_delta,
                fresh=False,
            ),
        )

        # A caller-supplied jti must survive encoding untouched.
        if "jti" in claims and self.decode(token)["jti"] != claims["jti"]:
            raise RuntimeError("Access token jti mismatch after creation.")

        return token

    def decode(self, token: str) -> dict[str, Any]:
        return cast(dict[str, Any], _decode(token))
