# tests/unit/services/test_token_issuer.py
from __future__ import annotations

import base64
from datetime import UTC, datetime, timedelta

from app.models.user import User
from app.services._shared.ports.token_provider import StubTokenProvider
from app.services.auth.dto import AuthTokenConfig
from app.services.auth.tokens import TokenIssuer
from freezegun import freeze_time

NOW = datetime(2026, 1, 15, 10, 0, tzinfo=UTC)


def _account() -> User:
    user = User(email="tech@example.com", username="tech@example.com", first_name="T", last_name="K")
    user.id = 42
    return user


def test_access_token_claims_and_expiry():
    provider = StubTokenProvider()
    issuer = TokenIssuer(provider, AuthTokenConfig())

    with freeze_time(NOW):
        issued = issuer.issue_access_token(_account(), ["Employee", "User"])

    claims = provider.decode(issued.token)
    assert claims["sub"] == "42"
    assert claims["username"] == "tech@example.com"
    assert claims["email"] == "tech@example.com"
    assert claims["roles"] == ["Employee", "User"]
    assert issued.expires_at == NOW + timedelta(hours=1)


def test_each_access_token_has_its_own_jti():
    provider = StubTokenProvider()
    issuer = TokenIssuer(provider, AuthTokenConfig())

    a = issuer.issue_access_token(_account(), [])
    b = issuer.issue_access_token(_account(), [])

    assert provider.decode(a.token)["jti"] != provider.decode(b.token)["jti"]


def test_access_expiry_is_read_back_from_the_signed_token():
    provider = StubTokenProvider()
    issuer = TokenIssuer(provider, AuthTokenConfig(access_expires=timedelta(minutes=15)))

    with freeze_time(NOW + timedelta(milliseconds=750)):
        issued = issuer.issue_access_token(_account(), ["User"])

    exp = provider.decode(issued.token)["exp"]
    assert issued.expires_at == datetime.fromtimestamp(exp, tz=UTC)
    assert issued.expires_at == NOW + timedelta(minutes=15)


def test_refresh_token_is_random_base64_with_seven_day_expiry():
    issuer = TokenIssuer(StubTokenProvider(), AuthTokenConfig())

    first = issuer.issue_refresh_token(now=NOW)
    second = issuer.issue_refresh_token(now=NOW)

    assert len(base64.b64decode(first.token)) == 64
    assert first.token != second.token
    assert first.expires_at == NOW + timedelta(days=7)


def test_config_from_mapping_keeps_defaults_for_absent_keys():
    cfg = AuthTokenConfig.from_mapping(
        {"REFRESH_TOKEN_BYTES": "32", "JWT_ACCESS_TOKEN_EXPIRES": timedelta(minutes=5)}
    )

    assert cfg.refresh_token_bytes == 32
    assert cfg.access_expires == timedelta(minutes=5)
    assert cfg.refresh_expires == timedelta(days=7)
    assert cfg.default_role == "User"
