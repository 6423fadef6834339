"""Tests for the flask-jwt-extended token adapter."""

from datetime import timedelta

import jwt as pyjwt
import pytest
from app.infra.jwt.flask_jwt_token_provider import JWTTokenProvider


@pytest.fixture()
def provider(app):
    with app.app_context():
        yield JWTTokenProvider()


def test_round_trip_preserves_claims(app, provider):
    token = provider.create_access_token(
        identity="42",
        additional_claims={"jti": "fixed-jti", "roles": ["Manager"], "email": "m@example.com"},
    )

    claims = provider.decode(token)

    assert claims["sub"] == "42"
    assert claims["jti"] == "fixed-jti"
    assert claims["roles"] == ["Manager"]
    assert claims["iss"] == app.config["JWT_ISSUER"]
    assert claims["aud"] == app.config["JWT_AUDIENCE"]
    assert claims["exp"] - claims["iat"] == 3600


def test_custom_lifetime_is_honoured(provider):
    token = provider.create_access_token(identity="1", expires_delta=timedelta(minutes=5))
    claims = provider.decode(token)
    assert claims["exp"] - claims["iat"] == 300


def test_expired_token_fails_to_decode(provider):
    token = provider.create_access_token(identity="1", expires_delta=timedelta(seconds=-1))
    with pytest.raises(pyjwt.ExpiredSignatureError):
        provider.decode(token)


@pytest.mark.parametrize(
    "override, error",
    [
        ({"aud": "someone-else"}, pyjwt.InvalidAudienceError),
        ({"iss": "rogue-issuer"}, pyjwt.InvalidIssuerError),
    ],
)
def test_foreign_issuer_or_audience_is_rejected(provider, override, error):
    token = provider.create_access_token(identity="1", additional_claims=override)
    with pytest.raises(error):
        provider.decode(token)


def test_token_signed_with_another_secret_is_rejected(app, provider):
    forged = pyjwt.encode(
        {
            "sub": "1",
            "iss": app.config["JWT_ISSUER"],
            "aud": app.config["JWT_AUDIENCE"],
            "type": "access",
        },
        "not-the-configured-secret-but-long-enough",
        algorithm="HS256",
    )
    with pytest.raises(pyjwt.InvalidSignatureError):
        provider.decode(forged)
