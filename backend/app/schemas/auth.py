"""Authentication-related Marshmallow schemas."""

from __future__ import annotations

from typing import Any

from marshmallow import Schema, ValidationError, fields, validate, validates

from app.core.passwords import check_password_policy


class RegisterSchema(Schema):
    """Input payload for account registration."""

    email = fields.Email(required=True, validate=validate.Length(max=254))
    password = fields.String(required=True, validate=validate.Length(max=128))
    first_name = fields.String(required=True, validate=validate.Length(min=1, max=100))
    last_name = fields.String(required=True, validate=validate.Length(min=1, max=100))
    role = fields.String(load_default=None, validate=validate.Length(min=1, max=50))

    @validates("password")
    def _password_policy(self, value: str, **_: Any) -> None:
        problems = check_password_policy(value)
        if problems:
            raise ValidationError(problems)


class LoginSchema(Schema):
    """Input payload for authenticating an account."""

    email = fields.Email(required=True, validate=validate.Length(max=254))
    password = fields.String(required=True, validate=validate.Length(min=1, max=128))


class RefreshTokenSchema(Schema):
    """Refresh token carried by refresh and logout calls."""

    refresh_token = fields.String(required=True, validate=validate.Length(min=1, max=128))


class AccountProfileSchema(Schema):
    id = fields.Integer(required=True)
    first_name = fields.String(required=True)
    last_name = fields.String(required=True)
    email = fields.Email(required=True)
    username = fields.String(required=True)
    is_active = fields.Boolean(required=True)
    roles = fields.List(fields.String(), required=True)


class SessionSchema(Schema):
    """Response payload for login, register and refresh."""

    access_token = fields.String(required=True)
    refresh_token = fields.String(required=True)
    token_type = fields.String(required=True)
    access_expires_at = fields.DateTime(required=True)
    account = fields.Nested(AccountProfileSchema, required=True)
