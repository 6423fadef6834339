"""Global Flask extension instances and initialization helpers."""

from __future__ import annotations

from flask import Flask
from flask_jwt_extended import JWTManager
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import MetaData

from app.core.config import validate_required_settings

# Global naming convention for all constraints
convention = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=convention)

# Global singletons (import-safe)
db: SQLAlchemy = SQLAlchemy(session_options={"autoflush": False}, metadata=metadata)
migrate = Migrate(render_as_batch=True)
jwt = JWTManager()


def _configure_jwt(app: Flask) -> None:
    """Mirror issuer/audience into the encode and decode keys of flask-jwt-extended.

    The same value is written into issued tokens and enforced on incoming
    ones, so a token minted by another issuer or for another audience is
    rejected.
    """
    issuer = app.config["JWT_ISSUER"]
    audience = app.config["JWT_AUDIENCE"]
    app.config.setdefault("JWT_ENCODE_ISSUER", issuer)
    app.config.setdefault("JWT_DECODE_ISSUER", issuer)
    app.config.setdefault("JWT_ENCODE_AUDIENCE", audience)
    app.config.setdefault("JWT_DECODE_AUDIENCE", audience)
    app.config.setdefault("JWT_DECODE_LEEWAY", 0)


def init_app(app: Flask) -> None:
    """Initialize SQLAlchemy, migrations and JWT.

    Parameters
    ----------
    app: flask.Flask
        Application used to bind extension instances. This call imports the
        :mod:`app.models` package to ensure SQLAlchemy metadata is ready for
        migrations.

    Raises
    ------
    RuntimeError
        When the signing secret, issuer or audience is not configured.
    """
    validate_required_settings(app.config)

    db.init_app(app)

    # Ensure models are imported so Alembic sees metadata
    from app import models as _models  # noqa: F401

    migrate.init_app(app, db)

    _configure_jwt(app)
    jwt.init_app(app)
