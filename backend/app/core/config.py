"""Application settings with environment-based simple classes."""

from __future__ import annotations

import os
from collections.abc import Mapping
from datetime import timedelta
from typing import Any, Final

from dotenv import load_dotenv

# Public selector env var
ENV_VAR: Final[str] = "APP_ENV"  # 'development' | 'testing' | 'production'

# Settings without which the API cannot issue or validate tokens
REQUIRED_SETTINGS: Final[tuple[str, ...]] = ("JWT_SECRET_KEY", "JWT_ISSUER", "JWT_AUDIENCE")


load_dotenv()


def env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean flag from an environment variable.

    Parameters
    ----------
    name: str
        Environment variable to inspect.
    default: bool, optional
        Value returned when the variable is unset. Defaults to ``False``.

    Returns
    -------
    bool
        ``True`` if the value resembles ``{"1", "true", "yes", "y", "on"}``
        ignoring case; otherwise ``False`` or ``default`` when missing.
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


def env_int(name: str, default: int) -> int:
    """Parse an integer from an environment variable, falling back to ``default``."""
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    return int(val)


class BaseConfig:
    """Base configuration shared across environments.

    Attributes
    ----------
    API_BASE_PREFIX: str
        Root path for registering API blueprints.
    JWT_SECRET_KEY: str | None
        Symmetric key used to sign access tokens (HS256). Required.
    JWT_ISSUER: str | None
        ``iss`` claim written on issue and enforced on decode. Required.
    JWT_AUDIENCE: str | None
        ``aud`` claim written on issue and enforced on decode. Required.
    JWT_ACCESS_TOKEN_EXPIRES: timedelta
        Access token lifetime (one hour).
    REFRESH_TOKEN_EXPIRES: timedelta
        Refresh token lifetime (seven days).
    REFRESH_TOKEN_BYTES: int
        Raw entropy of an opaque refresh token before base64 encoding.
    DEFAULT_ROLE: str
        Role granted at registration when the caller does not ask for one.
    SQLALCHEMY_DATABASE_URI: str
        Database connection string consumed by SQLAlchemy.
    LOG_LEVEL: str
        Root logging verbosity (``INFO`` by default).
    CORS_ORIGINS: str
        Comma-separated list of allowed origins for CORS.

    Notes
    -----
    Values are primarily sourced from environment variables, enabling
    configuration without code changes. The base class ships no default for
    the token settings so a misconfigured deployment fails at startup.
    """

    API_BASE_PREFIX = "/api"

    SECRET_KEY = os.getenv("SECRET_KEY")

    # Token issuance
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY")
    JWT_ISSUER = os.getenv("JWT_ISSUER")
    JWT_AUDIENCE = os.getenv("JWT_AUDIENCE")
    JWT_ALGORITHM = "HS256"
    JWT_TOKEN_LOCATION = ["headers"]
    JWT_DECODE_LEEWAY = 0
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(seconds=env_int("JWT_ACCESS_TOKEN_EXPIRES_SECONDS", 3600))
    REFRESH_TOKEN_EXPIRES = timedelta(seconds=env_int("REFRESH_TOKEN_EXPIRES_SECONDS", 604800))
    REFRESH_TOKEN_BYTES = 64
    DEFAULT_ROLE = "User"

    # DB
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///./dev.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = env_bool("SQLALCHEMY_ECHO", False)

    # Flask & JSON
    JSON_SORT_KEYS = False
    PROPAGATE_EXCEPTIONS = False

    # Logging & CORS
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173")

    DEBUG = False
    TESTING = False


class DevelopmentConfig(BaseConfig):
    """Configuration tailored for local development.

    Notes
    -----
    Supplies throwaway token settings so ``flask run`` works without a
    ``.env`` file. Never reuse these values outside a laptop.
    """

    DEBUG = env_bool("FLASK_DEBUG", True)
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "dev-jwt-secret-change-me-0123456789abcdef")
    JWT_ISSUER = os.getenv("JWT_ISSUER", "servicedesk-dev")
    JWT_AUDIENCE = os.getenv("JWT_AUDIENCE", "servicedesk-clients")
    CORS_MAX_AGE = 600  # 10 minutes


class TestingConfig(BaseConfig):
    """Configuration for automated test runs.

    Notes
    -----
    - Forces ``TESTING`` mode with fixed token settings.
    - Uses an in-memory SQLite database unless ``TEST_DATABASE_URL`` is set.
    - Propagates exceptions so pytest can surface tracebacks directly.
    """

    TESTING = True
    DEBUG = False
    SECRET_KEY = "test-secret"
    JWT_SECRET_KEY = "test-jwt-secret-with-enough-length-for-hs256"
    JWT_ISSUER = "servicedesk-test"
    JWT_AUDIENCE = "servicedesk-test-clients"
    SQLALCHEMY_DATABASE_URI = os.getenv("TEST_DATABASE_URL", "sqlite:///:memory:")
    SQLALCHEMY_ECHO = env_bool("SQLALCHEMY_ECHO", False)
    PROPAGATE_EXCEPTIONS = True


class ProductionConfig(BaseConfig):
    """Configuration defaults for production deployments."""

    DEBUG = False
    SQLALCHEMY_ECHO = False
    PROPAGATE_EXCEPTIONS = False


CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config(name: str | None = None) -> type[BaseConfig]:
    """Return the configuration class for ``name`` or, by default, ``APP_ENV``.

    Falls back to :class:`DevelopmentConfig` when the name is unset or
    unknown.
    """
    name = (name or os.getenv(ENV_VAR, "development")).strip().lower()
    return CONFIG_MAP.get(name, DevelopmentConfig)


def validate_required_settings(config: Mapping[str, Any]) -> None:
    """Fail fast when a required setting is missing or blank.

    :param config: Loaded Flask config mapping.
    :raises RuntimeError: Listing every missing key.
    """
    missing = [key for key in REQUIRED_SETTINGS if not str(config.get(key) or "").strip()]
    if missing:
        raise RuntimeError(f"Missing required configuration: {', '.join(missing)}")
