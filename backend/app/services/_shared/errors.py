"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and never depend on Flask or
HTTP. They serve as stable contracts between repositories, domain logic and
application services.

The translation to HTTP responses (RFC 7807) is handled by
``app/core/errors.py``.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError


def violates(exc: IntegrityError, constraint_name: str) -> bool:
    """
    Check whether an IntegrityError originates from a specific constraint.

    PostgreSQL reports the constraint name; SQLite reports the offending
    ``table.column`` instead, so both spellings are accepted.

    Parameters
    ----------
    exc : IntegrityError
        The exception raised by SQLAlchemy during flush/commit.
    constraint_name : str
        The constraint name (e.g. ``'uq_users_email'``) or ``table.column``.

    Returns
    -------
    bool
        True if the IntegrityError matches the given constraint.
    """
    message = str(exc.orig).lower() if exc.orig else ""
    return constraint_name.lower() in message


# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Anything that is not a ``ServiceError`` reaching the boundary is treated
    as an unexpected failure.
    """


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


class AuthenticationError(ServiceError):
    """
    Raised when credentials or a refresh token cannot be accepted.

    The message is deliberately generic: callers must not learn whether the
    account is missing, inactive, or the password is wrong.
    """


class AuthorizationError(ServiceError):
    """Raised when the authenticated actor lacks the required role."""


@dataclass(slots=True)
class NotFoundError(ServiceError):
    """
    Raised when an entity is not found in the repository.

    :param entity: Entity name (e.g., "ServiceRequest").
    :type entity: str
    :param key: Identifier or search key.
    :type key: str | int
    """

    entity: str
    key: str | int

    def __str__(self) -> str:
        return f"{self.entity} not found: {self.key}"


@dataclass(slots=True)
class InvalidReferenceError(NotFoundError):
    """
    Raised when a command references a related record that does not exist.

    Unlike :class:`NotFoundError` the addressed resource itself exists; it is
    one of its foreign keys (business, service, employee) that is dangling.
    """

    def __str__(self) -> str:
        return f"{self.entity} with id {self.key} does not exist"


@dataclass(slots=True)
class ConflictError(ServiceError):
    """
    Raised when a unique constraint or business rule conflict occurs.

    :param entity: Entity name (e.g., "User").
    :type entity: str
    :param detail: Short human-readable explanation.
    :type detail: str
    """

    entity: str
    detail: str

    def __str__(self) -> str:
        return f"Conflict on {self.entity}: {self.detail}"
