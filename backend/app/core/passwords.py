"""Password hashing, verification and policy checks.

Thin wrappers around :mod:`werkzeug.security` so models, schemas and the
CLI share one hashing scheme and one password policy.
"""

from __future__ import annotations

import functools
import re
from typing import Final

from werkzeug.security import check_password_hash, generate_password_hash

MIN_PASSWORD_LENGTH: Final[int] = 6

_POLICY_RULES: Final[tuple[tuple[re.Pattern[str], str], ...]] = (
    (re.compile(r"\d"), "Password must contain at least one digit."),
    (re.compile(r"[a-z]"), "Password must contain at least one lowercase letter."),
    (re.compile(r"[A-Z]"), "Password must contain at least one uppercase letter."),
)


def hash_password(raw: str) -> str:
    """
    Hash a plaintext password.

    :param raw: Plain text password.
    :type raw: str
    :returns: Salted hash string.
    :rtype: str
    :raises ValueError: If ``raw`` is empty or not a string.
    """
    if not isinstance(raw, str) or not raw:
        raise ValueError("Password must be a non-empty string.")
    return generate_password_hash(raw)


def verify_password(stored_hash: str | None, candidate: str) -> bool:
    """
    Compare ``candidate`` against ``stored_hash``.

    :param stored_hash: Hash persisted on the account (may be empty).
    :type stored_hash: str | None
    :param candidate: Plain text password supplied by the caller.
    :type candidate: str
    :returns: ``True`` only when the hash exists and matches.
    :rtype: bool
    """
    if not stored_hash or not isinstance(candidate, str):
        return False
    return bool(check_password_hash(stored_hash, candidate))


@functools.lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return generate_password_hash("no-account-behind-this-hash")


def verify_dummy_password(candidate: str) -> bool:
    """
    Run one full hash comparison that can never succeed.

    Called when there is no usable account so a rejected login costs the
    same time whether or not the email exists.

    :param candidate: Plain text password supplied by the caller.
    :type candidate: str
    :returns: Always ``False``.
    :rtype: bool
    """
    check_password_hash(_dummy_hash(), candidate if isinstance(candidate, str) else "")
    return False


def check_password_policy(raw: str) -> list[str]:
    """Return the list of policy violations for ``raw`` (empty when acceptable)."""
    problems: list[str] = []
    if len(raw) < MIN_PASSWORD_LENGTH:
        problems.append(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long.")
    problems.extend(message for pattern, message in _POLICY_RULES if not pattern.search(raw))
    return problems
