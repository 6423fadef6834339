"""Role-based authorization policies.

A policy names the set of roles allowed through. Roles come from the
``roles`` claim of the access token, so a role granted mid-session only
counts after the next login or refresh.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Final

ADMIN: Final[str] = "Admin"
MANAGER: Final[str] = "Manager"
EMPLOYEE: Final[str] = "Employee"
USER: Final[str] = "User"

POLICIES: Final[Mapping[str, frozenset[str]]] = {
    ADMIN: frozenset({ADMIN}),
    MANAGER: frozenset({ADMIN, MANAGER}),
    EMPLOYEE: frozenset({ADMIN, MANAGER, EMPLOYEE}),
    USER: frozenset({ADMIN, MANAGER, EMPLOYEE, USER}),
}

BUILTIN_ROLES: Final[tuple[str, ...]] = (ADMIN, MANAGER, EMPLOYEE, USER)


def satisfies(policy: str, roles: Iterable[str]) -> bool:
    """
    Tell whether any of ``roles`` is accepted by ``policy``.

    :param policy: Policy name (``"Admin"``, ``"Manager"``, ``"Employee"``, ``"User"``).
    :type policy: str
    :param roles: Role names held by the actor.
    :type roles: Iterable[str]
    :returns: ``True`` when at least one role is in the policy's set.
    :rtype: bool
    :raises KeyError: If ``policy`` is unknown.
    """
    allowed = POLICIES[policy]
    return any(role in allowed for role in roles)
