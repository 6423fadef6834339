"""Role registry repository."""

from __future__ import annotations

from typing import cast

from sqlalchemy import select

from app.models.role import Role
from app.repositories.base import BaseRepository


class RoleRepository(BaseRepository[Role]):
    """Lookup and creation of named roles. Roles are never deleted here."""

    model = Role

    def _sortable_fields(self):
        return {"name": Role.name, "created_at": Role.created_at}

    def _default_sort(self) -> list[str]:
        return ["name"]

    def get_by_name(self, name: str) -> Role | None:
        """Fetch a role by exact name, or ``None``."""
        stmt = select(Role).where(Role.name == name.strip())
        return cast(Role | None, self.session.execute(stmt).scalars().first())

    def get_or_create(self, name: str) -> tuple[Role, bool]:
        """Return the role called ``name``, creating it when missing.

        New roles get the description ``"{name} role"``.

        :param name: Role name.
        :type name: str
        :returns: ``(role, created)``.
        :rtype: tuple[Role, bool]
        """
        role = self.get_by_name(name)
        if role is not None:
            return role, False
        role = self.add(Role(name=name, description=f"{name.strip()} role"))
        return role, True
