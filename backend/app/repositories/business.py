"""Business repository."""

from __future__ import annotations

from app.models.business import Business
from app.repositories.base import BaseRepository


class BusinessRepository(BaseRepository[Business]):
    model = Business

    def _sortable_fields(self):
        return {"name": Business.name, "city": Business.city, "created_at": Business.created_at}

    def _default_sort(self) -> list[str]:
        return ["name"]

    def _filterable_fields(self):
        return {
            "id": Business.id,
            "name": Business.name,
            "is_active": Business.is_active,
            "city": Business.city,
        }

    def list_active(self) -> list[Business]:
        return self.list(filters={"is_active": True})
