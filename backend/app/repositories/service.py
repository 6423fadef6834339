"""Repository for the catalog of offered services."""

from __future__ import annotations

from app.models.service import Service
from app.repositories.base import BaseRepository


class ServiceRepository(BaseRepository[Service]):
    model = Service

    def _sortable_fields(self):
        return {"name": Service.name, "base_price": Service.base_price}

    def _default_sort(self) -> list[str]:
        return ["name"]

    def _filterable_fields(self):
        return {"id": Service.id, "name": Service.name, "is_active": Service.is_active}

    def list_active(self) -> list[Service]:
        return self.list(filters={"is_active": True})
