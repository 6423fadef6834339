"""Service catalog use-cases."""

from __future__ import annotations

from app.models.service import Service
from app.services._shared.base import BaseService
from app.services._shared.errors import NotFoundError, ServiceError

from .dto import CatalogEntryCreateIn, CatalogEntryOut, CatalogEntryUpdateIn


def _to_out(row: Service) -> CatalogEntryOut:
    return CatalogEntryOut(
        id=row.id,
        name=row.name,
        description=row.description,
        base_price=row.base_price,
        is_active=row.is_active,
    )


def _check_price(price) -> None:
    if price is not None and price < 0:
        raise ServiceError("base_price must be zero or positive.")


def _apply_update(row: Service, dto: CatalogEntryUpdateIn) -> None:
    if dto.name is not None:
        row.name = dto.name
    if dto.base_price is not None:
        row.base_price = dto.base_price
    if dto.description is not None:
        row.description = dto.description
    if dto.is_active is not None:
        row.is_active = dto.is_active


class CatalogService(BaseService):
    """CRUD over the :class:`Service` catalog."""

    def create_service(self, dto: CatalogEntryCreateIn) -> CatalogEntryOut:
        _check_price(dto.base_price)
        row = Service(
            name=dto.name,
            base_price=dto.base_price,
            description=dto.description,
            is_active=dto.is_active,
        )
        with self.rw_uow() as uow:
            uow.services.add(row)
            uow.session.refresh(row)
            return _to_out(row)

    def get_service(self, service_id: int) -> CatalogEntryOut:
        """
        Fetch a catalog entry.

        :raises NotFoundError: If it does not exist.
        """
        with self.ro_uow() as uow:
            row = uow.services.get(service_id)
            if row is None:
                raise NotFoundError("Service", service_id)
            return _to_out(row)

    def list_services(self) -> list[CatalogEntryOut]:
        with self.ro_uow() as uow:
            return [_to_out(r) for r in uow.services.list()]

    def list_active_services(self) -> list[CatalogEntryOut]:
        with self.ro_uow() as uow:
            return [_to_out(r) for r in uow.services.list_active()]

    def update_service(self, service_id: int, dto: CatalogEntryUpdateIn) -> CatalogEntryOut:
        _check_price(dto.base_price)
        with self.rw_uow() as uow:
            row = uow.services.get_for_update(service_id)
            if row is None:
                raise NotFoundError("Service", service_id)
            _apply_update(row, dto)
            uow.services.flush()
            uow.session.refresh(row)
            return _to_out(row)

    def delete_service(self, service_id: int) -> bool:
        with self.rw_uow() as uow:
            row = uow.services.get_for_update(service_id)
            if row is None:
                return False
            uow.services.delete(row)
        return True
