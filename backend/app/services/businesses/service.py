"""Business directory use-cases."""

from __future__ import annotations

from app.models.base import as_aware_utc
from app.models.business import Business
from app.services._shared.base import BaseService
from app.services._shared.errors import NotFoundError

from .dto import BusinessCreateIn, BusinessOut, BusinessUpdateIn


def _to_out(row: Business) -> BusinessOut:
    return BusinessOut(
        id=row.id,
        name=row.name,
        address=row.address,
        city=row.city,
        state=row.state,
        zip_code=row.zip_code,
        contact_email=row.contact_email,
        contact_phone=row.contact_phone,
        contact_person=row.contact_person,
        is_active=row.is_active,
        created_at=as_aware_utc(row.created_at),
    )


def _apply_update(row: Business, dto: BusinessUpdateIn) -> None:
    """Overwrite each field the update supplies; ``None`` leaves it alone."""
    if dto.name is not None:
        row.name = dto.name
    if dto.address is not None:
        row.address = dto.address
    if dto.city is not None:
        row.city = dto.city
    if dto.state is not None:
        row.state = dto.state
    if dto.zip_code is not None:
        row.zip_code = dto.zip_code
    if dto.contact_email is not None:
        row.contact_email = dto.contact_email
    if dto.contact_phone is not None:
        row.contact_phone = dto.contact_phone
    if dto.contact_person is not None:
        row.contact_person = dto.contact_person
    if dto.is_active is not None:
        row.is_active = dto.is_active


class BusinessService(BaseService):
    """CRUD over :class:`Business`."""

    def create_business(self, dto: BusinessCreateIn) -> BusinessOut:
        row = Business(
            name=dto.name,
            address=dto.address,
            city=dto.city,
            state=dto.state,
            zip_code=dto.zip_code,
            contact_email=dto.contact_email,
            contact_phone=dto.contact_phone,
            contact_person=dto.contact_person,
            is_active=dto.is_active,
        )
        with self.rw_uow() as uow:
            uow.businesses.add(row)
            uow.session.refresh(row)
            return _to_out(row)

    def get_business(self, business_id: int) -> BusinessOut:
        """
        Fetch a business by id.

        :raises NotFoundError: If it does not exist.
        """
        with self.ro_uow() as uow:
            row = uow.businesses.get(business_id)
            if row is None:
                raise NotFoundError("Business", business_id)
            return _to_out(row)

    def list_businesses(self) -> list[BusinessOut]:
        with self.ro_uow() as uow:
            return [_to_out(r) for r in uow.businesses.list()]

    def list_active_businesses(self) -> list[BusinessOut]:
        with self.ro_uow() as uow:
            return [_to_out(r) for r in uow.businesses.list_active()]

    def update_business(self, business_id: int, dto: BusinessUpdateIn) -> BusinessOut:
        """
        Merge the supplied fields into the business.

        :raises NotFoundError: If it does not exist.
        """
        with self.rw_uow() as uow:
            row = uow.businesses.get_for_update(business_id)
            if row is None:
                raise NotFoundError("Business", business_id)
            _apply_update(row, dto)
            uow.businesses.flush()
            return _to_out(row)

    def delete_business(self, business_id: int) -> bool:
        with self.rw_uow() as uow:
            row = uow.businesses.get_for_update(business_id)
            if row is None:
                return False
            uow.businesses.delete(row)
        return True
