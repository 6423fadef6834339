# app/services/service_requests/service.py
from __future__ import annotations

import logging

from app.models.service_request import ServiceRequest
from app.services._shared.base import BaseService
from app.services._shared.errors import InvalidReferenceError, NotFoundError

from ._converters import apply_update, service_request_to_out
from .dto import ServiceRequestCreateIn, ServiceRequestOut, ServiceRequestUpdateIn
from .lifecycle import RequestStatus, derive_status

log = logging.getLogger(__name__)


class ServiceRequestService(BaseService):
    """
    Use-cases for service requests.

    Writes validate every foreign reference before touching the row, so a
    rejected command leaves the database exactly as it was.
    """

    # ------------------------------------------------------------------ #
    # Commands
    # ------------------------------------------------------------------ #

    def create_request(self, dto: ServiceRequestCreateIn) -> ServiceRequestOut:
        """
        Open a new request in ``Pending`` status.

        :param dto: Creation input.
        :returns: Created request.
        :raises InvalidReferenceError: Business missing (checked first), or
            service missing.
        """
        with self.rw_uow() as uow:
            if not uow.businesses.exists(id=dto.business_id):
                raise InvalidReferenceError("Business", dto.business_id)
            if not uow.services.exists(id=dto.service_id):
                raise InvalidReferenceError("Service", dto.service_id)

            row = uow.service_requests.add(
                ServiceRequest(
                    business_id=dto.business_id,
                    service_id=dto.service_id,
                    status=RequestStatus.PENDING.value,
                    requested_date=dto.requested_date,
                    scheduled_date=dto.scheduled_date,
                    description=dto.description,
                    notes=dto.notes,
                    estimated_cost=dto.estimated_cost,
                )
            )
            uow.session.refresh(row)
            out = service_request_to_out(row)

        log.info(
            "service_request.created",
            extra={"event": "service_request.created", "request_ref": out.id},
        )
        return out

    def update_request(self, request_id: int, dto: ServiceRequestUpdateIn) -> ServiceRequestOut:
        """
        Apply a partial update and derive the resulting status.

        :param request_id: Request to update.
        :param dto: Partial update.
        :returns: Updated request.
        :raises NotFoundError: If the request does not exist.
        :raises InvalidReferenceError: If ``employee_id`` points nowhere; no
            field is changed in that case.
        :raises ServiceError: If ``status`` is not a known status.
        """
        with self.rw_uow() as uow:
            row = uow.service_requests.get_for_update(request_id)
            if row is None:
                raise NotFoundError("ServiceRequest", request_id)
            if dto.employee_id is not None and not uow.employees.exists(id=dto.employee_id):
                raise InvalidReferenceError("Employee", dto.employee_id)
            if dto.status is not None:
                RequestStatus.parse(dto.status)

            previous = row.status
            apply_update(row, dto)
            row.status = derive_status(
                row.status,
                completed_date=dto.completed_date,
                employee_id=dto.employee_id,
            ).value
            uow.service_requests.flush()
            uow.session.refresh(row)
            out = service_request_to_out(row)

        if out.status != previous:
            log.info(
                "service_request.status_changed",
                extra={
                    "event": "service_request.status_changed",
                    "request_ref": out.id,
                    "status": out.status,
                },
            )
        return out

    def delete_request(self, request_id: int) -> bool:
        """Delete a request; ``False`` when it does not exist."""
        with self.rw_uow() as uow:
            row = uow.service_requests.get_for_update(request_id)
            if row is None:
                return False
            uow.service_requests.delete(row)
        return True

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def get_request(self, request_id: int) -> ServiceRequestOut:
        """
        Fetch one request with business, service and employee names.

        :raises NotFoundError: If it does not exist.
        """
        with self.ro_uow() as uow:
            row = uow.service_requests.get(request_id)
            if row is None:
                raise NotFoundError("ServiceRequest", request_id)
            return service_request_to_out(row)

    def list_requests(self) -> list[ServiceRequestOut]:
        with self.ro_uow() as uow:
            return [service_request_to_out(r) for r in uow.service_requests.list()]

    def list_by_business(self, business_id: int) -> list[ServiceRequestOut]:
        with self.ro_uow() as uow:
            rows = uow.service_requests.list_by_business(business_id)
            return [service_request_to_out(r) for r in rows]

    def list_by_employee(self, employee_id: int) -> list[ServiceRequestOut]:
        with self.ro_uow() as uow:
            rows = uow.service_requests.list_by_employee(employee_id)
            return [service_request_to_out(r) for r in rows]

    def list_by_status(self, status: str) -> list[ServiceRequestOut]:
        """
        List requests in ``status``.

        :raises ServiceError: If ``status`` is not a known status.
        """
        parsed = RequestStatus.parse(status)
        with self.ro_uow() as uow:
            rows = uow.service_requests.list_by_status(parsed.value)
            return [service_request_to_out(r) for r in rows]
