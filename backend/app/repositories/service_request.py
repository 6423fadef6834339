"""Service request repository with the listing queries used by the API."""

from __future__ import annotations

from typing import Any

from sqlalchemy import Select
from sqlalchemy.orm import joinedload

from app.models.service_request import ServiceRequest
from app.repositories.base import BaseRepository


class ServiceRequestRepository(BaseRepository[ServiceRequest]):
    """Persistence for :class:`ServiceRequest`.

    Business, service and employee are eager-loaded so responses can carry
    their display names without extra queries.
    """

    model = ServiceRequest

    def _default_eagerload(self, stmt: Select[Any]) -> Select[Any]:
        return stmt.options(
            joinedload(ServiceRequest.business),
            joinedload(ServiceRequest.service),
            joinedload(ServiceRequest.employee),
        )

    def _sortable_fields(self):
        return {
            "requested_date": ServiceRequest.requested_date,
            "scheduled_date": ServiceRequest.scheduled_date,
            "status": ServiceRequest.status,
        }

    def _default_sort(self) -> list[str]:
        return ["-requested_date"]

    def _filterable_fields(self):
        return {
            "business_id": ServiceRequest.business_id,
            "employee_id": ServiceRequest.employee_id,
            "service_id": ServiceRequest.service_id,
            "status": ServiceRequest.status,
        }

    def list_by_business(self, business_id: int) -> list[ServiceRequest]:
        return self.list(filters={"business_id": business_id})

    def list_by_employee(self, employee_id: int) -> list[ServiceRequest]:
        return self.list(filters={"employee_id": employee_id})

    def list_by_status(self, status: str) -> list[ServiceRequest]:
        return self.list(filters={"status": status})
