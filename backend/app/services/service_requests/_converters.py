from __future__ import annotations

from app.models.base import as_aware_utc
from app.models.service_request import ServiceRequest

from .dto import ServiceRequestOut, ServiceRequestUpdateIn

def apply_update(row: ServiceRequest, dto: ServiceRequestUpdateIn) -> None:
    """Overwrite each field the update supplies; absent (``None``) fields stay.

    The status written here is only the explicit one; the service derives the
    final status afterwards.
    """
    if dto.employee_id is not None:
        row.employee_id = dto.employee_id
    if dto.status is not None:
        row.status = dto.status
    if dto.scheduled_date is not None:
        row.scheduled_date = dto.scheduled_date
    if dto.completed_date is not None:
        row.completed_date = dto.completed_date
    if dto.description is not None:
        row.description = dto.description
    if dto.notes is not None:
        row.notes = dto.notes
    if dto.estimated_cost is not None:
        row.estimated_cost = dto.estimated_cost
    if dto.actual_cost is not None:
        row.actual_cost = dto.actual_cost


def service_request_to_out(row: ServiceRequest) -> ServiceRequestOut:
    employee = row.employee
    return ServiceRequestOut(
        id=row.id,
        business_id=row.business_id,
        business_name=row.business.name if row.business else "",
        service_id=row.service_id,
        service_name=row.service.name if row.service else "",
        employee_id=row.employee_id,
        employee_name=employee.full_name if employee else None,
        status=row.status,
        requested_date=as_aware_utc(row.requested_date),
        scheduled_date=as_aware_utc(row.scheduled_date),
        completed_date=as_aware_utc(row.completed_date),
        description=row.description,
        notes=row.notes,
        estimated_cost=row.estimated_cost,
        actual_cost=row.actual_cost,
        created_at=as_aware_utc(row.created_at),
        updated_at=as_aware_utc(row.updated_at),
    )
