# app/services/service_requests/dto.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class ServiceRequestCreateIn:
    """
    Input DTO to open a service request.

    There is no status or completion date: a request always starts as
    ``Pending``.

    :param business_id: Requesting business.
    :type business_id: int
    :param service_id: Requested catalog service.
    :type service_id: int
    :param requested_date: When the business wants the work done.
    :type requested_date: datetime
    """

    business_id: int
    service_id: int
    requested_date: datetime
    scheduled_date: datetime | None = None
    description: str | None = None
    notes: str | None = None
    estimated_cost: Decimal | None = None


@dataclass(frozen=True, slots=True)
class ServiceRequestUpdateIn:
    """
    Partial update of a service request.

    ``None`` means "leave the field untouched"; fields cannot be cleared
    through this DTO.

    :param employee_id: Assign an employee (must exist).
    :type employee_id: int | None
    :param status: Explicit status, applied before the derived rules.
    :type status: str | None
    :param completed_date: Marks the request completed.
    :type completed_date: datetime | None
    """

    employee_id: int | None = None
    status: str | None = None
    scheduled_date: datetime | None = None
    completed_date: datetime | None = None
    description: str | None = None
    notes: str | None = None
    estimated_cost: Decimal | None = None
    actual_cost: Decimal | None = None


# --------------------------- Output DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class ServiceRequestOut:
    id: int
    business_id: int
    business_name: str
    service_id: int
    service_name: str
    employee_id: int | None
    employee_name: str | None
    status: str
    requested_date: datetime
    scheduled_date: datetime | None
    completed_date: datetime | None
    description: str | None
    notes: str | None
    estimated_cost: Decimal | None
    actual_cost: Decimal | None
    created_at: datetime | None
    updated_at: datetime | None
