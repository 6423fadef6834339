"""Status state machine of a service request."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from app.services._shared.errors import ServiceError


class RequestStatus(str, Enum):
    """Ordered set of statuses a service request moves through."""

    PENDING = "Pending"
    ASSIGNED = "Assigned"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"

    @classmethod
    def parse(cls, value: str | RequestStatus) -> RequestStatus:
        """
        Coerce a stored or submitted value into a :class:`RequestStatus`.

        :raises ServiceError: If ``value`` is not one of the known statuses.
        """
        try:
            return cls(value)
        except ValueError as exc:
            allowed = ", ".join(s.value for s in cls)
            raise ServiceError(f"Unknown status '{value}'. Expected one of: {allowed}.") from exc


def derive_status(
    current: str | RequestStatus,
    *,
    completed_date: datetime | None = None,
    employee_id: int | None = None,
) -> RequestStatus:
    """
    Compute the status after an update.

    ``current`` already holds any status the update set explicitly; the
    derived rules run afterwards and may override it:

    1. a completion date moves any non-completed request to ``Completed``;
    2. otherwise an employee assignment moves a ``Pending`` request to
       ``Assigned``;
    3. otherwise the status is left as is.

    :param current: Status after the plain field merge.
    :param completed_date: Completion date supplied by the update, if any.
    :param employee_id: Employee reference supplied by the update, if any.
    :returns: Resulting status.
    :rtype: RequestStatus
    """
    status = RequestStatus.parse(current)
    if completed_date is not None and status is not RequestStatus.COMPLETED:
        return RequestStatus.COMPLETED
    if employee_id is not None and status is RequestStatus.PENDING:
        return RequestStatus.ASSIGNED
    return status
