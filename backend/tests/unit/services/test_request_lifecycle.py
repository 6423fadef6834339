# tests/unit/services/test_request_lifecycle.py
from __future__ import annotations

from datetime import UTC, datetime

import pytest
from app.services._shared.errors import ServiceError
from app.services.service_requests.lifecycle import RequestStatus, derive_status

DONE_AT = datetime(2026, 6, 1, 17, 30, tzinfo=UTC)


@pytest.mark.parametrize(
    "current",
    ["Pending", "Assigned", "InProgress", "Cancelled"],
)
def test_completion_date_completes_any_open_status(current):
    assert derive_status(current, completed_date=DONE_AT) is RequestStatus.COMPLETED


def test_completion_date_on_completed_request_keeps_completed():
    assert derive_status("Completed", completed_date=DONE_AT) is RequestStatus.COMPLETED


def test_employee_assigns_pending_request():
    assert derive_status("Pending", employee_id=7) is RequestStatus.ASSIGNED


@pytest.mark.parametrize("current", ["Assigned", "InProgress", "Completed", "Cancelled"])
def test_employee_leaves_non_pending_status_alone(current):
    assert derive_status(current, employee_id=7) is RequestStatus(current)


def test_completion_wins_over_assignment():
    out = derive_status("Pending", completed_date=DONE_AT, employee_id=7)
    assert out is RequestStatus.COMPLETED


def test_no_signal_keeps_status():
    assert derive_status("InProgress") is RequestStatus.IN_PROGRESS


def test_unknown_status_is_rejected():
    with pytest.raises(ServiceError):
        derive_status("Paused")


def test_parse_accepts_enum_and_value():
    assert RequestStatus.parse(RequestStatus.ASSIGNED) is RequestStatus.ASSIGNED
    assert RequestStatus.parse("InProgress") is RequestStatus.IN_PROGRESS
