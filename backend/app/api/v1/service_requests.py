"""Service request endpoints."""

from __future__ import annotations

from flask import Blueprint

from app.api.deps import json_response, load_json, require_policy, timing
from app.core.errors import NotFound
from app.schemas import (
    ServiceRequestCreateSchema,
    ServiceRequestSchema,
    ServiceRequestUpdateSchema,
)
from app.services._shared.policies.roles import USER
from app.services.service_requests.dto import ServiceRequestCreateIn, ServiceRequestUpdateIn
from app.services.service_requests.service import ServiceRequestService

bp = Blueprint("service_requests", __name__)

request_schema = ServiceRequestSchema()
request_list_schema = ServiceRequestSchema(many=True)
request_create_schema = ServiceRequestCreateSchema()
request_update_schema = ServiceRequestUpdateSchema()


def _service() -> ServiceRequestService:
    return ServiceRequestService()


def _list(items):
    return json_response({"data": request_list_schema.dump(items)})


@bp.get("")
@require_policy(USER)
@timing
def list_requests():
    return _list(_service().list_requests())


@bp.get("/<int:request_id>")
@require_policy(USER)
@timing
def get_request(request_id: int):
    return json_response({"data": request_schema.dump(_service().get_request(request_id))})


@bp.get("/business/<int:business_id>")
@require_policy(USER)
@timing
def list_by_business(business_id: int):
    return _list(_service().list_by_business(business_id))


@bp.get("/employee/<int:employee_id>")
@require_policy(USER)
@timing
def list_by_employee(employee_id: int):
    return _list(_service().list_by_employee(employee_id))


@bp.get("/status/<string:status>")
@require_policy(USER)
@timing
def list_by_status(status: str):
    return _list(_service().list_by_status(status))


@bp.post("")
@timing
def create_request():
    """Open a request; businesses may submit without an account."""

    payload = load_json(request_create_schema)
    created = _service().create_request(ServiceRequestCreateIn(**payload))
    return json_response({"data": request_schema.dump(created)}, status=201)


@bp.put("/<int:request_id>")
@require_policy(USER)
@timing
def update_request(request_id: int):
    """Apply a partial update; the status may be derived from the changes."""

    payload = load_json(request_update_schema)
    updated = _service().update_request(request_id, ServiceRequestUpdateIn(**payload))
    return json_response({"data": request_schema.dump(updated)})


@bp.delete("/<int:request_id>")
@require_policy(USER)
@timing
def delete_request(request_id: int):
    if not _service().delete_request(request_id):
        raise NotFound(f"ServiceRequest with id {request_id} was not found")
    return "", 204
