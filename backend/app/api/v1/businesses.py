"""Business directory endpoints."""

from __future__ import annotations

from flask import Blueprint

from app.api.deps import json_response, load_json, require_policy, timing
from app.core.errors import NotFound
from app.schemas import BusinessCreateSchema, BusinessSchema, BusinessUpdateSchema
from app.services._shared.policies.roles import MANAGER
from app.services.businesses.dto import BusinessCreateIn, BusinessUpdateIn
from app.services.businesses.service import BusinessService

bp = Blueprint("businesses", __name__)

business_schema = BusinessSchema()
business_list_schema = BusinessSchema(many=True)
business_create_schema = BusinessCreateSchema()
business_update_schema = BusinessUpdateSchema()


def _service() -> BusinessService:
    return BusinessService()


@bp.get("")
@timing
def list_businesses():
    return json_response({"data": business_list_schema.dump(_service().list_businesses())})


@bp.get("/active")
@timing
def list_active_businesses():
    items = _service().list_active_businesses()
    return json_response({"data": business_list_schema.dump(items)})


@bp.get("/<int:business_id>")
@timing
def get_business(business_id: int):
    return json_response({"data": business_schema.dump(_service().get_business(business_id))})


@bp.post("")
@require_policy(MANAGER)
@timing
def create_business():
    """Register a customer business."""

    payload = load_json(business_create_schema)
    business = _service().create_business(BusinessCreateIn(**payload))
    return json_response({"data": business_schema.dump(business)}, status=201)


@bp.put("/<int:business_id>")
@require_policy(MANAGER)
@timing
def update_business(business_id: int):
    payload = load_json(business_update_schema)
    business = _service().update_business(business_id, BusinessUpdateIn(**payload))
    return json_response({"data": business_schema.dump(business)})


@bp.delete("/<int:business_id>")
@require_policy(MANAGER)
@timing
def delete_business(business_id: int):
    if not _service().delete_business(business_id):
        raise NotFound(f"Business with id {business_id} was not found")
    return "", 204
