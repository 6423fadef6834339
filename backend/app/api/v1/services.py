"""Endpoints for the catalog of offered services."""

from __future__ import annotations

from flask import Blueprint

from app.api.deps import json_response, load_json, require_policy, timing
from app.core.errors import NotFound
from app.schemas import CatalogEntryCreateSchema, CatalogEntrySchema, CatalogEntryUpdateSchema
from app.services._shared.policies.roles import MANAGER
from app.services.catalog.dto import CatalogEntryCreateIn, CatalogEntryUpdateIn
from app.services.catalog.service import CatalogService

bp = Blueprint("services", __name__)

entry_schema = CatalogEntrySchema()
entry_list_schema = CatalogEntrySchema(many=True)
entry_create_schema = CatalogEntryCreateSchema()
entry_update_schema = CatalogEntryUpdateSchema()


def _service() -> CatalogService:
    return CatalogService()


@bp.get("")
@timing
def list_services():
    return json_response({"data": entry_list_schema.dump(_service().list_services())})


@bp.get("/active")
@timing
def list_active_services():
    return json_response({"data": entry_list_schema.dump(_service().list_active_services())})


@bp.get("/<int:service_id>")
@timing
def get_service(service_id: int):
    return json_response({"data": entry_schema.dump(_service().get_service(service_id))})


@bp.post("")
@require_policy(MANAGER)
@timing
def create_service():
    payload = load_json(entry_create_schema)
    entry = _service().create_service(CatalogEntryCreateIn(**payload))
    return json_response({"data": entry_schema.dump(entry)}, status=201)


@bp.put("/<int:service_id>")
@require_policy(MANAGER)
@timing
def update_service(service_id: int):
    payload = load_json(entry_update_schema)
    entry = _service().update_service(service_id, CatalogEntryUpdateIn(**payload))
    return json_response({"data": entry_schema.dump(entry)})


@bp.delete("/<int:service_id>")
@require_policy(MANAGER)
@timing
def delete_service(service_id: int):
    if not _service().delete_service(service_id):
        raise NotFound(f"Service with id {service_id} was not found")
    return "", 204
