"""Employee endpoints."""

from __future__ import annotations

from flask import Blueprint

from app.api.deps import json_response, load_json, require_policy, timing
from app.core.errors import NotFound
from app.schemas import EmployeeCreateSchema, EmployeeSchema, EmployeeUpdateSchema
from app.services._shared.policies.roles import EMPLOYEE, MANAGER
from app.services.employees.dto import EmployeeCreateIn, EmployeeUpdateIn
from app.services.employees.service import EmployeeService

bp = Blueprint("employees", __name__)

employee_schema = EmployeeSchema()
employee_list_schema = EmployeeSchema(many=True)
employee_create_schema = EmployeeCreateSchema()
employee_update_schema = EmployeeUpdateSchema()


def _service() -> EmployeeService:
    return EmployeeService()


@bp.get("")
@require_policy(EMPLOYEE)
@timing
def list_employees():
    return json_response({"data": employee_list_schema.dump(_service().list_employees())})


@bp.get("/<int:employee_id>")
@require_policy(EMPLOYEE)
@timing
def get_employee(employee_id: int):
    return json_response({"data": employee_schema.dump(_service().get_employee(employee_id))})


@bp.get("/specialization/<string:specialization>")
@require_policy(EMPLOYEE)
@timing
def list_by_specialization(specialization: str):
    """List employees of a trade, case-insensitively."""

    items = _service().list_by_specialization(specialization)
    return json_response({"data": employee_list_schema.dump(items)})


@bp.post("")
@require_policy(MANAGER)
@timing
def create_employee():
    payload = load_json(employee_create_schema)
    employee = _service().create_employee(EmployeeCreateIn(**payload))
    return json_response({"data": employee_schema.dump(employee)}, status=201)


@bp.put("/<int:employee_id>")
@require_policy(MANAGER)
@timing
def update_employee(employee_id: int):
    payload = load_json(employee_update_schema)
    employee = _service().update_employee(employee_id, EmployeeUpdateIn(**payload))
    return json_response({"data": employee_schema.dump(employee)})


@bp.delete("/<int:employee_id>")
@require_policy(MANAGER)
@timing
def delete_employee(employee_id: int):
    if not _service().delete_employee(employee_id):
        raise NotFound(f"Employee with id {employee_id} was not found")
    return "", 204
