"""Service request resource schemas."""

from __future__ import annotations

from marshmallow import Schema, fields, validate

from app.services.service_requests.lifecycle import RequestStatus

_COST_RANGE = validate.Range(min=0)


class ServiceRequestCreateSchema(Schema):
    """Payload to open a request; the status always starts as ``Pending``."""

    business_id = fields.Integer(required=True, strict=True)
    service_id = fields.Integer(required=True, strict=True)
    requested_date = fields.DateTime(required=True)
    scheduled_date = fields.DateTime(load_default=None)
    description = fields.String(load_default=None)
    notes = fields.String(load_default=None)
    estimated_cost = fields.Decimal(places=2, load_default=None, validate=_COST_RANGE)


class ServiceRequestUpdateSchema(Schema):
    """
    Partial update payload.

    ``status`` is checked against the known statuses here so that clients get
    a 422 with the field name instead of a generic 400.
    """

    employee_id = fields.Integer(strict=True)
    status = fields.String(validate=validate.OneOf([s.value for s in RequestStatus]))
    scheduled_date = fields.DateTime()
    completed_date = fields.DateTime()
    description = fields.String()
    notes = fields.String()
    estimated_cost = fields.Decimal(places=2, validate=_COST_RANGE)
    actual_cost = fields.Decimal(places=2, validate=_COST_RANGE)


class ServiceRequestSchema(Schema):
    id = fields.Integer(required=True)
    business_id = fields.Integer(required=True)
    business_name = fields.String(required=True)
    service_id = fields.Integer(required=True)
    service_name = fields.String(required=True)
    employee_id = fields.Integer(allow_none=True)
    employee_name = fields.String(allow_none=True)
    status = fields.String(required=True)
    requested_date = fields.DateTime(required=True)
    scheduled_date = fields.DateTime(allow_none=True)
    completed_date = fields.DateTime(allow_none=True)
    description = fields.String(allow_none=True)
    notes = fields.String(allow_none=True)
    estimated_cost = fields.Decimal(places=2, as_string=True, allow_none=True)
    actual_cost = fields.Decimal(places=2, as_string=True, allow_none=True)
    created_at = fields.DateTime(allow_none=True)
    updated_at = fields.DateTime(allow_none=True)
