"""Employee resource schemas."""

from __future__ import annotations

from marshmallow import Schema, fields, validate


class EmployeeCreateSchema(Schema):
    """Payload for hiring an employee."""

    first_name = fields.String(required=True, validate=validate.Length(min=1, max=100))
    last_name = fields.String(required=True, validate=validate.Length(min=1, max=100))
    email = fields.Email(required=True, validate=validate.Length(max=254))
    phone = fields.String(load_default=None, validate=validate.Length(max=30))
    specialization = fields.String(load_default=None, validate=validate.Length(max=100))
    hire_date = fields.Date(load_default=None)
    is_active = fields.Boolean(load_default=True)


class EmployeeUpdateSchema(Schema):
    first_name = fields.String(validate=validate.Length(min=1, max=100))
    last_name = fields.String(validate=validate.Length(min=1, max=100))
    email = fields.Email(validate=validate.Length(max=254))
    phone = fields.String(validate=validate.Length(max=30))
    specialization = fields.String(validate=validate.Length(max=100))
    hire_date = fields.Date()
    is_active = fields.Boolean()


class EmployeeSchema(Schema):
    """Public representation of an employee."""

    id = fields.Integer(required=True)
    first_name = fields.String(required=True)
    last_name = fields.String(required=True)
    full_name = fields.String(required=True)
    email = fields.Email(required=True)
    phone = fields.String(allow_none=True)
    specialization = fields.String(allow_none=True)
    hire_date = fields.Date(allow_none=True)
    is_active = fields.Boolean(required=True)
