"""Business resource schemas."""

from __future__ import annotations

from marshmallow import Schema, fields, validate


class BusinessCreateSchema(Schema):
    """Payload for registering a customer business."""

    name = fields.String(required=True, validate=validate.Length(min=1, max=200))
    address = fields.String(load_default=None, validate=validate.Length(max=300))
    city = fields.String(load_default=None, validate=validate.Length(max=100))
    state = fields.String(load_default=None, validate=validate.Length(max=50))
    zip_code = fields.String(load_default=None, validate=validate.Length(max=20))
    contact_email = fields.Email(load_default=None, validate=validate.Length(max=254))
    contact_phone = fields.String(load_default=None, validate=validate.Length(max=30))
    contact_person = fields.String(load_default=None, validate=validate.Length(max=150))
    is_active = fields.Boolean(load_default=True)


class BusinessUpdateSchema(Schema):
    """Partial update; omitted keys stay untouched."""

    name = fields.String(validate=validate.Length(min=1, max=200))
    address = fields.String(validate=validate.Length(max=300))
    city = fields.String(validate=validate.Length(max=100))
    state = fields.String(validate=validate.Length(max=50))
    zip_code = fields.String(validate=validate.Length(max=20))
    contact_email = fields.Email(validate=validate.Length(max=254))
    contact_phone = fields.String(validate=validate.Length(max=30))
    contact_person = fields.String(validate=validate.Length(max=150))
    is_active = fields.Boolean()


class BusinessSchema(Schema):
    id = fields.Integer(required=True)
    name = fields.String(required=True)
    address = fields.String(allow_none=True)
    city = fields.String(allow_none=True)
    state = fields.String(allow_none=True)
    zip_code = fields.String(allow_none=True)
    contact_email = fields.String(allow_none=True)
    contact_phone = fields.String(allow_none=True)
    contact_person = fields.String(allow_none=True)
    is_active = fields.Boolean(required=True)
    created_at = fields.DateTime(allow_none=True)
