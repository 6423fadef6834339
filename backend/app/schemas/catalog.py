"""Schemas for the catalog of offered services."""

from __future__ import annotations

from marshmallow import Schema, fields, validate

_PRICE_RANGE = validate.Range(min=0)


class CatalogEntryCreateSchema(Schema):
    name = fields.String(required=True, validate=validate.Length(min=1, max=200))
    description = fields.String(load_default=None)
    base_price = fields.Decimal(places=2, required=True, validate=_PRICE_RANGE)
    is_active = fields.Boolean(load_default=True)


class CatalogEntryUpdateSchema(Schema):
    name = fields.String(validate=validate.Length(min=1, max=200))
    description = fields.String()
    base_price = fields.Decimal(places=2, validate=_PRICE_RANGE)
    is_active = fields.Boolean()


class CatalogEntrySchema(Schema):
    """Public representation of a catalog entry; prices dump as strings."""

    id = fields.Integer(required=True)
    name = fields.String(required=True)
    description = fields.String(allow_none=True)
    base_price = fields.Decimal(places=2, as_string=True, required=True)
    is_active = fields.Boolean(required=True)
