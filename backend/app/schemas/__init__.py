"""Convenience exports for application schemas."""

from __future__ import annotations

from .auth import (
    AccountProfileSchema,
    LoginSchema,
    RefreshTokenSchema,
    RegisterSchema,
    SessionSchema,
)
from .business import BusinessCreateSchema, BusinessSchema, BusinessUpdateSchema
from .catalog import CatalogEntryCreateSchema, CatalogEntrySchema, CatalogEntryUpdateSchema
from .employee import EmployeeCreateSchema, EmployeeSchema, EmployeeUpdateSchema
from .service_request import (
    ServiceRequestCreateSchema,
    ServiceRequestSchema,
    ServiceRequestUpdateSchema,
)

__all__ = [
    "AccountProfileSchema",
    "LoginSchema",
    "RefreshTokenSchema",
    "RegisterSchema",
    "SessionSchema",
    "BusinessCreateSchema",
    "BusinessSchema",
    "BusinessUpdateSchema",
    "CatalogEntryCreateSchema",
    "CatalogEntrySchema",
    "CatalogEntryUpdateSchema",
    "EmployeeCreateSchema",
    "EmployeeSchema",
    "EmployeeUpdateSchema",
    "ServiceRequestCreateSchema",
    "ServiceRequestSchema",
    "ServiceRequestUpdateSchema",
]
