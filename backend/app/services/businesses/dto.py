"""DTOs for the business directory."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class BusinessCreateIn:
    name: str
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    contact_person: str | None = None
    is_active: bool = True


@dataclass(frozen=True, slots=True)
class BusinessUpdateIn:
    """Partial update; ``None`` leaves the field untouched."""

    name: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    contact_person: str | None = None
    is_active: bool | None = None


@dataclass(frozen=True, slots=True)
class BusinessOut:
    id: int
    name: str
    address: str | None
    city: str | None
    state: str | None
    zip_code: str | None
    contact_email: str | None
    contact_phone: str | None
    contact_person: str | None
    is_active: bool
    created_at: datetime | None
