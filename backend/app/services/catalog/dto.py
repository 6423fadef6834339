"""DTOs for the service catalog."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class CatalogEntryCreateIn:
    name: str
    base_price: Decimal = Decimal("0.00")
    description: str | None = None
    is_active: bool = True


@dataclass(frozen=True, slots=True)
class CatalogEntryUpdateIn:
    name: str | None = None
    base_price: Decimal | None = None
    description: str | None = None
    is_active: bool | None = None


@dataclass(frozen=True, slots=True)
class CatalogEntryOut:
    """
    Public view of a catalog entry.

    :param base_price: List price, two decimal places.
    :type base_price: Decimal
    """

    id: int
    name: str
    description: str | None
    base_price: Decimal
    is_active: bool
