# tests/unit/services/test_catalog_service.py
from __future__ import annotations

from decimal import Decimal

import pytest
from app.services._shared.errors import NotFoundError, ServiceError
from app.services.catalog.dto import CatalogEntryCreateIn, CatalogEntryUpdateIn
from app.services.catalog.service import CatalogService
from tests.factories.service import ServiceFactory


@pytest.fixture()
def service() -> CatalogService:
    return CatalogService()


def test_create_and_get(service):
    out = service.create_service(
        CatalogEntryCreateIn(name="Boiler inspection", base_price=Decimal("120.00"))
    )

    fetched = service.get_service(out.id)
    assert fetched.name == "Boiler inspection"
    assert fetched.base_price == Decimal("120.00")
    assert fetched.is_active is True


def test_negative_price_is_rejected(service):
    with pytest.raises(ServiceError):
        service.create_service(CatalogEntryCreateIn(name="Free?", base_price=Decimal("-1")))


def test_list_active(service, session):
    live = ServiceFactory(name="A")
    ServiceFactory(name="B", is_active=False)
    session.commit()

    assert [s.id for s in service.list_active_services()] == [live.id]
    assert [s.name for s in service.list_services()] == ["A", "B"]


def test_update_and_delete(service, session):
    row = ServiceFactory(name="Old", base_price=Decimal("10.00"))
    session.commit()

    out = service.update_service(row.id, CatalogEntryUpdateIn(base_price=Decimal("12.50")))
    assert out.name == "Old"
    assert out.base_price == Decimal("12.50")

    assert service.delete_service(row.id) is True
    with pytest.raises(NotFoundError):
        service.get_service(row.id)
