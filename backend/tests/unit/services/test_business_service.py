# tests/unit/services/test_business_service.py
from __future__ import annotations

import pytest
from app.services._shared.errors import NotFoundError
from app.services.businesses.dto import BusinessCreateIn, BusinessUpdateIn
from app.services.businesses.service import BusinessService
from tests.factories.business import BusinessFactory


@pytest.fixture()
def service() -> BusinessService:
    return BusinessService()


def test_create_and_get(service):
    created = service.create_business(
        BusinessCreateIn(name="Greenfield Dental", city="Salem", contact_person="Omar")
    )

    fetched = service.get_business(created.id)
    assert fetched.name == "Greenfield Dental"
    assert fetched.city == "Salem"
    assert fetched.is_active is True
    assert fetched.created_at is not None


def test_get_missing_raises_not_found(service):
    with pytest.raises(NotFoundError):
        service.get_business(424242)


def test_list_active_hides_inactive(service, session):
    open_site = BusinessFactory(name="Open")
    BusinessFactory(name="Closed", is_active=False)
    session.commit()

    assert [b.id for b in service.list_active_businesses()] == [open_site.id]
    assert len(service.list_businesses()) == 2


def test_update_merges_supplied_fields_only(service, session):
    row = BusinessFactory(name="Old name", city="Portland", contact_phone="555-0001")
    session.commit()

    out = service.update_business(row.id, BusinessUpdateIn(name="New name", is_active=False))

    assert out.name == "New name"
    assert out.is_active is False
    assert out.city == "Portland"
    assert out.contact_phone == "555-0001"


def test_update_missing_raises_not_found(service):
    with pytest.raises(NotFoundError):
        service.update_business(424242, BusinessUpdateIn(name="x"))


def test_delete(service, session):
    row = BusinessFactory()
    session.commit()

    assert service.delete_business(row.id) is True
    assert service.delete_business(row.id) is False
