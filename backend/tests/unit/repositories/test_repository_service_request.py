"""Unit tests for ServiceRequestRepository and the directory repositories."""

from datetime import UTC, datetime

import pytest
from app.repositories.business import BusinessRepository
from app.repositories.employee import EmployeeRepository
from app.repositories.service_request import ServiceRequestRepository
from tests.factories.business import BusinessFactory
from tests.factories.employee import EmployeeFactory
from tests.factories.service_request import ServiceRequestFactory


class TestServiceRequestRepository:
    @pytest.fixture()
    def repo(self):
        return ServiceRequestRepository()

    def test_default_sort_is_newest_requested_first(self, repo, session):
        older = ServiceRequestFactory(requested_date=datetime(2026, 1, 1, tzinfo=UTC))
        newer = ServiceRequestFactory(requested_date=datetime(2026, 2, 1, tzinfo=UTC))
        session.flush()

        assert [r.id for r in repo.list()] == [newer.id, older.id]

    def test_filters(self, repo, session):
        business = BusinessFactory()
        tech = EmployeeFactory()
        hit = ServiceRequestFactory(business=business, employee=tech, status="Assigned")
        ServiceRequestFactory(status="Completed")
        session.flush()

        assert [r.id for r in repo.list_by_business(business.id)] == [hit.id]
        assert [r.id for r in repo.list_by_employee(tech.id)] == [hit.id]
        assert [r.id for r in repo.list_by_status("Assigned")] == [hit.id]

    def test_get_for_update_loads_relations(self, repo, session):
        row = ServiceRequestFactory()
        session.commit()

        locked = repo.get_for_update(row.id)
        assert locked.business.name == row.business.name
        assert repo.get_for_update(987654) is None


class TestDirectoryRepositories:
    def test_exists_checks_the_given_id(self, session):
        business = BusinessFactory()
        session.flush()
        repo = BusinessRepository()

        assert repo.exists(id=business.id)
        assert not repo.exists(id=business.id + 1000)

    def test_list_active_businesses(self, session):
        live = BusinessFactory(is_active=True)
        BusinessFactory(is_active=False)
        session.flush()

        assert [b.id for b in BusinessRepository().list_active()] == [live.id]

    def test_employee_specialization_lookup_ignores_case(self, session):
        hvac = EmployeeFactory(specialization="HVAC")
        EmployeeFactory(specialization="Electrical")
        session.flush()

        repo = EmployeeRepository()
        assert [e.id for e in repo.list_by_specialization(" hvac ")] == [hvac.id]
        assert repo.exists_by_email(hvac.email.upper())
