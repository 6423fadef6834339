# tests/unit/services/test_employee_service.py
from __future__ import annotations

from datetime import date

import pytest
from app.services._shared.errors import ConflictError, NotFoundError
from app.services.employees.dto import EmployeeCreateIn, EmployeeUpdateIn
from app.services.employees.service import EmployeeService
from tests.factories.employee import EmployeeFactory


@pytest.fixture()
def service() -> EmployeeService:
    return EmployeeService()


def test_create_normalizes_email(service):
    out = service.create_employee(
        EmployeeCreateIn(
            first_name="Tom",
            last_name="Becker",
            email="Tom.Becker@Example.com",
            specialization="Plumbing",
            hire_date=date(2022, 9, 15),
        )
    )

    assert out.email == "tom.becker@example.com"
    assert out.full_name == "Tom Becker"
    assert service.get_employee(out.id).hire_date == date(2022, 9, 15)


def test_create_duplicate_email_conflicts(service, session):
    EmployeeFactory(email="taken@example.com")
    session.commit()

    with pytest.raises(ConflictError):
        service.create_employee(
            EmployeeCreateIn(first_name="A", last_name="B", email="TAKEN@example.com")
        )


def test_list_by_specialization_ignores_case(service, session):
    hvac = EmployeeFactory(specialization="HVAC")
    EmployeeFactory(specialization="Plumbing")
    session.commit()

    assert [e.id for e in service.list_by_specialization("hvac")] == [hvac.id]
    assert len(service.list_employees()) == 2


def test_update_to_other_employees_email_conflicts(service, session):
    EmployeeFactory(email="first@example.com")
    second = EmployeeFactory(email="second@example.com")
    session.commit()

    with pytest.raises(ConflictError):
        service.update_employee(second.id, EmployeeUpdateIn(email="first@example.com"))


def test_update_keeping_own_email_is_allowed(service, session):
    row = EmployeeFactory(email="me@example.com", phone="555-0000")
    session.commit()

    out = service.update_employee(row.id, EmployeeUpdateIn(email="ME@example.com", phone="555-1111"))

    assert out.email == "me@example.com"
    assert out.phone == "555-1111"


def test_missing_employee(service):
    with pytest.raises(NotFoundError):
        service.get_employee(424242)
    with pytest.raises(NotFoundError):
        service.update_employee(424242, EmployeeUpdateIn(phone="1"))
    assert service.delete_employee(424242) is False


def test_delete(service, session):
    row = EmployeeFactory()
    session.commit()

    assert service.delete_employee(row.id) is True
    with pytest.raises(NotFoundError):
        service.get_employee(row.id)
