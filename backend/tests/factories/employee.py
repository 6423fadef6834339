"""Factory Boy definition for :class:`app.models.employee.Employee`."""

from __future__ import annotations

from datetime import date

from app.models.employee import Employee

import factory
from tests.factories import BaseFactory


class EmployeeFactory(BaseFactory):
    class Meta:
        model = Employee

    id = None
    first_name = factory.Faker("first_name")
    last_name = factory.Faker("last_name")
    email = factory.Sequence(lambda n: f"tech{n}@example.com")
    phone = "555-0200"
    specialization = "HVAC"
    hire_date = date(2023, 1, 9)
    is_active = True
