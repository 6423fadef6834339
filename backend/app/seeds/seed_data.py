"""Idempotent database seed helpers.

Every seeder runs inside one read-write unit of work and reports a
``{table: {"created": n, "existing": m}}`` summary.
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Any

from app.models.business import Business
from app.models.employee import Employee
from app.models.service import Service
from app.models.user import User
from app.services._shared.policies.roles import ADMIN, BUILTIN_ROLES
from app.uow.sqlalchemy_uow import SQLAlchemyUnitOfWork

LOGGER = logging.getLogger(__name__)

Summary = dict[str, dict[str, int]]

BUSINESS_FIXTURES: list[dict[str, Any]] = [
    {
        "name": "Harbor View Apartments",
        "address": "12 Quay Street",
        "city": "Portland",
        "state": "OR",
        "zip_code": "97201",
        "contact_email": "office@harborview.example.com",
        "contact_phone": "555-0101",
        "contact_person": "Dana Brooks",
    },
    {
        "name": "Greenfield Dental Clinic",
        "address": "400 Elm Avenue",
        "city": "Salem",
        "state": "OR",
        "zip_code": "97301",
        "contact_email": "admin@greenfield.example.com",
        "contact_phone": "555-0142",
        "contact_person": "Omar Haddad",
    },
]

EMPLOYEE_FIXTURES: list[dict[str, Any]] = [
    {
        "first_name": "Lucia",
        "last_name": "Romero",
        "email": "lucia.romero@example.com",
        "phone": "555-0201",
        "specialization": "HVAC",
        "hire_date": date(2021, 3, 1),
    },
    {
        "first_name": "Tom",
        "last_name": "Becker",
        "email": "tom.becker@example.com",
        "phone": "555-0202",
        "specialization": "Plumbing",
        "hire_date": date(2022, 9, 15),
    },
]

SERVICE_FIXTURES: list[dict[str, Any]] = [
    {
        "name": "Boiler inspection",
        "description": "Annual safety inspection of gas boilers.",
        "base_price": Decimal("120.00"),
    },
    {
        "name": "Leak repair",
        "description": "Locate and repair water leaks.",
        "base_price": Decimal("85.50"),
    },
]


def _touch(summary: Summary, table: str, created: bool) -> None:
    """Update summary counters for the given table."""
    entry = summary.setdefault(table, {"created": 0, "existing": 0})
    if created:
        entry["created"] += 1
    else:
        entry["existing"] += 1


def seed_roles(*, verbose: bool = False) -> Summary:
    """Create the four policy roles when missing."""
    if verbose:
        LOGGER.info("Seeding roles...")
    summary: Summary = {}
    with SQLAlchemyUnitOfWork() as uow:
        for name in BUILTIN_ROLES:
            _, created = uow.roles.get_or_create(name)
            _touch(summary, "roles", created)
    return summary


def seed_admin(
    *,
    email: str,
    password: str,
    first_name: str = "System",
    last_name: str = "Administrator",
) -> Summary:
    """
    Create an active account holding the ``Admin`` role.

    An existing account with the same email is granted the role instead; its
    password is left alone.
    """
    summary: Summary = {}
    with SQLAlchemyUnitOfWork() as uow:
        role, role_created = uow.roles.get_or_create(ADMIN)
        _touch(summary, "roles", role_created)
        user = uow.users.get_by_email(email)
        created = user is None
        if user is None:
            normalized = email.strip().lower()
            user = User(
                email=normalized,
                username=normalized,
                first_name=first_name,
                last_name=last_name,
                is_active=True,
            )
            user.password = password
            uow.users.add(user)
        if role not in user.roles:
            user.roles.append(role)
        uow.users.flush()
        _touch(summary, "users", created)
    return summary


def seed_directory(*, verbose: bool = False) -> Summary:
    """Create demo businesses, employees and catalog services."""
    if verbose:
        LOGGER.info("Seeding businesses, employees and services...")
    summary: Summary = {}
    with SQLAlchemyUnitOfWork() as uow:
        for fixture in BUSINESS_FIXTURES:
            existing = uow.businesses.find_one(name=fixture["name"])
            if existing is None:
                uow.businesses.add(Business(**fixture))
            _touch(summary, "businesses", existing is None)

        for fixture in EMPLOYEE_FIXTURES:
            exists = uow.employees.exists_by_email(fixture["email"])
            if not exists:
                uow.employees.add(Employee(**fixture))
            _touch(summary, "employees", not exists)

        for fixture in SERVICE_FIXTURES:
            existing = uow.services.find_one(name=fixture["name"])
            if existing is None:
                uow.services.add(Service(**fixture))
            _touch(summary, "services", existing is None)
    return summary


def run_all(*, verbose: bool = False) -> Summary:
    """Run the role and directory seeders."""
    combined: Summary = {}
    for func in (seed_roles, seed_directory):
        for table, counters in func(verbose=verbose).items():
            entry = combined.setdefault(table, {"created": 0, "existing": 0})
            entry["created"] += counters.get("created", 0)
            entry["existing"] += counters.get("existing", 0)
    return combined


__all__ = ["run_all", "seed_admin", "seed_directory", "seed_roles"]
