"""DTOs for employee management."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, slots=True)
class EmployeeCreateIn:
    """
    Input DTO to hire an employee.

    :param email: Work email, unique across employees.
    :type email: str
    :param specialization: Trade used to route work.
    :type specialization: str | None
    """

    first_name: str
    last_name: str
    email: str
    phone: str | None = None
    specialization: str | None = None
    hire_date: date | None = None
    is_active: bool = True


@dataclass(frozen=True, slots=True)
class EmployeeUpdateIn:
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    specialization: str | None = None
    hire_date: date | None = None
    is_active: bool | None = None


@dataclass(frozen=True, slots=True)
class EmployeeOut:
    id: int
    first_name: str
    last_name: str
    full_name: str
    email: str
    phone: str | None
    specialization: str | None
    hire_date: date | None
    is_active: bool
