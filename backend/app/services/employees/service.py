"""Employee management use-cases."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

from app.models.employee import Employee
from app.services._shared.base import BaseService
from app.services._shared.errors import ConflictError, NotFoundError, violates

from .dto import EmployeeCreateIn, EmployeeOut, EmployeeUpdateIn

_EMAIL_TAKEN = "email is already used by another employee"


def _to_out(row: Employee) -> EmployeeOut:
    return EmployeeOut(
        id=row.id,
        first_name=row.first_name,
        last_name=row.last_name,
        full_name=row.full_name,
        email=row.email,
        phone=row.phone,
        specialization=row.specialization,
        hire_date=row.hire_date,
        is_active=row.is_active,
    )


def _apply_update(row: Employee, dto: EmployeeUpdateIn) -> None:
    """Overwrite each field the update supplies; ``None`` leaves it alone."""
    if dto.first_name is not None:
        row.first_name = dto.first_name
    if dto.last_name is not None:
        row.last_name = dto.last_name
    if dto.email is not None:
        row.email = dto.email
    if dto.phone is not None:
        row.phone = dto.phone
    if dto.specialization is not None:
        row.specialization = dto.specialization
    if dto.hire_date is not None:
        row.hire_date = dto.hire_date
    if dto.is_active is not None:
        row.is_active = dto.is_active


def _is_email_clash(exc: IntegrityError) -> bool:
    return violates(exc, "uq_employees_email") or violates(exc, "employees.email")


class EmployeeService(BaseService):
    """CRUD over :class:`Employee`; emails are unique."""

    def create_employee(self, dto: EmployeeCreateIn) -> EmployeeOut:
        """
        Hire an employee.

        :raises ConflictError: If the email is already used.
        """
        row = Employee(
            first_name=dto.first_name,
            last_name=dto.last_name,
            email=dto.email,
            phone=dto.phone,
            specialization=dto.specialization,
            hire_date=dto.hire_date,
            is_active=dto.is_active,
        )
        with self.rw_uow() as uow:
            if uow.employees.exists_by_email(dto.email):
                raise ConflictError("Employee", _EMAIL_TAKEN)
            try:
                uow.employees.add(row)
            except IntegrityError as exc:
                if _is_email_clash(exc):
                    raise ConflictError("Employee", _EMAIL_TAKEN) from exc
                raise
            return _to_out(row)

    def get_employee(self, employee_id: int) -> EmployeeOut:
        with self.ro_uow() as uow:
            row = uow.employees.get(employee_id)
            if row is None:
                raise NotFoundError("Employee", employee_id)
            return _to_out(row)

    def list_employees(self) -> list[EmployeeOut]:
        with self.ro_uow() as uow:
            return [_to_out(r) for r in uow.employees.list()]

    def list_by_specialization(self, specialization: str) -> list[EmployeeOut]:
        with self.ro_uow() as uow:
            return [_to_out(r) for r in uow.employees.list_by_specialization(specialization)]

    def update_employee(self, employee_id: int, dto: EmployeeUpdateIn) -> EmployeeOut:
        """
        Merge the supplied fields into the employee.

        :raises NotFoundError: If it does not exist.
        :raises ConflictError: If the new email belongs to someone else.
        """
        with self.rw_uow() as uow:
            row = uow.employees.get_for_update(employee_id)
            if row is None:
                raise NotFoundError("Employee", employee_id)
            if (
                dto.email is not None
                and dto.email.strip().lower() != row.email
                and uow.employees.exists_by_email(dto.email)
            ):
                raise ConflictError("Employee", _EMAIL_TAKEN)
            _apply_update(row, dto)
            try:
                uow.employees.flush()
            except IntegrityError as exc:
                if _is_email_clash(exc):
                    raise ConflictError("Employee", _EMAIL_TAKEN) from exc
                raise
            return _to_out(row)

    def delete_employee(self, employee_id: int) -> bool:
        """Delete an employee; their requests keep going unassigned."""
        with self.rw_uow() as uow:
            row = uow.employees.get_for_update(employee_id)
            if row is None:
                return False
            uow.employees.delete(row)
        return True
