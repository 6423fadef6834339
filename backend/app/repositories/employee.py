"""Employee repository."""

from __future__ import annotations

from sqlalchemy import func, select

from app.models.employee import Employee
from app.repositories.base import BaseRepository


class EmployeeRepository(BaseRepository[Employee]):
    model = Employee

    def _sortable_fields(self):
        return {
            "last_name": Employee.last_name,
            "first_name": Employee.first_name,
            "hire_date": Employee.hire_date,
        }

    def _default_sort(self) -> list[str]:
        return ["last_name", "first_name"]

    def _filterable_fields(self):
        return {"id": Employee.id, "is_active": Employee.is_active, "email": Employee.email}

    def exists_by_email(self, email: str) -> bool:
        stmt = select(Employee.id).where(Employee.email == email.lower().strip())
        return self.session.execute(stmt).first() is not None

    def list_by_specialization(self, specialization: str) -> list[Employee]:
        """List employees whose specialization matches, ignoring case."""
        stmt = (
            select(Employee)
            .where(func.lower(Employee.specialization) == specialization.strip().lower())
            .order_by(Employee.last_name.asc(), Employee.first_name.asc(), Employee.id.asc())
        )
        return list(self.session.execute(stmt).scalars().all())
