from app.models.business import Business
from app.models.employee import Employee
from app.models.role import Role, account_roles
from app.models.service import Service
from app.models.service_request import ServiceRequest
from app.models.user import User

__all__ = [
    "Business",
    "Employee",
    "Role",
    "Service",
    "ServiceRequest",
    "User",
    "account_roles",
]
