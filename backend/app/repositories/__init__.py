"""Repository package exposing persistence-layer access for all domain models."""

from __future__ import annotations

from app.repositories.base import BaseRepository, apply_sorting, parse_sort_tokens
from app.repositories.business import BusinessRepository
from app.repositories.employee import EmployeeRepository
from app.repositories.role import RoleRepository
from app.repositories.service import ServiceRepository
from app.repositories.service_request import ServiceRequestRepository
from app.repositories.user import UserRepository

__all__ = [
    # Base
    "BaseRepository",
    "apply_sorting",
    "parse_sort_tokens",
    # Domain
    "BusinessRepository",
    "EmployeeRepository",
    "RoleRepository",
    "ServiceRepository",
    "ServiceRequestRepository",
    "UserRepository",
]
