"""API v1 blueprint package bundling versioned routes."""

from __future__ import annotations

from flask import Blueprint

API_VERSION = "v1"

# Import blueprints *only here* to keep imports localized and avoid cycles.
from .auth import bp as auth_bp  # noqa: E402
from .businesses import bp as businesses_bp  # noqa: E402
from .employees import bp as employees_bp  # noqa: E402
from .health import bp as health_bp  # noqa: E402
from .service_requests import bp as service_requests_bp  # noqa: E402
from .services import bp as services_bp  # noqa: E402

# Each tuple: (blueprint, url_prefix_relative_to_version)
REGISTRY: list[tuple[Blueprint, str]] = [
    (health_bp, ""),  # -> /api/v1
    (auth_bp, "/auth"),  # -> /api/v1/auth
    (businesses_bp, "/businesses"),
    (employees_bp, "/employees"),
    (services_bp, "/services"),
    (service_requests_bp, "/service-requests"),
]
