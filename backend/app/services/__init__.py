"""Service layer public API.

Use-case services live in one sub-package each:

- :mod:`app.services.auth` -- login, registration, refresh and logout.
- :mod:`app.services.service_requests` -- service request lifecycle.
- :mod:`app.services.businesses`, :mod:`app.services.employees`,
  :mod:`app.services.catalog` -- directory CRUD.

Shared primitives (:class:`BaseService`, domain errors and ports) live
under :mod:`app.services._shared`.
"""

from __future__ import annotations

from ._shared.base import BaseService

__all__ = ["BaseService"]
