"""Factory Boy definition for :class:`app.models.service_request.ServiceRequest`."""

from __future__ import annotations

from datetime import UTC, datetime

from app.models.service_request import ServiceRequest

import factory
from tests.factories import BaseFactory
from tests.factories.business import BusinessFactory
from tests.factories.service import ServiceFactory


class ServiceRequestFactory(BaseFactory):
    """Pending, unassigned request by default."""

    class Meta:
        model = ServiceRequest

    id = None
    business = factory.SubFactory(BusinessFactory)
    service = factory.SubFactory(ServiceFactory)
    employee = None
    status = "Pending"
    requested_date = datetime(2026, 3, 2, 9, 0, tzinfo=UTC)
    description = factory.Faker("sentence")
