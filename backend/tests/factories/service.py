"""Factory Boy definition for :class:`app.models.service.Service`."""

from __future__ import annotations

from decimal import Decimal

from app.models.service import Service

import factory
from tests.factories import BaseFactory


class ServiceFactory(BaseFactory):
    class Meta:
        model = Service

    id = None
    name = factory.Sequence(lambda n: f"Maintenance service {n}")
    description = factory.Faker("sentence")
    base_price = Decimal("99.90")
    is_active = True
