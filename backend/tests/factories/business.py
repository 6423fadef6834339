"""Factory Boy definition for :class:`app.models.business.Business`."""

from __future__ import annotations

from app.models.business import Business

import factory
from tests.factories import BaseFactory


class BusinessFactory(BaseFactory):
    class Meta:
        model = Business

    id = None
    name = factory.Faker("company")
    address = factory.Faker("street_address")
    city = factory.Faker("city")
    state = factory.Faker("state_abbr")
    zip_code = factory.Faker("postcode")
    contact_email = factory.Sequence(lambda n: f"contact{n}@business.example.com")
    contact_phone = "555-0100"
    contact_person = factory.Faker("name")
    is_active = True
