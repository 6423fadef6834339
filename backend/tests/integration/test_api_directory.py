"""End-to-end tests for businesses, employees, catalog services and health."""

from datetime import timedelta

import pytest
from tests.factories.business import BusinessFactory
from tests.factories.employee import EmployeeFactory
from tests.factories.service import ServiceFactory
from tests.helpers.auth import bearer_for

API = "/api/v1"


@pytest.fixture()
def manager(app):
    return bearer_for(app, 1, ["Manager"])


@pytest.fixture()
def plain_user(app):
    return bearer_for(app, 2, ["User"])


def test_health(client):
    resp = client.get(f"{API}/health")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["status"] == "ok"
    assert body["db"] == "ok"


def test_unknown_route_is_problem_json(client):
    resp = client.get(f"{API}/nowhere")

    assert resp.status_code == 404
    assert resp.mimetype == "application/problem+json"
    assert resp.get_json()["code"] == "not_found"


# ------------------------------ Businesses -------------------------------- #
def test_business_reads_are_public(client, session):
    live = BusinessFactory(name="Live Co", is_active=True)
    BusinessFactory(name="Closed Co", is_active=False)
    session.commit()

    everything = client.get(f"{API}/businesses").get_json()["data"]
    active = client.get(f"{API}/businesses/active").get_json()["data"]

    assert {b["name"] for b in everything} == {"Live Co", "Closed Co"}
    assert [b["id"] for b in active] == [live.id]


@pytest.mark.parametrize("kind", ["expired", "malformed"])
def test_public_reads_ignore_unusable_bearer(client, session, app, kind):
    BusinessFactory(name="Live Co")
    ServiceFactory(name="Gutter cleaning")
    session.commit()
    if kind == "expired":
        headers = bearer_for(app, 2, ["User"], expires_delta=timedelta(seconds=-5))
    else:
        headers = {"Authorization": "Bearer not-a-jwt"}

    businesses = client.get(f"{API}/businesses", headers=headers)
    services = client.get(f"{API}/services", headers=headers)

    assert businesses.status_code == 200, businesses.get_json()
    assert [b["name"] for b in businesses.get_json()["data"]] == ["Live Co"]
    assert services.status_code == 200, services.get_json()


def test_business_writes_need_manager(client, plain_user, manager):
    payload = {"name": "Northwind", "contact_email": "hi@northwind.example.com"}

    denied = client.post(f"{API}/businesses", json=payload, headers=plain_user)
    created = client.post(f"{API}/businesses", json=payload, headers=manager)

    assert denied.status_code == 403
    assert denied.get_json()["code"] == "forbidden"
    assert created.status_code == 201
    assert created.get_json()["data"]["is_active"] is True


def test_business_update_and_delete(client, session, manager):
    business = BusinessFactory(city="Old Town")
    session.commit()

    updated = client.put(
        f"{API}/businesses/{business.id}", json={"city": "New Town"}, headers=manager
    )
    deleted = client.delete(f"{API}/businesses/{business.id}", headers=manager)
    missing = client.get(f"{API}/businesses/{business.id}")

    assert updated.get_json()["data"]["city"] == "New Town"
    assert deleted.status_code == 204
    assert missing.status_code == 404


# ------------------------------- Employees -------------------------------- #
def test_employee_reads_need_employee_policy(client, session, app, plain_user):
    EmployeeFactory(specialization="HVAC")
    session.commit()
    staff = bearer_for(app, 3, ["Employee"])

    assert client.get(f"{API}/employees", headers=plain_user).status_code == 403
    resp = client.get(f"{API}/employees/specialization/hvac", headers=staff)
    assert resp.status_code == 200
    assert len(resp.get_json()["data"]) == 1


def test_employee_duplicate_email_conflicts(client, session, manager):
    EmployeeFactory(email="tech@example.com")
    session.commit()

    resp = client.post(
        f"{API}/employees",
        json={"first_name": "T", "last_name": "Ech", "email": "TECH@example.com"},
        headers=manager,
    )

    assert resp.status_code == 409


# ------------------------------- Services --------------------------------- #
def test_service_prices_are_strings(client, session):
    ServiceFactory(name="Inspection")
    session.commit()

    data = client.get(f"{API}/services").get_json()["data"]

    assert data[0]["name"] == "Inspection"
    assert data[0]["base_price"] == "99.90"


def test_service_negative_price_is_unprocessable(client, manager):
    resp = client.post(
        f"{API}/services", json={"name": "Free money", "base_price": "-1.00"}, headers=manager
    )

    assert resp.status_code == 422
    assert "base_price" in resp.get_json()["details"]["errors"]


def test_admin_passes_every_policy(client, app):
    admin = bearer_for(app, 9, ["Admin"])
    resp = client.post(
        f"{API}/services", json={"name": "Audit", "base_price": "10.00"}, headers=admin
    )
    assert resp.status_code == 201
