"""Unit tests for RoleRepository."""

import pytest
from app.repositories.role import RoleRepository
from tests.factories.role import RoleFactory


class TestRoleRepository:
    @pytest.fixture()
    def repo(self):
        return RoleRepository()

    def test_get_by_name_trims_input(self, repo, session):
        role = RoleFactory(name="Manager")
        session.commit()

        assert repo.get_by_name("Manager").id == role.id
        assert repo.get_by_name(" Manager ").id == role.id
        assert repo.get_by_name("Owner") is None

    def test_get_or_create_creates_with_description(self, repo, session):
        role, created = repo.get_or_create("Auditor")

        assert created is True
        assert role.id is not None
        assert role.description == "Auditor role"

    def test_get_or_create_returns_existing(self, repo, session):
        existing = RoleFactory(name="Employee", description="Field staff")
        session.commit()

        role, created = repo.get_or_create("Employee")

        assert created is False
        assert role.id == existing.id
        assert role.description == "Field staff"

    def test_list_sorted_by_name(self, repo, session):
        RoleFactory(name="User")
        RoleFactory(name="Admin")
        session.flush()

        assert [r.name for r in repo.list()] == ["Admin", "User"]
