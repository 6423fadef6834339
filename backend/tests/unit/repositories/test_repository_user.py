"""Unit tests for UserRepository."""

from datetime import UTC, datetime

import pytest
from app.repositories.user import UserRepository
from tests.factories.user import UserFactory

EXPIRES = datetime(2026, 7, 1, tzinfo=UTC)


class TestUserRepository:
    """Ensure ``UserRepository`` performs core persistence operations."""

    @pytest.fixture()
    def repo(self):
        return UserRepository()

    def test_get_by_email_is_case_insensitive(self, repo, session):
        u = UserFactory(email="alice@example.com")
        session.commit()

        fetched = repo.get_by_email(" Alice@Example.COM ")
        assert fetched is not None
        assert fetched.id == u.id

    def test_exists_by_email(self, repo, session):
        UserFactory(email="bob@example.com")
        session.commit()

        assert repo.exists_by_email("bob@example.com")
        assert not repo.exists_by_email("nonexistent@example.com")

    def test_store_and_find_refresh_token(self, repo, session):
        u = UserFactory()
        session.commit()

        repo.store_refresh_token(u, "tok-1", EXPIRES)
        session.commit()

        assert repo.get_by_refresh_token("tok-1").id == u.id
        assert repo.get_by_refresh_token("tok-1", for_update=True).id == u.id
        assert repo.get_by_refresh_token("tok-2") is None

    def test_store_overwrites_previous_token(self, repo, session):
        u = UserFactory()
        repo.store_refresh_token(u, "old", EXPIRES)
        repo.store_refresh_token(u, "new", EXPIRES)
        session.commit()

        assert repo.get_by_refresh_token("old") is None
        assert repo.get_by_refresh_token("new").id == u.id

    def test_clear_refresh_token(self, repo, session):
        u = UserFactory()
        repo.store_refresh_token(u, "tok", EXPIRES)
        repo.clear_refresh_token(u)
        session.commit()

        assert u.refresh_token is None
        assert u.refresh_token_expires_at is None
        assert repo.get_by_refresh_token("tok") is None

    def test_empty_token_never_matches(self, repo, session):
        UserFactory()
        session.commit()
        assert repo.get_by_refresh_token("") is None
