"""Unit tests for UserRepository."""

from datetime import UTC, datetime, timedelta

import pytest
from storefront.repositories.user import UserRepository

from tests.factories.user import UserFactory


class TestUserRepository:
    """Ensure ``UserRepository`` performs lookups used by the account services."""

    @pytest.fixture()
    def repo(self):
        return UserRepository()

    def test_get_and_add_by_primary_key(self, repo, session):
        u = UserFactory()

        assert repo.get(u.id) is u
        assert repo.get("0" * 32) is None

        added = repo.add(UserFactory.build())
        assert len(added.id) == 32
        session.rollback()

    def test_surface_is_persistence_only(self, repo):
        public = {n for n in dir(repo) if not n.startswith("_")}

        assert public == {
            "add",
            "authenticate",
            "exists_by_email",
            "flush",
            "get",
            "get_by_email",
            "get_by_refresh_token",
            "get_by_reset_token",
            "model",
            "session",
        }

    def test_get_by_email_is_case_insensitive(self, repo):
        u = UserFactory(email="alice@example.com")

        fetched = repo.get_by_email("  ALICE@example.COM ")
        assert fetched is not None
        assert fetched.id == u.id

    def test_exists_by_email(self, repo):
        UserFactory(email="bob@example.com")

        assert repo.exists_by_email("bob@example.com")
        assert repo.exists_by_email("Bob@Example.com")
        assert not repo.exists_by_email("nonexistent@example.com")

    def test_get_by_refresh_token_matches_only_stored_value(self, repo, session):
        u = UserFactory()
        u.refresh_token = "rt-current"
        session.commit()

        assert repo.get_by_refresh_token("rt-current").id == u.id
        assert repo.get_by_refresh_token("rt-old") is None
        assert repo.get_by_refresh_token("") is None

    def test_get_by_reset_token_respects_expiry(self, repo, session):
        now = datetime.now(UTC)
        u = UserFactory()
        u.reset_token = "a" * 64
        u.reset_token_expiration = now + timedelta(minutes=5)
        session.commit()

        assert repo.get_by_reset_token("a" * 64, now=now).id == u.id
        assert repo.get_by_reset_token("a" * 64, now=now + timedelta(minutes=5)) is None
        assert repo.get_by_reset_token("b" * 64, now=now) is None

    def test_authenticate_valid_and_invalid(self, repo):
        UserFactory(email="auth@example.com", password="strongpass")

        assert repo.authenticate("auth@example.com", "strongpass") is not None
        assert repo.authenticate("AUTH@example.com", "strongpass") is not None
        assert repo.authenticate("auth@example.com", "wrongpass") is None
        assert repo.authenticate("nope@example.com", "strongpass") is None
