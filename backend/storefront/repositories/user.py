"""User repository for persistence and credential lookups."""

from __future__ import annotations

from datetime import datetime
from typing import cast

from sqlalchemy import select

from storefront.models.user import User, normalize_email
from storefront.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Persistence-only repository for :class:`User`.

    The user row is the aggregate root for saved addresses and saved items;
    both collections are loaded with the user (``selectin``) and persisted
    through it. This repository NEVER issues or verifies tokens; it only
    finds the rows carrying them.
    """

    model = User

    # ---------------------------- Lookup helpers ----------------------------

    def get_by_email(self, email: str) -> User | None:
        """Fetch a user by email (case-insensitive).

        :param email: Email address to normalise and search.
        :type email: str
        :returns: User instance or ``None`` when not found.
        :rtype: User | None
        """
        stmt = select(User).where(User.email == normalize_email(email))
        result = self.session.execute(stmt).scalars().first()
        return cast(User | None, result)

    def exists_by_email(self, email: str) -> bool:
        """Return ``True`` when a user with the provided email exists."""
        stmt = select(User.id).where(User.email == normalize_email(email))
        return bool(self.session.execute(stmt).first())

    def get_by_refresh_token(self, token: str) -> User | None:
        """Return the user whose *currently stored* refresh token equals ``token``.

        A superseded token matches nobody, which is what revokes it.
        """
        if not token:
            return None
        stmt = select(User).where(User.refresh_token == token)
        return cast(User | None, self.session.execute(stmt).scalars().first())

    def get_by_reset_token(self, token: str, *, now: datetime) -> User | None:
        """Return the user holding ``token`` whose expiry is strictly after ``now``.

        :param token: Reset token presented by the client.
        :type token: str
        :param now: Reference instant (UTC).
        :type now: datetime
        :returns: Matching user or ``None`` for unknown/expired tokens.
        :rtype: User | None
        """
        if not token:
            return None
        stmt = select(User).where(
            User.reset_token == token,
            User.reset_token_expiration.is_not(None),
            User.reset_token_expiration > now,
        )
        return cast(User | None, self.session.execute(stmt).scalars().first())

    # ---------------------------- Password ops ----------------------------

    def authenticate(self, email: str, password: str) -> User | None:
        """Authenticate a user by email and password.

        :param email: Email address to authenticate.
        :type email: str
        :param password: Raw password to verify.
        :type password: str
        :returns: Authenticated user or ``None`` when credentials fail.
        :rtype: User | None
        """
        user = self.get_by_email(email)
        if not user or not user.verify_password(password):
            return None
        return user
