"""User repository for persistence and authentication utilities."""

from __future__ import annotations

from typing import cast

from sqlalchemy import select

from bloggy.models.user import User
from bloggy.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Persistence-only repository for :class:`User`.

    It NEVER handles JWT creation; only DB-level user management.
    """

    model = User

    def _filterable_fields(self):
        """Whitelist fields safe for equality filters."""
        return {"id": User.id, "username": User.username}

    def get_by_username(self, username: str) -> User | None:
        """Fetch a user by exact, case-sensitive username.

        :param username: Login handle as typed by the client.
        :returns: User instance or ``None`` when not found.
        """
        stmt = select(User).where(User.username == username)
        result = self.session.execute(stmt).scalars().first()
        return cast(User | None, result)

    def authenticate(self, username: str, password: str) -> tuple[User | None, bool]:
        """Look up ``username`` and verify ``password``.

        :returns: ``(user, password_ok)``; ``user`` is ``None`` when unknown.
        """
        user = self.get_by_username(username)
        if user is None:
            return None, False
        return user, user.verify_password(password)
