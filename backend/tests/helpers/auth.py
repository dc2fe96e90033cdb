"""Authentication helpers for tests."""

from __future__ import annotations

from datetime import timedelta

from bloggy.models import User
from flask_jwt_extended import create_access_token


def issue_token(user: User, expires_delta: timedelta | None = None) -> str:
    """Generate a JWT shaped like the ones ``POST /api/login`` returns.

    Parameters
    ----------
    user:
        Account whose username becomes the ``sub`` claim.
    expires_delta:
        Optional expiry delta. If ``None``, the configured lifetime is used.
    """
    return create_access_token(
        identity=user.username,
        additional_claims={"user": {"id": user.id, "username": user.username, "blog": user.blog}},
        expires_delta=expires_delta,
    )


def expired_token(user: User) -> str:
    """Return an already expired JWT for ``user``."""
    return issue_token(user, expires_delta=timedelta(seconds=-1))


def bearer(token: str) -> dict[str, str]:
    """Return the ``Authorization`` header carrying ``token``."""
    return {"Authorization": f"Bearer {token}"}
