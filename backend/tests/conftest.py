"""Pytest fixtures for the Bloggy API.

Each test gets a fresh schema in an in-memory SQLite database and runs inside
an application context, which the Flask test client reuses for its requests.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Any

import pytest
from bloggy.core.config import TestingConfig
from bloggy.core.extensions import db as _db
from bloggy.factory import create_app
from bloggy.models import User

from tests.factories.user import UserFactory
from tests.helpers.auth import bearer, issue_token


class TestConfig(TestingConfig):
    """Testing configuration for creating the Flask app.

    Notes
    -----
    - Uses an in-memory SQLite database for speed.
    - Signs tokens with a fixed, sufficiently long secret.
    """

    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    JWT_SECRET_KEY = "bloggy-test-secret-key-0123456789abcdef"
    JWT_EXPIRY = "7d"
    ACCESS_LOG = False


@pytest.fixture(scope="session")
def app():
    """Create a Flask application configured for testing."""
    # Ensure env-based config does not leak into tests
    os.environ.pop("DATABASE_URL", None)
    application = create_app(TestConfig)
    application.logger.setLevel("WARNING")
    return application


@pytest.fixture()
def db(app):
    """Create the schema for one test and drop it afterwards.

    Yields
    ------
    flask_sqlalchemy.SQLAlchemy
        Database extension bound to the testing application.
    """
    with app.app_context():
        _db.create_all()
        yield _db
        _db.session.remove()
        _db.drop_all()


@pytest.fixture()
def session(db):
    """Return the Flask-scoped session used by repositories and factories."""
    return db.session


@pytest.fixture()
def client(db, app):
    """Return a Flask test client sharing the test's application context."""
    return app.test_client()


# -- Hook up Factory Boy to the test session -----------------------------------
@pytest.fixture(autouse=True)
def _factories_session(session):
    """Wire Factory Boy's session helper to the per-test session."""
    from tests.factories import SQLAlchemySession

    SQLAlchemySession.set(session)
    yield


# -- Users and bearer tokens ----------------------------------------------------
@pytest.fixture()
def user() -> User:
    """Persist and return a user whose password is ``secret123``."""
    return UserFactory(username="alice", password="secret123", blog="Alice's blog")


@pytest.fixture()
def other_user() -> User:
    """A second, unrelated account."""
    return UserFactory(username="mallory", password="secret123", blog="Mallory's blog")


@pytest.fixture()
def auth_header(user: User) -> dict[str, str]:
    """Authorization header for requests made as ``user``."""
    return bearer(issue_token(user))


@pytest.fixture()
def other_header(other_user: User) -> dict[str, str]:
    """Authorization header for requests made as ``other_user``."""
    return bearer(issue_token(other_user))


@pytest.fixture()
def freeze_time() -> Callable[[str | None], Any]:
    """Factory returning :func:`freezegun.freeze_time`.

    Examples
    --------
    >>> def test_with_frozen_time(freeze_time):
    ...     with freeze_time("2024-01-01"):
    ...         ...
    """
    from freezegun import freeze_time as _freeze_time

    def _factory(target: str | None = None) -> Any:
        return _freeze_time(target or "2024-01-01")

    return _factory
