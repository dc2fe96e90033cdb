"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and should never import or depend
on Flask or HTTP. They serve as stable contracts between repositories, domain
logic, and application services.

The translation to HTTP responses is handled by ``bloggy/core/errors.py`` via
``BaseService.translate_exceptions()``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError


def violates(exc: IntegrityError, constraint_name: str, *, columns: Iterable[str] = ()) -> bool:
    """
    Check whether an IntegrityError originates from a specific constraint.

    PostgreSQL reports the constraint name; SQLite only lists the offending
    columns (``UNIQUE constraint failed: posts.slug, posts.user_id``), so the
    qualified ``columns`` are matched as a fallback.

    Parameters
    ----------
    exc : IntegrityError
        The exception raised by SQLAlchemy during flush/commit.
    constraint_name : str
        The name of the database constraint to match (e.g. 'uq_users_username').
    columns : Iterable[str]
        Qualified column names (``table.column``) covered by the constraint.

    Returns
    -------
    bool
        True if the IntegrityError matches the given constraint.
    """
    message = str(exc.orig).lower() if exc.orig else str(exc).lower()
    if constraint_name.lower() in message:
        return True
    cols = [c.lower() for c in columns]
    return bool(cols) and all(c in message for c in cols)


# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - The API layer or BaseService will later translate them to APIError.
    """

    pass


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


@dataclass(slots=True)
class NotFoundError(ServiceError):
    """
    Raised when an entity is not found in the repository.

    :param entity: Entity name (e.g., "Post").
    :type entity: str
    :param key: Identifier or search key.
    :type key: str
    """

    entity: str
    key: str

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.entity} not found: {self.key}"


@dataclass(slots=True)
class ConflictError(ServiceError):
    """
    Raised when a unique constraint is violated.

    :param entity: Entity name (e.g., "User").
    :type entity: str
    :param detail: Client-facing message naming the conflicting field(s).
    :type detail: str
    """

    entity: str
    detail: str

    def __str__(self) -> str:
        return self.detail


class AuthorizationError(ServiceError):
    """Raised when the actor does not own the targeted resource."""


@dataclass(slots=True)
class AuthenticationError(ServiceError):
    """
    Raised when credentials are rejected.

    :param kind: ``"unknown_user"``, ``"bad_password"`` or ``"invalid_token"``.
    """

    kind: str

    def __str__(self) -> str:
        return "Incorrect Username" if self.kind == "unknown_user" else "Incorrect Password"


class MalformedIdError(ServiceError):
    """Raised when an identifier cannot be parsed."""

    def __init__(self, message: str = "The `id` is not valid") -> None:
        super().__init__(message)


class MissingUpdateFieldsError(ServiceError):
    """Raised when an update payload names no updatable field."""

    def __init__(self, message: str = "Missing update fields in request body") -> None:
        super().__init__(message)


@dataclass(slots=True)
class ValidationFailure(ServiceError):
    """
    A request field violated a validation rule.

    :param message: Client-facing explanation.
    :param location: Name of the offending field.
    """

    message: str
    location: str

    def __str__(self) -> str:
        return self.message
