"""Base class and request context shared by application services."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import UUID

from bloggy.core import errors as api_errors
from bloggy.services._shared.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    MalformedIdError,
    MissingUpdateFieldsError,
    NotFoundError,
    ServiceError,
    ValidationFailure,
)
from bloggy.uow.sqlalchemy_uow import (
    SQLAlchemyReadOnlyUnitOfWork,
    SQLAlchemyUnitOfWork,
)

log = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContext:
    """
    Carry request-scoped data into services.

    :param actor_id: Authenticated user identifier (``None`` on public routes).
    :param request_id: Correlation id for logging/tracing.
    """

    actor_id: str | None = None
    request_id: str | None = None


def parse_id(raw: object) -> str:
    """
    Normalise a client-supplied identifier.

    :param raw: Path or body value.
    :returns: The identifier as 32 lowercase hex characters.
    :raises MalformedIdError: When ``raw`` is not a UUID in any common form.
    """
    if not isinstance(raw, str):
        raise MalformedIdError()
    try:
        return UUID(raw).hex
    except ValueError:
        raise MalformedIdError() from None


def is_owner(*, actor_id: str | None, owner_id: str) -> bool:
    """Return True if the actor owns the resource."""
    return actor_id is not None and str(actor_id) == str(owner_id)


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Provide helpers to run read-only and read-write units of work.
    * Centralize error translation.
    * Keep ownership policy in one place.

    Notes
    -----
    - Services never touch the global session directly; they open a Unit of Work.
    """

    def __init__(self, *, ctx: ServiceContext | None = None) -> None:
        """
        Initialize the base service.

        :param ctx: Optional request-scoped context (actor, tracing).
        :type ctx: ServiceContext | None
        """
        self.ctx = ctx or ServiceContext()

    # -------------------------- UoW helpers ---------------------------------

    def rw_uow(self) -> SQLAlchemyUnitOfWork:
        """Create a read-write Unit of Work."""
        return SQLAlchemyUnitOfWork()

    def ro_uow(self) -> SQLAlchemyReadOnlyUnitOfWork:
        """Create a read-only Unit of Work."""
        return SQLAlchemyReadOnlyUnitOfWork()

    # -------------------------- Error handling ------------------------------

    @staticmethod
    def translate_exceptions(exc: Exception) -> Exception:
        """
        Map domain/service-level errors to API-level (HTTP) errors.

        :param exc: Exception raised within the service.
        :type exc: Exception
        :returns: Translated exception ready to be re-raised.
        :rtype: Exception
        """
        if isinstance(exc, ValidationFailure):
            return api_errors.ValidationError(exc.message, location=exc.location)

        if isinstance(exc, NotFoundError):
            return api_errors.NotFound()

        if isinstance(exc, ConflictError):
            return api_errors.DuplicateResource(exc.detail)

        if isinstance(exc, AuthenticationError):
            if exc.kind == "unknown_user":
                return api_errors.UnknownUser()
            if exc.kind == "invalid_token":
                return api_errors.Unauthenticated()
            return api_errors.BadPassword()

        if isinstance(exc, AuthorizationError):
            return api_errors.Forbidden(str(exc) or None)

        if isinstance(exc, MalformedIdError):
            return api_errors.MalformedId(str(exc))

        if isinstance(exc, MissingUpdateFieldsError):
            return api_errors.MissingUpdateFields(str(exc))

        # Any other ServiceError subclass -> 400 Bad Request
        if isinstance(exc, ServiceError):
            return api_errors.BadRequest(str(exc) or None)

        # Fallback: return untouched (will bubble up to Flask handler)
        return exc

    # --------------------------- AuthZ --------------------------------

    def ensure_owner(self, owner_id: str, *, msg: str | None = None) -> None:
        """
        Ensure the current actor owns the resource.

        :param owner_id: ``user_id`` stored on the resource.
        :param msg: Optional custom error message.
        :raises AuthorizationError: If actor is not the owner.
        """
        if not is_owner(actor_id=self.ctx.actor_id, owner_id=owner_id):
            log.warning("ownership denied: actor=%s owner=%s", self.ctx.actor_id, owner_id)
            raise AuthorizationError(msg or "You can only modify your own resources.")

    def require_actor(self) -> str:
        """Return the authenticated actor id or fail closed."""
        if self.ctx.actor_id is None:
            raise AuthorizationError("Authentication required.")
        return self.ctx.actor_id
