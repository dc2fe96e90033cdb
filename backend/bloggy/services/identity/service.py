"""
IdentityService
===============

Aggregate service responsible for managing the `User` aggregate:
- Registration (validation, uniqueness, password hashing via the model)
- Sanitized retrieval of the caller's own profile
- Public profile by username (posts by username live in PostService)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.exc import IntegrityError

from bloggy.repositories.user import UserRepository
from bloggy.services._shared.base import BaseService
from bloggy.services._shared.errors import ConflictError, NotFoundError, violates
from bloggy.services._shared.validation import FieldRule, FieldRules, run_pipeline
from bloggy.services.identity.dto import UserOut

log = logging.getLogger(__name__)

USER_RULES = FieldRules(
    username=FieldRule(min=3, trimmed=True, no_spaces=True),
    password=FieldRule(min=6, max=72, trimmed=True),
    blog=FieldRule(min=3, max=72),
)
USER_REQUIRED = ("username", "password", "blog")

DUPLICATE_USERNAME = "Username already exists"


class IdentityService(BaseService):
    """
    Application service for the `User` aggregate.

    Responsibilities
    ----------------
    - Register users ensuring username uniqueness.
    - Retrieve the authenticated user's sanitized profile.
    - Expose public profiles by username.
    """

    # --------------------------------------------------------------------- #
    # Registration
    # --------------------------------------------------------------------- #

    def register(self, body: Mapping[str, Any]) -> UserOut:
        """
        Register a new user.

        :param body: Raw request payload (``username``, ``password``, ``blog``).
        :type body: Mapping[str, Any]
        :returns: Sanitized user DTO.
        :rtype: UserOut
        :raises ValidationFailure: When a field breaks a rule.
        :raises ConflictError: When the username is taken.
        """
        run_pipeline(body, USER_RULES, required=USER_REQUIRED)

        with self.rw_uow() as uow:
            repo: UserRepository = uow.users

            if repo.exists(username=body["username"]):
                raise ConflictError("User", DUPLICATE_USERNAME)

            try:
                user = repo.model(
                    username=body["username"],
                    password=body["password"],  # model hashes via setter
                    blog=body["blog"],
                )
                repo.add(user)
            except IntegrityError as exc:
                if violates(exc, "uq_users_username", columns=("users.username",)):
                    raise ConflictError("User", DUPLICATE_USERNAME) from exc
                raise  # unknown integrity error -> bubble up

            out = UserOut.from_model(user)

        log.info("user registered: %s", out.username)
        return out

    # --------------------------------------------------------------------- #
    # Retrieval
    # --------------------------------------------------------------------- #

    def get_current(self) -> UserOut:
        """
        Return the authenticated actor's sanitized profile.

        :raises NotFoundError: If the actor vanished after authentication.
        """
        actor_id = self.require_actor()
        with self.ro_uow() as uow:
            user = uow.users.get(actor_id)
            if user is None:
                raise NotFoundError("User", actor_id)
            return UserOut.from_model(user)

    def get_profile(self, username: str) -> UserOut:
        """
        Retrieve a user by exact username.

        :param username: Public handle.
        :type username: str
        :raises NotFoundError: If no such user exists.
        """
        with self.ro_uow() as uow:
            user = uow.users.get_by_username(username)
            if user is None:
                raise NotFoundError("User", username)
            return UserOut.from_model(user)
