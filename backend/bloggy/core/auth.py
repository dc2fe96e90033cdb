"""Flask-JWT-Extended callbacks mapping token failures onto the API error body."""

from __future__ import annotations

import logging
from typing import Any

from flask import Flask

from bloggy.core.errors import Unauthenticated
from bloggy.core.extensions import jwt

log = logging.getLogger(__name__)


def init_app(app: Flask) -> None:
    """Register identity lookup and 401 responders on the JWT manager.

    Every bearer failure (header missing, malformed or badly signed token,
    expired token, subject without a matching user) answers ``401
    Unauthenticated`` before any handler logic runs.
    """

    @jwt.user_lookup_loader
    def _load_user(_jwt_header: dict[str, Any], jwt_data: dict[str, Any]):
        from bloggy.repositories.user import UserRepository

        return UserRepository().get_by_username(str(jwt_data["sub"]))

    @jwt.user_lookup_error_loader
    def _unknown_subject(_jwt_header: dict[str, Any], jwt_data: dict[str, Any]):
        log.warning("token subject no longer exists: sub=%s", jwt_data.get("sub"))
        return Unauthenticated().to_response()

    @jwt.unauthorized_loader
    def _missing_token(reason: str):
        return Unauthenticated().to_response()

    @jwt.invalid_token_loader
    def _invalid_token(reason: str):
        log.warning("rejected bearer token: %s", reason)
        return Unauthenticated().to_response()

    @jwt.expired_token_loader
    def _expired_token(_jwt_header: dict[str, Any], _jwt_data: dict[str, Any]):
        return Unauthenticated("Token has expired").to_response()
