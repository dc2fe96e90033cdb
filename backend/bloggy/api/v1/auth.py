"""Authentication endpoints using the service layer."""

from __future__ import annotations

from flask import Blueprint, current_app
from flask_jwt_extended import get_jwt

from bloggy.api.deps import json_body, json_response, require_auth, timing, translate_errors
from bloggy.infra.jwt.flask_jwt_token_provider import JWTTokenProvider
from bloggy.schemas import LoginSchema, TokenResponseSchema
from bloggy.services.auth.dto import LoginIn, TokenSettings
from bloggy.services.auth.service import AuthService

bp = Blueprint("auth", __name__)

login_schema = LoginSchema()
token_schema = TokenResponseSchema()


def _auth_service() -> AuthService:
    return AuthService(
        token_provider=JWTTokenProvider(),
        settings=TokenSettings.from_config(current_app.config),
    )


@bp.post("/login")
@timing
@translate_errors
def login():
    """Verify credentials and issue a bearer token."""

    data = login_schema.load(json_body())
    dto = LoginIn(username=data["username"], password=data["password"])
    token = _auth_service().login(dto)
    return json_response(token_schema.dump(token))


@bp.post("/refresh")
@require_auth
@timing
@translate_errors
def refresh():
    """Exchange a still-valid bearer token for a fresh one."""

    token = _auth_service().refresh(get_jwt())
    return json_response(token_schema.dump(token))
