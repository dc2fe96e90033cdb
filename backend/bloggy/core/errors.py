"""Centralized JSON error handling for the API."""

from __future__ import annotations

import logging
import traceback
from http import HTTPStatus
from typing import Any

from flask import Flask, Response, current_app, has_request_context, jsonify
from marshmallow import ValidationError as MarshmallowValidationError
from sqlalchemy.exc import IntegrityError, OperationalError
from werkzeug.exceptions import HTTPException

from bloggy.core.logger import ensure_request_id

log = logging.getLogger(__name__)


def _as_body(
    *,
    status: int,
    reason: str,
    message: str,
    location: str | None = None,
    error: Any = None,
) -> dict[str, Any]:
    """
    Build the error payload shared by every failing response.

    :param status: HTTP status code, repeated as ``code``.
    :param reason: Stable taxonomy name (``ValidationError``, ``NotFound``...).
    :param message: Human-readable error summary (safe for clients).
    :param location: Offending request field, for validation failures.
    :param error: Debug details, only attached when explicitly enabled.
    :returns: JSON-serializable dictionary.
    :rtype: dict
    """
    body: dict[str, Any] = {"code": status, "reason": reason, "message": message}
    if location is not None:
        body["location"] = location
    if error is not None:
        body["error"] = error
    if has_request_context():
        body["request_id"] = ensure_request_id()
    return body


def _error_response(body: dict[str, Any], status: int) -> tuple[Response, int]:
    return jsonify(body), status


def _debug_details(err: BaseException) -> str | None:
    """Return a formatted traceback when the app exposes error details."""
    if not current_app.config.get("EXPOSE_ERROR_DETAILS", False):
        return None
    return "".join(traceback.format_exception(type(err), err, err.__traceback__))


class APIError(Exception):
    """
    Represent a JSON-serializable API error.

    Parameters
    ----------
    message : str
        Human-readable description presented to clients.
    status_code : int, optional
        HTTP status code to return. Defaults to ``400``.
    reason : str, optional
        Machine-readable taxonomy name. Defaults to ``"BadRequest"``.
    location : str | None, optional
        Request field the error refers to.
    """

    status_code: int = HTTPStatus.BAD_REQUEST
    reason: str = "BadRequest"
    default_message: str = "Bad Request"

    def __init__(
        self,
        message: str | None = None,
        status_code: int | None = None,
        reason: str | None = None,
        location: str | None = None,
    ) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)
        if status_code is not None:
            self.status_code = int(status_code)
        if reason is not None:
            self.reason = reason
        self.location = location

    def to_body(self) -> dict[str, Any]:
        """Serialize the error into the API error payload."""
        return _as_body(
            status=int(self.status_code),
            reason=self.reason,
            message=self.message,
            location=self.location,
        )

    def to_response(self) -> tuple[Response, int]:
        """Return a ``(response, status)`` pair usable from any Flask hook."""
        return _error_response(self.to_body(), int(self.status_code))


# Domain conveniences
class BadRequest(APIError):
    """400 for malformed requests (e.g. missing login credentials)."""


class ValidationError(APIError):
    """422 when a request body fails field validation."""

    status_code = HTTPStatus.UNPROCESSABLE_ENTITY
    reason = "ValidationError"
    default_message = "Validation failed"


class MalformedId(APIError):
    """400 when a path or body identifier cannot be parsed."""

    reason = "MalformedId"
    default_message = "The `id` is not valid"


class MissingUpdateFields(APIError):
    """400 when an update payload carries no updatable field."""

    reason = "MissingUpdateFields"
    default_message = "Missing update fields in request body"


class DuplicateResource(APIError):
    """400 for uniqueness collisions."""

    reason = "DuplicateResource"
    default_message = "Resource already exists"


class Unauthenticated(APIError):
    """401 when no valid credential accompanies the request."""

    status_code = HTTPStatus.UNAUTHORIZED
    reason = "Unauthenticated"
    default_message = "Unauthorized"


class UnknownUser(Unauthenticated):
    """401 when logging in with a username that does not exist."""

    reason = "UnknownUser"
    default_message = "Incorrect Username"


class BadPassword(Unauthenticated):
    """401 when the password does not match the stored hash."""

    reason = "BadPassword"
    default_message = "Incorrect Password"


class Forbidden(APIError):
    """403 when authorization denies access."""

    status_code = HTTPStatus.FORBIDDEN
    reason = "Forbidden"
    default_message = "Forbidden"


class NotFound(APIError):
    """404 when resources are missing."""

    status_code = HTTPStatus.NOT_FOUND
    reason = "NotFound"
    default_message = "Not Found"


def init_app(app: Flask) -> None:
    """
    Attach JSON error handlers to the Flask app.

    Notes
    -----
    - Every error body carries ``code``, ``reason`` and ``message``.
    - Unmatched routes fall through to a 404 ``NotFound`` body.
    - Marshmallow load failures answer 400 ``BadRequest``.
    - Emits 5xx with ``exc_info`` for traceability; 4xx as warnings.
    """

    @app.errorhandler(APIError)
    def handle_api_error(err: APIError):
        level = log.error if err.status_code >= 500 else log.warning
        level(
            "APIError: reason=%s status=%s msg=%s",
            err.reason,
            err.status_code,
            err.message,
        )
        return err.to_response()

    @app.errorhandler(MarshmallowValidationError)
    def handle_schema_error(err: MarshmallowValidationError):
        # Schema-loaded bodies (login) only promise a generic 400
        log.warning("Schema validation failed: %s", err.normalized_messages())
        return BadRequest().to_response()

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        status = int(err.code or HTTPStatus.INTERNAL_SERVER_ERROR)
        phrase = HTTPStatus(status).phrase
        reason = "NotFound" if status == HTTPStatus.NOT_FOUND else phrase.replace(" ", "")
        level = log.error if status >= 500 else log.warning
        level("HTTPException: status=%s detail=%s", status, err.description)
        return _error_response(_as_body(status=status, reason=reason, message=phrase), status)

    @app.errorhandler(IntegrityError)
    def handle_integrity_error(err: IntegrityError):
        # Services translate known constraints; anything reaching here is unmapped
        log.error("IntegrityError reached the API boundary", exc_info=True)
        return DuplicateResource().to_response()

    @app.errorhandler(OperationalError)
    def handle_operational_error(err: OperationalError):
        log.error("OperationalError", exc_info=True)
        status = HTTPStatus.SERVICE_UNAVAILABLE
        body = _as_body(
            status=status,
            reason="ServiceUnavailable",
            message="Service temporarily unavailable",
            error=_debug_details(err),
        )
        return _error_response(body, status)

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        log.error("Unhandled exception", exc_info=True)
        status = HTTPStatus.INTERNAL_SERVER_ERROR
        body = _as_body(
            status=status,
            reason="InternalServerError",
            message=str(err) or status.phrase,
            error=_debug_details(err),
        )
        return _error_response(body, status)
