"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from urllib.parse import quote
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Response, current_app, jsonify, request
from flask_jwt_extended import get_current_user, verify_jwt_in_request

from bloggy.core.logger import ensure_request_id
from bloggy.services._shared.base import BaseService, ServiceContext
from bloggy.services._shared.errors import ServiceError

F = TypeVar("F", bound=Callable[..., Any])


def require_auth(func: F) -> F:
    """Ensure the request carries a valid bearer token for an existing user."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        verify_jwt_in_request(optional=False)
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def translate_errors(func: F) -> F:
    """Re-raise service-layer errors as their HTTP counterparts."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        try:
            return func(*args, **kwargs)
        except ServiceError as exc:
            raise BaseService.translate_exceptions(exc) from exc

    return wrapper  # type: ignore[return-value]


def actor_context() -> ServiceContext:
    """Build a service context for the authenticated user (after ``require_auth``)."""

    user = get_current_user()
    return ServiceContext(actor_id=user.id, request_id=ensure_request_id())


def public_context() -> ServiceContext:
    """Build a service context for an anonymous request."""

    return ServiceContext(request_id=ensure_request_id())


def json_body() -> dict[str, Any]:
    """Return the request's JSON object, or an empty dict for anything else."""

    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def created_response(payload: dict[str, Any], resource_key: str) -> Response:
    """Return ``201 Created`` pointing ``Location`` at ``<request path>/<key>``.

    ``resource_key`` is whatever the resource is retrieved by: the id for
    posts and comments, the username for users.
    """

    response = json_response(payload, status=201)
    response.headers["Location"] = f"{request.path.rstrip('/')}/{quote(resource_key)}"
    return response


def no_content() -> Response:
    """Return an empty ``204 No Content`` response."""

    return Response(status=204)


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
