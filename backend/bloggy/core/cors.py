"""CORS configuration helper for API resources."""

from __future__ import annotations

from flask import Flask
from flask_cors import CORS


def init_app(app: Flask) -> None:
    """Allow the configured client origin(s) to call ``/api/*``.

    Parameters
    ----------
    app: flask.Flask
        Application whose ``CORS_ORIGINS`` (fed by ``CLIENT_ORIGIN``) and
        ``CORS_MAX_AGE`` settings are consulted. When ``CORS_ORIGINS`` is blank
        or ``"*"`` any origin is allowed. The ``Location`` header is exposed so
        browser clients can follow newly created resources.
    """
    raw_origins = app.config.get("CORS_ORIGINS", "")
    origins = [o.strip() for o in raw_origins.split(",") if o.strip()]
    wildcard = len(origins) == 0 or origins == ["*"]

    CORS(
        app,
        resources={r"/api/*": {"origins": "*" if wildcard else origins}},
        expose_headers=["Location"],
        allow_headers=["Authorization", "Content-Type"],
        max_age=app.config.get("CORS_MAX_AGE", 600),
    )
