"""Application factory for the Bloggy API."""

from __future__ import annotations

import logging
from importlib import import_module

from flask import Flask

from bloggy.core.config import BaseConfig, get_config
from bloggy.core.logger import configure_logging

log = logging.getLogger(__name__)

# Each module exposes ``init_app(app)``; extensions come first since the JWT
# loaders, the API and the CLI all need a bound ``db``.
COMPONENTS = (
    "bloggy.core.extensions",
    "bloggy.core.logger",
    "bloggy.core.cors",
    "bloggy.api",
    "bloggy.core.errors",
    "bloggy.cli",
)


def create_app(config: type[BaseConfig] | object | None = None) -> Flask:
    """Build and configure the Flask application.

    :param config: Configuration class or object. Defaults to the class
        selected by ``APP_ENV``.
    :returns: Application with extensions, blueprints, error handlers and
        CLI commands registered.
    """
    app = Flask(__name__)
    app.config.from_object(config or get_config())

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    for dotted in COMPONENTS:
        import_module(dotted).init_app(app)

    log.info("app created: env=%s", app.config.get("APP_ENV"))
    return app
