"""Global Flask extension instances and initialization helpers."""

from __future__ import annotations

from flask import Flask
from flask_jwt_extended import JWTManager
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import MetaData

from bloggy.core.config import DEFAULT_TOKEN_LIFETIME, parse_duration

# Global naming convention for all constraints
convention = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=convention)

# Global singletons (import-safe)
db: SQLAlchemy = SQLAlchemy(session_options={"autoflush": False}, metadata=metadata)
migrate = Migrate(render_as_batch=True)
jwt = JWTManager()


def init_app(app: Flask) -> None:
    """Initialize SQLAlchemy, migrations, and JWT extensions.

    Parameters
    ----------
    app: flask.Flask
        Application used to bind extension instances. ``JWT_EXPIRY`` is
        converted into ``JWT_ACCESS_TOKEN_EXPIRES`` before the JWT manager is
        bound so tokens and settings share one lifetime.
    """
    app.config["JWT_ACCESS_TOKEN_EXPIRES"] = parse_duration(
        app.config.get("JWT_EXPIRY"), DEFAULT_TOKEN_LIFETIME
    )

    db.init_app(app)

    # Ensure models are imported so Alembic sees metadata
    from bloggy import models as _models  # noqa: F401

    migrate.init_app(app, db)
    jwt.init_app(app)

    from bloggy.core import auth

    auth.init_app(app)
