"""Application settings with environment-based simple classes."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from datetime import timedelta
from typing import Final

from dotenv import load_dotenv

# Public selector env var (keep neutral name to avoid collisions)
ENV_VAR: Final[str] = "APP_ENV"  # 'development' | 'testing' | 'production'

DEFAULT_TOKEN_LIFETIME: Final[timedelta] = timedelta(days=7)

_DURATION_RE = re.compile(r"^\s*(\d+)\s*([smhdw]?)\s*$", re.IGNORECASE)
_DURATION_UNITS: Final[Mapping[str, str]] = {
    "": "seconds",
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
    "w": "weeks",
}


# Load .env during development (no-op when the file is absent)
load_dotenv()


def env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean flag from an environment variable.

    Parameters
    ----------
    name: str
        Environment variable to inspect.
    default: bool, optional
        Value returned when the variable is unset. Defaults to ``False``.

    Returns
    -------
    bool
        ``True`` if the value resembles ``{"1", "true", "yes", "y", "on"}``
        ignoring case; otherwise ``False`` or ``default`` when missing.
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


def parse_duration(value: str | int | timedelta | None, default: timedelta) -> timedelta:
    """Convert a compact duration such as ``"7d"`` or ``"90m"`` into a timedelta.

    Parameters
    ----------
    value: str | int | timedelta | None
        Raw setting. Integers and bare digit strings are seconds; a single
        unit suffix among ``s``, ``m``, ``h``, ``d`` and ``w`` is accepted.
    default: timedelta
        Returned when ``value`` is ``None`` or blank.

    Raises
    ------
    ValueError
        If the value cannot be interpreted as a positive duration.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    if isinstance(value, timedelta):
        return value
    if isinstance(value, int):
        return timedelta(seconds=value)
    match = _DURATION_RE.match(str(value))
    if match is None:
        raise ValueError(f"Invalid duration: {value!r}")
    amount, unit = match.groups()
    return timedelta(**{_DURATION_UNITS[unit.lower()]: int(amount)})


class BaseConfig:
    """Base configuration shared across environments.

    Attributes
    ----------
    API_BASE_PREFIX: str
        Root path for registering API blueprints.
    PORT: int
        Port the HTTP server listens on (read by gunicorn and ``flask run``).
    SECRET_KEY: str
        Flask secret. Defaults to a development-safe placeholder.
    JWT_SECRET_KEY: str
        Key used by ``flask-jwt-extended`` for signing access tokens.
    JWT_EXPIRY: str
        Token lifetime in compact form (``"7d"`` by default).
    SQLALCHEMY_DATABASE_URI: str
        Database connection string consumed by SQLAlchemy.
    LOG_LEVEL: str
        Root logging verbosity (``INFO`` by default).
    ACCESS_LOG: bool
        Emit one log line per handled request.
    CORS_ORIGINS: str
        Comma-separated list of allowed client origins.
    EXPOSE_ERROR_DETAILS: bool
        Include tracebacks in 5xx error bodies (never in production).

    Notes
    -----
    Values are primarily sourced from environment variables, enabling
    configuration without code changes.
    """

    APP_ENV = "development"
    API_BASE_PREFIX = "/api"
    PORT = int(os.getenv("PORT", "8080"))
    APP_VERSION = os.getenv("APP_VERSION", "dev")

    # Secrets / security
    SECRET_KEY = os.getenv("SECRET_KEY", "CHANGE_ME")
    JWT_SECRET_KEY = os.getenv("JWT_SECRET", os.getenv("JWT_SECRET_KEY", "CHANGE_ME_JWT"))
    JWT_EXPIRY = os.getenv("JWT_EXPIRY", "7d")
    JWT_ERROR_MESSAGE_KEY = "message"

    # DB
    SQLALCHEMY_DATABASE_URI = os.getenv(
        "DATABASE_URL", os.getenv("DATABASE_URI", "sqlite:///./bloggy.db")
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = env_bool("SQLALCHEMY_ECHO", False)

    # Flask & JSON
    JSON_SORT_KEYS = False
    PROPAGATE_EXCEPTIONS = False

    # Logging & CORS
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    ACCESS_LOG = env_bool("ACCESS_LOG", True)
    CORS_ORIGINS = os.getenv("CLIENT_ORIGIN", "http://localhost:3000")
    CORS_MAX_AGE = 600
    EXPOSE_ERROR_DETAILS = False

    # Flask built-ins
    DEBUG = False
    TESTING = False


class DevelopmentConfig(BaseConfig):
    """Configuration tailored for local development.

    Notes
    -----
    Enables debug mode and error details by default.
    """

    APP_ENV = "development"
    DEBUG = env_bool("FLASK_DEBUG", True)
    EXPOSE_ERROR_DETAILS = env_bool("EXPOSE_ERROR_DETAILS", True)


class TestingConfig(BaseConfig):
    """Configuration for automated test runs.

    Notes
    -----
    - Uses an in-memory SQLite database unless ``TEST_DATABASE_URL`` is set.
    - Silences the access log.
    """

    APP_ENV = "testing"
    TESTING = True
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("TEST_DATABASE_URL", "sqlite:///:memory:")
    ACCESS_LOG = False
    EXPOSE_ERROR_DETAILS = True


class ProductionConfig(BaseConfig):
    """Configuration defaults for production deployments."""

    APP_ENV = "production"
    DEBUG = False
    SQLALCHEMY_ECHO = False
    PROPAGATE_EXCEPTIONS = False
    EXPOSE_ERROR_DETAILS = False


# Map names -> classes (simple, explicit)
CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config() -> type[BaseConfig]:
    """Return the configuration class inferred from ``APP_ENV``.

    Falls back to :class:`DevelopmentConfig` when ``APP_ENV`` is unset or
    unknown.
    """
    name = os.getenv(ENV_VAR, "development").strip().lower()
    return CONFIG_MAP.get(name, DevelopmentConfig)
