# bloggy/services/auth/dto.py
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from bloggy.core.config import DEFAULT_TOKEN_LIFETIME, parse_duration

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class LoginIn:
    """
    Input DTO for login.

    :param username: Exact, case-sensitive username.
    :type username: str
    :param password: Raw password (to be verified).
    :type password: str
    """

    username: str
    password: str


# --------------------------- Output DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class TokenOut:
    """
    Output DTO carrying a signed bearer token.

    :param auth_token: Encoded access JWT.
    :type auth_token: str
    """

    auth_token: str


# ---------------------------- Configuration ------------------------------- #


@dataclass(frozen=True, slots=True)
class TokenSettings:
    """
    Token emission settings.

    :param lifetime: Access token lifetime (7 days unless configured).
    :type lifetime: timedelta
    """

    lifetime: timedelta = DEFAULT_TOKEN_LIFETIME

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> TokenSettings:
        """Read ``JWT_EXPIRY`` from a Flask config mapping."""
        return cls(lifetime=parse_duration(config.get("JWT_EXPIRY"), DEFAULT_TOKEN_LIFETIME))
