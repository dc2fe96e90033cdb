# bloggy/services/auth/service.py
from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from typing import Any

from bloggy.repositories.user import UserRepository
from bloggy.services._shared.base import BaseService, ServiceContext
from bloggy.services._shared.errors import AuthenticationError
from bloggy.services._shared.ports.token_provider import TokenProvider
from bloggy.services.auth.dto import LoginIn, TokenOut, TokenSettings

log = logging.getLogger(__name__)

# Smallest step by which a refreshed token outlives the one it replaces;
# ``exp`` is serialized in whole seconds.
EXPIRY_STEP = timedelta(seconds=1)


class AuthService(BaseService):
    """
    Authentication lifecycle service (login / refresh).

    Tokens are stateless: the subject (``sub``) is always the username and is
    the only claim the bearer guard relies on. Login embeds the sanitized user
    under ``user``; refresh embeds only ``{"username": ...}``.
    """

    def __init__(
        self,
        *,
        token_provider: TokenProvider,
        settings: TokenSettings | None = None,
        ctx: ServiceContext | None = None,
    ) -> None:
        """
        Initialize the service with its dependencies.

        :param token_provider: Adapter for issuing/decoding JWTs.
        :param settings: Token lifetime settings.
        """
        super().__init__(ctx=ctx)
        self.tokens = token_provider
        self.settings = settings or TokenSettings()

    # ------------------------------------------------------------------ #
    # Login
    # ------------------------------------------------------------------ #

    def login(self, dto: LoginIn) -> TokenOut:
        """
        Verify credentials and issue a token embedding the sanitized user.

        :param dto: Login input.
        :returns: Signed bearer token.
        :raises AuthenticationError: ``unknown_user`` or ``bad_password``.
        """
        with self.ro_uow() as uow:
            repo: UserRepository = uow.users
            user, password_ok = repo.authenticate(dto.username, dto.password)
            if user is None:
                log.info("login rejected: unknown username")
                raise AuthenticationError("unknown_user")
            if not password_ok:
                log.info("login rejected: bad password for %s", user.username)
                raise AuthenticationError("bad_password")

            claims: dict[str, Any] = {
                "user": {"id": user.id, "username": user.username, "blog": user.blog}
            }
            subject = user.username

        token = self.tokens.create_access_token(
            identity=subject,
            additional_claims=claims,
            expires_delta=self.settings.lifetime,
        )
        return TokenOut(auth_token=token)

    # ------------------------------------------------------------------ #
    # Refresh
    # ------------------------------------------------------------------ #

    def refresh(self, claims: Mapping[str, Any]) -> TokenOut:
        """
        Re-issue a token for an already verified one.

        :param claims: Decoded claims of the presented (valid) token.
        :returns: Token with the same subject and a strictly later expiry.
        :raises AuthenticationError: If the claims lack a subject or expiry.
        """
        subject = claims.get("sub")
        previous_exp = claims.get("exp")
        if not subject or previous_exp is None:
            raise AuthenticationError("invalid_token")

        token = self.tokens.create_access_token(
            identity=str(subject),
            additional_claims={"user": {"username": str(subject)}},
            expires_delta=self._refresh_delta(int(previous_exp)),
        )
        return TokenOut(auth_token=token)

    def _refresh_delta(self, previous_exp: int) -> timedelta:
        """Lifetime for a refreshed token: the configured one, or longer if needed.

        A token refreshed moments after issue would otherwise get the same
        ``exp`` as its predecessor.
        """
        now = self.now_utc()
        floor = datetime.fromtimestamp(previous_exp, tz=timezone.utc) + EXPIRY_STEP - now
        return max(self.settings.lifetime, floor)

    @staticmethod
    def now_utc() -> datetime:
        return datetime.now(timezone.utc)
