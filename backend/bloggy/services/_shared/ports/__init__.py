"""
bloggy.services._shared.ports
=============================

Ports (hexagonal interfaces) that keep the service layer independent from the
JWT library. Concrete adapters live under ``bloggy.infra``.

Modules
-------
- :mod:`token_provider`:
    Defines :class:`~.TokenProvider`, the abstraction for JWT creation and
    decoding, and :class:`~.StubTokenProvider` for unit tests.
"""

from __future__ import annotations

from .token_provider import StubTokenProvider, TokenProvider

__all__ = [
    "TokenProvider",
    "StubTokenProvider",
]
