"""Service layer public API.

This package exposes the essential building blocks for the service layer so that
callers can import from :mod:`bloggy.services` without knowing internal structure.

Re-exports
----------
- Base primitives (from ``bloggy.services._shared.base``)
    * :class:`BaseService`
    * :class:`ServiceContext`

- Auth service (from ``bloggy.services.auth``)
    * :class:`AuthService`
    * DTOs: :class:`LoginIn`, :class:`TokenOut`, :class:`TokenSettings`

- Identity service (from ``bloggy.services.identity``)
    * :class:`IdentityService`
    * DTOs: :class:`UserOut`

- Post service (from ``bloggy.services.posts``)
    * :class:`PostService`
    * DTOs: :class:`PostOut`

- Comment service (from ``bloggy.services.comments``)
    * :class:`CommentService`
    * DTOs: :class:`CommentOut`, :class:`AuthorOut`
"""

from __future__ import annotations

# Base primitives (service base + request-scoped context)
from ._shared.base import BaseService, ServiceContext

# Auth service + DTOs
from .auth.dto import LoginIn, TokenOut, TokenSettings
from .auth.service import AuthService

# Comment service + DTOs
from .comments.dto import AuthorOut, CommentOut
from .comments.service import CommentService

# Identity service + DTOs
from .identity.dto import UserOut
from .identity.service import IdentityService

# Post service + DTOs
from .posts.dto import PostOut
from .posts.service import PostService

__all__ = [
    # Base
    "BaseService",
    "ServiceContext",
    # Auth
    "AuthService",
    "LoginIn",
    "TokenOut",
    "TokenSettings",
    # Identity
    "IdentityService",
    "UserOut",
    # Posts
    "PostService",
    "PostOut",
    # Comments
    "CommentService",
    "CommentOut",
    "AuthorOut",
]
