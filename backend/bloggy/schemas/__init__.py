"""Convenience exports for application schemas."""

from __future__ import annotations

from .auth import LoginSchema, TokenResponseSchema
from .comment import CommentAuthorSchema, CommentSchema, ThreadCommentSchema
from .post import PostSchema
from .user import UserPrivateSchema, UserPublicSchema

__all__ = [
    "LoginSchema",
    "TokenResponseSchema",
    "CommentAuthorSchema",
    "CommentSchema",
    "ThreadCommentSchema",
    "PostSchema",
    "UserPrivateSchema",
    "UserPublicSchema",
]
