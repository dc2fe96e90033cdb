"""Repository package exposing persistence-layer access for all domain models."""

from __future__ import annotations

from bloggy.repositories.base import BaseRepository
from bloggy.repositories.comment import CommentRepository
from bloggy.repositories.post import PostRepository
from bloggy.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "CommentRepository",
    "PostRepository",
    "UserRepository",
]
