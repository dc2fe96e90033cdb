"""DTOs for CommentService."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from bloggy.models.comment import Comment


@dataclass(frozen=True, slots=True)
class AuthorOut:
    """Minimal author reference embedded in public comment threads."""

    id: str
    username: str


@dataclass(frozen=True, slots=True)
class CommentOut:
    """
    Output DTO for a comment.

    :param id: Comment identifier.
    :param user_id: Author identifier.
    :param post_id: Commented post identifier.
    :param content: Comment body.
    :param created_at: Insert timestamp.
    :param updated_at: Last modification timestamp.
    :param user: Author reference, only populated for thread listings.
    """

    id: str
    user_id: str
    post_id: str
    content: str
    created_at: datetime
    updated_at: datetime
    user: AuthorOut | None = None

    @classmethod
    def from_model(cls, comment: Comment, *, with_author: bool = False) -> CommentOut:
        author = None
        if with_author:
            author = AuthorOut(id=comment.user.id, username=comment.user.username)
        return cls(
            id=comment.id,
            user_id=comment.user_id,
            post_id=comment.post_id,
            content=comment.content,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            user=author,
        )
