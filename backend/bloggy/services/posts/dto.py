"""DTOs for PostService."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from bloggy.models.post import Post


@dataclass(frozen=True, slots=True)
class PostOut:
    """
    Output DTO for a post.

    :param id: Post identifier.
    :param user_id: Owner identifier.
    :param title: Title, unique per owner.
    :param content: Body text.
    :param slug: URL handle, unique per owner.
    :param created_at: Insert timestamp.
    :param updated_at: Last modification timestamp.
    """

    id: str
    user_id: str
    title: str
    content: str
    slug: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, post: Post) -> PostOut:
        return cls(
            id=post.id,
            user_id=post.user_id,
            title=post.title,
            content=post.content,
            slug=post.slug,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
