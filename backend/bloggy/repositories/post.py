"""Post repository."""

from __future__ import annotations

from typing import cast

from sqlalchemy import select

from bloggy.models.post import Post
from bloggy.models.user import User
from bloggy.repositories.base import BaseRepository

NEWEST_FIRST = ("-created_at",)


class PostRepository(BaseRepository[Post]):
    """Persistence-only repository for :class:`Post`."""

    model = Post

    def _sortable_fields(self):
        return {"created_at": Post.created_at, "title": Post.title}

    def _filterable_fields(self):
        return {"id": Post.id, "user_id": Post.user_id, "slug": Post.slug}

    def _updatable_fields(self):
        return {"title", "content", "slug"}

    def list_for_user(self, user_id: str) -> list[Post]:
        """Return every post owned by ``user_id``, newest first."""
        return self.list(filters={"user_id": user_id}, sort=NEWEST_FIRST)

    def get_by_owner_and_slug(self, username: str, slug: str) -> Post | None:
        """Resolve a public ``/<username>/<slug>`` address to a post."""
        stmt = (
            select(Post)
            .join(User, User.id == Post.user_id)
            .where(User.username == username, Post.slug == slug)
        )
        return cast(Post | None, self.session.execute(stmt).scalars().first())
