"""Comment repository."""

from __future__ import annotations

from sqlalchemy.orm import selectinload

from bloggy.models.comment import Comment
from bloggy.repositories.base import BaseRepository

NEWEST_FIRST = ("-created_at",)


class CommentRepository(BaseRepository[Comment]):
    """Persistence-only repository for :class:`Comment`."""

    model = Comment

    def _default_eagerload(self, stmt):
        """Load the author alongside each comment (1:1 -> one extra SELECT)."""
        return stmt.options(selectinload(Comment.user))

    def _sortable_fields(self):
        return {"created_at": Comment.created_at}

    def _filterable_fields(self):
        return {"id": Comment.id, "user_id": Comment.user_id, "post_id": Comment.post_id}

    def _updatable_fields(self):
        return {"content"}

    def list_for_user(self, user_id: str) -> list[Comment]:
        """Return comments written by ``user_id``, newest first."""
        return self.list(filters={"user_id": user_id}, sort=NEWEST_FIRST)

    def list_thread(self, post_id: str) -> list[Comment]:
        """Return a post's comments newest first with their authors loaded."""
        return self.list(filters={"post_id": post_id}, sort=NEWEST_FIRST)
