"""Comment model: a short reply written by a user on a post."""

from __future__ import annotations

from sqlalchemy import ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bloggy.core.extensions import db

from .base import ID_LENGTH, PKMixin, ReprMixin, TimestampMixin
from .post import Post
from .user import User


class Comment(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """Comment authored by ``user`` on ``post``."""

    __tablename__ = "comments"

    user_id: Mapped[str] = mapped_column(
        String(ID_LENGTH), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    post_id: Mapped[str] = mapped_column(
        String(ID_LENGTH), ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    )
    content: Mapped[str] = mapped_column(String(300), nullable=False)

    user: Mapped[User] = relationship()
    post: Mapped[Post] = relationship()

    __table_args__ = (
        Index("ix_comments_post_id_created_at", "post_id", "created_at"),
        Index("ix_comments_user_id", "user_id"),
    )
