"""Post model: an article owned by a single user."""

from __future__ import annotations

from sqlalchemy import ForeignKey, Index, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bloggy.core.extensions import db

from .base import ID_LENGTH, PKMixin, ReprMixin, TimestampMixin
from .user import User


class Post(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    Blog post.

    ``title`` and ``slug`` are unique per owner, so two users may publish the
    same slug while one user cannot reuse it.
    """

    __tablename__ = "posts"

    user_id: Mapped[str] = mapped_column(
        String(ID_LENGTH), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    title: Mapped[str] = mapped_column(String(64), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(String(64), nullable=False)

    user: Mapped[User] = relationship()

    __table_args__ = (
        UniqueConstraint("title", "user_id", name="uq_posts_title_user_id"),
        UniqueConstraint("slug", "user_id", name="uq_posts_slug_user_id"),
        Index("ix_posts_user_id_created_at", "user_id", "created_at"),
    )
