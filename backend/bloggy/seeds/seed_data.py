"""Idempotent database seed helpers for local development environments."""

from __future__ import annotations

import logging
from typing import Any, TypeVar, cast

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import select
from sqlalchemy.orm import Session

from bloggy.models.comment import Comment
from bloggy.models.post import Post
from bloggy.models.user import User

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

USER_FIXTURES: list[dict[str, str]] = [
    {"username": "demo", "password": "demopass", "blog": "Demo Notes"},
    {"username": "jamielee", "password": "strongPass123", "blog": "Field Journal"},
]

POST_FIXTURES: list[dict[str, str]] = [
    {
        "author": "demo",
        "title": "Hello World",
        "slug": "hello-world",
        "content": "The first post on this blog, written by the seed command.",
    },
    {
        "author": "demo",
        "title": "Second Thoughts",
        "slug": "second-thoughts",
        "content": "A follow-up post so listings have something to order.",
    },
]

COMMENT_FIXTURES: list[dict[str, str]] = [
    {"author": "jamielee", "post_author": "demo", "slug": "hello-world", "content": "Welcome!"},
]


def _session(database: SQLAlchemy) -> Session:
    """Return the current SQLAlchemy session."""
    return cast(Session, database.session)


def _touch(summary: dict[str, dict[str, int]], table: str, created: bool) -> None:
    """Update summary counters for the given table."""
    entry = summary.setdefault(table, {"created": 0, "existing": 0})
    if created:
        entry["created"] += 1
    else:
        entry["existing"] += 1


def _get_or_create(
    session: Session,
    model: type[T],
    *,
    defaults: dict[str, Any] | None = None,
    **filters: Any,
) -> tuple[T, bool]:
    """Fetch ``model`` by ``filters`` or create it using ``defaults``."""
    instance = session.execute(select(model).filter_by(**filters)).scalar_one_or_none()
    if instance is not None:
        return instance, False
    params = dict(defaults or {})
    params.update(filters)
    instance = cast(T, model(**params))
    session.add(instance)
    session.flush()
    return instance, True


def seed_users(database: SQLAlchemy, *, verbose: bool = False) -> dict[str, dict[str, int]]:
    """Create demo accounts (passwords hashed by the model setter)."""
    if verbose:
        LOGGER.info("Seeding users...")
    session = _session(database)
    summary: dict[str, dict[str, int]] = {}
    for fixture in USER_FIXTURES:
        _, created = _get_or_create(
            session,
            User,
            username=fixture["username"],
            defaults={"password": fixture["password"], "blog": fixture["blog"]},
        )
        _touch(summary, "users", created)
    session.commit()
    return summary


def seed_posts_and_comments(
    database: SQLAlchemy, *, verbose: bool = False
) -> dict[str, dict[str, int]]:
    """Create demo posts and a comment thread for the seeded users."""
    if verbose:
        LOGGER.info("Seeding posts and comments...")
    session = _session(database)
    summary: dict[str, dict[str, int]] = {}
    users = {
        u.username: u
        for u in session.execute(
            select(User).where(User.username.in_([f["username"] for f in USER_FIXTURES]))
        ).scalars()
    }

    for fixture in POST_FIXTURES:
        author = users.get(fixture["author"])
        if author is None:
            raise RuntimeError(f"Post fixture references unknown user {fixture['author']!r}")
        _, created = _get_or_create(
            session,
            Post,
            user_id=author.id,
            slug=fixture["slug"],
            defaults={"title": fixture["title"], "content": fixture["content"]},
        )
        _touch(summary, "posts", created)

    for fixture in COMMENT_FIXTURES:
        author = users[fixture["author"]]
        post = session.execute(
            select(Post).where(
                Post.user_id == users[fixture["post_author"]].id, Post.slug == fixture["slug"]
            )
        ).scalar_one()
        _, created = _get_or_create(
            session, Comment, user_id=author.id, post_id=post.id, content=fixture["content"]
        )
        _touch(summary, "comments", created)

    session.commit()
    return summary


def run_all(database: SQLAlchemy, *, verbose: bool = False) -> dict[str, dict[str, int]]:
    """Run all seeders in the correct foreign-key order."""
    if verbose:
        LOGGER.info("Running full seed pipeline...")
    combined: dict[str, dict[str, int]] = {}
    for func in (seed_users, seed_posts_and_comments):
        result = func(database, verbose=verbose)
        for table, counters in result.items():
            entry = combined.setdefault(table, {"created": 0, "existing": 0})
            entry["created"] += counters.get("created", 0)
            entry["existing"] += counters.get("existing", 0)
    return combined


__all__ = ["seed_users", "seed_posts_and_comments", "run_all"]
