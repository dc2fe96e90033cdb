"""
PostService
===========

Owner-scoped CRUD over the `Post` aggregate plus the public listing of a
user's posts.

Every mutation re-asserts ownership inside the statement's ``WHERE`` clause
(``id`` *and* ``user_id``), so the pre-read only decides between 404 and 403.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.exc import IntegrityError

from bloggy.repositories.post import PostRepository
from bloggy.services._shared.base import BaseService, parse_id
from bloggy.services._shared.errors import (
    ConflictError,
    MalformedIdError,
    MissingUpdateFieldsError,
    NotFoundError,
    violates,
)
from bloggy.services._shared.validation import FieldRule, FieldRules, run_pipeline
from bloggy.services.posts.dto import PostOut

log = logging.getLogger(__name__)

POST_RULES = FieldRules(
    title=FieldRule(min=3, max=64, trimmed=True),
    content=FieldRule(min=16),
    slug=FieldRule(min=3, max=64, trimmed=True, no_spaces=True),
)
POST_REQUIRED = ("title", "content", "slug")


def _conflict_from(exc: IntegrityError) -> ConflictError | None:
    """Name the per-owner unique field an insert/update collided on."""
    if violates(exc, "uq_posts_slug_user_id", columns=("posts.slug", "posts.user_id")):
        return ConflictError("Post", "You already have a post with this slug")
    if violates(exc, "uq_posts_title_user_id", columns=("posts.title", "posts.user_id")):
        return ConflictError("Post", "You already have a post with this title")
    return None


def _clean(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Store text fields trimmed."""
    return {k: v.strip() if isinstance(v, str) else v for k, v in fields.items()}


class PostService(BaseService):
    """Application service for posts."""

    # --------------------------------------------------------------------- #
    # Reads
    # --------------------------------------------------------------------- #

    def list_mine(self) -> list[PostOut]:
        """Return the actor's posts, newest first."""
        actor_id = self.require_actor()
        with self.ro_uow() as uow:
            return [PostOut.from_model(p) for p in uow.posts.list_for_user(actor_id)]

    def get_mine(self, raw_id: object) -> PostOut:
        """
        Return one of the actor's posts.

        :raises MalformedIdError: If ``raw_id`` is not a valid identifier.
        :raises NotFoundError: If the post does not exist or is someone else's.
        """
        post_id = parse_id(raw_id)
        actor_id = self.require_actor()
        with self.ro_uow() as uow:
            post = uow.posts.find_one(id=post_id, user_id=actor_id)
            if post is None:
                raise NotFoundError("Post", post_id)
            return PostOut.from_model(post)

    def list_for_username(self, username: str) -> list[PostOut]:
        """
        Public listing of a user's posts, newest first.

        :raises NotFoundError: If the user does not exist.
        """
        with self.ro_uow() as uow:
            user = uow.users.get_by_username(username)
            if user is None:
                raise NotFoundError("User", username)
            return [PostOut.from_model(p) for p in uow.posts.list_for_user(user.id)]

    # --------------------------------------------------------------------- #
    # Mutations
    # --------------------------------------------------------------------- #

    def create(self, body: Mapping[str, Any]) -> PostOut:
        """
        Create a post owned by the actor.

        :param body: Raw payload with ``title``, ``content`` and ``slug``.
        :raises ValidationFailure: When a field breaks a rule.
        :raises ConflictError: On a duplicate title or slug for this owner.
        """
        actor_id = self.require_actor()
        run_pipeline(body, POST_RULES, required=POST_REQUIRED)
        values = _clean({k: body[k] for k in POST_REQUIRED})

        with self.rw_uow() as uow:
            repo: PostRepository = uow.posts
            try:
                post = repo.add(repo.model(user_id=actor_id, **values))
            except IntegrityError as exc:
                conflict = _conflict_from(exc)
                if conflict is None:
                    raise
                raise conflict from exc
            out = PostOut.from_model(post)

        log.info("post created: id=%s owner=%s", out.id, actor_id)
        return out

    def update(self, raw_id: object, body: Mapping[str, Any]) -> PostOut:
        """
        Partially update ``title``, ``content`` and/or ``slug``.

        Order: id -> non-empty update -> validation -> existence (404) ->
        ownership (403) -> scoped ``UPDATE`` -> re-read.

        :raises MalformedIdError: If ``raw_id`` is not a valid identifier.
        :raises MissingUpdateFieldsError: If no updatable field is present.
        :raises ValidationFailure: When a supplied field breaks a rule.
        :raises NotFoundError: If the post is missing (or vanished mid-update).
        :raises AuthorizationError: If the actor does not own the post.
        :raises ConflictError: On a duplicate title or slug for this owner.
        """
        post_id = parse_id(raw_id)
        actor_id = self.require_actor()

        fields = {k: body[k] for k in POST_REQUIRED if k in body}
        if not fields:
            raise MissingUpdateFieldsError()
        run_pipeline(fields, POST_RULES.subset(fields))

        with self.rw_uow() as uow:
            repo: PostRepository = uow.posts
            post = repo.get(post_id)
            if post is None:
                raise NotFoundError("Post", post_id)
            self.ensure_owner(post.user_id, msg="You can only edit your own posts")

            try:
                updated = repo.update_where(_clean(fields), id=post_id, user_id=actor_id)
            except IntegrityError as exc:
                conflict = _conflict_from(exc)
                if conflict is None:
                    raise
                raise conflict from exc
            if updated == 0:
                raise NotFoundError("Post", post_id)

            post = repo.refresh(post_id)
            if post is None:
                raise NotFoundError("Post", post_id)
            return PostOut.from_model(post)

    def delete(self, raw_id: object) -> None:
        """
        Delete one of the actor's posts together with its comments.

        Idempotent: malformed, unknown or foreign ids are silently ignored.
        """
        actor_id = self.require_actor()
        try:
            post_id = parse_id(raw_id)
        except MalformedIdError:
            return

        with self.rw_uow() as uow:
            if not uow.posts.exists(id=post_id, user_id=actor_id):
                return
            uow.comments.delete_where(post_id=post_id)
            uow.posts.delete_where(id=post_id, user_id=actor_id)

        log.info("post deleted: id=%s owner=%s", post_id, actor_id)
