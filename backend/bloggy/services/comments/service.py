"""
CommentService
==============

Comments are written by any authenticated user on an existing post and
edited or deleted only by their author. Threads are public.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from bloggy.repositories.comment import CommentRepository
from bloggy.services._shared.base import BaseService, parse_id
from bloggy.services._shared.errors import MalformedIdError, NotFoundError
from bloggy.services._shared.validation import (
    FieldRule,
    FieldRules,
    required_fields,
    run_pipeline,
)
from bloggy.services.comments.dto import CommentOut

log = logging.getLogger(__name__)

COMMENT_RULES = FieldRules(content=FieldRule(min=3, max=300, trimmed=True))


class CommentService(BaseService):
    """Application service for comments."""

    # --------------------------------------------------------------------- #
    # Reads
    # --------------------------------------------------------------------- #

    def list_mine(self) -> list[CommentOut]:
        """Return the actor's comments, newest first."""
        actor_id = self.require_actor()
        with self.ro_uow() as uow:
            return [CommentOut.from_model(c) for c in uow.comments.list_for_user(actor_id)]

    def get_mine(self, raw_id: object) -> CommentOut:
        """
        Return one of the actor's comments.

        :raises MalformedIdError: If ``raw_id`` is not a valid identifier.
        :raises NotFoundError: If the comment does not exist or is someone else's.
        """
        comment_id = parse_id(raw_id)
        actor_id = self.require_actor()
        with self.ro_uow() as uow:
            comment = uow.comments.find_one(id=comment_id, user_id=actor_id)
            if comment is None:
                raise NotFoundError("Comment", comment_id)
            return CommentOut.from_model(comment)

    def thread(self, username: str, slug: str) -> list[CommentOut]:
        """
        Public comments on ``/<username>/<slug>``, newest first, with authors.

        :raises NotFoundError: If the user or the post is unknown.
        """
        with self.ro_uow() as uow:
            post = uow.posts.get_by_owner_and_slug(username, slug)
            if post is None:
                raise NotFoundError("Post", f"{username}/{slug}")
            return [
                CommentOut.from_model(c, with_author=True)
                for c in uow.comments.list_thread(post.id)
            ]

    # --------------------------------------------------------------------- #
    # Mutations
    # --------------------------------------------------------------------- #

    def create(self, body: Mapping[str, Any]) -> CommentOut:
        """
        Comment on an existing post.

        :param body: Raw payload with ``content`` and ``postId``.
        :raises ValidationFailure: On a missing or invalid field.
        :raises MalformedIdError: If ``postId`` is not a valid identifier.
        :raises NotFoundError: If the post does not exist.
        """
        actor_id = self.require_actor()
        failure = required_fields(body, ("content", "postId"))
        if failure is not None:
            raise failure
        post_id = parse_id(body["postId"])
        run_pipeline(body, COMMENT_RULES)

        with self.rw_uow() as uow:
            if uow.posts.get(post_id) is None:
                raise NotFoundError("Post", post_id)
            repo: CommentRepository = uow.comments
            comment = repo.add(
                repo.model(user_id=actor_id, post_id=post_id, content=body["content"])
            )
            out = CommentOut.from_model(comment)

        log.info("comment created: id=%s post=%s author=%s", out.id, post_id, actor_id)
        return out

    def update(self, raw_id: object, body: Mapping[str, Any]) -> CommentOut:
        """
        Replace a comment's ``content``.

        :raises MalformedIdError: If ``raw_id`` is not a valid identifier.
        :raises ValidationFailure: When ``content`` is missing or invalid.
        :raises NotFoundError: If the comment is missing.
        :raises AuthorizationError: If the actor is not the author.
        """
        comment_id = parse_id(raw_id)
        actor_id = self.require_actor()
        run_pipeline(body, COMMENT_RULES, required=("content",))

        with self.rw_uow() as uow:
            repo: CommentRepository = uow.comments
            comment = repo.get(comment_id)
            if comment is None:
                raise NotFoundError("Comment", comment_id)
            self.ensure_owner(comment.user_id, msg="You can only edit your own comments")

            updated = repo.update_where(
                {"content": body["content"]}, id=comment_id, user_id=actor_id
            )
            if updated == 0:
                raise NotFoundError("Comment", comment_id)

            comment = repo.refresh(comment_id)
            if comment is None:
                raise NotFoundError("Comment", comment_id)
            return CommentOut.from_model(comment)

    def delete(self, raw_id: object) -> None:
        """Delete one of the actor's comments; malformed or foreign ids are no-ops."""
        actor_id = self.require_actor()
        try:
            comment_id = parse_id(raw_id)
        except MalformedIdError:
            return

        with self.rw_uow() as uow:
            removed = uow.comments.delete_where(id=comment_id, user_id=actor_id)

        if removed:
            log.info("comment deleted: id=%s author=%s", comment_id, actor_id)
