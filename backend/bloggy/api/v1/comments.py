"""Comment endpoints: public threads plus author-scoped CRUD."""

from __future__ import annotations

from flask import Blueprint

from bloggy.api.deps import (
    actor_context,
    created_response,
    json_body,
    json_response,
    no_content,
    public_context,
    require_auth,
    timing,
    translate_errors,
)
from bloggy.schemas import CommentSchema, ThreadCommentSchema
from bloggy.services.comments.service import CommentService

bp = Blueprint("comments", __name__)

comment_schema = CommentSchema()
comment_list_schema = CommentSchema(many=True)
thread_schema = ThreadCommentSchema(many=True)


@bp.get("/<username>/<slug>")
@timing
@translate_errors
def thread(username: str, slug: str):
    """Return the comments on ``username``'s post ``slug``, newest first."""

    comments = CommentService(ctx=public_context()).thread(username, slug)
    return json_response(thread_schema.dump(comments))


@bp.get("")
@require_auth
@timing
@translate_errors
def list_comments():
    """Return the caller's comments, newest first."""

    comments = CommentService(ctx=actor_context()).list_mine()
    return json_response(comment_list_schema.dump(comments))


@bp.get("/<comment_id>")
@require_auth
@timing
@translate_errors
def get_comment(comment_id: str):
    """Return one of the caller's comments."""

    comment = CommentService(ctx=actor_context()).get_mine(comment_id)
    return json_response(comment_schema.dump(comment))


@bp.post("")
@require_auth
@timing
@translate_errors
def create_comment():
    """Comment on an existing post."""

    comment = CommentService(ctx=actor_context()).create(json_body())
    return created_response(comment_schema.dump(comment), comment.id)


@bp.put("/<comment_id>")
@require_auth
@timing
@translate_errors
def update_comment(comment_id: str):
    """Replace the content of one of the caller's comments."""

    comment = CommentService(ctx=actor_context()).update(comment_id, json_body())
    return json_response(comment_schema.dump(comment))


@bp.delete("/<comment_id>")
@require_auth
@timing
@translate_errors
def delete_comment(comment_id: str):
    """Delete one of the caller's comments; always answers 204."""

    CommentService(ctx=actor_context()).delete(comment_id)
    return no_content()
