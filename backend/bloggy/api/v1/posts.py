"""Post endpoints (bearer protected, owner scoped)."""

from __future__ import annotations

from flask import Blueprint

from bloggy.api.deps import (
    actor_context,
    created_response,
    json_body,
    json_response,
    no_content,
    require_auth,
    timing,
    translate_errors,
)
from bloggy.schemas import PostSchema
from bloggy.services.posts.service import PostService

bp = Blueprint("posts", __name__)

post_schema = PostSchema()
post_list_schema = PostSchema(many=True)


@bp.get("")
@require_auth
@timing
@translate_errors
def list_posts():
    """Return the caller's posts, newest first."""

    posts = PostService(ctx=actor_context()).list_mine()
    return json_response(post_list_schema.dump(posts))


@bp.get("/<post_id>")
@require_auth
@timing
@translate_errors
def get_post(post_id: str):
    """Return one of the caller's posts."""

    post = PostService(ctx=actor_context()).get_mine(post_id)
    return json_response(post_schema.dump(post))


@bp.post("")
@require_auth
@timing
@translate_errors
def create_post():
    """Create a post owned by the caller."""

    post = PostService(ctx=actor_context()).create(json_body())
    return created_response(post_schema.dump(post), post.id)


@bp.put("/<post_id>")
@require_auth
@timing
@translate_errors
def update_post(post_id: str):
    """Partially update one of the caller's posts."""

    post = PostService(ctx=actor_context()).update(post_id, json_body())
    return json_response(post_schema.dump(post))


@bp.delete("/<post_id>")
@require_auth
@timing
@translate_errors
def delete_post(post_id: str):
    """Delete one of the caller's posts; always answers 204."""

    PostService(ctx=actor_context()).delete(post_id)
    return no_content()
