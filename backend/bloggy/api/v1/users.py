"""User endpoints: registration, own profile and public profiles."""

from __future__ import annotations

from flask import Blueprint

from bloggy.api.deps import (
    actor_context,
    created_response,
    json_body,
    json_response,
    public_context,
    require_auth,
    timing,
    translate_errors,
)
from bloggy.schemas import PostSchema, UserPrivateSchema, UserPublicSchema
from bloggy.services.identity.service import IdentityService
from bloggy.services.posts.service import PostService

bp = Blueprint("users", __name__)

private_schema = UserPrivateSchema()
public_schema = UserPublicSchema()
post_list_schema = PostSchema(many=True)


@bp.post("")
@timing
@translate_errors
def register():
    """Register a new user and return its sanitized representation."""

    user = IdentityService(ctx=public_context()).register(json_body())
    return created_response(private_schema.dump(user), user.username)


@bp.get("")
@require_auth
@timing
@translate_errors
def me():
    """Return the authenticated user's profile."""

    user = IdentityService(ctx=actor_context()).get_current()
    return json_response(private_schema.dump(user))


@bp.get("/<username>")
@timing
@translate_errors
def profile(username: str):
    """Return a user's public profile."""

    user = IdentityService(ctx=public_context()).get_profile(username)
    return json_response(public_schema.dump(user))


@bp.get("/<username>/posts")
@timing
@translate_errors
def user_posts(username: str):
    """Return a user's posts, newest first."""

    posts = PostService(ctx=public_context()).list_for_username(username)
    return json_response(post_list_schema.dump(posts))
