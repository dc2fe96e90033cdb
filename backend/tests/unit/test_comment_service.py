# tests/unit/test_comment_service.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from bloggy.models import Comment
from bloggy.services._shared.base import ServiceContext
from bloggy.services._shared.errors import (
    AuthorizationError,
    MalformedIdError,
    NotFoundError,
    ValidationFailure,
)
from bloggy.services.comments.service import CommentService

from tests.factories.comment import CommentFactory
from tests.factories.post import PostFactory
from tests.factories.user import UserFactory


def service_for(user) -> CommentService:
    return CommentService(ctx=ServiceContext(actor_id=user.id))


def test_create_on_existing_post():
    post = PostFactory()
    author = UserFactory()
    out = service_for(author).create({"content": "Nice post", "postId": post.id})
    assert out.post_id == post.id
    assert out.user_id == author.id


def test_create_requires_content_then_post_id():
    svc = service_for(UserFactory())
    with pytest.raises(ValidationFailure) as info:
        svc.create({})
    assert info.value.location == "content"
    with pytest.raises(ValidationFailure) as info:
        svc.create({"content": "hello"})
    assert info.value.location == "postId"


def test_create_with_malformed_post_id():
    with pytest.raises(MalformedIdError):
        service_for(UserFactory()).create({"content": "hello", "postId": "nope"})


def test_create_on_missing_post(session):
    with pytest.raises(NotFoundError):
        service_for(UserFactory()).create({"content": "hello", "postId": uuid4().hex})
    assert session.query(Comment).count() == 0


def test_create_rejects_padded_content():
    post = PostFactory()
    with pytest.raises(ValidationFailure) as info:
        service_for(UserFactory()).create({"content": " hello ", "postId": post.id})
    assert info.value.message == "Cannot start or end with whitespace"


def test_update_requires_content():
    comment = CommentFactory()
    with pytest.raises(ValidationFailure) as info:
        service_for(comment.user).update(comment.id, {})
    assert info.value.message == "Missing content in request body"


def test_update_by_author(session):
    comment = CommentFactory(content="first")
    out = service_for(comment.user).update(comment.id, {"content": "second"})
    assert out.content == "second"


def test_update_by_someone_else(session):
    comment = CommentFactory(content="first")
    with pytest.raises(AuthorizationError):
        service_for(UserFactory()).update(comment.id, {"content": "hijack"})
    assert session.get(Comment, comment.id).content == "first"


def test_delete_is_scoped_to_author(session):
    comment = CommentFactory()
    service_for(UserFactory()).delete(comment.id)
    service_for(UserFactory()).delete(uuid4().hex)
    assert session.get(Comment, comment.id) is not None

    service_for(comment.user).delete(comment.id)
    assert session.get(Comment, comment.id) is None


def test_thread_lists_newest_first_with_authors():
    post = PostFactory(slug="hello-world")
    now = datetime.now(timezone.utc)
    older = CommentFactory(post=post, created_at=now - timedelta(minutes=5))
    newer = CommentFactory(post=post, created_at=now)
    CommentFactory()  # another post

    thread = CommentService().thread(post.user.username, "hello-world")
    assert [c.id for c in thread] == [newer.id, older.id]
    assert thread[0].user.username == newer.user.username


def test_thread_unknown_post_or_user():
    post = PostFactory(slug="hello-world")
    with pytest.raises(NotFoundError):
        CommentService().thread(post.user.username, "missing")
    with pytest.raises(NotFoundError):
        CommentService().thread("nobody", "hello-world")


def test_list_and_get_mine():
    comment = CommentFactory()
    svc = service_for(comment.user)
    assert [c.id for c in svc.list_mine()] == [comment.id]
    assert svc.get_mine(comment.id).id == comment.id
    with pytest.raises(NotFoundError):
        service_for(UserFactory()).get_mine(comment.id)
