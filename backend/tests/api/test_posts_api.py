"""API tests for ``/api/posts``."""

from __future__ import annotations

from uuid import UUID, uuid4

import pytest
from bloggy.models import Post

from tests.factories.post import PostFactory
from tests.helpers.assertions import assert_error, assert_json_keys

BODY = {"title": "Hello World", "content": "0123456789012345", "slug": "hello-world"}
POST_KEYS = {"id", "userId", "title", "content", "slug", "createdAt", "updatedAt"}


def test_requires_auth(client):
    assert_error(client.get("/api/posts"), 401, "Unauthenticated")
    assert_error(client.post("/api/posts", json=BODY), 401, "Unauthenticated")


def test_create_post(client, user, auth_header):
    resp = client.post("/api/posts", json=BODY, headers=auth_header)
    assert resp.status_code == 201
    body = resp.get_json()
    assert_json_keys(body, POST_KEYS)
    assert body["userId"] == user.id
    assert resp.headers["Location"] == f"/api/posts/{body['id']}"


def test_create_title_too_short(client, auth_header):
    resp = client.post("/api/posts", json={**BODY, "title": "ab"}, headers=auth_header)
    assert_error(resp, 422, "ValidationError", location="title")


def test_duplicate_slug_same_owner(client, auth_header):
    client.post("/api/posts", json=BODY, headers=auth_header)
    resp = client.post("/api/posts", json={**BODY, "title": "Other"}, headers=auth_header)
    assert_error(resp, 400, "DuplicateResource")


def test_same_slug_different_owners(client, auth_header, other_header):
    assert client.post("/api/posts", json=BODY, headers=auth_header).status_code == 201
    assert client.post("/api/posts", json=BODY, headers=other_header).status_code == 201


def test_get_own_post(client, user, auth_header):
    post = PostFactory(user=user)
    resp = client.get(f"/api/posts/{post.id}", headers=auth_header)
    assert resp.status_code == 200
    assert resp.get_json()["id"] == post.id


def test_get_accepts_hyphenated_uuid(client, user, auth_header):
    post = PostFactory(user=user)
    hyphenated = str(UUID(post.id))
    assert client.get(f"/api/posts/{hyphenated}", headers=auth_header).status_code == 200


def test_get_malformed_id(client, auth_header):
    resp = client.get("/api/posts/123", headers=auth_header)
    assert_error(resp, 400, "MalformedId", "The `id` is not valid")


def test_get_someone_elses_post(client, other_user, auth_header):
    post = PostFactory(user=other_user)
    assert_error(client.get(f"/api/posts/{post.id}", headers=auth_header), 404, "NotFound")


def test_update_post(client, user, auth_header):
    post = PostFactory(user=user)
    resp = client.put(f"/api/posts/{post.id}", json={"slug": "new-slug"}, headers=auth_header)
    assert resp.status_code == 200
    assert resp.get_json()["slug"] == "new-slug"


def test_update_empty_body(client, user, auth_header, session):
    post = PostFactory(user=user, title="Keep me")
    resp = client.put(f"/api/posts/{post.id}", json={}, headers=auth_header)
    assert_error(resp, 400, "MissingUpdateFields", "Missing update fields in request body")
    assert session.get(Post, post.id).title == "Keep me"


def test_update_not_owner(client, other_user, auth_header):
    post = PostFactory(user=other_user)
    resp = client.put(f"/api/posts/{post.id}", json={"title": "Mine now"}, headers=auth_header)
    assert_error(resp, 403, "Forbidden")


def test_update_missing(client, auth_header):
    resp = client.put(f"/api/posts/{uuid4().hex}", json={"title": "Nope"}, headers=auth_header)
    assert_error(resp, 404, "NotFound")


@pytest.mark.parametrize(
    ("field", "message"),
    [
        ("title", "You already have a post with this title"),
        ("slug", "You already have a post with this slug"),
    ],
)
def test_update_into_own_existing_value(client, user, auth_header, session, field, message):
    PostFactory(user=user, title="Taken title", slug="taken-slug")
    post = PostFactory(user=user, title="Free title", slug="free-slug")
    taken = {"title": "Taken title", "slug": "taken-slug"}[field]

    resp = client.put(f"/api/posts/{post.id}", json={field: taken}, headers=auth_header)

    assert_error(resp, 400, "DuplicateResource", message)
    session.expire_all()
    assert session.get(Post, post.id).slug == "free-slug"
    assert session.get(Post, post.id).title == "Free title"


def test_update_to_value_used_by_other_owner(client, user, other_user, auth_header):
    PostFactory(user=other_user, slug="shared-slug")
    post = PostFactory(user=user)
    resp = client.put(f"/api/posts/{post.id}", json={"slug": "shared-slug"}, headers=auth_header)
    assert resp.status_code == 200
    assert resp.get_json()["slug"] == "shared-slug"


def test_delete_is_idempotent(client, user, other_user, auth_header, session):
    mine = PostFactory(user=user)
    theirs = PostFactory(user=other_user)

    for target in (mine.id, mine.id, theirs.id, "garbage", uuid4().hex):
        resp = client.delete(f"/api/posts/{target}", headers=auth_header)
        assert resp.status_code == 204
        assert resp.get_data() == b""

    assert session.get(Post, mine.id) is None
    assert session.get(Post, theirs.id) is not None


def test_list_is_scoped_to_owner(client, user, other_user, auth_header):
    PostFactory(user=user)
    PostFactory(user=other_user)
    resp = client.get("/api/posts", headers=auth_header)
    assert [p["userId"] for p in resp.get_json()] == [user.id]
