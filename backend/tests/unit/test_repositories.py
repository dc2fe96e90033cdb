"""Tests for the scoped repository operations."""

from __future__ import annotations

import pytest
from bloggy.repositories import PostRepository, UserRepository

from tests.factories.post import PostFactory
from tests.factories.user import UserFactory


class TestScopedMutations:
    def test_update_where_requires_matching_owner(self, session):
        post = PostFactory(title="Original")
        repo = PostRepository()

        assert repo.update_where({"title": "Changed"}, id=post.id, user_id=UserFactory().id) == 0
        assert repo.update_where({"title": "Changed"}, id=post.id, user_id=post.user_id) == 1
        session.commit()
        assert repo.refresh(post.id).title == "Changed"

    def test_update_where_rejects_non_updatable_fields(self):
        post = PostFactory()
        with pytest.raises(ValueError):
            PostRepository().update_where({"user_id": "x"}, id=post.id)

    def test_unknown_filter_fails_closed(self):
        with pytest.raises(ValueError):
            PostRepository().delete_where(owner="x")

    def test_delete_where_requires_a_filter(self):
        with pytest.raises(ValueError):
            PostRepository().delete_where()


class TestUserRepository:
    def test_authenticate(self):
        UserFactory(username="alice", password="secret123")
        repo = UserRepository()
        user, ok = repo.authenticate("alice", "secret123")
        assert user is not None and ok is True
        assert repo.authenticate("alice", "wrong")[1] is False
        assert repo.authenticate("bob", "secret123") == (None, False)

    def test_post_lookup_by_owner_and_slug(self):
        post = PostFactory(slug="intro")
        found = PostRepository().get_by_owner_and_slug(post.user.username, "intro")
        assert found is not None and found.id == post.id
