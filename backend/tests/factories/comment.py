"""Factory Boy definition for :class:`bloggy.models.comment.Comment`."""

from __future__ import annotations

import factory
from bloggy.models.comment import Comment

from tests.factories import BaseFactory
from tests.factories.post import PostFactory
from tests.factories.user import UserFactory


class CommentFactory(BaseFactory):
    """Build persisted comments by a fresh user on a fresh post by default."""

    class Meta:
        model = Comment

    user = factory.SubFactory(UserFactory)
    post = factory.SubFactory(PostFactory)
    content = factory.Faker("sentence")
