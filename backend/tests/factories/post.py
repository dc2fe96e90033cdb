"""Factory Boy definition for :class:`bloggy.models.post.Post`."""

from __future__ import annotations

import factory
from bloggy.models.post import Post

from tests.factories import BaseFactory
from tests.factories.user import UserFactory


class PostFactory(BaseFactory):
    """Build persisted posts owned by a fresh user unless ``user`` is given."""

    class Meta:
        model = Post

    user = factory.SubFactory(UserFactory)
    title = factory.Sequence(lambda n: f"Post title {n}")
    slug = factory.Sequence(lambda n: f"post-{n}")
    content = factory.Faker("text", max_nb_chars=200)
