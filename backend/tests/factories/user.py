"""Factory Boy definition for :class:`bloggy.models.user.User`."""

from __future__ import annotations

import factory
from bloggy.models.user import User

from tests.factories import BaseFactory


class UserFactory(BaseFactory):
    """Build persisted :class:`bloggy.models.user.User` instances.

    ``password`` goes through the model's write-only setter, so the stored
    value is always a hash.
    """

    class Meta:
        model = User

    username = factory.Sequence(lambda n: f"user{n}")
    blog = factory.Faker("text", max_nb_chars=40)
    password = "secret123"
