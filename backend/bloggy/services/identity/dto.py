"""
DTOs for IdentityService.

Data Transfer Objects (DTOs) isolate the service layer from ORM models,
ensuring clear input/output contracts and type safety.
"""

from __future__ import annotations

from dataclasses import dataclass

from bloggy.models.user import User

# --------------------------------------------------------------------------- #
# Output DTOs
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class UserOut:
    """
    Output DTO representing a sanitized user.

    The password hash never leaves the model; schemas decide whether ``id``
    is exposed (private view) or not (public view).

    :param id: User identifier.
    :type id: str
    :param username: Unique login handle.
    :type username: str
    :param blog: Blog display name.
    :type blog: str
    """

    id: str
    username: str
    blog: str

    @classmethod
    def from_model(cls, user: User) -> UserOut:
        return cls(id=user.id, username=user.username, blog=user.blog)
