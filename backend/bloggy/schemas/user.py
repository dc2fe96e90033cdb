"""User resource schemas."""

from __future__ import annotations

from marshmallow import Schema, fields


class UserPublicSchema(Schema):
    """Public representation of a user, safe for anonymous readers."""

    username = fields.String(required=True)
    blog = fields.String(required=True)


class UserPrivateSchema(UserPublicSchema):
    """Representation returned to the user themselves (adds ``id``)."""

    id = fields.String(required=True)
