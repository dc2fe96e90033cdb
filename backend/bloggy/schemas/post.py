"""Post resource schemas."""

from __future__ import annotations

from marshmallow import Schema, fields


class PostSchema(Schema):
    """Representation of the post entity."""

    id = fields.String(required=True)
    user_id = fields.String(required=True, data_key="userId")
    title = fields.String(required=True)
    content = fields.String(required=True)
    slug = fields.String(required=True)
    created_at = fields.DateTime(required=True, data_key="createdAt")
    updated_at = fields.DateTime(required=True, data_key="updatedAt")
