"""Comment resource schemas."""

from __future__ import annotations

from marshmallow import Schema, fields


class CommentAuthorSchema(Schema):
    """Author reference embedded in thread listings."""

    id = fields.String(required=True)
    username = fields.String(required=True)


class CommentSchema(Schema):
    """Representation of the comment entity."""

    id = fields.String(required=True)
    user_id = fields.String(required=True, data_key="userId")
    post_id = fields.String(required=True, data_key="postId")
    content = fields.String(required=True)
    created_at = fields.DateTime(required=True, data_key="createdAt")
    updated_at = fields.DateTime(required=True, data_key="updatedAt")


class ThreadCommentSchema(CommentSchema):
    """Comment as listed under a public post, with its author."""

    user = fields.Nested(CommentAuthorSchema, required=True)
