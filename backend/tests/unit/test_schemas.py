"""Tests for request and response schemas."""

from __future__ import annotations

import pytest
from bloggy.schemas import LoginSchema, TokenResponseSchema
from bloggy.services.auth.dto import TokenOut
from marshmallow import ValidationError


def test_login_schema_loads_credentials_and_ignores_extras():
    data = LoginSchema().load({"username": "alice", "password": "secret123", "remember": True})
    assert data == {"username": "alice", "password": "secret123"}


@pytest.mark.parametrize(
    ("payload", "field"),
    [
        ({"password": "secret123"}, "username"),
        ({"username": "alice"}, "password"),
        ({"username": "", "password": "secret123"}, "username"),
        ({"username": "alice", "password": 12345678}, "password"),
    ],
)
def test_login_schema_rejects_missing_or_blank_fields(payload, field):
    with pytest.raises(ValidationError) as info:
        LoginSchema().load(payload)
    assert field in info.value.messages


def test_token_response_uses_camel_case():
    assert TokenResponseSchema().dump(TokenOut(auth_token="abc")) == {"authToken": "abc"}
