"""Tests for the User model."""

from __future__ import annotations

import pytest
from bloggy.models.user import User
from sqlalchemy.exc import IntegrityError


class TestUser:
    def test_password_hashing(self, session):
        u = User(username="tester", blog="Tester blog")
        u.password = "secret123"
        session.add(u)
        session.commit()
        assert u.password_hash != "secret123"
        assert u.verify_password("secret123") is True
        assert u.verify_password("wrong") is False

    def test_password_is_write_only(self):
        u = User(username="u1", blog="blog")
        u.password = "x"
        with pytest.raises(AttributeError):
            _ = u.password

    def test_ids_are_32_hex_chars(self, session):
        u = User(username="hexy", blog="blog", password="secret123")
        session.add(u)
        session.commit()
        assert len(u.id) == 32
        int(u.id, 16)

    def test_username_and_blog_are_trimmed(self):
        u = User(username="  bob ", blog=" Bob's blog ")
        assert u.username == "bob"
        assert u.blog == "Bob's blog"

    def test_blank_username_rejected(self):
        with pytest.raises(ValueError):
            User(username="   ", blog="blog")

    def test_username_unique(self, session):
        session.add(User(username="bob", blog="first", password="secret123"))
        session.commit()

        session.add(User(username="bob", blog="second", password="secret123"))
        with pytest.raises(IntegrityError):
            session.commit()
        session.rollback()
