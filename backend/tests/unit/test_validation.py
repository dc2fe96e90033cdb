"""Tests for the request-body validation primitives."""

from __future__ import annotations

import pytest
from bloggy.services._shared.errors import ValidationFailure
from bloggy.services._shared.validation import (
    FieldRule,
    FieldRules,
    required_fields,
    run_pipeline,
    string_fields,
    validate_lengths,
    validate_space_around,
    validate_space_inside,
)

from tests.helpers.utils import not_raises


class TestRequiredFields:
    def test_first_missing_field_in_declaration_order(self):
        failure = required_fields({"title": "x"}, ["title", "content", "slug"])
        assert failure == ValidationFailure("Missing content in request body", "content")

    def test_falsy_value_counts_as_missing(self):
        failure = required_fields({"title": ""}, ["title"])
        assert failure is not None
        assert failure.location == "title"

    def test_all_present(self):
        assert required_fields({"a": "1", "b": "2"}, ["a", "b"]) is None


class TestStringFields:
    def test_non_string_value_is_rejected(self):
        failure = string_fields({"username": 123}, ["username", "password"])
        assert failure == ValidationFailure("Incorrect field type: expected string", "username")

    def test_absent_fields_are_ignored(self):
        assert string_fields({}, ["username"]) is None


class TestValidateLengths:
    def test_trimmed_length_is_measured(self):
        sized = {"title": FieldRule(min=3)}
        failure = validate_lengths({"title": "  ab  "}, sized)
        assert failure == ValidationFailure("Must be at least 3 characters long", "title")

    def test_min_checks_run_before_max_checks(self):
        sized = {"title": FieldRule(max=5), "content": FieldRule(min=16)}
        failure = validate_lengths({"title": "x" * 10, "content": "short"}, sized)
        assert failure is not None
        assert failure.location == "content"
        assert failure.message == "Must be at least 16 characters long"

    def test_too_long(self):
        failure = validate_lengths({"blog": "b" * 73}, {"blog": FieldRule(min=3, max=72)})
        assert failure == ValidationFailure("Must be at most 72 characters long", "blog")

    def test_boundaries_pass(self):
        sized = {"title": FieldRule(min=3, max=64)}
        assert validate_lengths({"title": "abc"}, sized) is None
        assert validate_lengths({"title": "a" * 64}, sized) is None

    def test_absent_fields_are_skipped(self):
        assert validate_lengths({}, {"title": FieldRule(min=3)}) is None


class TestWhitespaceChecks:
    def test_space_around(self):
        failure = validate_space_around({"password": " secret1"}, ["password"])
        assert failure == ValidationFailure("Cannot start or end with whitespace", "password")
        assert validate_space_around({"password": "sec ret"}, ["password"]) is None

    def test_space_inside(self):
        failure = validate_space_inside({"slug": "hello world"}, ["slug"])
        assert failure == ValidationFailure("Must not contain whitespace", "slug")
        assert validate_space_inside({"slug": "hello-world"}, ["slug"]) is None


class TestRunPipeline:
    rules = FieldRules(
        username=FieldRule(min=3, trimmed=True, no_spaces=True),
        password=FieldRule(min=6, max=72, trimmed=True),
    )

    def test_required_before_everything_else(self):
        with pytest.raises(ValidationFailure) as info:
            run_pipeline({"username": 1}, self.rules, required=("username", "password"))
        assert info.value.location == "password"

    def test_type_before_length(self):
        with pytest.raises(ValidationFailure) as info:
            run_pipeline({"username": ["a"], "password": "secret1"}, self.rules)
        assert info.value.message == "Incorrect field type: expected string"

    def test_length_before_space_around(self):
        with pytest.raises(ValidationFailure) as info:
            run_pipeline({"username": " ab ", "password": "secret1"}, self.rules)
        assert info.value.message == "Must be at least 3 characters long"

    def test_space_around_before_space_inside(self):
        with pytest.raises(ValidationFailure) as info:
            run_pipeline({"username": " bob smith", "password": "secret1"}, self.rules)
        assert info.value.message == "Cannot start or end with whitespace"

    def test_valid_body(self):
        with not_raises(ValidationFailure):
            run_pipeline(
                {"username": "bob", "password": "secret1"},
                self.rules,
                required=("username", "password"),
            )

    def test_subset_keeps_only_present_fields(self):
        subset = self.rules.subset(["password"])
        assert list(subset) == ["password"]
        with not_raises(ValidationFailure):
            run_pipeline({"password": "secret1"}, subset)
