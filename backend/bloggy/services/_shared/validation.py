"""
Request-body validation primitives.

Each check is a pure function over a ``field -> value`` mapping returning
``None`` on success or a :class:`ValidationFailure` describing the first
offending field. Checks are framework-agnostic: the API layer turns a failure
into a ``422`` response carrying ``message`` and ``location``.

Rules are declared once per entity/operation as a :class:`FieldRules` mapping
and executed by :func:`run_pipeline` in a fixed order::

    required -> type -> length -> space-around -> space-inside

stopping at the first failure.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from bloggy.services._shared.errors import ValidationFailure


@dataclass(frozen=True, slots=True)
class FieldRule:
    """
    Declarative constraints for one string field.

    :param min: Minimum trimmed length, when set.
    :param max: Maximum trimmed length, when set.
    :param trimmed: Reject leading/trailing whitespace.
    :param no_spaces: Reject any space character inside the value.
    """

    min: int | None = None
    max: int | None = None
    trimmed: bool = False
    no_spaces: bool = False


class FieldRules(Mapping[str, FieldRule]):
    """Ordered ``field -> FieldRule`` mapping; declaration order drives error order."""

    def __init__(self, rules: Mapping[str, FieldRule] | None = None, **kwargs: FieldRule) -> None:
        self._rules: dict[str, FieldRule] = dict(rules or {})
        self._rules.update(kwargs)

    def __getitem__(self, key: str) -> FieldRule:
        return self._rules[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def subset(self, fields: Iterable[str]) -> FieldRules:
        """Return the rules restricted to ``fields``, keeping declaration order."""
        wanted = set(fields)
        return FieldRules({k: v for k, v in self._rules.items() if k in wanted})

    def sized(self) -> dict[str, FieldRule]:
        return {k: v for k, v in self._rules.items() if v.min is not None or v.max is not None}

    def trimmed(self) -> list[str]:
        return [k for k, v in self._rules.items() if v.trimmed]

    def no_spaces(self) -> list[str]:
        return [k for k, v in self._rules.items() if v.no_spaces]


# --------------------------------------------------------------------------- #
# Individual checks
# --------------------------------------------------------------------------- #


def required_fields(body: Mapping[str, Any], fields: Iterable[str]) -> ValidationFailure | None:
    """Fail on the first field that is absent or falsy."""
    for field in fields:
        if not body.get(field):
            return ValidationFailure(f"Missing {field} in request body", field)
    return None


def string_fields(body: Mapping[str, Any], fields: Iterable[str]) -> ValidationFailure | None:
    """Fail on the first present field whose value is not a string."""
    for field in fields:
        if field in body and not isinstance(body[field], str):
            return ValidationFailure("Incorrect field type: expected string", field)
    return None


def validate_lengths(
    body: Mapping[str, Any], sized_fields: Mapping[str, FieldRule]
) -> ValidationFailure | None:
    """Check trimmed lengths; every minimum is checked before any maximum.

    Fields missing from ``body`` are skipped so the same rules serve partial
    updates.
    """
    present = [f for f in sized_fields if isinstance(body.get(f), str)]
    for field in present:
        rule = sized_fields[field]
        if rule.min is not None and len(body[field].strip()) < rule.min:
            return ValidationFailure(f"Must be at least {rule.min} characters long", field)
    for field in present:
        rule = sized_fields[field]
        if rule.max is not None and len(body[field].strip()) > rule.max:
            return ValidationFailure(f"Must be at most {rule.max} characters long", field)
    return None


def validate_space_around(
    body: Mapping[str, Any], fields: Iterable[str]
) -> ValidationFailure | None:
    """Fail when a value carries leading or trailing whitespace."""
    for field in fields:
        value = body.get(field)
        if isinstance(value, str) and len(value) > len(value.strip()):
            return ValidationFailure("Cannot start or end with whitespace", field)
    return None


def validate_space_inside(
    body: Mapping[str, Any], fields: Iterable[str]
) -> ValidationFailure | None:
    """Fail when a value contains a space character anywhere."""
    for field in fields:
        value = body.get(field)
        if isinstance(value, str) and " " in value:
            return ValidationFailure("Must not contain whitespace", field)
    return None


# --------------------------------------------------------------------------- #
# Pipeline
# --------------------------------------------------------------------------- #


def run_pipeline(
    body: Mapping[str, Any],
    rules: FieldRules,
    *,
    required: Iterable[str] = (),
) -> None:
    """
    Apply every check in order and raise the first failure.

    :param body: Request payload.
    :param rules: Sizing and whitespace rules for the fields being validated.
    :param required: Fields that must be present and non-empty.
    :raises ValidationFailure: On the first violated constraint.
    """
    checks = (
        lambda: required_fields(body, required),
        lambda: string_fields(body, rules),
        lambda: validate_lengths(body, rules.sized()),
        lambda: validate_space_around(body, rules.trimmed()),
        lambda: validate_space_inside(body, rules.no_spaces()),
    )
    for check in checks:
        failure = check()
        if failure is not None:
            raise failure
