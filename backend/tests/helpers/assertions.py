"""Assertion helper utilities for tests."""

from __future__ import annotations


def assert_json_keys(data: dict, required: set[str]) -> None:
    """Ensure that exactly ``required`` keys are present in ``data``.

    Raises
    ------
    AssertionError
        If a key is missing or an unexpected one is present.
    """
    missing = required - data.keys()
    extra = data.keys() - required
    assert not missing, f"Missing keys: {', '.join(sorted(missing))}"
    assert not extra, f"Unexpected keys: {', '.join(sorted(extra))}"


def assert_error(resp, status: int, reason: str, message: str | None = None, location=None):
    """Check the shared error body ``{code, reason, message[, location], request_id}``."""
    assert resp.status_code == status, resp.get_json()
    body = resp.get_json()
    assert body["code"] == status
    assert body["reason"] == reason
    assert body["request_id"]
    if message is not None:
        assert body["message"] == message
    if location is not None:
        assert body["location"] == location
    return body
