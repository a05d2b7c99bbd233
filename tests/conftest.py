"""Shared fixtures for rule-validation tests."""

from __future__ import annotations

from typing import Any

import pytest

from rule_validation import Result


class DummyRule:
    """Minimal structural rule: accepts any present value as-is."""

    def __init__(self, key: str, default: Any = None, required: bool = False) -> None:
        self._key = key
        self._default = default
        self._required = required

    @property
    def key(self) -> str:
        return self._key

    @property
    def required(self) -> bool:
        return self._required

    def validate(self, value: Any, context: Any) -> Result[Any]:
        return Result.for_valid_value(self._key, value)

    def default(self) -> Result[Any]:
        return Result.for_valid_value(self._key, self._default)

    def missing(self) -> Result[Any]:
        return Result.for_missing_value(self._key)


@pytest.fixture
def make_rule():
    """Factory for dummy rules: ``make_rule("first", default=1, required=True)``."""

    def _make(key: str, default: Any = None, required: bool = False) -> DummyRule:
        return DummyRule(key, default=default, required=required)

    return _make


@pytest.fixture
def record() -> dict[str, Any]:
    """Record with two keys no rule in the scenarios governs."""
    return {
        "first": "string",
        "second": "ignored",
        "third": 1,
        "fourth": "also ignored",
        "fifth": [1, 2, 3],
    }
