"""Tests for CallbackRule."""

from __future__ import annotations

from typing import Any

import pytest

from rule_validation import (
    MISSING_MESSAGE,
    CallbackRule,
    IRule,
    Result,
    ResultKeyMismatchError,
)


def positive(value: Any, context: Any, key: str) -> Result[Any]:
    if isinstance(value, int) and value > 0:
        return Result.for_valid_value(key, value)
    return Result.for_invalid_value(key, value, "Must be positive")


def test_validate_delegates_to_callback() -> None:
    rule = CallbackRule("quantity", positive)

    assert rule.validate(3, {}) == Result.for_valid_value("quantity", 3)
    assert rule.validate(-3, {}) == Result.for_invalid_value(
        "quantity", -3, "Must be positive"
    )


def test_callback_receives_value_context_and_key() -> None:
    calls: list[tuple[Any, Any, str]] = []

    def spy(value: Any, context: Any, key: str) -> Result[Any]:
        calls.append((value, context, key))
        return Result.for_valid_value(key, value)

    context = {"quantity": 2, "unit": "kg"}
    CallbackRule("quantity", spy).validate(2, context)

    assert calls == [(2, context, "quantity")]


def test_defaults() -> None:
    rule = CallbackRule("quantity", positive)

    assert rule.key == "quantity"
    assert rule.required is True
    assert rule.default() == Result.for_valid_value("quantity", None)
    assert rule.missing() == Result.for_missing_value("quantity")
    assert rule.missing().message == MISSING_MESSAGE


def test_configured_default_and_missing_results() -> None:
    default = Result.for_valid_value("quantity", 1)
    missing = Result.for_missing_value("quantity", "How many?")
    rule = CallbackRule(
        "quantity", positive, required=False, default=default, missing=missing
    )

    assert rule.required is False
    assert rule.default() is default
    assert rule.missing() is missing


def test_default_may_be_invalid() -> None:
    default = Result.for_invalid_value("quantity", 0, "Quantity not chosen yet")
    rule = CallbackRule("quantity", positive, required=False, default=default)

    assert rule.default().is_valid is False


def test_configured_result_key_must_match_rule_key() -> None:
    with pytest.raises(ResultKeyMismatchError):
        CallbackRule("quantity", positive, default=Result.for_valid_value("qty", 1))

    with pytest.raises(ResultKeyMismatchError):
        CallbackRule("quantity", positive, missing=Result.for_missing_value("qty"))


def test_empty_key_is_rejected() -> None:
    with pytest.raises(ValueError, match="non-empty"):
        CallbackRule("", positive)


def test_callback_rule_satisfies_protocol() -> None:
    assert isinstance(CallbackRule("quantity", positive), IRule)
