"""Tests for NestedResult access into a composed ResultSet."""

from __future__ import annotations

from types import SimpleNamespace

import pytest
from pydantic import ValidationError as PydanticValidationError

from rule_validation import (
    MISSING_MESSAGE,
    NestedResult,
    NestedResultTypeError,
    Result,
    ResultSet,
    UnknownResultError,
)


def test_has_is_false_when_nested_set_lacks_name() -> None:
    author = NestedResult.for_valid_value("author", ResultSet())

    assert author.has("name") is False
    assert "name" not in author


def test_has_is_true_when_nested_set_contains_name() -> None:
    author = NestedResult.for_valid_value(
        "author", ResultSet(Result.for_valid_value("name", "Dirk Gently"))
    )

    assert author.has("name") is True
    assert "name" in author


def test_get_returns_nested_result() -> None:
    name = Result.for_valid_value("name", "Dirk Gently")
    author = NestedResult.for_valid_value("author", ResultSet(name))

    assert author.get("name") is name


def test_get_raises_when_nested_set_lacks_name() -> None:
    author = NestedResult.for_valid_value("author", ResultSet())

    with pytest.raises(UnknownResultError, match='"name"'):
        author.get("name")


def test_get_raises_when_entry_is_not_a_result() -> None:
    nested = ResultSet()
    nested.add(SimpleNamespace(key="name"))  # type: ignore[arg-type]
    author = NestedResult.for_valid_value("author", nested)

    with pytest.raises(NestedResultTypeError, match="SimpleNamespace") as exc:
        author.get("name")

    assert isinstance(exc.value, TypeError)


def test_value_must_be_a_result_set() -> None:
    with pytest.raises(PydanticValidationError):
        NestedResult.for_valid_value("author", {"name": "Dirk"})  # type: ignore[arg-type]


def test_for_invalid_value() -> None:
    nested = ResultSet(Result.for_invalid_value("email", "nope", "Invalid email"))
    author = NestedResult.for_invalid_value("author", nested, "Invalid author")

    assert author.is_valid is False
    assert author.message == "Invalid author"
    assert author.value is nested
    assert author.get("email").message == "Invalid email"


def test_for_missing_value_carries_empty_frozen_set() -> None:
    author = NestedResult.for_missing_value("author")

    assert author.is_valid is False
    assert author.message == MISSING_MESSAGE
    assert isinstance(author.value, ResultSet)
    assert len(author.value) == 0
    assert author.value.is_frozen is True


def test_for_missing_value_requires_message() -> None:
    with pytest.raises(ValueError, match="non-empty message"):
        NestedResult.for_missing_value("author", "")


def test_nested_result_is_a_result() -> None:
    author = NestedResult.for_valid_value("author", ResultSet())
    assert isinstance(author, Result)
