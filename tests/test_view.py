"""Tests for typed views over a ResultSet."""

from __future__ import annotations

import pytest

from rule_validation import (
    Result,
    ResultField,
    ResultSet,
    ResultSetView,
    UnknownResultError,
)


class ArticleResults(ResultSetView):
    title: ResultField[str] = ResultField()
    published: ResultField[bool] = ResultField("is_published")


class ReviewedArticleResults(ArticleResults):
    reviewer: ResultField[str] = ResultField()


@pytest.fixture
def article() -> ResultSet:
    return ResultSet(
        Result.for_valid_value("title", "Hello"),
        Result.for_invalid_value("is_published", "yes", "Expected boolean value"),
    )


def test_fields_resolve_to_results(article: ResultSet) -> None:
    view = ArticleResults(article)

    assert view.title.value == "Hello"
    assert view.published.key == "is_published"
    assert view.published.is_valid is False


def test_view_delegates_aggregate_views(article: ResultSet) -> None:
    view = ArticleResults(article)

    assert view.results is article
    assert view.is_valid is False
    assert view.get_messages() == {"is_published": "Expected boolean value"}
    assert view.get_values() == {"title": "Hello", "is_published": "yes"}
    assert [result.key for result in view] == ["title", "is_published"]


def test_field_access_is_strict(article: ResultSet) -> None:
    view = ReviewedArticleResults(article)

    with pytest.raises(UnknownResultError, match="reviewer"):
        view.reviewer  # noqa: B018


def test_declared_keys_include_inherited_fields() -> None:
    assert ArticleResults.declared_keys() == ["title", "is_published"]
    assert ReviewedArticleResults.declared_keys() == [
        "title",
        "is_published",
        "reviewer",
    ]


def test_class_access_returns_descriptor() -> None:
    assert isinstance(ArticleResults.title, ResultField)
    assert ArticleResults.title.key == "title"
