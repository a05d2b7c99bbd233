"""Tests for RuleSetOptions and RuleSet.from_options."""

from __future__ import annotations

from rule_validation import Result, ResultSet, RuleSet, RuleSetOptions


class CustomResultSet(ResultSet):
    pass


def test_defaults() -> None:
    options = RuleSetOptions()

    assert options.rules == []
    assert options.result_set_class is ResultSet
    assert options.missing_value_result_factory is None


def test_rules_list_is_not_shared() -> None:
    first = RuleSetOptions()
    first.add_rule(object())  # type: ignore[arg-type]

    assert RuleSetOptions().rules == []


def test_from_options_applies_configuration(make_rule) -> None:
    def factory(key: str) -> Result[None]:
        return Result.for_missing_value(key, f"{key} is mandatory")

    options = RuleSetOptions(result_set_class=CustomResultSet)
    options.add_rule(make_rule("first", required=True))
    options.add_rule(make_rule("second"))
    options.missing_value_result_factory = factory

    rule_set = RuleSet.from_options(options)
    results = rule_set.validate({})

    assert rule_set.keys() == ["first", "second"]
    assert rule_set.missing_value_result_factory is factory
    assert isinstance(results, CustomResultSet)
    assert results.get_messages() == {"first": "first is mandatory"}
