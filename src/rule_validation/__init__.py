"""rule-validation — declarative, field-by-field record validation.

Define one rule per field, collect them in a :class:`RuleSet`, and
evaluate records into an immutable :class:`ResultSet`::

    from rule_validation import BooleanRule, CallbackRule, Result, RuleSet

    def non_empty(value, context, key):
        if isinstance(value, str) and value.strip():
            return Result.for_valid_value(key, value)
        return Result.for_invalid_value(key, value, "Must not be empty")

    rules = RuleSet(CallbackRule("title", non_empty), BooleanRule("draft"))
    results = rules.validate({"title": "Hello", "draft": True})
    results.is_valid        # True
    results.get_values()    # {"title": "Hello", "draft": True}
"""

from __future__ import annotations

from .exceptions import (
    DuplicateKeyError,
    DuplicateResultKeyError,
    DuplicateRuleKeyError,
    NestedResultTypeError,
    RequiredRuleWithNoDefaultError,
    ResultKeyMismatchError,
    ResultSetFrozenError,
    RuleValidationError,
    UnknownResultError,
)
from .ports import (
    IMissingValueResultFactory,
    IRule,
    IRuleSetValidator,
    IValidationResult,
)
from .results import (
    MISSING_MESSAGE,
    NestedResult,
    Result,
    ResultField,
    ResultSet,
    ResultSetView,
)
from .rules import BaseRule, BooleanRule, CallbackRule, NestedRule, PydanticRule
from .ruleset import RuleSet, RuleSetOptions

__all__ = [
    # Ports
    "IMissingValueResultFactory",
    "IRule",
    "IRuleSetValidator",
    "IValidationResult",
    # Results
    "MISSING_MESSAGE",
    "NestedResult",
    "Result",
    "ResultField",
    "ResultSet",
    "ResultSetView",
    # Rules
    "BaseRule",
    "BooleanRule",
    "CallbackRule",
    "NestedRule",
    "PydanticRule",
    # Rule sets
    "RuleSet",
    "RuleSetOptions",
    # Exceptions
    "RuleValidationError",
    "DuplicateKeyError",
    "DuplicateRuleKeyError",
    "DuplicateResultKeyError",
    "ResultSetFrozenError",
    "UnknownResultError",
    "RequiredRuleWithNoDefaultError",
    "ResultKeyMismatchError",
    "NestedResultTypeError",
]
