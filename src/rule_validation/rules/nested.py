"""NestedRule — validates a sub-record with its own rule set."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ..results.nested import NestedResult
from ..results.result_set import ResultSet
from .base import BaseRule

if TYPE_CHECKING:
    from ..ports.rule_set import IRuleSetValidator

INVALID_NESTED_MESSAGE = "One or more nested values are invalid"


class NestedRule(BaseRule):
    """Produces a :class:`~rule_validation.results.nested.NestedResult`.

    The inner rule set evaluates the field's mapping value; the outer
    result is valid only when every nested result is::

        address = RuleSet(CallbackRule("city", ...), CallbackRule("zip", ...))
        rules = RuleSet(NestedRule("address", address))
        rules.validate(data).get_path("address.city")
    """

    def __init__(
        self,
        key: str,
        rule_set: IRuleSetValidator[ResultSet],
        *,
        required: bool = True,
        invalid_message: str = INVALID_NESTED_MESSAGE,
    ) -> None:
        super().__init__(key, required=required)
        self._rule_set = rule_set
        self._invalid_message = invalid_message

    @property
    def rule_set(self) -> IRuleSetValidator[ResultSet]:
        return self._rule_set

    def validate(self, value: Any, context: Mapping[str, Any]) -> NestedResult:
        if not isinstance(value, Mapping):
            return NestedResult.for_invalid_value(
                self._key,
                _empty_result_set(),
                f"Expected mapping value; received {type(value).__name__}",
            )
        results = self._rule_set.validate(value)
        if results.is_valid:
            return NestedResult.for_valid_value(self._key, results)
        return NestedResult.for_invalid_value(
            self._key, results, self._invalid_message
        )

    def default(self) -> NestedResult:
        return NestedResult.for_valid_value(self._key, _empty_result_set())

    def missing(self) -> NestedResult:
        return NestedResult.for_missing_value(self._key)


def _empty_result_set() -> ResultSet:
    empty = ResultSet()
    empty.freeze()
    return empty
