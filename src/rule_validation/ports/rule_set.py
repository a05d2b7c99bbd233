"""IRuleSetValidator — evaluates whole records against a set of rules."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..results.result_set import ResultSet
    from .rule import IRule

RS_co = TypeVar("RS_co", bound="ResultSet", covariant=True)


@runtime_checkable
class IRuleSetValidator(Protocol[RS_co]):
    """Protocol for rule sets.

    Implemented by :class:`~rule_validation.ruleset.rule_set.RuleSet`;
    :class:`~rule_validation.rules.nested.NestedRule` depends only on this
    port.
    """

    def validate(self, data: Mapping[str, Any]) -> RS_co:
        """Evaluate *data* and return a frozen result set."""
        ...

    def create_valid_result_set(
        self, value_map: Mapping[str, Any] | None = None
    ) -> RS_co:
        """Build a result set treating every supplied value as valid."""
        ...

    def get_rule(self, key: str) -> IRule | None: ...
