"""RuleSetOptions — declarative configuration for a RuleSet."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..results.result_set import ResultSet

if TYPE_CHECKING:
    from ..ports.missing import IMissingValueResultFactory
    from ..ports.rule import IRule


def default_rules_factory() -> list[IRule]:
    """Factory for the mutable default rules list in RuleSetOptions."""
    return []


@dataclass
class RuleSetOptions:
    """Configuration consumed by :meth:`RuleSet.from_options`.

    Attributes:
        rules: Rules to register, in evaluation order.
        result_set_class: :class:`ResultSet` subclass instantiated for
            every evaluation.
        missing_value_result_factory: Optional ``(key) -> result`` used
            for required keys absent from a record. When unset, each
            rule's own ``missing()`` outcome is used.
    """

    rules: list[IRule] = field(default_factory=default_rules_factory)
    result_set_class: type[ResultSet] = ResultSet
    missing_value_result_factory: IMissingValueResultFactory | None = None

    def add_rule(self, rule: IRule) -> None:
        """Append a rule to the configuration."""
        self.rules.append(rule)
