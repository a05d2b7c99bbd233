"""IRule — the capability every field validator satisfies."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .result import IValidationResult


@runtime_checkable
class IRule(Protocol):
    """Protocol for a rule governing one field of a record.

    Rules are registered into a
    :class:`~rule_validation.ruleset.rule_set.RuleSet`, which decides
    whether to call :meth:`validate`, :meth:`default` or :meth:`missing`
    for each record it evaluates.
    """

    @property
    def key(self) -> str:
        """Non-empty field name; stable for the lifetime of the rule."""
        ...

    @property
    def required(self) -> bool:
        """Whether absence of the field is an error."""
        ...

    def validate(
        self, value: Any, context: Mapping[str, Any]
    ) -> IValidationResult[Any]:
        """Validate *value*; *context* is the full record being evaluated."""
        ...

    def default(self) -> IValidationResult[Any]:
        """Outcome to use when the field is absent and not required."""
        ...

    def missing(self) -> IValidationResult[Any]:
        """Outcome to use when the field is absent and required."""
        ...
