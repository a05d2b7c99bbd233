"""
RuleSet — evaluates a record field by field.

Rules run in registration order; each contributes exactly one result.
Keys present in the record but governed by no rule are ignored.

Example::

    rules = RuleSet(
        CallbackRule("title", check_title),
        BooleanRule("published", required=False),
    )
    results = rules.validate({"title": "Hello"})
    results.is_valid
    results.get_values()   # {"title": "Hello", "published": False}
"""

from __future__ import annotations

import logging
from copy import deepcopy
from typing import TYPE_CHECKING, Any, Generic, TypeVar, cast

from ..exceptions import DuplicateRuleKeyError, RequiredRuleWithNoDefaultError
from ..results.result import Result
from ..results.result_set import ResultSet

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from ..ports.missing import IMissingValueResultFactory
    from ..ports.result import IValidationResult
    from ..ports.rule import IRule
    from .options import RuleSetOptions

logger = logging.getLogger(__name__)

RS = TypeVar("RS", bound=ResultSet)


class RuleSet(Generic[RS]):
    """Ordered, duplicate-free collection of rules.

    Build it once, then call :meth:`validate` (or
    :meth:`create_valid_result_set`) for as many records as needed. Each
    call produces an independent result set, so a populated rule set may
    be shared between threads as long as nobody calls :meth:`add`
    concurrently.

    Parameters
    ----------
    *rules:
        Initial rules, in evaluation order.
    result_set_class:
        :class:`ResultSet` subclass to instantiate for every evaluation.
    missing_value_result_factory:
        Optional ``(key) -> result`` overriding every rule's ``missing()``
        outcome, e.g. to customise messages for the whole set.
    """

    def __init__(
        self,
        *rules: IRule,
        result_set_class: type[ResultSet] = ResultSet,
        missing_value_result_factory: IMissingValueResultFactory | None = None,
    ) -> None:
        if not (
            isinstance(result_set_class, type)
            and issubclass(result_set_class, ResultSet)
        ):
            raise TypeError(
                f"result_set_class must be a ResultSet subclass, "
                f"got {result_set_class!r}"
            )
        self._result_set_class = cast("type[RS]", result_set_class)
        self._missing_value_result_factory = missing_value_result_factory
        self._rules: dict[str, IRule] = {}
        for rule in rules:
            self.add(rule)

    # ── Construction helpers ─────────────────────────────────────

    @classmethod
    def from_options(cls, options: RuleSetOptions) -> RuleSet[Any]:
        """Build a rule set from a :class:`RuleSetOptions` instance."""
        return cls(
            *options.rules,
            result_set_class=options.result_set_class,
            missing_value_result_factory=options.missing_value_result_factory,
        )

    @classmethod
    def with_result_set_class(
        cls, result_set_class: type[ResultSet], *rules: IRule
    ) -> RuleSet[Any]:
        return cls(*rules, result_set_class=result_set_class)

    # ── Registration ─────────────────────────────────────────────

    def add(self, rule: IRule) -> None:
        """Register *rule*.

        Raises:
            DuplicateRuleKeyError: If another rule already governs the key.
        """
        key = rule.key
        if key in self._rules:
            raise DuplicateRuleKeyError(key)
        self._rules[key] = rule
        logger.debug("Registered rule for key %r (%s)", key, type(rule).__name__)

    # ── Lookup ───────────────────────────────────────────────────

    def get_rule(self, key: str) -> IRule | None:
        return self._rules.get(key)

    def keys(self) -> list[str]:
        return list(self._rules)

    def __contains__(self, key: object) -> bool:
        return key in self._rules

    def __iter__(self) -> Iterator[IRule]:
        return iter(tuple(self._rules.values()))

    def __len__(self) -> int:
        return len(self._rules)

    @property
    def result_set_class(self) -> type[RS]:
        return self._result_set_class

    @property
    def missing_value_result_factory(self) -> IMissingValueResultFactory | None:
        return self._missing_value_result_factory

    # ── Evaluation ───────────────────────────────────────────────

    def validate(self, data: Mapping[str, Any]) -> RS:
        """
        Evaluate *data* and return a frozen result set.

        For each rule, in order: a present key is passed to the rule's
        ``validate``; an absent required key yields the missing-value
        outcome; an absent optional key yields the rule's ``default()``.
        """
        result_set = self._result_set_class()

        for key, rule in self._rules.items():
            if key in data:
                result_set.add(rule.validate(data[key], data))
            elif rule.required:
                result_set.add(self._missing_result(rule))
            else:
                result_set.add(rule.default())

        result_set.freeze()

        if logger.isEnabledFor(logging.DEBUG):
            ignored = [key for key in data if key not in self._rules]
            if ignored:
                logger.debug("Ignoring keys with no rule: %s", ignored)
            logger.debug(
                "Validated %d rule(s) into %s (valid=%s)",
                len(self._rules),
                type(result_set).__name__,
                result_set.is_valid,
            )
        return result_set

    def create_valid_result_set(
        self, value_map: Mapping[str, Any] | None = None
    ) -> RS:
        """
        Build a result set as if every supplied value had passed validation.

        Useful for seeding known-good data (e.g. pre-filling an edit form)
        without running the rules. Absent keys fall back to the rule's
        default value, copied so no two result sets share it. The returned
        set is **not** frozen.

        Raises:
            RequiredRuleWithNoDefaultError: If a required rule has no value
                in *value_map* and its default value is ``None``.
        """
        values = value_map if value_map is not None else {}
        result_set = self._result_set_class()

        for key, rule in self._rules.items():
            if key in values:
                result_set.add(Result.for_valid_value(key, values[key]))
                continue

            default = rule.default().value
            if rule.required and default is None:
                raise RequiredRuleWithNoDefaultError(
                    key, self._result_set_class.__name__
                )
            logger.debug("No value supplied for %r; using rule default", key)
            result_set.add(Result.for_valid_value(key, deepcopy(default)))

        return result_set

    def _missing_result(self, rule: IRule) -> IValidationResult[Any]:
        if self._missing_value_result_factory is None:
            return rule.missing()
        return self._missing_value_result_factory(rule.key)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} keys={self.keys()!r}>"
