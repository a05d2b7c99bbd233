"""ResultSet — ordered, freezable collection of field outcomes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..exceptions import (
    DuplicateResultKeyError,
    ResultKeyMismatchError,
    ResultSetFrozenError,
    UnknownResultError,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..ports.result import IValidationResult


class ResultSet:
    """Results keyed by field name, in insertion order.

    A result set is **open** until :meth:`freeze` is called, after which
    :meth:`add` raises :class:`~rule_validation.exceptions.ResultSetFrozenError`.
    :meth:`RuleSet.validate <rule_validation.ruleset.rule_set.RuleSet.validate>`
    freezes the set it returns.

    Lookup comes in two flavours:

    * :meth:`get_result` (and ``result_set[key]``) raise
      :class:`~rule_validation.exceptions.UnknownResultError` for unknown keys;
    * :meth:`get` (and :meth:`get_path`) return ``None``.

    Usage::

        results = ResultSet(Result.for_valid_value("title", "Hello"))
        results.add(Result.for_invalid_value("age", -1, "Must be positive"))
        results.is_valid          # False
        results.get_messages()    # {"age": "Must be positive"}
    """

    def __init__(self, *results: IValidationResult[Any]) -> None:
        self._results: dict[str, IValidationResult[Any]] = {}
        self._frozen = False
        for result in results:
            self.add(result)

    # ── Population ───────────────────────────────────────────────

    def add(self, result: IValidationResult[Any]) -> None:
        """Append *result*; its key must not already be present."""
        if self._frozen:
            raise ResultSetFrozenError(type(self).__name__)
        key = result.key
        if key in self._results:
            raise DuplicateResultKeyError(key)
        self._results[key] = result

    def __setitem__(self, key: str, result: IValidationResult[Any]) -> None:
        if result.key != key:
            raise ResultKeyMismatchError(result.key, key)
        self.add(result)

    def freeze(self) -> None:
        """Close the set to further additions. Calling it again is a no-op."""
        self._frozen = True

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    # ── Lookup ───────────────────────────────────────────────────

    def get_result(self, key: str) -> IValidationResult[Any]:
        """Return the result for *key*.

        Raises:
            UnknownResultError: If no result exists for *key*.
        """
        try:
            return self._results[key]
        except KeyError:
            raise UnknownResultError(key) from None

    def __getitem__(self, key: str) -> IValidationResult[Any]:
        return self.get_result(key)

    def get(self, key: str) -> IValidationResult[Any] | None:
        """Return the result for *key*, or ``None`` if absent."""
        return self._results.get(key)

    def get_path(self, path: str) -> IValidationResult[Any] | None:
        """
        Resolve a dot-separated path through nested result sets.

        ``results.get_path("author.email")`` returns the ``email`` result
        held by the nested ``author`` result, or ``None`` when any segment
        is missing or a segment before the last does not hold a result set.
        """
        current: ResultSet = self
        parts = path.split(".")
        for index, part in enumerate(parts):
            result = current.get(part)
            if result is None or index == len(parts) - 1:
                return result
            if not isinstance(result.value, ResultSet):
                return None
            current = result.value
        return None

    def __contains__(self, key: object) -> bool:
        return key in self._results

    def __len__(self) -> int:
        return len(self._results)

    def __iter__(self) -> Iterator[IValidationResult[Any]]:
        return iter(tuple(self._results.values()))

    def keys(self) -> list[str]:
        return list(self._results)

    # ── Aggregate views ──────────────────────────────────────────

    @property
    def is_valid(self) -> bool:
        """True when every contained result is valid (and for an empty set)."""
        return all(result.is_valid for result in self._results.values())

    def get_messages(self) -> dict[str, str | None]:
        """Map each *invalid* result's key to its message."""
        return {
            key: result.message
            for key, result in self._results.items()
            if not result.is_valid
        }

    def get_values(self) -> dict[str, Any]:
        """Map every result's key to its value, in insertion order."""
        return {key: result.value for key, result in self._results.items()}

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"<{type(self).__name__} {state} keys={self.keys()!r}>"
