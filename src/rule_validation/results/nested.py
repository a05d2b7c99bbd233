"""
NestedResult — a result whose value is itself a ResultSet.

Returned by rules that validate a sub-record with their own rule set
(see :class:`~rule_validation.rules.nested.NestedRule`), so callers can
navigate into the nested outcomes::

    author = results.get_result("author")
    if author.is_valid:
        Author(author.get("name").value, author.get("email").value)
"""

from __future__ import annotations

from typing import Any

from ..exceptions import NestedResultTypeError, UnknownResultError
from ..ports.result import IValidationResult
from .result import MISSING_MESSAGE, Result
from .result_set import ResultSet


class NestedResult(Result[Any]):
    """Result specialisation carrying a :class:`ResultSet` as its value."""

    value: ResultSet

    @classmethod
    def for_valid_value(cls, key: str, value: ResultSet) -> NestedResult:
        return cls(key=key, is_valid=True, value=value)

    @classmethod
    def for_invalid_value(
        cls, key: str, value: ResultSet, message: str
    ) -> NestedResult:
        if not message:
            raise ValueError("An invalid result requires a non-empty message")
        return cls(key=key, is_valid=False, value=value, message=message)

    @classmethod
    def for_missing_value(
        cls, key: str, message: str = MISSING_MESSAGE
    ) -> NestedResult:
        if not message:
            raise ValueError("A missing-value result requires a non-empty message")
        empty = ResultSet()
        empty.freeze()
        return cls(key=key, is_valid=False, value=empty, message=message)

    # ── Nested access ────────────────────────────────────────────

    def has(self, name: str) -> bool:
        return name in self.value

    def __contains__(self, name: object) -> bool:
        return name in self.value

    def get(self, name: str) -> IValidationResult[Any]:
        """Return the nested result stored under *name*.

        Raises:
            UnknownResultError: If the nested set has no entry for *name*.
            NestedResultTypeError: If the entry is not a result object.
        """
        entry: object = self.value.get(name)
        if entry is None:
            raise UnknownResultError(name)
        if not isinstance(entry, IValidationResult):
            raise NestedResultTypeError(name, type(entry).__name__)
        return entry
