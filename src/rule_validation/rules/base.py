"""
Rule base class.

Concrete rules implement :meth:`BaseRule.validate`; the default and
missing-value outcomes come for free and may be overridden.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from ..results.result import Result

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..ports.result import IValidationResult


class BaseRule(ABC):
    """
    Strategy base for validating one field.

    Satisfies :class:`~rule_validation.ports.rule.IRule`. Rules should be
    pure: the same value and context always produce the same result.
    """

    def __init__(self, key: str, *, required: bool = True) -> None:
        if not key:
            raise ValueError("Rule key must be a non-empty string")
        self._key = key
        self._required = required

    @property
    def key(self) -> str:
        return self._key

    @property
    def required(self) -> bool:
        return self._required

    @abstractmethod
    def validate(
        self, value: Any, context: Mapping[str, Any]
    ) -> IValidationResult[Any]:
        """
        Validate a present value.

        Args:
            value: The raw value found under :attr:`key` in the record.
            context: The full record, for rules that depend on other fields.

        Returns:
            A valid or invalid result keyed by :attr:`key`.
        """
        ...

    def default(self) -> IValidationResult[Any]:
        """Valid ``None`` result; used when the field is optional and absent."""
        return Result.for_valid_value(self._key, None)

    def missing(self) -> IValidationResult[Any]:
        """Canonical missing-value result; used when a required field is absent."""
        return Result.for_missing_value(self._key)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(key={self._key!r}, required={self._required!r})"
        )
