"""BooleanRule — accepts only real ``bool`` values."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..results.result import Result
from .base import BaseRule

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..ports.result import IValidationResult


class BooleanRule(BaseRule):
    """No coercion: ``1``, ``"true"`` and ``None`` are all rejected."""

    def __init__(self, key: str, *, required: bool = True, default: bool = False) -> None:
        super().__init__(key, required=required)
        self._default = default

    def validate(
        self, value: Any, context: Mapping[str, Any]
    ) -> IValidationResult[Any]:
        if not isinstance(value, bool):
            return Result.for_invalid_value(
                self._key,
                value,
                f"Expected boolean value; received {type(value).__name__}",
            )
        return Result.for_valid_value(self._key, value)

    def default(self) -> IValidationResult[Any]:
        return Result.for_valid_value(self._key, self._default)
