"""CallbackRule — plug a plain function in as a rule."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..exceptions import ResultKeyMismatchError
from .base import BaseRule

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from ..ports.result import IValidationResult

    RuleCallback = Callable[[Any, Mapping[str, Any], str], IValidationResult[Any]]


class CallbackRule(BaseRule):
    """Delegates validation to a function ``(value, context, key) -> result``.

    The default and missing outcomes are themselves results, so a rule can
    pair any validity with any message for those cases::

        def positive(value, context, key):
            if isinstance(value, int) and value > 0:
                return Result.for_valid_value(key, value)
            return Result.for_invalid_value(key, value, "Must be positive")

        rule = CallbackRule(
            "quantity",
            positive,
            required=False,
            default=Result.for_valid_value("quantity", 1),
        )
    """

    def __init__(
        self,
        key: str,
        callback: RuleCallback,
        *,
        required: bool = True,
        default: IValidationResult[Any] | None = None,
        missing: IValidationResult[Any] | None = None,
    ) -> None:
        super().__init__(key, required=required)
        for configured in (default, missing):
            if configured is not None and configured.key != key:
                raise ResultKeyMismatchError(configured.key, key)
        self._callback = callback
        self._default = default
        self._missing = missing

    def validate(
        self, value: Any, context: Mapping[str, Any]
    ) -> IValidationResult[Any]:
        return self._callback(value, context, self._key)

    def default(self) -> IValidationResult[Any]:
        if self._default is None:
            return super().default()
        return self._default

    def missing(self) -> IValidationResult[Any]:
        if self._missing is None:
            return super().missing()
        return self._missing
