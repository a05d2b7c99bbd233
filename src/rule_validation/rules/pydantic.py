"""PydanticRule — validates a field against a type via pydantic."""

from __future__ import annotations

from copy import deepcopy
from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..results.result import Result
from .base import BaseRule

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..ports.result import IValidationResult


class PydanticRule(BaseRule):
    """Checks a value against any type pydantic understands.

    Validation is strict by default, so ``"5"`` is not accepted for
    ``int``. The validated value (for example a model instance built from
    a dict) becomes the result's value. Pydantic errors are converted into
    a single message, one ``location: message`` entry per error::

        PydanticRule("tags", list[str], required=False, default=[])
    """

    def __init__(
        self,
        key: str,
        type_: Any,
        *,
        required: bool = True,
        default: Any = None,
        strict: bool = True,
    ) -> None:
        super().__init__(key, required=required)
        self._adapter: TypeAdapter[Any] = TypeAdapter(type_)
        self._default = default
        self._strict = strict

    def validate(
        self, value: Any, context: Mapping[str, Any]
    ) -> IValidationResult[Any]:
        try:
            validated = self._adapter.validate_python(value, strict=self._strict)
        except PydanticValidationError as exc:
            return Result.for_invalid_value(self._key, value, _format_errors(exc))
        return Result.for_valid_value(self._key, validated)

    def default(self) -> IValidationResult[Any]:
        """Valid result holding a fresh copy of the configured default."""
        return Result.for_valid_value(self._key, deepcopy(self._default))


def _format_errors(exc: PydanticValidationError) -> str:
    messages: list[str] = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error.get("loc", ()))
        msg = error.get("msg", "validation error")
        messages.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(messages)
