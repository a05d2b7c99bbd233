"""Result — immutable outcome of validating a single field."""

from __future__ import annotations

from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")

MISSING_MESSAGE = "Missing required value"


class Result(BaseModel, Generic[T]):
    """Outcome for one key: validity flag, resulting value, optional message.

    Results are frozen value objects; equality is structural over
    ``key``, ``is_valid``, ``value`` and ``message``. Build them through
    the three named constructors rather than directly::

        Result.for_valid_value("title", "Hello")
        Result.for_invalid_value("age", -1, "Must be positive")
        Result.for_missing_value("email")
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    MISSING_MESSAGE: ClassVar[str] = MISSING_MESSAGE

    key: str = Field(min_length=1)
    is_valid: bool
    value: T | None = None
    message: str | None = None

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def for_valid_value(cls, key: str, value: Any) -> Result[Any]:
        return cls(key=key, is_valid=True, value=value)

    @classmethod
    def for_invalid_value(cls, key: str, value: Any, message: str) -> Result[Any]:
        if not message:
            raise ValueError("An invalid result requires a non-empty message")
        return cls(key=key, is_valid=False, value=value, message=message)

    @classmethod
    def for_missing_value(
        cls, key: str, message: str = MISSING_MESSAGE
    ) -> Result[Any]:
        if not message:
            raise ValueError("A missing-value result requires a non-empty message")
        return cls(key=key, is_valid=False, value=None, message=message)
