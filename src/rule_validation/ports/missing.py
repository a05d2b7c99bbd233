"""IMissingValueResultFactory — strategy for missing required values."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .result import IValidationResult


@runtime_checkable
class IMissingValueResultFactory(Protocol):
    """Builds the outcome for a required key absent from a record.

    Any plain function ``(key) -> result`` satisfies this protocol.
    """

    def __call__(self, key: str) -> IValidationResult[Any]: ...
