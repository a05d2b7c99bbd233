"""IValidationResult — the read contract every field outcome satisfies."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class IValidationResult(Protocol[T_co]):
    """Outcome of validating a single field.

    Implemented by :class:`~rule_validation.results.result.Result` and
    :class:`~rule_validation.results.nested.NestedResult`.
    """

    @property
    def key(self) -> str:
        """The field name this outcome belongs to."""
        ...

    @property
    def is_valid(self) -> bool: ...

    @property
    def value(self) -> T_co: ...

    @property
    def message(self) -> str | None: ...
