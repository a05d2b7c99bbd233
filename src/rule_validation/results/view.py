"""
Typed, named access over a ResultSet.

Declare one view per schema instead of subclassing ``ResultSet``::

    class ArticleResults(ResultSetView):
        title: ResultField[str] = ResultField()
        published: ResultField[bool] = ResultField("is_published")

    view = ArticleResults(rule_set.validate(data))
    view.title.value
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..ports.result import IValidationResult
    from .result_set import ResultSet

T = TypeVar("T")


class ResultField(Generic[T]):
    """Descriptor resolving a named attribute to a result in the wrapped set.

    The key defaults to the attribute name. Access is strict: an absent
    key raises :class:`~rule_validation.exceptions.UnknownResultError`.
    """

    def __init__(self, key: str | None = None) -> None:
        self.key = key

    def __set_name__(self, owner: type[Any], name: str) -> None:
        if self.key is None:
            self.key = name

    def __get__(self, instance: ResultSetView | None, owner: type[Any]) -> Any:
        if instance is None:
            return self
        if self.key is None:
            raise AttributeError("ResultField used outside of a class body")
        return instance.results.get_result(self.key)


class ResultSetView:
    """Wraps a :class:`ResultSet`; subclasses declare :class:`ResultField` s."""

    def __init__(self, results: ResultSet) -> None:
        self._results = results

    @classmethod
    def declared_keys(cls) -> list[str]:
        """Keys of every :class:`ResultField` declared on the view, in order."""
        keys: list[str] = []
        for klass in reversed(cls.__mro__):
            for attr in vars(klass).values():
                if isinstance(attr, ResultField) and attr.key and attr.key not in keys:
                    keys.append(attr.key)
        return keys

    @property
    def results(self) -> ResultSet:
        return self._results

    @property
    def is_valid(self) -> bool:
        return self._results.is_valid

    def get_messages(self) -> dict[str, str | None]:
        return self._results.get_messages()

    def get_values(self) -> dict[str, Any]:
        return self._results.get_values()

    def __iter__(self) -> Iterator[IValidationResult[Any]]:
        return iter(self._results)
