"""Result types: Result, NestedResult, ResultSet and typed views."""

from __future__ import annotations

from .nested import NestedResult
from .result import MISSING_MESSAGE, Result
from .result_set import ResultSet
from .view import ResultField, ResultSetView

__all__ = [
    "MISSING_MESSAGE",
    "NestedResult",
    "Result",
    "ResultField",
    "ResultSet",
    "ResultSetView",
]
