"""Built-in rules and the rule base class."""

from __future__ import annotations

from .base import BaseRule
from .boolean import BooleanRule
from .callback import CallbackRule
from .nested import NestedRule
from .pydantic import PydanticRule

__all__ = [
    "BaseRule",
    "BooleanRule",
    "CallbackRule",
    "NestedRule",
    "PydanticRule",
]
