"""RuleSet and its configuration."""

from __future__ import annotations

from .options import RuleSetOptions
from .rule_set import RuleSet

__all__ = ["RuleSet", "RuleSetOptions"]
