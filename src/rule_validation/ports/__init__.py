from .missing import IMissingValueResultFactory
from .result import IValidationResult
from .rule import IRule
from .rule_set import IRuleSetValidator

__all__ = [
    "IMissingValueResultFactory",
    "IRule",
    "IRuleSetValidator",
    "IValidationResult",
]
