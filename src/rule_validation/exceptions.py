"""
Rule-validation exception hierarchy.

Every exception here signals a malformed rule set or a lifecycle bug in
the caller. Invalid *data* is never raised; it is reported as an invalid
result inside a returned result set.

All exceptions inherit from ``RuleValidationError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from typing import Any


class RuleValidationError(Exception):
    """Base exception for all rule-validation errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class DuplicateKeyError(RuleValidationError):
    """Two entries registered into the same set share a key."""

    def __init__(self, key: str, message: str) -> None:
        self.key = key
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "DUPLICATE_KEY",
            "key": self.key,
            "message": str(self),
        }


class DuplicateRuleKeyError(DuplicateKeyError):
    """A rule was added for a key another rule already governs."""

    def __init__(self, key: str) -> None:
        super().__init__(key, f'Duplicate validation rule detected for key "{key}"')


class DuplicateResultKeyError(DuplicateKeyError):
    """A result was added for a key already present in the result set."""

    def __init__(self, key: str) -> None:
        super().__init__(key, f'Duplicate result detected for key "{key}"')


class ResultSetFrozenError(RuleValidationError):
    """A result was added to a result set after ``freeze()``."""

    def __init__(self, result_set_class: str = "ResultSet") -> None:
        self.result_set_class = result_set_class
        super().__init__(f"Cannot add results to a completed {result_set_class}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "RESULT_SET_FROZEN",
            "result_set_class": self.result_set_class,
            "message": str(self),
        }


class UnknownResultError(RuleValidationError):
    """Strict lookup was given a key with no corresponding result."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f'No validation result exists for key "{key}"')

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNKNOWN_RESULT",
            "key": self.key,
            "message": str(self),
        }


class RequiredRuleWithNoDefaultError(RuleValidationError):
    """
    A valid result set was requested for a required rule that has
    neither a supplied value nor a usable default.
    """

    def __init__(self, key: str, result_set_class: str) -> None:
        self.key = key
        self.result_set_class = result_set_class
        super().__init__(
            f"Unable to create valid {result_set_class} instance; "
            f'key "{key}" is required, but has no default value; '
            f"provide a value via the value_map argument"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "REQUIRED_RULE_WITH_NO_DEFAULT",
            "key": self.key,
            "result_set_class": self.result_set_class,
            "message": str(self),
        }


class ResultKeyMismatchError(RuleValidationError):
    """A result was attached under a key other than its own."""

    def __init__(self, result_key: str, offset_key: str) -> None:
        self.result_key = result_key
        self.offset_key = offset_key
        super().__init__(
            f'Attempted to assign result with key "{result_key}" '
            f'to offset "{offset_key}"; offset key must match result key'
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "RESULT_KEY_MISMATCH",
            "result_key": self.result_key,
            "offset_key": self.offset_key,
            "message": str(self),
        }


class NestedResultTypeError(RuleValidationError, TypeError):
    """An entry inside a nested result set is not a result object."""

    def __init__(self, name: str, actual_type: str) -> None:
        self.name = name
        self.actual_type = actual_type
        super().__init__(
            f'Value associated with "{name}" is not a validation result; '
            f"received {actual_type}"
        )
