# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exception hierarchy for structcheck.

Every problem the engine can report is an instance of :class:`ValidationError`
tagged with a :class:`FailureKind`. Only :class:`NotAStructError` escapes
``validate()``; the rest are collected per field into a ``ValidationResult``.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:  # pragma: no cover
    from .validation.base import ValidationFailure


class FailureKind(str, Enum):
    NOT_A_STRUCT = "not_a_struct"
    INVALID_SYNTAX = "invalid_syntax"
    UNEXPORTED_FIELD = "unexported_field"
    UNSUPPORTED_TYPE = "unsupported_type"
    UNSUPPORTED_VALIDATOR = "unsupported_validator"
    RULE_VIOLATION = "rule_violation"


class StructCheckError(Exception):
    """Base class for all structcheck errors."""


class ValidationError(StructCheckError):
    """A single categorised validation problem."""

    kind: FailureKind = FailureKind.RULE_VIOLATION
    default_message: str = "validation failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotAStructError(ValidationError):
    kind = FailureKind.NOT_A_STRUCT
    default_message = "wrong argument given, should be a struct"


class InvalidValidatorSyntaxError(ValidationError):
    kind = FailureKind.INVALID_SYNTAX
    default_message = "invalid validator syntax"


class UnexportedFieldError(ValidationError):
    kind = FailureKind.UNEXPORTED_FIELD
    default_message = "validation for unexported field is not allowed"


class UnsupportedValidatorError(ValidationError):
    kind = FailureKind.UNSUPPORTED_VALIDATOR
    default_message = "used unsupported validator"


class UnsupportedTypeError(ValidationError):
    kind = FailureKind.UNSUPPORTED_TYPE
    default_message = "used unsupported type with validator"


class RuleViolationError(ValidationError):
    """Raised by an evaluator when a value breaks its rule."""

    kind = FailureKind.RULE_VIOLATION


FAILURE_DELIMITER = " >>= "


class ValidationErrors(StructCheckError):
    """Aggregated failures of one record, rendered in field order."""

    def __init__(self, failures: Sequence["ValidationFailure"]):
        self.failures = tuple(failures)
        self.message = FAILURE_DELIMITER.join(f.message for f in self.failures)
        super().__init__(self.message)

    @property
    def kinds(self) -> list[FailureKind]:
        return [f.kind for f in self.failures]


__all__ = [
    "FAILURE_DELIMITER",
    "FailureKind",
    "InvalidValidatorSyntaxError",
    "NotAStructError",
    "RuleViolationError",
    "StructCheckError",
    "UnexportedFieldError",
    "UnsupportedTypeError",
    "UnsupportedValidatorError",
    "ValidationError",
    "ValidationErrors",
]
