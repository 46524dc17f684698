# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""structcheck - declarative field validation for dataclass records."""

from .exceptions import (
    FailureKind,
    InvalidValidatorSyntaxError,
    NotAStructError,
    RuleViolationError,
    StructCheckError,
    UnexportedFieldError,
    UnsupportedTypeError,
    UnsupportedValidatorError,
    ValidationError,
    ValidationErrors,
)
from .validation import (
    Rule,
    StructValidator,
    ValidationFailure,
    ValidationResult,
    check,
    get_validator,
    validate,
)

__version__ = "0.1.0"

__all__ = [
    "FailureKind",
    "InvalidValidatorSyntaxError",
    "NotAStructError",
    "Rule",
    "RuleViolationError",
    "StructCheckError",
    "StructValidator",
    "UnexportedFieldError",
    "UnsupportedTypeError",
    "UnsupportedValidatorError",
    "ValidationError",
    "ValidationErrors",
    "ValidationFailure",
    "ValidationResult",
    "check",
    "get_validator",
    "validate",
]
