# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Shared value types for field validation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

from ..exceptions import FAILURE_DELIMITER, FailureKind, ValidationError, ValidationErrors


class ScalarKind(str, Enum):
    INTEGER = "integer"
    TEXT = "text"


def scalar_kind(value: Any) -> Optional[ScalarKind]:
    """Classify *value* as one of the supported scalar kinds, or ``None``."""

    # bool is an int subclass but a distinct kind for validation purposes
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return ScalarKind.INTEGER
    if isinstance(value, str):
        return ScalarKind.TEXT
    return None


@dataclass(frozen=True)
class ValidationFailure:
    """One problem found while validating a single field."""

    field: str
    rule: Optional[str]
    error: ValidationError

    @property
    def kind(self) -> FailureKind:
        return self.error.kind

    @property
    def message(self) -> str:
        return self.error.message

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one record.

    ``failures`` is ordered by field declaration. An empty result means the
    record is valid; the result is truthy exactly when it is valid.
    """

    failures: Tuple[ValidationFailure, ...] = ()

    @property
    def allowed(self) -> bool:
        return not self.failures

    @property
    def message(self) -> str:
        return FAILURE_DELIMITER.join(f.message for f in self.failures)

    def error(self) -> Optional[ValidationErrors]:
        """Return the aggregated exception, or ``None`` when valid."""

        if self.allowed:
            return None
        return ValidationErrors(self.failures)

    def raise_for_failures(self) -> None:
        error = self.error()
        if error is not None:
            raise error

    def __bool__(self) -> bool:
        return self.allowed

    def __str__(self) -> str:
        return self.message


__all__ = [
    "ScalarKind",
    "ValidationFailure",
    "ValidationResult",
    "scalar_kind",
]
