# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Field walker for dataclass records.

A record is any dataclass *instance*. Each field may carry an annotation in
its metadata under the configured key (``"validate"`` by default)::

    @dataclass
    class Account:
        name: str = field(metadata={"validate": "min:3"})
        role: str = field(metadata={"validate": "in:admin,viewer"})

Fields are visited in declaration order and every failure is collected;
only a non-record argument aborts the call.
"""

from __future__ import annotations

import dataclasses
import logging
import time
from typing import Any, Final, List, Optional

from ..config import get_metadata_key
from ..exceptions import (
    NotAStructError,
    UnexportedFieldError,
    UnsupportedTypeError,
    UnsupportedValidatorError,
    ValidationError,
)
from ..telemetry import get_tracer, record_validation_metrics
from .annotation import parse_annotation
from .base import ValidationFailure, ValidationResult, scalar_kind
from .rules import EVALUATORS

logger = logging.getLogger(__name__)

# Stands in for an init=False field that was never assigned
_UNSET = object()


def is_record(value: Any) -> bool:
    """Return True for dataclass instances (not dataclass types)."""

    return dataclasses.is_dataclass(value) and not isinstance(value, type)


class StructValidator:
    """Apply per-field annotation rules to dataclass records.

    Example:
        ```python
        validator = StructValidator()
        result = validator.validate(Account(name="al", role="root"))
        assert result.allowed is False
        print(result)  # Length of string al is less than 3 >>= value is not found
        ```
    """

    def __init__(self, metadata_key: Optional[str] = None):
        self._metadata_key = metadata_key

    @property
    def metadata_key(self) -> str:
        return self._metadata_key or get_metadata_key()

    def validate(self, record: Any) -> ValidationResult:
        """Validate every annotated field of *record*.

        Raises:
            NotAStructError: *record* is not a dataclass instance.
        """
        if not is_record(record):
            logger.debug("Refusing to validate non-record value of type %s", type(record).__name__)
            raise NotAStructError()

        record_name = type(record).__qualname__
        started_at = time.perf_counter()
        with get_tracer().start_as_current_span(
            "structcheck.validate",
            attributes={"structcheck.record": record_name},
        ) as span:
            failures: List[ValidationFailure] = []
            key = self.metadata_key
            for field in dataclasses.fields(record):
                annotation = field.metadata.get(key)
                if annotation is None or annotation == "":
                    continue
                value = getattr(record, field.name, _UNSET)
                failure = self._check_field(field.name, annotation, value)
                if failure is not None:
                    failures.append(failure)

            result = ValidationResult(failures=tuple(failures))
            span.set_attribute("structcheck.failures", len(result.failures))

        record_validation_metrics(record_name, result, started_at)
        logger.debug("Validated %s: %d failure(s)", record_name, len(result.failures))
        return result

    def _check_field(self, name: str, annotation: Any, value: Any) -> Optional[ValidationFailure]:
        rule_name: Optional[str] = None
        try:
            if name.startswith("_"):
                raise UnexportedFieldError()

            parsed = parse_annotation(annotation)
            rule_name = parsed.name

            if scalar_kind(value) is None:
                raise UnsupportedTypeError()

            rule = parsed.rule
            if rule is None:
                raise UnsupportedValidatorError()

            EVALUATORS[rule](value, parsed.args)
        except ValidationError as exc:
            logger.debug("Field '%s' failed %r: %s", name, annotation, exc.message)
            return ValidationFailure(field=name, rule=rule_name, error=exc)
        return None


_VALIDATOR: Final[StructValidator] = StructValidator()


def get_validator() -> StructValidator:
    """Return the process-wide validator instance."""

    return _VALIDATOR


def validate(record: Any) -> ValidationResult:
    """Validate *record* with the process-wide validator."""

    return _VALIDATOR.validate(record)


def check(record: Any) -> None:
    """Validate *record* and raise ``ValidationErrors`` if anything failed."""

    _VALIDATOR.validate(record).raise_for_failures()


__all__ = [
    "StructValidator",
    "check",
    "get_validator",
    "is_record",
    "validate",
]
