"""Validation package - annotation parsing, rule evaluation and field walking.

This package inspects dataclass records and checks each annotated field
against its declared rule. Nothing is transformed or coerced here.
"""

from .annotation import Bound, ParsedAnnotation, Rule, parse_annotation, parse_int
from .base import ScalarKind, ValidationFailure, ValidationResult, scalar_kind
from .rules import EVALUATORS, validate_in, validate_len, validate_max_min
from .validator import StructValidator, check, get_validator, is_record, validate

__all__ = [
    "Bound",
    "EVALUATORS",
    "ParsedAnnotation",
    "Rule",
    "ScalarKind",
    "StructValidator",
    "ValidationFailure",
    "ValidationResult",
    "check",
    "get_validator",
    "is_record",
    "parse_annotation",
    "parse_int",
    "scalar_kind",
    "validate",
    "validate_in",
    "validate_len",
    "validate_max_min",
]
