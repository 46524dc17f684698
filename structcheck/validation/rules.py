# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Built-in rule evaluators.

Each evaluator takes a scalar value and the parsed argument tokens. It
returns ``None`` when the value satisfies the rule and raises a
``ValidationError`` subclass otherwise. Evaluators hold no state.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Sequence

from ..exceptions import (
    InvalidValidatorSyntaxError,
    RuleViolationError,
    UnsupportedTypeError,
    UnsupportedValidatorError,
)
from .annotation import Bound, Rule, parse_int
from .base import ScalarKind, scalar_kind

logger = logging.getLogger(__name__)


def _require_kind(value: Any) -> ScalarKind:
    kind = scalar_kind(value)
    if kind is None:
        raise UnsupportedTypeError()
    return kind


def validate_max_min(value: Any, args: Sequence[str], bound: Bound) -> None:
    """Check *value* (or the length of a text value) against one inclusive bound."""

    if len(args) != 1:
        raise InvalidValidatorSyntaxError()
    limit = parse_int(args[0])
    kind = _require_kind(value)

    if kind is ScalarKind.INTEGER:
        subject, measured = "Integer", value
        label = str(value)
    else:
        subject, measured = "Length of string", len(value)
        label = value

    if bound is Bound.UPPER and measured > limit:
        raise RuleViolationError(f"{subject} {label} is greater than {limit}")
    if bound is Bound.LOWER and measured < limit:
        raise RuleViolationError(f"{subject} {label} is less than {limit}")


def validate_in(value: Any, args: Sequence[str]) -> None:
    """Check that *value* is one of the candidate tokens.

    For integers a candidate that fails to parse is only reported when no
    other candidate matches.
    """
    kind = _require_kind(value)
    found = False
    parse_error: Optional[InvalidValidatorSyntaxError] = None

    if kind is ScalarKind.INTEGER:
        for token in args:
            try:
                candidate = parse_int(token)
            except InvalidValidatorSyntaxError as exc:
                if parse_error is None:
                    parse_error = exc
                continue
            if value == candidate:
                found = True
    else:
        found = any(value == token for token in args)

    if found:
        return
    if parse_error is not None:
        logger.debug("No candidate matched %r and %d token(s) failed to parse", value, len(args))
        raise parse_error
    raise RuleViolationError("value is not found")


def validate_len(value: Any, args: Sequence[str]) -> None:
    """Check that a text value has exactly the expected number of characters."""

    if not args:
        raise InvalidValidatorSyntaxError()
    expected = parse_int(args[0])
    kind = _require_kind(value)

    if kind is ScalarKind.INTEGER:
        raise UnsupportedValidatorError()
    if len(value) != expected:
        raise RuleViolationError(f"length of string {value} is not equal to {expected}")


Evaluator = Callable[[Any, Sequence[str]], None]

EVALUATORS: Dict[Rule, Evaluator] = {
    Rule.IN: validate_in,
    Rule.MAX: lambda value, args: validate_max_min(value, args, Bound.UPPER),
    Rule.MIN: lambda value, args: validate_max_min(value, args, Bound.LOWER),
    Rule.LEN: validate_len,
}


__all__ = [
    "EVALUATORS",
    "Evaluator",
    "validate_in",
    "validate_len",
    "validate_max_min",
]
