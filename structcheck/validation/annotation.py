# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Parsing of per-field annotation strings.

An annotation has the form ``rule:arg1,arg2,...``. The text is split on the
first ``:`` only; everything after it is the argument blob, which is split on
``,`` into whitespace-trimmed tokens kept in declaration order.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..exceptions import InvalidValidatorSyntaxError

RULE_SEPARATOR = ":"
ARG_SEPARATOR = ","

_INT_RE = re.compile(r"[+-]?[0-9]+")


class Rule(str, Enum):
    """The closed set of supported rules."""

    IN = "in"
    MAX = "max"
    MIN = "min"
    LEN = "len"

    @classmethod
    def lookup(cls, name: str) -> Optional["Rule"]:
        try:
            return cls(name)
        except ValueError:
            return None


class Bound(Enum):
    UPPER = 1
    LOWER = -1


@dataclass(frozen=True)
class ParsedAnnotation:
    name: str
    args: Tuple[str, ...]

    @property
    def rule(self) -> Optional[Rule]:
        return Rule.lookup(self.name)


def parse_annotation(text: str) -> ParsedAnnotation:
    """Split *text* into a rule name and its argument tokens.

    Raises:
        InvalidValidatorSyntaxError: *text* is not a string, has no ``:``
            separator, or has nothing after it.
    """
    if not isinstance(text, str):
        raise InvalidValidatorSyntaxError()
    name, sep, blob = text.partition(RULE_SEPARATOR)
    if not sep or not blob:
        raise InvalidValidatorSyntaxError()
    args = tuple(token.strip() for token in blob.split(ARG_SEPARATOR))
    return ParsedAnnotation(name=name, args=args)


def parse_int(token: str) -> int:
    """Parse a base-10 integer argument token.

    Surrounding whitespace is stripped; then only an optional sign followed
    by digits is accepted.
    """
    stripped = token.strip()
    if not _INT_RE.fullmatch(stripped):
        raise InvalidValidatorSyntaxError() from ValueError(
            f"invalid integer argument: {token!r}"
        )
    return int(stripped)


__all__ = [
    "ARG_SEPARATOR",
    "Bound",
    "ParsedAnnotation",
    "RULE_SEPARATOR",
    "Rule",
    "parse_annotation",
    "parse_int",
]
