# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Unit tests for record-level validation (field walking, dispatch, aggregation)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

import structcheck
from structcheck import (
    FailureKind,
    NotAStructError,
    StructValidator,
    ValidationErrors,
    ValidationFailure,
    ValidationResult,
)


def _rule(annotation: str, default: Any):
    return field(default=default, metadata={"validate": annotation})


def _validate(record):
    return StructValidator().validate(record)


@dataclass
class Account:
    name: str = _rule("min:3", "alice")
    role: str = _rule("in:admin,viewer", "admin")
    age: int = _rule("max:130", 30)
    pin: str = _rule("len:4", "1234")
    note: str = "anything"


# ------------------------------------------------------------------
# Record shape
# ------------------------------------------------------------------


@pytest.mark.parametrize("value", [42, "text", [1, 2], {"name": "x"}, None, Account])
def test_non_record_input_raises_not_a_struct(value):
    with pytest.raises(NotAStructError) as exc_info:
        _validate(value)

    assert exc_info.value.kind is FailureKind.NOT_A_STRUCT
    assert str(exc_info.value) == "wrong argument given, should be a struct"


def test_record_without_annotations_is_valid():
    @dataclass
    class Plain:
        a: int = 1
        b: Any = None

    result = _validate(Plain())

    assert isinstance(result, ValidationResult)
    assert result.allowed is True
    assert result.failures == ()
    assert result.error() is None


def test_valid_record_passes():
    result = _validate(Account())

    assert result.allowed is True
    assert bool(result) is True
    assert str(result) == ""


# ------------------------------------------------------------------
# Per-field failure categories
# ------------------------------------------------------------------


@pytest.mark.parametrize("annotation", ["max:10", "max", "foo:1", "", "in:1,2"])
def test_unexported_field_is_always_reported(annotation):
    @dataclass
    class Hidden:
        _secret: int = field(default=99, metadata={"validate": annotation})

    result = _validate(Hidden())

    if not annotation:
        assert result.allowed is True
        return
    [failure] = result.failures
    assert failure.field == "_secret"
    assert failure.kind is FailureKind.UNEXPORTED_FIELD
    assert failure.rule is None
    assert failure.message == "validation for unexported field is not allowed"


@pytest.mark.parametrize("annotation", ["max", "max:", "in"])
def test_malformed_annotation_is_invalid_syntax(annotation):
    @dataclass
    class Broken:
        limit: int = _rule(annotation, 5)

    [failure] = _validate(Broken()).failures
    assert failure.kind is FailureKind.INVALID_SYNTAX


@pytest.mark.parametrize("annotation", [10, 0, ["max:1"], b"max:1"])
def test_non_string_annotation_is_invalid_syntax_and_walk_continues(annotation):
    @dataclass
    class Odd:
        first: int = field(default=5, metadata={"validate": annotation})
        second: int = _rule("max:1", 5)

    result = _validate(Odd())

    assert [f.field for f in result.failures] == ["first", "second"]
    assert [f.kind for f in result.failures] == [
        FailureKind.INVALID_SYNTAX,
        FailureKind.RULE_VIOLATION,
    ]


def test_unassigned_init_false_field_is_unsupported_type():
    @dataclass
    class Lazy:
        pending: int = field(init=False, metadata={"validate": "max:10"})
        count: int = _rule("max:1", 5)

    result = _validate(Lazy())

    assert [f.kind for f in result.failures] == [
        FailureKind.UNSUPPORTED_TYPE,
        FailureKind.RULE_VIOLATION,
    ]
    assert result.failures[0].field == "pending"


def test_unknown_rule_is_unsupported_validator():
    @dataclass
    class Unknown:
        limit: int = _rule("foo:1", 5)

    [failure] = _validate(Unknown()).failures
    assert failure.kind is FailureKind.UNSUPPORTED_VALIDATOR
    assert failure.rule == "foo"
    assert failure.message == "used unsupported validator"


@pytest.mark.parametrize("value", [1.5, True, None, [1], b"abc"])
def test_unsupported_value_kind_is_reported(value):
    @dataclass
    class Odd:
        value: Any = _rule("max:10", None)

    [failure] = _validate(Odd(value=value)).failures
    assert failure.kind is FailureKind.UNSUPPORTED_TYPE
    assert failure.message == "used unsupported type with validator"


def test_unsupported_type_is_checked_before_rule_name():
    @dataclass
    class Odd:
        ratio: float = _rule("foo:1", 0.5)

    [failure] = _validate(Odd()).failures
    assert failure.kind is FailureKind.UNSUPPORTED_TYPE


def test_len_on_integer_field_is_unsupported_validator():
    @dataclass
    class Numbered:
        count: int = _rule("len:3", 123)

    [failure] = _validate(Numbered()).failures
    assert failure.kind is FailureKind.UNSUPPORTED_VALIDATOR


# ------------------------------------------------------------------
# Rule outcomes through the walker
# ------------------------------------------------------------------


@pytest.mark.parametrize(
    "annotation,value,allowed",
    [
        ("max:10", 42, False),
        ("max:10", 10, True),
        ("max:10", 9, True),
        ("min:5", "ab", False),
        ("min:5", "abcde", True),
        ("len:3", "abc", True),
        ("len:3", "ab", False),
        ("in:1,2,3", 2, True),
        ("in:1,2,3", 5, False),
        ("in:foo,bar", "bar", True),
        ("in:foo,bar", "baz", False),
    ],
)
def test_rule_outcomes(annotation, value, allowed):
    @dataclass
    class Single:
        value: Any = _rule(annotation, None)

    result = _validate(Single(value=value))
    assert result.allowed is allowed
    if not allowed:
        assert result.failures[0].kind is FailureKind.RULE_VIOLATION


def test_max_violation_message_names_value_and_bound():
    @dataclass
    class Limit:
        value: int = _rule("max:10", 42)

    [failure] = _validate(Limit()).failures
    assert "42" in failure.message
    assert "10" in failure.message
    assert "greater" in failure.message


def test_min_violation_message_mentions_length():
    @dataclass
    class Name:
        value: str = _rule("min:5", "ab")

    [failure] = _validate(Name()).failures
    assert "Length" in failure.message


def test_membership_failure_message():
    @dataclass
    class Choice:
        value: int = _rule("in:1,2,3", 5)

    assert _validate(Choice()).message == "value is not found"


# ------------------------------------------------------------------
# Aggregation
# ------------------------------------------------------------------


def test_all_failures_collected_in_declaration_order():
    record = Account(name="al", role="root", age=200, pin="12")

    result = _validate(record)

    assert result.allowed is False
    assert [f.field for f in result.failures] == ["name", "role", "age", "pin"]
    assert all(isinstance(f, ValidationFailure) for f in result.failures)


def test_three_different_violations_yield_three_failures():
    @dataclass
    class Mixed:
        count: int = _rule("max:1", 5)
        label: str = _rule("len:2", "abc")
        kind: str = _rule("in:a,b", "c")

    result = _validate(Mixed())

    assert len(result.failures) == 3
    assert [f.rule for f in result.failures] == ["max", "len", "in"]


def test_mixed_categories_do_not_short_circuit():
    @dataclass
    class Messy:
        _hidden: int = _rule("max:1", 5)
        syntax: int = _rule("max", 5)
        ratio: float = _rule("max:1", 2.5)
        unknown: int = _rule("regex:x", 1)
        bounded: int = _rule("max:1", 5)

    kinds = [f.kind for f in _validate(Messy()).failures]

    assert kinds == [
        FailureKind.UNEXPORTED_FIELD,
        FailureKind.INVALID_SYNTAX,
        FailureKind.UNSUPPORTED_TYPE,
        FailureKind.UNSUPPORTED_VALIDATOR,
        FailureKind.RULE_VIOLATION,
    ]


def test_combined_message_uses_delimiter_without_trailing():
    @dataclass
    class Pair:
        a: int = _rule("max:1", 2)
        b: str = _rule("in:x", "y")

    result = _validate(Pair())

    assert str(result) == "Integer 2 is greater than 1 >>= value is not found"
    assert not str(result).endswith(" >>= ")


def test_error_returns_aggregated_exception():
    result = _validate(Account(role="root", age=200))

    error = result.error()
    assert isinstance(error, ValidationErrors)
    assert error.kinds == [FailureKind.RULE_VIOLATION, FailureKind.RULE_VIOLATION]
    assert str(error) == "value is not found >>= Integer 200 is greater than 130"
    with pytest.raises(ValidationErrors):
        result.raise_for_failures()


def test_result_is_immutable():
    result = _validate(Account(age=200))

    with pytest.raises(AttributeError):
        result.failures = ()  # type: ignore[misc]
    assert isinstance(result.failures, tuple)


def test_validation_does_not_mutate_record():
    record = Account(name="al")
    _validate(record)

    assert record.name == "al"


# ------------------------------------------------------------------
# Module-level entry points and configuration
# ------------------------------------------------------------------


def test_module_validate_uses_process_wide_validator():
    assert structcheck.get_validator() is structcheck.get_validator()
    assert structcheck.validate(Account()).allowed is True
    assert structcheck.validate(Account(age=500)).allowed is False


def test_check_raises_on_invalid_record():
    structcheck.check(Account())

    with pytest.raises(ValidationErrors) as exc_info:
        structcheck.check(Account(pin="1"))

    assert "not equal to 4" in str(exc_info.value)


def test_check_raises_not_a_struct_for_mapping():
    with pytest.raises(NotAStructError):
        structcheck.check({"pin": "1"})


def test_metadata_key_from_environment(monkeypatch):
    @dataclass
    class Custom:
        value: int = field(default=50, metadata={"check": "max:10"})

    assert _validate(Custom()).allowed is True

    monkeypatch.setenv("STRUCTCHECK_METADATA_KEY", "check")
    assert _validate(Custom()).allowed is False


def test_explicit_metadata_key_overrides_environment(monkeypatch):
    @dataclass
    class Custom:
        value: int = field(default=50, metadata={"rules": "max:10"})

    monkeypatch.setenv("STRUCTCHECK_METADATA_KEY", "check")
    validator = StructValidator(metadata_key="rules")

    assert validator.metadata_key == "rules"
    assert validator.validate(Custom()).allowed is False
