# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Record Validation Demo: every problem in a record, reported at once.

This demo annotates dataclass fields with rules and shows how structcheck
collects every failure in field order instead of stopping at the first one.

Run with:
    python examples/record_validation_demo.py
"""

from dataclasses import dataclass, field

import structcheck
from structcheck import NotAStructError, ValidationErrors


@dataclass
class Signup:
    username: str = field(metadata={"validate": "min:3"})
    country: str = field(metadata={"validate": "len:2"})
    plan: str = field(metadata={"validate": "in:free,pro,team"})
    seats: int = field(metadata={"validate": "max:50"})
    referrer: str = ""


def demo_valid_record():
    print("\n" + "=" * 70)
    print("DEMO 1: A valid record")
    print("=" * 70)

    result = structcheck.validate(Signup(username="alice", country="NL", plan="pro", seats=5))
    print(f"\n  allowed: {result.allowed}")


def demo_aggregated_failures():
    print("\n" + "=" * 70)
    print("DEMO 2: Several broken fields")
    print("=" * 70)

    result = structcheck.validate(Signup(username="al", country="NLD", plan="gold", seats=80))
    print(f"\n  allowed: {result.allowed}")
    for failure in result.failures:
        print(f"    - {failure.field:<10} [{failure.kind.value}] {failure.message}")
    print(f"\n  Combined message:\n    {result}")


def demo_check_raises():
    print("\n" + "=" * 70)
    print("DEMO 3: check() raises instead of returning")
    print("=" * 70)

    try:
        structcheck.check(Signup(username="bob", country="DE", plan="team", seats=500))
    except ValidationErrors as e:
        print(f"\n  ValidationErrors: {e}")

    try:
        structcheck.check({"username": "bob"})
    except NotAStructError as e:
        print(f"  NotAStructError: {e}")


if __name__ == "__main__":
    demo_valid_record()
    demo_aggregated_failures()
    demo_check_raises()
