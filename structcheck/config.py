# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Environment-driven settings.

Values are read on every call so tests and long-running processes can change
them through the environment without re-importing the package.
"""

from __future__ import annotations

import os

DEFAULT_METADATA_KEY = "validate"

_FALSY = ("", "0", "false", "no")


def get_metadata_key() -> str:
    """Field metadata key that holds the annotation string."""

    return os.getenv("STRUCTCHECK_METADATA_KEY") or DEFAULT_METADATA_KEY


def telemetry_enabled() -> bool:
    return os.getenv("STRUCTCHECK_TELEMETRY", "1").strip().lower() not in _FALSY


__all__ = [
    "DEFAULT_METADATA_KEY",
    "get_metadata_key",
    "telemetry_enabled",
]
