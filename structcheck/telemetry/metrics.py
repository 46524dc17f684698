# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for structcheck."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from ..config import telemetry_enabled
from .runtime import meter

if TYPE_CHECKING:  # pragma: no cover
    from ..validation.base import ValidationResult

logger = logging.getLogger(__name__)

validation_total = meter.create_counter(
    name="structcheck.validation.total",
    description="Counts validated records, partitioned by outcome.",
    unit="1",
)

validation_failure_total = meter.create_counter(
    name="structcheck.validation.failure.total",
    description="Counts individual field failures, partitioned by failure kind.",
    unit="1",
)

validation_latency_ms = meter.create_histogram(
    name="structcheck.validation.latency.ms",
    description="Time spent validating a single record.",
    unit="ms",
)


def record_validation_metrics(record_name: str, result: "ValidationResult", started_at: float) -> None:
    """Record latency, outcome and per-kind failure counts for one record.

    Args:
        record_name: Qualified name of the record's type.
        result: The finished validation result.
        started_at: Timestamp from time.perf_counter() when validation started.
    """
    if not telemetry_enabled():
        return

    status = "valid" if result.allowed else "invalid"
    duration_ms = (time.perf_counter() - started_at) * 1000.0
    try:
        validation_latency_ms.record(duration_ms, {"record": record_name, "status": status})
        validation_total.add(1, {"record": record_name, "status": status})
        for failure in result.failures:
            validation_failure_total.add(1, {"record": record_name, "kind": failure.kind.value})
    except Exception:
        # Telemetry must never interfere with validation
        logger.debug("Failed to record validation metrics for %s", record_name, exc_info=True)


__all__ = [
    "record_validation_metrics",
    "validation_failure_total",
    "validation_latency_ms",
    "validation_total",
]
