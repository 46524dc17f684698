"""Telemetry package - OpenTelemetry metrics and tracing helpers."""

from .metrics import (
    record_validation_metrics,
    validation_failure_total,
    validation_latency_ms,
    validation_total,
)
from .runtime import get_tracer, meter

__all__ = [
    "get_tracer",
    "meter",
    "record_validation_metrics",
    "validation_failure_total",
    "validation_latency_ms",
    "validation_total",
]
