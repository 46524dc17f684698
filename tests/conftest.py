"""Shared pytest fixtures for the structcheck test-suite."""
from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _silence_logging(caplog):  # noqa: D401
    """Reduce noise – most tests assert behaviour, not log output."""
    caplog.set_level("WARNING")
    yield


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Start every test from the default configuration."""
    monkeypatch.delenv("STRUCTCHECK_METADATA_KEY", raising=False)
    monkeypatch.delenv("STRUCTCHECK_TELEMETRY", raising=False)
    yield
