"""Pytest configuration and shared fixtures"""

import os

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset environment variables before each test"""
    # Clear any MEDIAFS_ prefixed environment variables
    for key in list(os.environ.keys()):
        if key.startswith("MEDIAFS_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_log_context() -> None:
    """Drop context variables bound by a previous test"""
    structlog.contextvars.clear_contextvars()
