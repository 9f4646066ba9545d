"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_SYNC_ENV_VARS = (
    "ES_ADDRESSES",
    "ES_INSECURE_SKIP_VERIFY",
    "ES_CA_CERTS",
    "ES_REQUEST_TIMEOUT",
    "SYNC_INDEX_NAME",
    "SYNC_BATCH_SIZE",
    "SYNC_SOURCE_URI",
    "SYNC_LOG_LEVEL",
    "SYNC_S3_REGION",
    "SYNC_S3_PROFILE",
)


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    src_path = _PROJECT_ROOT / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def sync_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from the repo root with test credentials and default settings."""
    monkeypatch.chdir(_PROJECT_ROOT)
    for name in _SYNC_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("ES_USERNAME", "test-user")
    monkeypatch.setenv("ES_PASSWORD", "test-password")
