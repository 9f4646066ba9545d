"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import SyncerConfig, parse_batch_size
from core.errors import SyncerConfigError


def test_from_env_applies_defaults() -> None:
    """Unset optional variables should fall back to documented defaults."""
    config = SyncerConfig.from_env()

    assert (
        config.es_addresses == ("https://localhost:9200",)
        and config.index_name == "inshorts-news"
        and config.batch_size == 500
        and config.insecure_skip_verify is False
        and config.request_timeout is None
    )


@pytest.mark.parametrize("missing_name", ["ES_USERNAME", "ES_PASSWORD"])
def test_from_env_requires_credentials(monkeypatch: pytest.MonkeyPatch, missing_name: str) -> None:
    """Missing credentials should fail fast instead of using a fallback."""
    monkeypatch.delenv(missing_name)

    with pytest.raises(SyncerConfigError):
        SyncerConfig.from_env()

    assert True


def test_from_env_reads_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment overrides should be parsed into typed values."""
    monkeypatch.setenv("ES_ADDRESSES", "https://es-1:9200, https://es-2:9200")
    monkeypatch.setenv("ES_INSECURE_SKIP_VERIFY", "true")
    monkeypatch.setenv("ES_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("SYNC_BATCH_SIZE", "250")
    monkeypatch.setenv("SYNC_LOG_LEVEL", "debug")

    config = SyncerConfig.from_env()

    assert (
        config.es_addresses == ("https://es-1:9200", "https://es-2:9200")
        and config.insecure_skip_verify is True
        and config.request_timeout == 2.5
        and config.batch_size == 250
        and config.log_level == "DEBUG"
    )


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("SYNC_BATCH_SIZE", "many"),
        ("SYNC_BATCH_SIZE", "0"),
        ("ES_INSECURE_SKIP_VERIFY", "maybe"),
        ("ES_REQUEST_TIMEOUT", "-1"),
        ("ES_ADDRESSES", " , "),
        ("SYNC_LOG_LEVEL", "LOUD"),
    ],
)
def test_from_env_rejects_invalid_values(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    """Invalid values should raise SyncerConfigError."""
    monkeypatch.setenv(name, value)

    with pytest.raises(SyncerConfigError):
        SyncerConfig.from_env()

    assert True


def test_parse_batch_size_names_source_in_error() -> None:
    """Batch-size errors should name the offending setting."""
    with pytest.raises(SyncerConfigError, match="--batch-size"):
        parse_batch_size("-3", "--batch-size")

    assert parse_batch_size("7", "--batch-size") == 7
