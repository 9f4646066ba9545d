"""Unit tests for Elasticsearch client construction."""

from __future__ import annotations

from dataclasses import replace

import pytest

from core.config import SyncerConfig
from core.errors import ClientInitError
from store import search_client
from store.search_client import build_client_kwargs, create_search_client


def test_build_client_kwargs_verifies_tls_by_default() -> None:
    """Default config should verify certificates and send basic auth."""
    kwargs = build_client_kwargs(SyncerConfig.from_env())

    assert (
        kwargs["verify_certs"] is True
        and kwargs["basic_auth"] == ("test-user", "test-password")
        and kwargs["hosts"] == ["https://localhost:9200"]
        and "request_timeout" not in kwargs
    )


def test_build_client_kwargs_applies_insecure_flag_and_timeout() -> None:
    """Insecure mode and timeouts should be forwarded to the client."""
    config = replace(SyncerConfig.from_env(), insecure_skip_verify=True, request_timeout=5.0)

    kwargs = build_client_kwargs(config)

    assert kwargs["verify_certs"] is False and kwargs["ssl_show_warn"] is False and kwargs["request_timeout"] == 5.0


def test_create_search_client_wraps_constructor_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    """Client constructor failures should surface as ClientInitError."""

    def _failing_client(**kwargs: object) -> None:
        raise ValueError("URL must include a 'scheme'")

    monkeypatch.setattr(search_client, "Elasticsearch", _failing_client)

    with pytest.raises(ClientInitError):
        create_search_client(SyncerConfig.from_env())

    assert True
