"""Elasticsearch client construction.

This module builds the official Elasticsearch client from the typed
runtime configuration.
"""

from __future__ import annotations

from typing import Any

from elasticsearch import Elasticsearch

from core.config import SyncerConfig
from core.errors import ClientInitError


def create_search_client(config: SyncerConfig) -> Elasticsearch:
    """Create an Elasticsearch client.

    Args:
        config: Runtime configuration with addresses, credentials, and TLS options.

    Returns:
        Configured client. No request is sent until first use.

    Raises:
        ClientInitError: If the client rejects the configuration.
    """
    try:
        return Elasticsearch(**build_client_kwargs(config))
    except (ValueError, TypeError) as error:
        raise ClientInitError(
            f"Failed to create Elasticsearch client for {', '.join(config.es_addresses)}: "
            f"{error}. Check ES_ADDRESSES and TLS settings."
        ) from error


def build_client_kwargs(config: SyncerConfig) -> dict[str, Any]:
    """Build Elasticsearch constructor kwargs from config."""
    kwargs: dict[str, Any] = {
        "hosts": list(config.es_addresses),
        "basic_auth": (config.es_username, config.es_password),
        "verify_certs": not config.insecure_skip_verify,
    }
    if config.insecure_skip_verify:
        kwargs["ssl_show_warn"] = False
    if config.ca_certs:
        kwargs["ca_certs"] = config.ca_certs
    if config.request_timeout is not None:
        kwargs["request_timeout"] = config.request_timeout
    return kwargs
