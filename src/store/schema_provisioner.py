"""Destination index provisioning.

This module makes sure the target index exists with the news schema
before the first bulk write. Creation failures are logged, not raised,
so ingestion can still proceed against an existing or auto-created index.
"""

from __future__ import annotations

from typing import Any, Mapping

from elasticsearch import ApiError, TransportError

from core.errors import SchemaCreateError
from core.logging_config import get_logger
from core.types import ProvisionOutcome
from store.index_schema import NEWS_INDEX_SCHEMA


class SchemaProvisioner:
    """Idempotent index creator."""

    def __init__(self, client: Any, logger: Any | None = None) -> None:
        self._client = client
        self._logger = logger or get_logger(__name__)

    def ensure(
        self,
        index_name: str,
        schema: Mapping[str, Any] = NEWS_INDEX_SCHEMA,
    ) -> ProvisionOutcome:
        """Create ``index_name`` with ``schema`` unless it already exists.

        Existence-check failures count as "absent" so creation is attempted.

        Args:
            index_name: Destination index.
            schema: Mapping with ``settings`` and ``mappings`` sections.

        Returns:
            Whether the index already existed, was created, or creation failed.
        """
        if self._index_exists(index_name):
            self._logger.info("index_exists", index_name=index_name)
            return ProvisionOutcome.EXISTS
        try:
            self._client.indices.create(
                index=index_name,
                settings=schema.get("settings"),
                mappings=schema.get("mappings"),
            )
        except (ApiError, TransportError) as error:
            failure = SchemaCreateError(f"Failed to create index {index_name}: {error}")
            self._logger.error(
                "index_create_failed",
                index_name=index_name,
                error_type=type(error).__name__,
                error=str(failure),
            )
            return ProvisionOutcome.FAILED
        self._logger.info("index_created", index_name=index_name)
        return ProvisionOutcome.CREATED

    def _index_exists(self, index_name: str) -> bool:
        try:
            return bool(self._client.indices.exists(index=index_name))
        except (ApiError, TransportError) as error:
            self._logger.warning(
                "index_exists_check_failed",
                index_name=index_name,
                error_type=type(error).__name__,
                error=str(error),
            )
            return False
