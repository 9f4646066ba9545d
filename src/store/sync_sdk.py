"""Python SDK for news sync operations.

This module exposes high-level APIs for index provisioning and article
sync jobs backed by one shared Elasticsearch client.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from core.config import SyncerConfig
from core.sync_spec import load_sync_spec
from core.types import ProvisionOutcome, SyncOptions, SyncResult
from ingest.pipeline import sync_articles
from store.bulk_writer import ElasticsearchBulkWriter
from store.schema_provisioner import SchemaProvisioner
from store.search_client import create_search_client


class SyncerClient:
    """Primary SDK entry point for sync workflows."""

    def __init__(
        self,
        config: SyncerConfig | None = None,
        search_client: Any | None = None,
        logger: Any | None = None,
    ) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration, read from env when omitted.
            search_client: Optional pre-built Elasticsearch client.
            logger: Optional structured logger shared by all components.

        Raises:
            SyncerConfigError: If environment configuration is invalid.
            ClientInitError: If the Elasticsearch client cannot be created.
        """
        self._config = config or SyncerConfig.from_env()
        self._search_client = search_client or create_search_client(self._config)
        self._logger = logger
        self._provisioner = SchemaProvisioner(self._search_client, logger=logger)
        self._writer = ElasticsearchBulkWriter(self._search_client)

    @property
    def config(self) -> SyncerConfig:
        """Runtime configuration used by this client."""
        return self._config

    def default_options(
        self,
        source_uri: str | None = None,
        index_name: str | None = None,
        batch_size: int | None = None,
    ) -> SyncOptions:
        """Build sync options from config, with optional overrides."""
        options = SyncOptions(
            source_uri=self._config.source_uri,
            index_name=self._config.index_name,
            batch_size=self._config.batch_size,
        )
        if source_uri:
            options = replace(options, source_uri=source_uri)
        if index_name:
            options = replace(options, index_name=index_name)
        if batch_size:
            options = replace(options, batch_size=batch_size)
        return options

    def ensure_index(self, index_name: str) -> ProvisionOutcome:
        """Create the news index if it does not exist yet."""
        return self._provisioner.ensure(index_name)

    def sync(self, options: SyncOptions) -> SyncResult:
        """Load one article source into one index.

        Args:
            options: Sync job options.

        Returns:
            Completed sync summary.

        Raises:
            SyncerSourceError: If articles cannot be loaded.
            SyncerIngestError: If any record or bulk request fails.
        """
        return sync_articles(
            options,
            self._config,
            self._provisioner,
            self._writer,
            logger=self._logger,
        )

    def sync_spec(
        self,
        spec_path: str,
        default_index: str | None = None,
        default_batch_size: int | None = None,
    ) -> tuple[SyncResult, ...]:
        """Run every job of a YAML sync spec in order, stopping at the first failure.

        Args:
            spec_path: YAML sync-spec file path.
            default_index: Index for jobs the sync spec leaves unset; config value when omitted.
            default_batch_size: Batch size for jobs the sync spec leaves unset.

        Returns:
            One sync summary per job.

        Raises:
            SyncerSpecError: If the sync-spec file is invalid.
        """
        spec = load_sync_spec(spec_path)
        jobs = spec.resolve(
            default_index or self._config.index_name,
            default_batch_size or self._config.batch_size,
        )
        return tuple(self.sync(options) for options in jobs)
