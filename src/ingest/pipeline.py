"""Sync orchestration for one article load.

This module coordinates index provisioning, article loading, bulk
ingestion, and completion reporting for a single sync job.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Protocol

from core.config import SyncerConfig
from core.logging_config import get_logger
from core.types import Article, ProvisionOutcome, SyncOptions, SyncResult
from ingest.article_reader import read_articles
from ingest.bulk_pipeline import BulkIngestionPipeline, BulkWriter
from ingest.result_reporter import elapsed_milliseconds, report_sync_result


class IndexProvisioner(Protocol):
    """Index provisioning operation required before any write."""

    def ensure(self, index_name: str) -> ProvisionOutcome: ...


class SyncRunner:
    """Runner that executes one sync job end to end."""

    def __init__(
        self,
        options: SyncOptions,
        config: SyncerConfig,
        provisioner: IndexProvisioner,
        writer: BulkWriter,
        logger: Any | None = None,
        clock: Callable[[], float] = time.monotonic,
        article_loader: Callable[[str, SyncerConfig], list[Article]] = read_articles,
    ) -> None:
        self._options = options
        self._config = config
        self._provisioner = provisioner
        self._writer = writer
        self._logger = logger or get_logger(__name__)
        self._clock = clock
        self._article_loader = article_loader

    def run(self) -> SyncResult:
        """Provision the index, load articles, and bulk index them."""
        provision = self._provisioner.ensure(self._options.index_name)
        started_at = self._clock()
        articles = self._article_loader(self._options.source_uri, self._config)
        pipeline = BulkIngestionPipeline(
            writer=self._writer,
            index_name=self._options.index_name,
            batch_size=self._options.batch_size,
            logger=self._logger,
        )
        ingestion = pipeline.run(articles)
        finished_at = self._clock()
        summary = report_sync_result(
            self._options.index_name,
            ingestion.indexed_count,
            started_at,
            finished_at,
            self._logger,
        )
        return SyncResult(
            index_name=self._options.index_name,
            indexed_count=ingestion.indexed_count,
            flush_count=ingestion.flush_count,
            elapsed_ms=elapsed_milliseconds(started_at, finished_at),
            provision=provision,
            summary=summary,
        )


def sync_articles(
    options: SyncOptions,
    config: SyncerConfig,
    provisioner: IndexProvisioner,
    writer: BulkWriter,
    logger: Any | None = None,
) -> SyncResult:
    """Run one sync job.

    Args:
        options: Index, source, and batch size of the job.
        config: Runtime configuration.
        provisioner: Ensures the destination index exists.
        writer: Bulk request submitter.
        logger: Optional structured logger.

    Returns:
        Completed sync summary.

    Raises:
        SyncerSourceError: If articles cannot be loaded.
        SyncerIngestError: If any record or bulk request fails.
    """
    runner = SyncRunner(options, config, provisioner, writer, logger=logger)
    return runner.run()
