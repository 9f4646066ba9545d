"""Batched bulk ingestion of articles.

This module owns the core load loop: it accumulates articles into
fixed-size bulk batches, submits each batch in order, and fails the
whole run on the first rejected batch or unparseable record.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Iterable, Mapping, Protocol

from core.constants import DEFAULT_BULK_SIZE
from core.errors import SyncerConfigError, SyncerIngestError
from core.logging_config import get_logger
from core.types import Article, BulkIngestionResult
from ingest.bulk_payload import BulkBatch, build_action_line, build_document
from ingest.bulk_response import failed_items, parse_bulk_response, raise_for_item_errors
from ingest.date_normalizer import normalize_to_es_date


class BulkWriter(Protocol):
    """Store operation required to submit one bulk request."""

    def submit(self, payload: str) -> Mapping[str, object]: ...


class PipelineState(str, Enum):
    """Lifecycle states of a bulk ingestion run."""

    ACCUMULATING = "accumulating"
    FLUSHING = "flushing"
    DRAINING = "draining"
    DONE = "done"
    FAILED = "failed"


class BulkIngestionPipeline:
    """One-shot runner that loads articles through sequential bulk requests."""

    def __init__(
        self,
        writer: BulkWriter,
        index_name: str,
        batch_size: int = DEFAULT_BULK_SIZE,
        logger: Any | None = None,
        normalize_date: Callable[[str], str] = normalize_to_es_date,
    ) -> None:
        """Create a pipeline.

        Args:
            writer: Bulk request submitter.
            index_name: Destination index for every document.
            batch_size: Articles per bulk request.
            logger: Structured logger; a module logger when omitted.
            normalize_date: Publication date converter.

        Raises:
            SyncerConfigError: If batch size is not positive.
        """
        if batch_size <= 0:
            raise SyncerConfigError(
                f"Invalid bulk batch size {batch_size}: expected a positive integer."
            )
        self._writer = writer
        self._index_name = index_name
        self._batch_size = batch_size
        self._logger = logger or get_logger(__name__)
        self._normalize_date = normalize_date
        self._batch = BulkBatch()
        self._state = PipelineState.ACCUMULATING
        self._appended_count = 0
        self._flush_sizes: list[int] = []

    @property
    def state(self) -> PipelineState:
        """Current lifecycle state."""
        return self._state

    @property
    def pending_count(self) -> int:
        """Articles appended since the last flush."""
        return len(self._batch)

    def run(self, articles: Iterable[Article]) -> BulkIngestionResult:
        """Load all articles and drain the final partial batch.

        Args:
            articles: Articles in load order.

        Returns:
            Submitted article count and per-flush sizes.

        Raises:
            DateParseError: If any publication date is malformed.
            BulkSubmitError: If a bulk request cannot be submitted.
            BulkItemError: If the store rejects any document.
        """
        self._require_fresh()
        for article in articles:
            self.append(article)
            if len(self._batch) >= self._batch_size:
                self.flush()
        self._state = PipelineState.DRAINING
        self.flush()
        self._state = PipelineState.DONE
        return BulkIngestionResult(
            indexed_count=self._appended_count,
            flush_sizes=tuple(self._flush_sizes),
        )

    def append(self, article: Article) -> None:
        """Normalize one article and add it to the current batch.

        Raises:
            DateParseError: If the publication date is malformed.
            SyncerIngestError: If the article has no identifier or cannot be encoded.
        """
        try:
            if not article.article_id:
                raise SyncerIngestError(
                    "Cannot index article without an identifier. Every article needs an 'id'."
                )
            publication_date = self._normalize_date(article.publication_date)
            self._batch.append(
                build_action_line(self._index_name, article.article_id),
                build_document(article, publication_date),
                article.article_id,
            )
        except SyncerIngestError:
            self._state = PipelineState.FAILED
            raise
        self._appended_count += 1

    def flush(self) -> int:
        """Submit the current batch, if any, and clear it on success.

        Returns:
            Number of articles submitted, zero for an empty batch.

        Raises:
            BulkSubmitError: If the request or its response fails.
            BulkItemError: If the store rejects any document.
        """
        if len(self._batch) == 0:
            return 0
        resume_state = self._state
        self._state = PipelineState.FLUSHING
        try:
            response = parse_bulk_response(self._writer.submit(self._batch.to_ndjson()))
            if response.errors and not failed_items(response):
                self._logger.warning(
                    "bulk_errors_without_item_errors",
                    index_name=self._index_name,
                    item_count=len(response.items),
                )
            raise_for_item_errors(response)
        except SyncerIngestError:
            self._state = PipelineState.FAILED
            raise
        flushed_count = len(self._batch)
        self._flush_sizes.append(flushed_count)
        self._logger.info(
            "bulk_flushed",
            index_name=self._index_name,
            flush_number=len(self._flush_sizes),
            document_count=flushed_count,
        )
        self._batch.clear()
        self._state = resume_state
        return flushed_count

    def _require_fresh(self) -> None:
        if self._state != PipelineState.ACCUMULATING or self._appended_count:
            raise SyncerIngestError(
                f"Bulk pipeline already used (state={self._state.value}). "
                "Create a new pipeline for each run."
            )
