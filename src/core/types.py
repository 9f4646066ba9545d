"""Shared typed models.

This module defines immutable data models used by the reader, the
bulk pipeline, the store layer, and the CLI to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from core.constants import DEFAULT_BULK_SIZE, DEFAULT_INDEX_NAME


@dataclass(frozen=True)
class Article:
    """One news article record to ingest.

    Attributes:
        article_id: Stable unique identifier, used as the document id.
        title: Headline text.
        description: Article body or teaser text.
        url: Canonical article URL.
        publication_date: Source timestamp in ``YYYY-MM-DDTHH:MM:SS`` form.
        source_name: Publisher name.
        category: Ordered category labels.
        relevance_score: Ranking score attached by the producer.
        latitude: Geo latitude of the story.
        longitude: Geo longitude of the story.
        llm_summary: Optional generated summary.
    """

    article_id: str
    title: str = ""
    description: str = ""
    url: str = ""
    publication_date: str = ""
    source_name: str = ""
    category: tuple[str, ...] = ()
    relevance_score: float = 0.0
    latitude: float = 0.0
    longitude: float = 0.0
    llm_summary: str | None = None


@dataclass(frozen=True)
class SyncOptions:
    """Options for one sync run.

    Attributes:
        index_name: Destination index.
        source_uri: Article JSON file path or ``s3://`` URI.
        batch_size: Articles per bulk request.
    """

    source_uri: str
    index_name: str = DEFAULT_INDEX_NAME
    batch_size: int = DEFAULT_BULK_SIZE


@dataclass(frozen=True)
class BulkItemResult:
    """Outcome of one document inside a bulk response.

    Attributes:
        action: Bulk action name, usually ``index``.
        document_id: Document id echoed by the store.
        status: HTTP-like status code for the item.
        error: Structured error detail when the item failed.
    """

    action: str
    document_id: str | None
    status: int
    error: Mapping[str, object] | None = None


@dataclass(frozen=True)
class BulkResponse:
    """Parsed bulk response.

    Attributes:
        errors: Store-reported flag that at least one item failed.
        items: Per-item outcomes in request order.
    """

    errors: bool
    items: tuple[BulkItemResult, ...]


@dataclass(frozen=True)
class BulkIngestionResult:
    """Aggregate output of a bulk ingestion run.

    Attributes:
        indexed_count: Articles submitted across all flushes.
        flush_sizes: Article count of each flush, in submission order.
    """

    indexed_count: int
    flush_sizes: tuple[int, ...]

    @property
    def flush_count(self) -> int:
        """Number of bulk requests submitted."""
        return len(self.flush_sizes)


class ProvisionOutcome(str, Enum):
    """Result of ensuring the destination index exists."""

    EXISTS = "exists"
    CREATED = "created"
    FAILED = "failed"


@dataclass(frozen=True)
class SyncResult:
    """Summary of one completed sync run.

    Attributes:
        index_name: Destination index.
        indexed_count: Articles submitted.
        flush_count: Bulk requests submitted.
        elapsed_ms: Wall-clock duration from source load to last flush.
        provision: Outcome of the index provisioning step.
        summary: Human-readable completion line.
    """

    index_name: str
    indexed_count: int
    flush_count: int
    elapsed_ms: int
    provision: ProvisionOutcome
    summary: str
