"""Public SDK surface for the news syncer.

This module provides a stable import path for library users.
It re-exports the client, typed options, and error types.
"""

from __future__ import annotations

from core.config import SyncerConfig
from core.errors import (
    BulkItemError,
    BulkSubmitError,
    ClientInitError,
    DateParseError,
    SchemaCreateError,
    SourceNotFoundError,
    SourceParseError,
    SyncerConfigError,
    SyncerError,
)
from core.logging_config import configure_logging
from core.types import Article, ProvisionOutcome, SyncOptions, SyncResult
from ingest.bulk_pipeline import BulkIngestionPipeline, PipelineState
from ingest.date_normalizer import normalize_to_es_date
from store.index_schema import NEWS_INDEX_SCHEMA
from store.sync_sdk import SyncerClient

__all__ = [
    "Article",
    "BulkIngestionPipeline",
    "BulkItemError",
    "BulkSubmitError",
    "ClientInitError",
    "DateParseError",
    "NEWS_INDEX_SCHEMA",
    "PipelineState",
    "ProvisionOutcome",
    "SchemaCreateError",
    "SourceNotFoundError",
    "SourceParseError",
    "SyncOptions",
    "SyncResult",
    "SyncerClient",
    "SyncerConfig",
    "SyncerConfigError",
    "SyncerError",
    "configure_logging",
    "normalize_to_es_date",
]
