"""News syncer exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations

from typing import Mapping, Sequence


class SyncerError(Exception):
    """Base exception for all news syncer failures."""


class SyncerConfigError(SyncerError):
    """Raised for invalid or missing runtime configuration."""


class SyncerSourceError(SyncerError):
    """Raised when article records cannot be loaded."""


class SourceNotFoundError(SyncerSourceError):
    """Raised when the article source file or object is absent."""


class SourceParseError(SyncerSourceError):
    """Raised when the article source is not a valid array of articles."""


class SyncerIngestError(SyncerError):
    """Raised for bulk ingestion pipeline failures."""


class DateParseError(SyncerIngestError):
    """Raised when a publication date does not match the input layout."""


class BulkSubmitError(SyncerIngestError):
    """Raised when a bulk request cannot be submitted or decoded."""


class BulkItemError(SyncerIngestError):
    """Raised when the store rejects documents inside a bulk request.

    Attributes:
        detail: Structured error of the first failed item.
        failures: Every failed item as ``(document_id, status, error)``.
    """

    def __init__(
        self,
        message: str,
        detail: Mapping[str, object],
        failures: Sequence[tuple[str | None, int, Mapping[str, object]]],
    ) -> None:
        super().__init__(message)
        self.detail = detail
        self.failures = tuple(failures)


class SyncerStoreError(SyncerError):
    """Raised for search store connection and index failures."""


class ClientInitError(SyncerStoreError):
    """Raised when the search store client cannot be constructed."""


class SchemaCreateError(SyncerStoreError):
    """Describes a failed index creation. Logged, never fatal."""


class SyncerSpecError(SyncerError):
    """Raised for invalid or unsupported sync-spec files."""


class SyncerDependencyError(SyncerError):
    """Raised when an optional runtime dependency is missing."""
