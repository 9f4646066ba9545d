"""Bulk request payload building.

This module turns articles into newline-delimited bulk action and
document lines, accumulated in a batch until it is flushed.
"""

from __future__ import annotations

import json
from typing import Any

from core.constants import BULK_INDEX_ACTION
from core.errors import SyncerIngestError
from core.types import Article


def build_action_line(index_name: str, article_id: str) -> dict[str, Any]:
    """Return bulk action metadata addressing ``article_id`` in ``index_name``."""
    return {BULK_INDEX_ACTION: {"_index": index_name, "_id": article_id}}


def build_document(article: Article, publication_date: str) -> dict[str, Any]:
    """Build the stored document body for an article.

    Args:
        article: Source article.
        publication_date: Already normalized publication date.

    Returns:
        Document body including the derived ``location`` geo-point.
    """
    document: dict[str, Any] = {
        "id": article.article_id,
        "title": article.title,
        "description": article.description,
        "url": article.url,
        "publication_date": publication_date,
        "source_name": article.source_name,
        "category": list(article.category),
        "relevance_score": article.relevance_score,
        "latitude": article.latitude,
        "longitude": article.longitude,
        "location": {"lat": article.latitude, "lon": article.longitude},
    }
    if article.llm_summary:
        document["llm_summary"] = article.llm_summary
    return document


class BulkBatch:
    """Ordered action/document pairs awaiting one bulk request."""

    def __init__(self) -> None:
        self._lines: list[str] = []
        self._document_ids: list[str] = []

    def __len__(self) -> int:
        return len(self._document_ids)

    @property
    def document_ids(self) -> tuple[str, ...]:
        """Document ids in append order."""
        return tuple(self._document_ids)

    def append(self, action: dict[str, Any], document: dict[str, Any], document_id: str) -> None:
        """Append one action line and its document line.

        Raises:
            SyncerIngestError: If the document holds a non-finite number.
        """
        try:
            action_line = _encode_line(action)
            document_line = _encode_line(document)
        except ValueError as error:
            raise SyncerIngestError(
                f"Cannot encode document {document_id!r} as JSON: {error}."
            ) from error
        self._lines.extend((action_line, document_line))
        self._document_ids.append(document_id)

    def to_ndjson(self) -> str:
        """Serialize the batch into a newline-terminated bulk body."""
        return "".join(self._lines)

    def clear(self) -> None:
        """Reset the batch after a successful flush."""
        self._lines.clear()
        self._document_ids.clear()


def _encode_line(payload: dict[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False, allow_nan=False, separators=(",", ":")) + "\n"
