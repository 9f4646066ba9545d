"""Bulk request submission to Elasticsearch."""

from __future__ import annotations

from typing import Any, Mapping

from elasticsearch import ApiError, TransportError

from core.errors import BulkSubmitError


class ElasticsearchBulkWriter:
    """Submit newline-delimited bulk bodies through the Elasticsearch client."""

    def __init__(self, client: Any) -> None:
        self._client = client

    def submit(self, payload: str) -> Mapping[str, object]:
        """Send one bulk request and return the decoded response body.

        Args:
            payload: Newline-terminated action/document lines.

        Returns:
            Response body with ``errors`` and ``items``.

        Raises:
            BulkSubmitError: If the request fails at transport or API level.
        """
        try:
            response = self._client.bulk(operations=payload)
        except (ApiError, TransportError) as error:
            raise BulkSubmitError(
                f"Failed to submit bulk request: {error}. No further batches were sent."
            ) from error
        return getattr(response, "body", response)
