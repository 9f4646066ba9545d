"""Bulk response interpretation.

This module decodes the mixed per-item bulk response returned by the
store and decides whether a flushed batch succeeded.
"""

from __future__ import annotations

import json
from typing import Mapping

from core.errors import BulkItemError, BulkSubmitError
from core.types import BulkItemResult, BulkResponse


def parse_bulk_response(body: object) -> BulkResponse:
    """Decode a raw bulk response body.

    Args:
        body: Decoded JSON mapping ``{"errors": bool, "items": [...]}``.

    Returns:
        Typed bulk response.

    Raises:
        BulkSubmitError: If the body does not have the bulk response shape.
    """
    if not isinstance(body, Mapping):
        raise BulkSubmitError(
            f"Unexpected bulk response: expected object, got {type(body).__name__}."
        )
    errors_flag = body.get("errors")
    raw_items = body.get("items")
    if not isinstance(errors_flag, bool) or not isinstance(raw_items, list):
        raise BulkSubmitError(
            "Unexpected bulk response: expected boolean 'errors' and list 'items'."
        )
    items: list[BulkItemResult] = []
    for raw_item in raw_items:
        items.extend(_parse_item(raw_item))
    return BulkResponse(errors=errors_flag, items=tuple(items))


def failed_items(response: BulkResponse) -> tuple[BulkItemResult, ...]:
    """Return items carrying a non-empty structured error, in response order."""
    return tuple(item for item in response.items if item.error)


def raise_for_item_errors(response: BulkResponse) -> None:
    """Raise when the store rejected any document of the batch.

    The first failed item is the headline of the error; every failed
    item is attached for diagnosis.

    Args:
        response: Parsed bulk response.

    Raises:
        BulkItemError: If ``errors`` is set and any item carries an error.
    """
    if not response.errors:
        return
    failures = failed_items(response)
    if not failures:
        return
    first = failures[0]
    detail = dict(first.error or {})
    raise BulkItemError(
        f"bulk item failed: id={first.document_id} status={first.status} "
        f"error={json.dumps(detail, sort_keys=True, default=str)} "
        f"({len(failures)} of {len(response.items)} items failed)",
        detail=detail,
        failures=[(item.document_id, item.status, dict(item.error or {})) for item in failures],
    )


def _parse_item(raw_item: object) -> list[BulkItemResult]:
    if not isinstance(raw_item, Mapping):
        raise BulkSubmitError(
            f"Unexpected bulk response item: expected object, got {type(raw_item).__name__}."
        )
    results: list[BulkItemResult] = []
    for action, outcome in raw_item.items():
        if not isinstance(outcome, Mapping):
            raise BulkSubmitError(f"Unexpected bulk response item for action '{action}'.")
        raw_error = outcome.get("error")
        error = _normalize_error(raw_error)
        raw_id = outcome.get("_id")
        results.append(
            BulkItemResult(
                action=str(action),
                document_id=None if raw_id is None else str(raw_id),
                status=_parse_status(outcome.get("status")),
                error=error,
            )
        )
    return results


def _normalize_error(raw_error: object) -> Mapping[str, object] | None:
    if raw_error is None:
        return None
    if isinstance(raw_error, Mapping):
        return dict(raw_error) if raw_error else None
    # Some store versions report plain string reasons.
    return {"reason": str(raw_error)} if str(raw_error) else None


def _parse_status(raw_status: object) -> int:
    if isinstance(raw_status, int) and not isinstance(raw_status, bool):
        return raw_status
    return 0
