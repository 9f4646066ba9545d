"""Sync completion reporting."""

from __future__ import annotations

from typing import Any


def elapsed_milliseconds(started_at: float, finished_at: float) -> int:
    """Return whole milliseconds between two monotonic clock readings."""
    return max(0, int((finished_at - started_at) * 1000))


def report_sync_result(
    index_name: str,
    indexed_count: int,
    started_at: float,
    finished_at: float,
    logger: Any,
) -> str:
    """Log and return the human-readable completion summary.

    Args:
        index_name: Destination index.
        indexed_count: Articles submitted.
        started_at: Monotonic clock reading when loading began.
        finished_at: Monotonic clock reading after the last flush.
        logger: Structured logger receiving the ``ingest_completed`` event.

    Returns:
        Summary line such as ``indexed 1200 articles in 85 milliseconds``.
    """
    elapsed_ms = elapsed_milliseconds(started_at, finished_at)
    summary = f"indexed {indexed_count} articles in {elapsed_ms} milliseconds"
    logger.info(
        "ingest_completed",
        index_name=index_name,
        indexed_count=indexed_count,
        elapsed_ms=elapsed_ms,
    )
    return summary
