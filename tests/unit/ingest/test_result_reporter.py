"""Unit tests for sync completion reporting."""

from __future__ import annotations

from ingest.result_reporter import elapsed_milliseconds, report_sync_result
from tests.search_fakes import RecordingLogger


def test_report_sync_result_returns_summary_line() -> None:
    """Summary should include the count and whole elapsed milliseconds."""
    summary = report_sync_result("news", 1200, 10.0, 10.25, RecordingLogger())

    assert summary == "indexed 1200 articles in 250 milliseconds"


def test_report_sync_result_logs_completion_event() -> None:
    """Reporter should log ingest_completed with count and duration."""
    logger = RecordingLogger()

    report_sync_result("news", 3, 1.0, 1.5, logger)

    assert logger.events == [
        ("info", "ingest_completed", {"index_name": "news", "indexed_count": 3, "elapsed_ms": 500})
    ]


def test_elapsed_milliseconds_never_negative() -> None:
    """A clock going backwards should clamp to zero."""
    assert elapsed_milliseconds(5.0, 4.0) == 0
