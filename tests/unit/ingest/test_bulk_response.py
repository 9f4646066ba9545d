"""Unit tests for bulk response interpretation."""

from __future__ import annotations

import pytest

from core.errors import BulkItemError, BulkSubmitError
from ingest.bulk_response import failed_items, parse_bulk_response, raise_for_item_errors


def _mixed_body() -> dict[str, object]:
    return {
        "errors": True,
        "items": [
            {"index": {"_id": "a", "status": 201}},
            {"index": {"_id": "b", "status": 400, "error": {"type": "mapper_parsing_exception"}}},
            {"index": {"_id": "c", "status": 429, "error": {"type": "es_rejected_execution_exception"}}},
        ],
    }


def test_parse_bulk_response_reads_items_in_order() -> None:
    """Parser should expose id, status, and error for each item."""
    response = parse_bulk_response(_mixed_body())

    assert [(item.document_id, item.status) for item in response.items] == [
        ("a", 201),
        ("b", 400),
        ("c", 429),
    ]


def test_raise_for_item_errors_reports_first_failure_and_collects_all() -> None:
    """The first failed item heads the error; every failure is attached."""
    response = parse_bulk_response(_mixed_body())

    with pytest.raises(BulkItemError) as error_info:
        raise_for_item_errors(response)

    assert (
        error_info.value.detail == {"type": "mapper_parsing_exception"}
        and [failure[0] for failure in error_info.value.failures] == ["b", "c"]
    )


def test_raise_for_item_errors_passes_clean_response() -> None:
    """A response without the errors flag should pass."""
    response = parse_bulk_response({"errors": False, "items": [{"index": {"_id": "a", "status": 201}}]})

    raise_for_item_errors(response)

    assert failed_items(response) == ()


def test_raise_for_item_errors_ignores_flag_without_item_errors() -> None:
    """An errors flag with only null item errors should not fail the batch."""
    response = parse_bulk_response(
        {"errors": True, "items": [{"index": {"_id": "a", "status": 201, "error": None}}]}
    )

    raise_for_item_errors(response)

    assert response.errors is True


@pytest.mark.parametrize(
    "body",
    [
        None,
        [],
        {"items": []},
        {"errors": "false", "items": []},
        {"errors": False},
        {"errors": False, "items": ["oops"]},
    ],
)
def test_parse_bulk_response_rejects_unexpected_shapes(body: object) -> None:
    """Bodies without the bulk response shape should fail as submit errors."""
    with pytest.raises(BulkSubmitError):
        parse_bulk_response(body)
