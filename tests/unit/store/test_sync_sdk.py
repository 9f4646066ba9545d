"""Unit tests for the sync SDK client."""

from __future__ import annotations

import pytest

from core.errors import BulkItemError, SyncerSpecError
from core.types import ProvisionOutcome, SyncOptions
from store.sync_sdk import SyncerClient
from tests.fixture_paths import fixture_path
from tests.search_fakes import FakeSearchClient, RecordingLogger


def _client(search_client: FakeSearchClient) -> SyncerClient:
    return SyncerClient(search_client=search_client, logger=RecordingLogger())


def test_sync_loads_fixture_into_index() -> None:
    """SDK sync should create the index and store every article by id."""
    search_client = FakeSearchClient()
    options = SyncOptions(source_uri=str(fixture_path("articles/valid_articles.json")), index_name="news")

    result = _client(search_client).sync(options)

    assert (
        result.indexed_count == 3
        and result.provision is ProvisionOutcome.CREATED
        and sorted(search_client.documents["news"]) == ["news-001", "news-002", "news-003"]
    )


def test_sync_stores_normalized_dates_and_geo_points() -> None:
    """Stored documents should carry the normalized date and location."""
    search_client = FakeSearchClient()
    options = SyncOptions(source_uri=str(fixture_path("articles/valid_articles.json")), index_name="news")

    _client(search_client).sync(options)
    stored = search_client.documents["news"]["news-001"]

    assert stored["publication_date"] == "2024-06-01T08:15:00.000Z" and stored["location"] == {
        "lat": 10.8505,
        "lon": 76.2711,
    }


def test_sync_raises_item_error_for_rejected_document() -> None:
    """A document rejected by the store should fail the sync."""
    search_client = FakeSearchClient(rejected_ids={"news-002"})
    options = SyncOptions(source_uri=str(fixture_path("articles/valid_articles.json")), index_name="news")

    with pytest.raises(BulkItemError) as error_info:
        _client(search_client).sync(options)

    assert error_info.value.failures[0][0] == "news-002"


def test_default_options_apply_overrides() -> None:
    """Explicit overrides should replace config defaults."""
    client = _client(FakeSearchClient())

    options = client.default_options(index_name="archive", batch_size=50)

    assert options == SyncOptions(source_uri="resources/news_data.json", index_name="archive", batch_size=50)


def test_sync_spec_runs_every_job_in_order() -> None:
    """Spec jobs should run sequentially with their resolved index and batch size."""
    search_client = FakeSearchClient()

    results = _client(search_client).sync_spec(str(fixture_path("sync_spec/valid_jobs.yaml")))

    assert [(result.index_name, result.flush_count) for result in results] == [
        ("news-default", 2),
        ("news-archive", 3),
    ]


def test_sync_spec_rejects_invalid_file() -> None:
    """Invalid specs should fail before any job runs."""
    search_client = FakeSearchClient()

    with pytest.raises(SyncerSpecError):
        _client(search_client).sync_spec(str(fixture_path("sync_spec/unknown_field.yaml")))

    assert search_client.calls == []
