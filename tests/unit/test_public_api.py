"""Unit tests for the public SDK import path."""

from __future__ import annotations

import news_syncer
from tests.search_fakes import FakeSearchClient, RecordingLogger


def test_public_module_runs_sync_with_exported_types() -> None:
    """Exported client and options should be enough to run one sync."""
    search_client = FakeSearchClient()
    client = news_syncer.SyncerClient(search_client=search_client, logger=RecordingLogger())

    result = client.sync(news_syncer.SyncOptions(source_uri="resources/news_data.json"))

    assert (
        result.provision is news_syncer.ProvisionOutcome.CREATED
        and result.indexed_count == 3
        and set(news_syncer.__all__) <= set(dir(news_syncer))
    )
