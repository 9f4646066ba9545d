"""Unit tests for S3 URI parsing."""

from __future__ import annotations

import pytest

from core.errors import SyncerSourceError
from core.s3_uri import S3Location, is_s3_uri, parse_s3_uri


def test_parse_s3_uri_splits_bucket_and_key() -> None:
    """URI should split into bucket and nested object key."""
    assert parse_s3_uri("s3://news-bucket/daily/2024/news.json") == S3Location(
        bucket="news-bucket", key="daily/2024/news.json"
    )


@pytest.mark.parametrize("uri", ["s3://", "s3://bucket", "s3://bucket/", "s3:///key.json", "s3://bucket/dir/"])
def test_parse_s3_uri_rejects_incomplete_uris(uri: str) -> None:
    """URIs without both bucket and object key should be rejected."""
    with pytest.raises(SyncerSourceError):
        parse_s3_uri(uri)

    assert is_s3_uri(uri)
