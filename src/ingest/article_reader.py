"""Article record readers for ingestion.

This module loads news articles from a local JSON file or an S3 object.
It validates the JSON array into typed article records for the pipeline.
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, Mapping

from core.config import SyncerConfig
from core.errors import (
    SourceNotFoundError,
    SourceParseError,
    SyncerDependencyError,
    SyncerSourceError,
)
from core.s3_uri import S3Location, is_s3_uri, parse_s3_uri
from core.types import Article

_STRING_FIELDS = ("title", "description", "url", "publication_date", "source_name")
_FLOAT_FIELDS = ("relevance_score", "latitude", "longitude")
_MISSING_OBJECT_CODES = ("NoSuchKey", "404", "NotFound")


def read_articles(source_uri: str, config: SyncerConfig) -> list[Article]:
    """Load every article from a source into memory.

    Args:
        source_uri: Local JSON file path or ``s3://bucket/key`` URI.
        config: Runtime configuration for S3 session defaults.

    Returns:
        Articles in source order.

    Raises:
        SourceNotFoundError: If the file or object is absent.
        SourceParseError: If the content is not a valid article array.
    """
    if is_s3_uri(source_uri):
        return _read_s3_articles(source_uri, config)
    return _read_local_articles(Path(source_uri).expanduser())


def parse_articles(raw_text: str, source_label: str) -> list[Article]:
    """Parse a JSON array of article objects.

    Args:
        raw_text: JSON document text.
        source_label: Source path or URI used in error messages.

    Returns:
        Parsed articles in array order.

    Raises:
        SourceParseError: If JSON is malformed or any element is invalid.
    """
    try:
        payload = json.loads(raw_text, parse_constant=_reject_constant)
    except json.JSONDecodeError as error:
        raise SourceParseError(
            f"Failed to parse articles at {source_label}: {error.msg} "
            f"(line {error.lineno}, column {error.colno}). Fix the JSON syntax and retry."
        ) from error
    except ValueError as error:
        raise SourceParseError(
            f"Failed to parse articles at {source_label}: {error}. Fix the JSON syntax and retry."
        ) from error
    if not isinstance(payload, list):
        raise SourceParseError(
            f"Invalid articles file {source_label}: expected a JSON array, "
            f"got {type(payload).__name__}."
        )
    return [
        _parse_article(element, source_label, position)
        for position, element in enumerate(payload, 1)
    ]


def _reject_constant(token: str) -> object:
    raise ValueError(f"{token} is not a valid JSON number")


def _read_local_articles(source_path: Path) -> list[Article]:
    if not source_path.is_file():
        raise SourceNotFoundError(
            f"Failed to read articles at {source_path}: file does not exist. "
            "Set SYNC_SOURCE_URI or --source to an existing JSON file."
        )
    try:
        raw_text = source_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as error:
        raise SourceParseError(f"Failed to read articles at {source_path}: {error}.") from error
    return parse_articles(raw_text, str(source_path))


def _parse_article(element: object, source_label: str, position: int) -> Article:
    """Validate one JSON element into an article.

    Args:
        element: Decoded JSON value.
        source_label: Source path for error context.
        position: One-based array position.

    Returns:
        Typed article.

    Raises:
        SourceParseError: If the element is not a well-formed article.
    """
    context = f"{source_label} element #{position}"
    if not isinstance(element, Mapping):
        raise SourceParseError(
            f"Invalid article at {context}: expected object, got {type(element).__name__}."
        )
    article_id = element.get("id")
    if not isinstance(article_id, str) or not article_id.strip():
        raise SourceParseError(
            f"Invalid article at {context}: field 'id' must be a non-empty string."
        )
    fields: dict[str, Any] = {}
    for field_name in _STRING_FIELDS:
        fields[field_name] = _string_field(element, field_name, context)
    for field_name in _FLOAT_FIELDS:
        fields[field_name] = _float_field(element, field_name, context)
    return Article(
        article_id=article_id,
        category=_category_field(element, context),
        llm_summary=_optional_summary(element, context),
        **fields,
    )


def _string_field(element: Mapping[str, object], field_name: str, context: str) -> str:
    value = element.get(field_name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise SourceParseError(
            f"Invalid article at {context}: field '{field_name}' must be a string."
        )
    return value


def _float_field(element: Mapping[str, object], field_name: str, context: str) -> float:
    value = element.get(field_name)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SourceParseError(
            f"Invalid article at {context}: field '{field_name}' must be a number."
        )
    number = float(value)
    if not math.isfinite(number):
        raise SourceParseError(
            f"Invalid article at {context}: field '{field_name}' must be a finite number."
        )
    return number


def _category_field(element: Mapping[str, object], context: str) -> tuple[str, ...]:
    value = element.get("category")
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise SourceParseError(
            f"Invalid article at {context}: field 'category' must be a list of strings."
        )
    return tuple(value)


def _optional_summary(element: Mapping[str, object], context: str) -> str | None:
    value = element.get("llm_summary")
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise SourceParseError(
            f"Invalid article at {context}: field 'llm_summary' must be a string."
        )
    return value


def _read_s3_articles(source_uri: str, config: SyncerConfig) -> list[Article]:
    """Read articles from one S3 object.

    Args:
        source_uri: S3 object URI.
        config: Runtime configuration for region/profile.

    Returns:
        Parsed articles.

    Raises:
        SourceNotFoundError: If the object does not exist.
        SourceParseError: If the object is not a valid article array.
    """
    location = parse_s3_uri(source_uri)
    s3_client = _create_s3_client(config)
    body = _download_s3_object(s3_client, location, source_uri)
    try:
        raw_text = body.decode("utf-8")
    except UnicodeDecodeError as error:
        raise SourceParseError(f"Failed to decode articles at {source_uri}: {error}.") from error
    return parse_articles(raw_text, source_uri)


def _create_s3_client(config: SyncerConfig) -> Any:
    """Create a boto3 S3 client.

    Args:
        config: Runtime config containing optional profile/region.

    Returns:
        Boto3 S3 client.

    Raises:
        SyncerDependencyError: If boto3 is missing.
    """
    try:
        import boto3
    except ImportError as error:
        raise SyncerDependencyError(
            "S3 sources require boto3, but it is not installed. "
            "Install the 's3' extra to read s3:// sources."
        ) from error
    session_kwargs = _build_boto3_session_kwargs(config)
    session = boto3.session.Session(**session_kwargs)
    return session.client("s3")


def _build_boto3_session_kwargs(config: SyncerConfig) -> dict[str, str]:
    """Build boto3 Session kwargs from config."""
    kwargs: dict[str, str] = {}
    if config.s3_profile:
        kwargs["profile_name"] = config.s3_profile
    if config.s3_region:
        kwargs["region_name"] = config.s3_region
    return kwargs


def _download_s3_object(s3_client: Any, location: S3Location, source_uri: str) -> bytes:
    from botocore.exceptions import ClientError

    try:
        response = s3_client.get_object(Bucket=location.bucket, Key=location.key)
    except ClientError as error:
        error_code = str(error.response.get("Error", {}).get("Code", ""))
        if error_code in _MISSING_OBJECT_CODES:
            raise SourceNotFoundError(
                f"Failed to read articles at {source_uri}: object does not exist."
            ) from error
        raise SyncerSourceError(
            f"Failed to read articles at {source_uri}: {error_code or error}."
        ) from error
    return response["Body"].read()
