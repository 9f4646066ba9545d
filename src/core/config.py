"""Runtime configuration model for the news syncer.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_BULK_SIZE,
    DEFAULT_ES_ADDRESS,
    DEFAULT_INDEX_NAME,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SOURCE_URI,
    FALSE_FLAG_VALUES,
    TRUE_FLAG_VALUES,
)
from core.errors import SyncerConfigError

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class SyncerConfig:
    """Validated runtime configuration.

    Attributes:
        es_addresses: Elasticsearch node URLs.
        es_username: Basic-auth user name.
        es_password: Basic-auth password.
        insecure_skip_verify: Disable TLS certificate verification.
        ca_certs: Optional CA bundle path for TLS verification.
        request_timeout: Optional per-request timeout in seconds.
        index_name: Default destination index.
        batch_size: Default number of articles per bulk request.
        source_uri: Default article source path or ``s3://`` URI.
        log_level: Structured log threshold.
        s3_region: Optional AWS region for S3 sources.
        s3_profile: Optional AWS profile for S3 sources.
    """

    es_addresses: tuple[str, ...]
    es_username: str
    es_password: str
    insecure_skip_verify: bool = False
    ca_certs: str | None = None
    request_timeout: float | None = None
    index_name: str = DEFAULT_INDEX_NAME
    batch_size: int = DEFAULT_BULK_SIZE
    source_uri: str = DEFAULT_SOURCE_URI
    log_level: str = DEFAULT_LOG_LEVEL
    s3_region: str | None = None
    s3_profile: str | None = None

    @classmethod
    def from_env(cls) -> "SyncerConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            SyncerConfigError: If credentials are missing or values are invalid.
        """
        return cls(
            es_addresses=_parse_addresses(os.getenv("ES_ADDRESSES", DEFAULT_ES_ADDRESS)),
            es_username=_require_env("ES_USERNAME"),
            es_password=_require_env("ES_PASSWORD"),
            insecure_skip_verify=_parse_flag(
                "ES_INSECURE_SKIP_VERIFY", os.getenv("ES_INSECURE_SKIP_VERIFY", "false")
            ),
            ca_certs=os.getenv("ES_CA_CERTS") or None,
            request_timeout=_parse_timeout(os.getenv("ES_REQUEST_TIMEOUT")),
            index_name=os.getenv("SYNC_INDEX_NAME") or DEFAULT_INDEX_NAME,
            batch_size=parse_batch_size(
                os.getenv("SYNC_BATCH_SIZE", str(DEFAULT_BULK_SIZE)), "SYNC_BATCH_SIZE"
            ),
            source_uri=os.getenv("SYNC_SOURCE_URI") or DEFAULT_SOURCE_URI,
            log_level=_parse_log_level(os.getenv("SYNC_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
            s3_region=os.getenv("SYNC_S3_REGION") or None,
            s3_profile=os.getenv("SYNC_S3_PROFILE") or None,
        )


def parse_batch_size(raw_value: str, source_name: str) -> int:
    """Parse a positive bulk batch size.

    Args:
        raw_value: Raw string value.
        source_name: Variable or flag name used in error messages.

    Returns:
        Parsed batch size.

    Raises:
        SyncerConfigError: If value is not a positive integer.
    """
    try:
        batch_size = int(raw_value)
    except ValueError as error:
        raise SyncerConfigError(
            f"Invalid {source_name} value: expected integer, got '{raw_value}'. "
            f"Set {source_name} to a positive number such as {DEFAULT_BULK_SIZE}."
        ) from error
    if batch_size <= 0:
        raise SyncerConfigError(
            f"Invalid {source_name} value: expected a positive integer, got {batch_size}."
        )
    return batch_size


def _require_env(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise SyncerConfigError(
            f"Missing required environment variable {name}. "
            "Export Elasticsearch credentials before running the syncer."
        )
    return value


def _parse_addresses(raw_value: str) -> tuple[str, ...]:
    addresses = tuple(part.strip() for part in raw_value.split(",") if part.strip())
    if not addresses:
        raise SyncerConfigError(
            "Invalid ES_ADDRESSES value: expected at least one node URL, "
            f"for example '{DEFAULT_ES_ADDRESS}'."
        )
    return addresses


def _parse_flag(name: str, raw_value: str) -> bool:
    normalized_value = raw_value.strip().lower()
    if normalized_value in TRUE_FLAG_VALUES:
        return True
    if normalized_value in FALSE_FLAG_VALUES:
        return False
    raise SyncerConfigError(
        f"Invalid {name} value: expected true or false, got '{raw_value}'."
    )


def _parse_timeout(raw_value: str | None) -> float | None:
    if raw_value is None or not raw_value.strip():
        return None
    try:
        timeout = float(raw_value)
    except ValueError as error:
        raise SyncerConfigError(
            f"Invalid ES_REQUEST_TIMEOUT value: expected seconds, got '{raw_value}'."
        ) from error
    if timeout <= 0:
        raise SyncerConfigError(
            f"Invalid ES_REQUEST_TIMEOUT value: expected a positive number, got {timeout}."
        )
    return timeout


def _parse_log_level(raw_value: str) -> str:
    level = raw_value.strip().upper()
    if level not in _LOG_LEVELS:
        raise SyncerConfigError(
            f"Invalid SYNC_LOG_LEVEL value '{raw_value}'. Use one of: {', '.join(_LOG_LEVELS)}."
        )
    return level
