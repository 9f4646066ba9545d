"""Core constants used across news syncer modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

DEFAULT_INDEX_NAME = "inshorts-news"
DEFAULT_BULK_SIZE = 500
DEFAULT_SOURCE_URI = "resources/news_data.json"
DEFAULT_ES_ADDRESS = "https://localhost:9200"
DEFAULT_LOG_LEVEL = "INFO"
SOURCE_DATE_LAYOUT = "%Y-%m-%dT%H:%M:%S"
ES_DATE_LAYOUT = "%Y-%m-%dT%H:%M:%S"
LOG_TIMESTAMP_KEY = "@timestamp"
BULK_INDEX_ACTION = "index"
SUPPORTED_SYNC_SPEC_VERSION = 1
TRUE_FLAG_VALUES = ("1", "true", "yes", "on")
FALSE_FLAG_VALUES = ("0", "false", "no", "off", "")
