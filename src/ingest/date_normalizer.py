"""Publication date normalization.

This module converts source timestamps into the date-time string
format stored in the search index.
"""

from __future__ import annotations

from datetime import datetime, timezone
import re

from core.constants import ES_DATE_LAYOUT, SOURCE_DATE_LAYOUT
from core.errors import DateParseError

_SOURCE_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}")


def normalize_to_es_date(value: str) -> str:
    """Convert ``YYYY-MM-DDTHH:MM:SS`` into ``YYYY-MM-DDTHH:MM:SS.000Z``.

    The input carries no zone; it is read literally and labelled UTC.

    Args:
        value: Source timestamp string.

    Returns:
        Millisecond-precision UTC timestamp string.

    Raises:
        DateParseError: If value does not match the source layout.
    """
    if not isinstance(value, str) or not _SOURCE_DATE_PATTERN.fullmatch(value):
        raise DateParseError(
            f"Invalid publication date {value!r}: expected layout YYYY-MM-DDTHH:MM:SS."
        )
    try:
        parsed = datetime.strptime(value, SOURCE_DATE_LAYOUT).replace(tzinfo=timezone.utc)
    except ValueError as error:
        raise DateParseError(f"Invalid publication date {value!r}: {error}.") from error
    return f"{parsed.strftime(ES_DATE_LAYOUT)}.{parsed.microsecond // 1000:03d}Z"
