"""Structured logging configuration.

This module initializes structlog with a stable JSON line format.
The driver configures it once; components receive loggers explicitly.
"""

from __future__ import annotations

from datetime import datetime, timezone
import logging
from typing import Any, MutableMapping

import structlog

from core.constants import DEFAULT_LOG_LEVEL, ES_DATE_LAYOUT, LOG_TIMESTAMP_KEY


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure structlog processors and the level threshold.

    Args:
        level: Standard level name such as ``INFO`` or ``DEBUG``.
    """
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            _add_utc_timestamp,
            structlog.processors.CallsiteParameterAdder(
                {
                    structlog.processors.CallsiteParameter.MODULE,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                    structlog.processors.CallsiteParameter.LINENO,
                }
            ),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog bound logger.
    """
    return structlog.get_logger(name)


def _add_utc_timestamp(
    logger: Any,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Stamp events with a millisecond-precision UTC timestamp."""
    now = datetime.now(timezone.utc)
    event_dict[LOG_TIMESTAMP_KEY] = (
        f"{now.strftime(ES_DATE_LAYOUT)}.{now.microsecond // 1000:03d}Z"
    )
    return event_dict
