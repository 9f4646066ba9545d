"""News syncer CLI entry point.

This module maps process invocation onto SDK sync calls. Without
arguments it runs one sync job configured from the environment.
"""

from __future__ import annotations

import argparse
from typing import Any, Sequence

from core.config import SyncerConfig, parse_batch_size
from core.errors import BulkItemError, SyncerConfigError, SyncerError
from core.logging_config import configure_logging, get_logger
from core.types import SyncResult
from store.sync_sdk import SyncerClient


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="news-syncer",
        description="Load news articles from JSON into an Elasticsearch index",
    )
    source_group = parser.add_mutually_exclusive_group()
    source_group.add_argument("--source", help="Override SYNC_SOURCE_URI for this run")
    source_group.add_argument("--spec", help="Run every job of a YAML sync spec")
    parser.add_argument("--index", help="Override SYNC_INDEX_NAME for this run")
    parser.add_argument(
        "--batch-size",
        type=_batch_size_arg,
        help="Override SYNC_BATCH_SIZE for this run",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the news syncer CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code, non-zero on any fatal failure.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = get_logger("news_syncer")
    configure_logging()
    try:
        config = SyncerConfig.from_env()
        configure_logging(config.log_level)
        client = SyncerClient(config, logger=logger)
        results = _run_sync(client, args)
    except SyncerError as error:
        _log_failure(logger, error)
        return 1
    for result in results:
        print(result.summary)
    return 0


def _run_sync(client: SyncerClient, args: argparse.Namespace) -> tuple[SyncResult, ...]:
    """Run either the sync-spec jobs or the single configured job."""
    if args.spec:
        return client.sync_spec(
            args.spec,
            default_index=args.index,
            default_batch_size=args.batch_size,
        )
    options = client.default_options(
        source_uri=args.source,
        index_name=args.index,
        batch_size=args.batch_size,
    )
    return (client.sync(options),)


def _log_failure(logger: Any, error: SyncerError) -> None:
    fields: dict[str, object] = {"error_type": type(error).__name__, "error": str(error)}
    if isinstance(error, BulkItemError):
        fields["failed_items"] = len(error.failures)
    logger.error("sync_failed", **fields)


def _batch_size_arg(raw_value: str) -> int:
    try:
        return parse_batch_size(raw_value, "--batch-size")
    except SyncerConfigError as error:
        raise argparse.ArgumentTypeError(str(error)) from error
