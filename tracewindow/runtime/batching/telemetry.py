"""Structured logging for batch loading.

This module provides telemetry hooks for batch operations, emitting
structured logs for observability.
"""

from __future__ import annotations

import logging

from .definitions import BatchResult

logger = logging.getLogger(__name__)


def log_batch_page(
    *,
    page_index: int,
    records: int,
    has_more: bool,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single remote page within a batch.

    Args:
        page_index: Zero-based index of the page within the batch
        records: Records returned by this page
        has_more: Whether the page carried a continuation cursor
        latency_ms: Latency in milliseconds (optional)
    """
    logger.debug(
        "batch_page_completed",
        extra={
            "page_index": page_index,
            "records": records,
            "has_more": has_more,
            "latency_ms": latency_ms,
        },
    )


def log_batch_error(
    *,
    page_index: int,
    records_discarded: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed page; the in-progress batch is discarded.

    Args:
        page_index: Zero-based index of the failed page
        records_discarded: Records accumulated by the batch before the failure
        error_type: Exception class name
        error_message: Exception message
    """
    logger.warning(
        "batch_page_failed",
        extra={
            "page_index": page_index,
            "records_discarded": records_discarded,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_batch_complete(*, result: BatchResult, latency_ms: float) -> None:
    logger.info(
        "batch_completed",
        extra={
            "pages_fetched": result.pages_fetched,
            "total_records": result.total_records,
            "has_more": result.has_more,
            "latency_ms": latency_ms,
        },
    )
