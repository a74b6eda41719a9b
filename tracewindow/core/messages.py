"""User-facing message strings."""

from __future__ import annotations

LOADING = "Loading..."
LOAD_FAILED = "Error loading traces. The Tracing service might be disabled."
NO_RECORDS_FOUND = "No plugin trace logs found for the current filter criteria."
NO_RECORDS_LABEL = "0 Records"


def page_size_out_of_range(minimum: int, maximum: int) -> str:
    return f"Page size must be between {minimum} and {maximum}"


def page_number_out_of_range(total_pages: int) -> str:
    return f"Page must be a number between 1 and {total_pages}"


def load_failed_with_reason(reason: str) -> str:
    return f"{LOAD_FAILED} ({reason})" if reason else LOAD_FAILED
