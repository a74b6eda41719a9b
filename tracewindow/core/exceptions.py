"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class WindowError(Exception):
    """Base exception for all library errors."""

    pass


class TransportError(WindowError):
    """A remote page fetch failed.

    Raised for non-2xx responses, connection failures, timeouts and bodies
    that cannot be decoded. The engine never retries on its own.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class BatchLoadError(TransportError):
    """A page inside a batch failed; the whole batch was discarded."""

    def __init__(
        self,
        message: str,
        *,
        pages_completed: int = 0,
        records_discarded: int = 0,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code)
        self.pages_completed = pages_completed
        self.records_discarded = records_discarded


class InvalidInputError(WindowError, ValueError):
    """User input (page size, page number, filter field) was rejected locally."""

    def __init__(self, message: str, *, field: str, value: Any = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value
