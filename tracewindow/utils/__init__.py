"""Utility functions."""

from .http import HTTPClient
from .odata import escape_literal, format_odata_datetime, parse_error_message, quote_query_value

__all__ = [
    "HTTPClient",
    "escape_literal",
    "format_odata_datetime",
    "parse_error_message",
    "quote_query_value",
]
