"""OData helpers: literal escaping, datetime formatting and error bodies."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from urllib.parse import quote

# Left as-is in query option values; everything else is percent-encoded
_QUERY_VALUE_SAFE = "$,'():"


def escape_literal(text: str) -> str:
    """Escape a value for use inside a single-quoted OData string literal."""
    return text.replace("'", "''")


def quote_query_value(value: str) -> str:
    """Percent-encode a system query option value ($filter, $orderby, ...).

    Keeps OData punctuation readable but encodes characters that would end
    or split the option, such as ``&``, ``#``, ``+`` and spaces.

    Example:
        contains(typename,'A&B') -> contains(typename,'A%26B')
    """
    return quote(value, safe=_QUERY_VALUE_SAFE)


def format_odata_datetime(value: datetime) -> str:
    """Format a datetime as an OData/ISO 8601 UTC timestamp.

    Naive datetimes are treated as local time (the value a datetime-local
    input produces) and converted to UTC.

    Example:
        2024-03-01T09:30:00+01:00 -> 2024-03-01T08:30:00.000Z
    """
    utc = value.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_error_message(body: str | None) -> str | None:
    """Extract the message from an OData error body, if there is one.

    Dataverse returns ``{"error": {"code": "...", "message": "..."}}``.
    """
    if not body:
        return None
    try:
        payload = json.loads(body)
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str) and message.strip():
            return message.strip()
    return None
