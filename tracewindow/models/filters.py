"""Filter state model and OData query construction."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, model_validator

from ..core.config import (
    TRACE_CONTENT_FIELDS,
    TRACE_DATE_FIELD,
    TRACE_ORDER_BY,
    TRACE_SELECT_FIELDS,
    TRACE_TYPE_FIELD,
)
from ..utils.odata import escape_literal, format_odata_datetime, quote_query_value


class TraceFilters(BaseModel):
    """Immutable snapshot of the active query predicates.

    Empty strings and ``None`` dates mean "no constraint" and are left out
    of the remote query. Two equal instances describe the same query.
    """

    type_name: str = ""
    message_content: str = ""
    date_from: datetime | None = None
    date_to: datetime | None = None

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @model_validator(mode="after")
    def validate_date_range(self) -> TraceFilters:
        """Validate date_from <= date_to."""
        if self.date_from is not None and self.date_to is not None:
            # astimezone() so naive (local) and aware values compare
            if self.date_from.astimezone() > self.date_to.astimezone():
                raise ValueError("date_from must be <= date_to")
        return self

    @property
    def is_empty(self) -> bool:
        return not (self.type_name or self.message_content or self.date_from or self.date_to)

    def filter_clauses(self) -> list[str]:
        """Individual predicates, in query order. Combined with AND."""
        clauses: list[str] = []
        if self.type_name:
            clauses.append(f"contains({TRACE_TYPE_FIELD},'{escape_literal(self.type_name)}')")
        if self.message_content:
            term = escape_literal(self.message_content)
            content = " or ".join(f"contains({field},'{term}')" for field in TRACE_CONTENT_FIELDS)
            clauses.append(f"({content})")
        if self.date_from is not None:
            clauses.append(f"{TRACE_DATE_FIELD} ge {format_odata_datetime(self.date_from)}")
        if self.date_to is not None:
            clauses.append(f"{TRACE_DATE_FIELD} le {format_odata_datetime(self.date_to)}")
        return clauses

    def to_odata_filter(self) -> str:
        """Return the ``$filter`` expression, or an empty string."""
        return " and ".join(self.filter_clauses())

    def to_query_options(self) -> str:
        """Return the full query string for the first page of this query.

        Option values are percent-encoded, so user text containing ``&`` or
        ``#`` stays inside the $filter literal.

        Example:
            ?$select=typename,...&$filter=contains(typename,'Acme')&$orderby=createdon%20desc
        """
        parts = [f"$select={quote_query_value(','.join(TRACE_SELECT_FIELDS))}"]
        odata_filter = self.to_odata_filter()
        if odata_filter:
            parts.append(f"$filter={quote_query_value(odata_filter)}")
        parts.append(f"$orderby={quote_query_value(TRACE_ORDER_BY)}")
        return "?" + "&".join(parts)
