"""Ownership of the active query."""

from __future__ import annotations

from datetime import datetime

from pydantic import ValidationError

from ..core.exceptions import InvalidInputError
from ..models.filters import TraceFilters


def _parse_datetime(value: str | datetime | None, field: str) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    value = value.strip()
    if not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError as e:
        raise InvalidInputError(f"Invalid date: {value!r}", field=field, value=value) from e


class FilterController:
    """Holds the current TraceFilters and encodes it for the remote source."""

    def __init__(self, filters: TraceFilters | None = None) -> None:
        self._filters = filters or TraceFilters()

    @property
    def filters(self) -> TraceFilters:
        return self._filters

    @property
    def query(self) -> str:
        """Query options for the first page of the active filters."""
        return self._filters.to_query_options()

    def apply(self, filters: TraceFilters) -> bool:
        """Replace the active filters.

        Returns:
            True if the query changed
        """
        changed = filters != self._filters
        self._filters = filters
        return changed

    @staticmethod
    def from_inputs(
        *,
        type_name: str = "",
        message_content: str = "",
        date_from: str | datetime | None = None,
        date_to: str | datetime | None = None,
    ) -> TraceFilters:
        """Build filters from raw form input.

        Dates accept ISO 8601 text (what a datetime-local control yields);
        blank text means no bound.

        Raises:
            InvalidInputError: Unparseable date or an inverted range
        """
        start = _parse_datetime(date_from, "date_from")
        end = _parse_datetime(date_to, "date_to")
        try:
            return TraceFilters(
                type_name=type_name,
                message_content=message_content,
                date_from=start,
                date_to=end,
            )
        except ValidationError as e:
            raise InvalidInputError(
                "Date range start must not be after its end", field="date_from", value=date_from
            ) from e
