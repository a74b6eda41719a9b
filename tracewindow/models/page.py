"""Remote page data model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

NEXT_LINK_KEY = "@odata.nextLink"


class Page(BaseModel):
    """One page returned by a single remote fetch.

    ``next_cursor`` is the opaque continuation token; ``None`` means the
    remote sequence is exhausted.
    """

    records: list[Any] = Field(default_factory=list)
    next_cursor: str | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("next_cursor")
    @classmethod
    def blank_cursor_is_end(cls, v: str | None) -> str | None:
        """Treat an empty continuation token as end of sequence."""
        if v is not None and not v.strip():
            return None
        return v

    @property
    def has_more(self) -> bool:
        return self.next_cursor is not None

    @classmethod
    def from_odata(cls, payload: dict[str, Any] | None) -> Page:
        """Build a page from an OData collection response body."""
        payload = payload or {}
        records = payload.get("value")
        return cls(
            records=records if isinstance(records, list) else [],
            next_cursor=payload.get(NEXT_LINK_KEY) or None,
        )
