"""Unit tests for TraceFilters query construction."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from tracewindow.models import TraceFilters

SELECT = (
    "$select=typename,messagename,primaryentity,exceptiondetails,"
    "messageblock,performanceexecutionduration,createdon,correlationid"
)


class TestTraceFiltersQuery:
    """Test OData $filter and query option encoding."""

    def test_empty_filters(self):
        """No constraints: no $filter, newest first."""
        filters = TraceFilters()
        assert filters.is_empty
        assert filters.to_odata_filter() == ""
        assert filters.to_query_options() == f"?{SELECT}&$orderby=createdon%20desc"

    def test_type_name(self):
        filters = TraceFilters(type_name="Acme.Plugins.OnCreate")
        assert filters.to_odata_filter() == "contains(typename,'Acme.Plugins.OnCreate')"

    def test_message_content_searches_three_fields(self):
        filters = TraceFilters(message_content="Account")
        assert filters.to_odata_filter() == (
            "(contains(messageblock,'Account') or contains(messagename,'Account')"
            " or contains(primaryentity,'Account'))"
        )

    def test_date_range(self):
        filters = TraceFilters(
            date_from=datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc),
            date_to=datetime(2024, 3, 2, 8, 0, tzinfo=timezone.utc),
        )
        assert filters.filter_clauses() == [
            "createdon ge 2024-03-01T08:00:00.000Z",
            "createdon le 2024-03-02T08:00:00.000Z",
        ]

    def test_clauses_joined_with_and(self):
        filters = TraceFilters(type_name="Acme", message_content="x")
        assert " and " in filters.to_odata_filter()
        query = filters.to_query_options()
        assert query.startswith(f"?{SELECT}&$filter=contains(typename,'Acme')%20and%20(")
        assert query.endswith("&$orderby=createdon%20desc")

    def test_quotes_escaped(self):
        filters = TraceFilters(type_name="O'Brien")
        assert filters.to_odata_filter() == "contains(typename,'O''Brien')"

    def test_reserved_characters_encoded_in_query(self):
        """An ampersand in user text must not split the query string."""
        filters = TraceFilters(type_name="A&B")
        assert filters.to_odata_filter() == "contains(typename,'A&B')"
        query = filters.to_query_options()
        assert "$filter=contains(typename,'A%26B')&" in query
        assert query.count("&") == 2

    def test_hash_and_plus_encoded(self):
        filters = TraceFilters(message_content="C# 1+1 50%")
        query = filters.to_query_options()
        assert "#" not in query
        assert "+" not in query
        assert "contains(messageblock,'C%23%201%2B1%2050%25')" in query

    def test_whitespace_stripped(self):
        """Whitespace-only input means no constraint."""
        filters = TraceFilters(type_name="   ", message_content="  hi ")
        assert filters.type_name == ""
        assert filters.message_content == "hi"


class TestTraceFiltersValidation:
    """Test TraceFilters validation and equality."""

    def test_inverted_range_rejected(self):
        with pytest.raises(ValidationError):
            TraceFilters(
                date_from=datetime(2024, 3, 2, tzinfo=timezone.utc),
                date_to=datetime(2024, 3, 1, tzinfo=timezone.utc),
            )

    def test_equal_filters_describe_same_query(self):
        assert TraceFilters(type_name="a") == TraceFilters(type_name="a")
        assert TraceFilters(type_name="a") != TraceFilters(type_name="b")

    def test_frozen(self):
        filters = TraceFilters()
        with pytest.raises(ValidationError):
            filters.type_name = "x"
