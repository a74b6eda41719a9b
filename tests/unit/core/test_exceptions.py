"""Unit tests for the exception hierarchy and message helpers."""

from tracewindow.core import (
    BatchLoadError,
    InvalidInputError,
    TransportError,
    WindowError,
)
from tracewindow.core.messages import (
    LOAD_FAILED,
    load_failed_with_reason,
    page_number_out_of_range,
    page_size_out_of_range,
)


def test_transport_error_carries_status_and_body():
    """TransportError keeps the HTTP status and raw body."""
    error = TransportError("Service unavailable", status_code=503, body="{}")
    assert str(error) == "Service unavailable"
    assert error.status_code == 503
    assert error.body == "{}"
    assert isinstance(error, WindowError)


def test_batch_load_error_reports_discarded_work():
    """BatchLoadError says how far the batch got before failing."""
    error = BatchLoadError("boom", pages_completed=2, records_discarded=500, status_code=500)
    assert error.pages_completed == 2
    assert error.records_discarded == 500
    assert error.status_code == 500
    assert isinstance(error, TransportError)


def test_invalid_input_error_is_value_error():
    """InvalidInputError can be caught as a plain ValueError."""
    error = InvalidInputError("bad", field="page_size", value="abc")
    assert isinstance(error, ValueError)
    assert isinstance(error, WindowError)
    assert error.field == "page_size"
    assert error.value == "abc"


def test_page_size_message():
    assert page_size_out_of_range(1, 1000) == "Page size must be between 1 and 1000"


def test_page_number_message():
    assert page_number_out_of_range(40) == "Page must be a number between 1 and 40"


def test_load_failed_with_reason():
    assert load_failed_with_reason("") == LOAD_FAILED
    assert load_failed_with_reason("HTTP 503") == f"{LOAD_FAILED} (HTTP 503)"
