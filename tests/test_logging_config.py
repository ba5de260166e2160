"""Tests for structured logging."""

import json
import logging

from prompt_gallery.core.request_context import clear_request_id, set_request_id
from prompt_gallery.logging_config import ContextFilter, JSONFormatter


def _record(message="hello", **extra):
    record = logging.LogRecord(
        name="prompt_gallery.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_fields():
    """Test the formatter emits the core fields."""
    data = json.loads(JSONFormatter().format(_record()))
    assert data["message"] == "hello"
    assert data["severity"] == "INFO"
    assert data["logger"] == "prompt_gallery.test"
    assert data["timestamp"].endswith("Z")


def test_json_formatter_includes_extra_fields():
    """Test extra= fields end up in the JSON payload."""
    data = json.loads(JSONFormatter().format(_record(category_count=3)))
    assert data["category_count"] == 3


def test_context_filter_adds_request_id():
    """Test the request id from context is attached."""
    record = _record()
    set_request_id("req-1")
    try:
        assert ContextFilter().filter(record) is True
    finally:
        clear_request_id()

    data = json.loads(JSONFormatter().format(record))
    assert data["request_id"] == "req-1"


def test_no_request_id_outside_request():
    """Test no request_id key when there is no request."""
    record = _record()
    ContextFilter().filter(record)
    data = json.loads(JSONFormatter().format(record))
    assert "request_id" not in data
