"""Tests for JSON logging and request correlation."""

import json
import logging

from app.core.logger import JSONFormatter, RequestIdFilter, ensure_request_id


def _record(**extra):
    record = logging.LogRecord(
        name="app.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="hello %s",
        args=("world",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_emits_one_json_object():
    line = JSONFormatter().format(_record(request_id="r-1", event="auth.login", account_id=7))
    payload = json.loads(line)

    assert payload["message"] == "hello world"
    assert payload["level"] == "INFO"
    assert payload["name"] == "app.test"
    assert payload["request_id"] == "r-1"
    assert payload["event"] == "auth.login"
    assert payload["account_id"] == 7
    assert "\n" not in line


def test_filter_outside_request_sets_none():
    record = _record()
    assert RequestIdFilter().filter(record) is True
    assert record.request_id is None


def test_request_id_prefers_incoming_header(app):
    with app.test_request_context(headers={"X-Correlation-ID": "corr-9"}):
        assert ensure_request_id() == "corr-9"
        assert ensure_request_id() == "corr-9"


def test_request_id_is_generated_and_cached(app):
    with app.test_request_context():
        first = ensure_request_id()
        assert first
        assert ensure_request_id() == first


def test_response_echoes_request_id(client):
    resp = client.get("/api/v1/health", headers={"X-Request-ID": "abc-123"})
    assert resp.headers["X-Request-ID"] == "abc-123"
