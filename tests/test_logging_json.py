"""JSON-формат логов и идентификатор трассировки."""

import json
import logging

from core.logging_json import TRACE_ID, ContextFilter, JsonFormatter, configure_logging, new_trace_id


def _record(msg, *args, **extra):
    record = logging.LogRecord("clock", logging.INFO, __file__, 1, msg, args, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_fields():
    record = _record("render %s", "d’onze", event="clock.refresh", attrs={"lang": "ca"})
    data = json.loads(JsonFormatter().format(record))
    assert data["level"] == "INFO"
    assert data["component"] == "clock"
    assert data["event"] == "clock.refresh"
    assert data["attrs"] == {"lang": "ca"}
    assert data["message"] == "render d’onze"
    assert data["ts"].endswith("Z")


def test_formatter_keeps_unicode():
    line = JsonFormatter().format(_record("九時三十分"))
    assert "九時三十分" in line


def test_context_filter_adds_trace_id():
    token = TRACE_ID.set("abc12345")
    try:
        record = _record("x")
        assert ContextFilter().filter(record)
        assert record.trace_id == "abc12345"
    finally:
        TRACE_ID.reset(token)


def test_configure_logging_is_idempotent():
    first = configure_logging("tests.idempotent")
    second = configure_logging("tests.idempotent")
    assert first is second
    assert len(first.handlers) == 1
    assert first.propagate is False


def test_new_trace_id():
    a, b = new_trace_id(), new_trace_id()
    assert len(a) == 8 and a != b
