import json
import logging

from quote_frontend.core.logging import (
    JsonFormatter,
    RequestIdFilter,
    init_logging,
    request_id_ctx,
)


def _record(msg: str) -> logging.LogRecord:
    return logging.LogRecord("frontend.backend", logging.WARNING, __file__, 1, msg, None, None)


def test_json_formatter_fields():
    record = _record("Interest error : boom")
    RequestIdFilter().filter(record)
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "WARNING"
    assert payload["message"] == "Interest error : boom"
    assert payload["logger"] == "frontend.backend"
    assert payload["request_id"] == "-"


def test_request_id_filter_uses_context():
    token = request_id_ctx.set("rid-42")
    try:
        record = _record("hello")
        RequestIdFilter().filter(record)
    finally:
        request_id_ctx.reset(token)
    assert record.request_id == "rid-42"


def test_json_formatter_tags_frontend_variant():
    payload = json.loads(JsonFormatter(frontend="orders").format(_record("hi")))
    assert payload["frontend"] == "orders"
    assert "frontend" not in json.loads(JsonFormatter().format(_record("hi")))


def test_request_id_filter_keeps_explicit_id():
    token = request_id_ctx.set("rid-ctx")
    try:
        record = _record("late")
        record.request_id = "rid-explicit"
        RequestIdFilter().filter(record)
    finally:
        request_id_ctx.reset(token)
    assert record.request_id == "rid-explicit"


def test_init_logging_keeps_foreign_handlers():
    root = logging.getLogger()
    foreign = logging.NullHandler()
    root.addHandler(foreign)
    try:
        init_logging(frontend="membership")
        init_logging(frontend="membership")
        json_handlers = [h for h in root.handlers if isinstance(h.formatter, JsonFormatter)]
        assert len(json_handlers) == 1
        assert json_handlers[0].formatter.frontend == "membership"
        assert foreign in root.handlers
    finally:
        root.removeHandler(foreign)
