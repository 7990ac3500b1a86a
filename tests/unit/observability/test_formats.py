"""Format tests: compact JSON shape, pretty output sections, timestamp formats."""

import json
from datetime import datetime, timezone

from adivalt.observability.formats import COLORS, RESET, JsonFormat, PrettyFormat, format_timestamp
from adivalt.observability.log_models import ErrorSnapshot, LogEntry, LoggerConfig, LogLevel

TS = datetime(2024, 3, 5, 14, 7, 9, 123456, tzinfo=timezone.utc)


def make_entry(**kwargs):
    values = dict(
        level=LogLevel.INFO,
        message="hello",
        service="orders",
        environment="production",
        version="2.0.0",
        timestamp=TS,
    )
    values.update(kwargs)
    return LogEntry(**values)


def make_config(environment="production", timestamp_format="ISO"):
    return LoggerConfig(level=LogLevel.TRACE, service="orders", environment=environment, timestamp_format=timestamp_format)


def test_format_timestamp_iso():
    assert format_timestamp(TS, "ISO") == "2024-03-05T14:07:09.123Z"


def test_format_timestamp_utc():
    assert format_timestamp(TS, "UTC") == "Tue, 05 Mar 2024 14:07:09 GMT"


def test_format_timestamp_local():
    local = TS.astimezone().strftime("%Y-%m-%d %H:%M:%S")
    assert format_timestamp(TS, "LOCAL") == local


def test_format_timestamp_unknown_falls_back_to_iso():
    assert format_timestamp(TS, "EPOCH") == "2024-03-05T14:07:09.123Z"
    assert format_timestamp(TS.replace(tzinfo=None), "") == "2024-03-05T14:07:09.123Z"


def test_json_minimal_entry():
    line = JsonFormat(make_config()).format(make_entry())
    assert "\n" not in line
    assert " " not in line.replace("hello", "")
    assert json.loads(line) == {
        "timestamp": "2024-03-05T14:07:09.123Z",
        "level": "INFO",
        "service": "orders",
        "environment": "production",
        "version": "2.0.0",
        "message": "hello",
    }


def test_json_full_entry():
    entry = make_entry(
        level=LogLevel.ERROR,
        context={"at": TS, "n": 1},
        error=ErrorSnapshot(name="DatabaseError", message="down", code="DB_CONNECTION_ERROR", status_code=503),
        duration=12.5,
        request_id="r1",
        user_id="u1",
        session_id="s1",
    )
    payload = json.loads(JsonFormat(make_config()).format(entry))
    assert payload["level"] == "ERROR"
    assert payload["context"] == {"at": str(TS), "n": 1}
    assert payload["error"] == {
        "name": "DatabaseError",
        "message": "down",
        "code": "DB_CONNECTION_ERROR",
        "status_code": 503,
    }
    assert payload["duration"] == 12.5
    assert (payload["request_id"], payload["user_id"], payload["session_id"]) == ("r1", "u1", "s1")


def test_pretty_header_colored_by_level():
    line = PrettyFormat(make_config()).format(make_entry(level=LogLevel.WARN, message="slow"))
    assert line == f"{COLORS[LogLevel.WARN]}[2024-03-05T14:07:09.123Z] WARN  orders: slow{RESET}"


def test_pretty_sections():
    entry = make_entry(
        level=LogLevel.ERROR,
        context={"k": "v"},
        error=ErrorSnapshot(name="ValueError", message="bad", stack="Traceback..."),
        duration=3.0,
    )
    lines = PrettyFormat(make_config(environment="development")).format(entry).split("\n")
    assert any("Context: {" in line for line in lines)
    assert any("Error: ValueError: bad" in line for line in lines)
    assert any("Stack: Traceback..." in line for line in lines)
    assert any("Duration: 3.0ms" in line for line in lines)


def test_pretty_hides_stack_outside_development():
    entry = make_entry(error=ErrorSnapshot(name="ValueError", message="bad", stack="Traceback..."))
    out = PrettyFormat(make_config(environment="production")).format(entry)
    assert "Error: ValueError: bad" in out
    assert "Stack:" not in out
