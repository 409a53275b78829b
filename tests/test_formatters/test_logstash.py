"""Tests for LogstashFormatter."""

import json
from datetime import datetime

from request_logging import Formatter, LogstashFormatter


def test_is_formatter():
    assert isinstance(LogstashFormatter(), Formatter)


def test_renders_json_object():
    payload = {"message": "[Ok] (svc.m)", "status": 0, "params": {"id": 1, "tags": ["a"]}}
    line = LogstashFormatter().format(payload)

    assert json.loads(line) == payload


def test_preserves_key_order():
    line = LogstashFormatter().format({"b": 1, "a": 2})
    assert line == '{"b": 1, "a": 2}'


def test_non_ascii_emitted_verbatim():
    line = LogstashFormatter().format({"message": "héllo ✓"})
    assert "héllo ✓" in line


def test_unserializable_values_use_str():
    at = datetime(2017, 6, 1, 12, 0, 0)
    line = LogstashFormatter().format({"time": at})
    assert json.loads(line) == {"time": str(at)}


def test_single_line():
    line = LogstashFormatter().format({"params": {"a": {"b": "c"}}})
    assert "\n" not in line
