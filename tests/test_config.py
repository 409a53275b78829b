"""Tests for HookOptions."""

import pytest
from pydantic import ValidationError

from request_logging import HookOptions, LogstashFormatter


def test_defaults():
    opts = HookOptions()
    assert opts.log_parameters is False
    assert opts.formatter == "plain"
    assert opts.blacklist == []
    assert opts.redacted_string == "REDACTED"


def test_from_mapping():
    opts = HookOptions.from_mapping(
        {"log_parameters": True, "formatter": "logstash", "blacklist": ["a.b"]}
    )
    assert opts.log_parameters is True
    assert opts.formatter == "logstash"
    assert opts.blacklist == ["a.b"]


def test_from_none():
    assert HookOptions.from_mapping(None) == HookOptions()


def test_unknown_keys_ignored():
    opts = HookOptions.from_mapping({"color": "blue"})
    assert not hasattr(opts, "color")


def test_formatter_accepts_class_and_instance():
    assert HookOptions(formatter=LogstashFormatter).formatter is LogstashFormatter
    instance = LogstashFormatter()
    assert HookOptions(formatter=instance).formatter is instance


def test_blacklist_entries_coerced_to_strings():
    assert HookOptions(blacklist=["a", 1]).blacklist == ["a", "1"]
    assert HookOptions(blacklist="foo").blacklist == ["foo"]
    assert HookOptions(blacklist=None).blacklist == []


def test_invalid_redacted_string_raises():
    with pytest.raises(ValidationError):
        HookOptions(redacted_string=["not", "a", "string"])
