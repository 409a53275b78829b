"""Shared test fixtures."""

from datetime import datetime, timezone

import pytest

from request_logging import RequestContext, RequestLoggingHook, RpcStatusError, StatusCode


class RecordingSink:
    """Captures ``log(level, msg)`` calls instead of emitting them."""

    def __init__(self):
        self.records = []

    def log(self, level, msg):
        self.records.append((level, msg))


class FixedClock:
    def __init__(self, at=None):
        self._at = at or datetime(2017, 6, 1, 12, 30, 0, tzinfo=timezone.utc)

    def now(self):
        return self._at


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def options():
    return {}


@pytest.fixture
def hook(options, sink, clock):
    return RequestLoggingHook("thing_service", options, sink=sink, clock=clock)


@pytest.fixture
def request_body():
    return {"id": 42, "data": {"hello": "world"}}


@pytest.fixture
def success_ctx(request_body):
    return RequestContext(
        service_key="thing_service",
        call_signature="get_thing",
        request=request_body,
        response={"id": 42},
        success=True,
        execution_time=12.3456,
    )


@pytest.fixture
def failure_ctx(request_body):
    return RequestContext(
        service_key="thing_service",
        call_signature="get_thing",
        request=request_body,
        response=RpcStatusError(StatusCode.NOT_FOUND, "thing not found"),
        success=False,
        execution_time=3.1,
    )
