# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""RequestLoggingHook — one structured log line per RPC call.

Flow per call:
1. Classify the outcome (success -> INFO, status failure -> ERROR)
2. Optionally redact the request body into ``params``
3. Assemble the payload
4. Render it with the configured formatter
5. Write it to the sink
"""

from __future__ import annotations

import asyncio
import logging
import socket
import threading
import time
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any, Protocol

from request_logging.config import HookOptions
from request_logging.context import RequestContext, request_to_dict
from request_logging.exceptions import RpcStatusError
from request_logging.formatters import Formatter
from request_logging.redaction import Redactor
from request_logging.resolver import FormatterResolver
from request_logging.status import StatusCode

DEFAULT_LOGGER_NAME = "request_logging"


class LogSink(Protocol):
    """Leveled logger accepting pre-formatted strings.  ``logging.Logger`` fits."""

    def log(self, level: int, msg: str) -> None: ...


class Clock(Protocol):
    """Wall-clock source for the ``time`` field.  Inject a fake in tests."""

    def now(self) -> datetime: ...


class SystemClock:
    """Local system time, with its UTC offset."""

    def now(self) -> datetime:
        return datetime.now().astimezone()


class RequestLoggingHook:
    """Logs every call the server completes, Rails-style.

    Parameters:
        service_key: Logical service name used by :meth:`outer_around`.
        options:     :class:`HookOptions` or a raw options mapping.
        sink:        Where log lines go.  Defaults to the
                     ``"request_logging"`` standard library logger.
        clock:       Injectable wall-clock for the ``time`` field.

    Example:
        hook = RequestLoggingHook("thing_service", {"formatter": "logstash"})
        result = await hook.outer_around("get_thing", request, handler)
    """

    def __init__(
        self,
        service_key: str = "",
        options: HookOptions | Mapping[str, Any] | None = None,
        *,
        sink: LogSink | None = None,
        clock: Clock | None = None,
    ) -> None:
        if not isinstance(options, HookOptions):
            options = HookOptions.from_mapping(options)
        self.service_key = service_key
        self.options = options
        self._sink: LogSink = sink or logging.getLogger(DEFAULT_LOGGER_NAME)
        self._clock = clock or SystemClock()
        self._redactor = Redactor(options.blacklist, options.redacted_string)
        self._resolver = FormatterResolver(options.formatter)

    # ── logging ──────────────────────────────────────────────

    def call(self, context: RequestContext) -> str:
        """Log *context* and return the rendered line.

        Errors resolving the formatter or rendering the payload propagate.
        """
        if context.success:
            level = logging.INFO
        else:
            level = logging.ERROR

        payload: dict[str, Any] = {}
        if self.options.log_parameters:
            payload["params"] = self.sanitize(request_to_dict(context.request))
        payload["message"] = self._message(context)
        payload["service"] = context.service_key
        payload["method"] = context.call_signature
        payload["action"] = context.call_signature
        payload["grpc_status"] = context.response_class_name
        payload["duration"] = context.execution_time_rounded
        payload["status"] = self._status(context)
        payload["thread_id"] = threading.get_ident()
        payload["time"] = str(self._clock.now())
        payload["host"] = socket.gethostname()

        line = self.formatter().format(payload)
        self._sink.log(level, line)
        return line

    def sanitize(self, params: Any) -> Any:
        """Return *params* with blacklisted paths redacted."""
        return self._redactor.sanitize(params)

    def formatter(self) -> Formatter:
        """Return the configured formatter, resolved on first use."""
        return self._resolver.get()

    # ── call wrapping ────────────────────────────────────────

    async def outer_around(
        self,
        call_signature: str,
        request: Any,
        handler: Callable[[Any], Any],
    ) -> Any:
        """Run *handler* for one call and log its outcome.

        The handler may be sync or async.  An :class:`RpcStatusError` is
        logged as a failed call and re-raised; any other exception
        propagates without a log line.
        """
        start = time.perf_counter()
        try:
            result = handler(request)
            if asyncio.iscoroutine(result):
                result = await result
        except RpcStatusError as e:
            self.call(self._context(call_signature, request, e, False, start))
            raise

        self.call(self._context(call_signature, request, result, True, start))
        return result

    # ── helpers ──────────────────────────────────────────────

    def _context(
        self,
        call_signature: str,
        request: Any,
        response: Any,
        success: bool,
        start: float,
    ) -> RequestContext:
        return RequestContext(
            service_key=self.service_key,
            call_signature=call_signature,
            request=request,
            response=response,
            success=success,
            execution_time=(time.perf_counter() - start) * 1000.0,
        )

    @staticmethod
    def _message(context: RequestContext) -> str:
        route = f"({context.service_key}.{context.call_signature})"
        if context.success:
            return f"[{StatusCode.OK.class_name}] {route}"
        return f"[{context.response_class_name}] {route} {context.response.message}"

    @staticmethod
    def _status(context: RequestContext) -> int:
        if context.success:
            return int(StatusCode.OK)
        return int(context.response.code)
