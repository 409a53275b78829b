"""request_logging — per-call request logging for RPC servers.

Every completed call becomes one log line: the outcome is classified,
the request body is optionally redacted, and the payload is rendered by
a pluggable formatter.
"""

from request_logging.config import HookOptions
from request_logging.context import RequestContext
from request_logging.exceptions import (
    FormatterNotFoundError,
    InvalidFormatterError,
    RequestLoggingError,
    RpcStatusError,
)
from request_logging.formatters import Formatter, LogstashFormatter, PlainFormatter
from request_logging.hook import RequestLoggingHook
from request_logging.redaction import Redactor
from request_logging.resolver import FormatterResolver
from request_logging.status import StatusCode

__all__ = [
    "Formatter",
    "FormatterNotFoundError",
    "FormatterResolver",
    "HookOptions",
    "InvalidFormatterError",
    "LogstashFormatter",
    "PlainFormatter",
    "Redactor",
    "RequestContext",
    "RequestLoggingError",
    "RequestLoggingHook",
    "RpcStatusError",
    "StatusCode",
]
