"""Built-in request log formatters."""

from request_logging.formatters.base import Formatter
from request_logging.formatters.logstash import LogstashFormatter
from request_logging.formatters.plain import PlainFormatter

__all__ = [
    "Formatter",
    "LogstashFormatter",
    "PlainFormatter",
]
