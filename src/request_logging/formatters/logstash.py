"""LogstashFormatter — one JSON object per call."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from request_logging.formatters.base import Formatter


class LogstashFormatter(Formatter):
    """Renders the payload as a single-line JSON object.

    Key order follows the payload.  Non-ASCII text is emitted as-is and
    nested values such as ``params`` stay nested.  Values JSON cannot
    represent natively fall back to ``str()``.
    """

    _formatter_type = "logstash"

    def format(self, payload: Mapping[str, Any]) -> str:
        return json.dumps(dict(payload), ensure_ascii=False, default=str)
