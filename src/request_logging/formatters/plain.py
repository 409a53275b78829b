"""PlainFormatter — space-separated ``key=value`` pairs."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from request_logging.formatters.base import Formatter


class PlainFormatter(Formatter):
    """Renders ``key=value`` pairs in payload order."""

    _formatter_type = "plain"

    def format(self, payload: Mapping[str, Any]) -> str:
        return " ".join(f"{key}={value}" for key, value in payload.items())
