"""Formatter ABC — the contract every request log formatter implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar


class Formatter(ABC):
    """Base class for request log formatters.

    A formatter turns the payload assembled for one call into the string
    handed to the logging sink.  Implementations must be stateless so a
    single instance can serve concurrent calls.

    Class Variables:
        _formatter_type: Symbolic name used in configuration (e.g. ``"plain"``).
    """

    _formatter_type: ClassVar[str] = "base"

    @abstractmethod
    def format(self, payload: Mapping[str, Any]) -> str:
        """Render *payload* as a single log line."""
        ...
