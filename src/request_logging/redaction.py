"""Redactor — masks blacklisted values in a nested request body."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping
from typing import Any

from request_logging.config import DEFAULT_REDACTED_STRING


def _owned_copy(value: Any) -> Any:
    """Deep-copy *value*, turning every nested mapping into a plain ``dict``."""
    if isinstance(value, Mapping):
        return {key: _owned_copy(child) for key, child in value.items()}
    if isinstance(value, list):
        return [_owned_copy(item) for item in value]
    if isinstance(value, tuple):
        return tuple(_owned_copy(item) for item in value)
    return copy.deepcopy(value)


class Redactor:
    """Replaces values addressed by dotted paths with a redaction string.

    A path such as ``"data.schema"`` walks ``params["data"]["schema"]``.
    When the value at the end of the path is itself a mapping, each of its
    direct values is replaced; otherwise the value is replaced.  Paths that
    run through missing keys or non-mapping values are ignored.

    Parameters:
        blacklist:       Dotted paths to redact, applied in order.
        redacted_string: Replacement for redacted values.
    """

    def __init__(
        self,
        blacklist: Iterable[str] = (),
        redacted_string: str = DEFAULT_REDACTED_STRING,
    ) -> None:
        self._paths = [tuple(str(entry).split(".")) for entry in blacklist]
        self.redacted_string = redacted_string

    @property
    def blacklist(self) -> list[str]:
        return [".".join(parts) for parts in self._paths]

    def sanitize(self, params: Any) -> Any:
        """Return a redacted copy of *params* as plain nested dicts.

        Non-mapping input (``None`` included) is returned unchanged.  The
        caller's structure is never mutated, read-only mappings included.
        """
        if not isinstance(params, Mapping):
            return params

        sanitized = _owned_copy(params)
        for parts in self._paths:
            self._redact(parts, sanitized)
        return sanitized

    def _redact(self, parts: tuple[str, ...], params: dict[str, Any]) -> None:
        node: Any = params
        for idx, key in enumerate(parts):
            if not isinstance(node, Mapping) or key not in node:
                return
            if idx < len(parts) - 1:
                node = node[key]
                continue

            value = node[key]
            if isinstance(value, Mapping):
                for child in value:
                    value[child] = self.redacted_string
            else:
                node[key] = self.redacted_string
