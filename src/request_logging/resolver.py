# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Formatter resolution from configuration.

Uses the Registry pattern to map symbolic names to formatter classes,
allowing extensibility without modifying resolver code.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from request_logging.config import DEFAULT_FORMATTER
from request_logging.exceptions import FormatterNotFoundError, InvalidFormatterError
from request_logging.formatters import Formatter, LogstashFormatter, PlainFormatter

logger = logging.getLogger(__name__)


class ReferenceKind(Enum):
    NAME = "name"
    TYPE = "type"
    INSTANCE = "instance"


@dataclass(frozen=True)
class FormatterReference:
    """A configured formatter, tagged by the shape it was given in."""

    kind: ReferenceKind
    value: Any

    @classmethod
    def classify(cls, value: Any) -> FormatterReference:
        if isinstance(value, str):
            return cls(ReferenceKind.NAME, value)
        if isinstance(value, type):
            return cls(ReferenceKind.TYPE, value)
        return cls(ReferenceKind.INSTANCE, value)


class FormatterResolver:
    """Resolves a formatter reference once and memoizes the result.

    A symbolic name is looked up in the registry (case-insensitively) and
    instantiated without arguments.  A class is instantiated without
    arguments.  An instance is used as-is.  Whatever comes out must be a
    :class:`Formatter`.

    Resolution happens under a lock, so concurrent first calls resolve
    once.  A failed resolution is remembered: every later :meth:`get`
    re-raises the same error without trying again.

    Example:
        resolver = FormatterResolver("logstash")
        line = resolver.get().format({"message": "hi"})
    """

    # Class-level registry mapping symbolic names to formatter classes
    _registry: ClassVar[dict[str, type[Formatter]]] = {
        "plain": PlainFormatter,
        "logstash": LogstashFormatter,
    }

    def __init__(self, formatter: Any = DEFAULT_FORMATTER) -> None:
        self.reference = FormatterReference.classify(formatter)
        self._formatter: Formatter | None = None
        self._error: Exception | None = None
        self._lock = threading.Lock()

    @classmethod
    def register(cls, name: str, formatter_class: type[Formatter]) -> None:
        """Register a custom formatter under a symbolic name.

        Raises:
            InvalidFormatterError: If *formatter_class* is not a Formatter subclass
            ValueError: If formatter_class._formatter_type doesn't match name

        Example:
            FormatterResolver.register("compact", CompactFormatter)
        """
        if not (isinstance(formatter_class, type) and issubclass(formatter_class, Formatter)):
            raise InvalidFormatterError(formatter_class)
        key = name.lower()
        declared_type = formatter_class._formatter_type
        if declared_type != "base" and declared_type != key:
            raise ValueError(
                f"Formatter {formatter_class.__name__} has _formatter_type='{declared_type}' "
                f"but is being registered as '{key}'"
            )
        cls._registry[key] = formatter_class

    @classmethod
    def registered_types(cls) -> list[str]:
        """Return list of registered formatter names."""
        return list(cls._registry.keys())

    def get(self) -> Formatter:
        """Return the resolved formatter, resolving it on first use.

        Raises:
            FormatterNotFoundError: If a symbolic name is not registered
            InvalidFormatterError: If the result is not a Formatter
        """
        formatter = self._formatter
        if formatter is not None:
            return formatter

        with self._lock:
            if self._formatter is None:
                if self._error is not None:
                    raise self._error.with_traceback(None)
                try:
                    self._formatter = self._resolve(self.reference)
                except (FormatterNotFoundError, InvalidFormatterError) as e:
                    self._error = e
                    raise
                logger.debug(
                    "Resolved request log formatter %s from %s reference",
                    type(self._formatter).__name__,
                    self.reference.kind.value,
                )
            return self._formatter

    def _resolve(self, reference: FormatterReference) -> Formatter:
        if reference.kind is ReferenceKind.NAME:
            formatter_class = self._registry.get(reference.value.lower())
            if formatter_class is None:
                raise FormatterNotFoundError(reference.value, sorted(self.registered_types()))
            candidate: Any = formatter_class()
        elif reference.kind is ReferenceKind.TYPE:
            if not issubclass(reference.value, Formatter):
                raise InvalidFormatterError(reference.value)
            candidate = reference.value()
        else:
            candidate = reference.value

        if not isinstance(candidate, Formatter) or not callable(getattr(candidate, "format", None)):
            raise InvalidFormatterError(reference.value)
        return candidate
