# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Configuration schema for the request logging hook.

Options are injected at hook construction rather than read from
process-wide configuration.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_FORMATTER = "plain"
DEFAULT_REDACTED_STRING = "REDACTED"


class HookOptions(BaseModel):
    """Options recognized by :class:`~request_logging.hook.RequestLoggingHook`.

    Attributes:
        log_parameters:  Include the (redacted) request body as ``params``.
        formatter:       Symbolic formatter name, ``Formatter`` subclass, or
                         ``Formatter`` instance.
        blacklist:       Dotted paths into the request body to redact.
        redacted_string: Replacement for redacted values.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="ignore", frozen=True)

    log_parameters: bool = False
    formatter: Any = DEFAULT_FORMATTER
    blacklist: list[str] = Field(default_factory=list)
    redacted_string: str = DEFAULT_REDACTED_STRING

    @field_validator("blacklist", mode="before")
    @classmethod
    def _coerce_blacklist(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return [str(entry) for entry in value]

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> HookOptions:
        """Build options from a raw server configuration mapping."""
        return cls.model_validate(dict(options or {}))
