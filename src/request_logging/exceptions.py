"""Custom exceptions for the request_logging package."""

from __future__ import annotations

from typing import Any

from request_logging.status import StatusCode


class RequestLoggingError(Exception):
    """Base exception for all request-logging errors."""


class FormatterNotFoundError(RequestLoggingError):
    """Raised when a symbolic formatter name has no registered formatter."""

    def __init__(self, name: str, available: list[str] | None = None) -> None:
        self.name = name
        self.available = available or []
        msg = f"Request log formatter '{name}' not found"
        if self.available:
            msg += f". Available formatters: {', '.join(self.available)}"
        super().__init__(msg)


class InvalidFormatterError(RequestLoggingError):
    """Raised when the configured formatter does not extend ``Formatter``."""

    def __init__(self, reference: Any) -> None:
        self.reference = reference
        super().__init__(
            f"Request log formatter {reference!r} must be a Formatter subclass or instance"
        )


class RpcStatusError(Exception):
    """Raised by a service handler to fail the current call with a status.

    Not a ``RequestLoggingError``: a failed call is an ordinary outcome that
    the hook logs at error level before re-raising.

    Attributes:
        code:    Canonical status code of the failure.
        details: Human-readable failure message.
        metadata: Optional trailing metadata for the server to send back.
    """

    def __init__(
        self,
        code: StatusCode | int,
        details: str = "",
        metadata: dict[str, Any] | None = None,
    ) -> None:
        self.code = StatusCode(code)
        self.details = details
        self.metadata = metadata or {}
        super().__init__(f"{self.code.class_name}: {details}" if details else self.code.class_name)

    @property
    def message(self) -> str:
        return self.details
