"""Canonical RPC status codes."""

from __future__ import annotations

from enum import IntEnum


class StatusCode(IntEnum):
    """The canonical status codes shared by gRPC-style servers."""

    OK = 0
    CANCELLED = 1
    UNKNOWN = 2
    INVALID_ARGUMENT = 3
    DEADLINE_EXCEEDED = 4
    NOT_FOUND = 5
    ALREADY_EXISTS = 6
    PERMISSION_DENIED = 7
    RESOURCE_EXHAUSTED = 8
    FAILED_PRECONDITION = 9
    ABORTED = 10
    OUT_OF_RANGE = 11
    UNIMPLEMENTED = 12
    INTERNAL = 13
    UNAVAILABLE = 14
    DATA_LOSS = 15
    UNAUTHENTICATED = 16

    @property
    def class_name(self) -> str:
        """CamelCase status type name, e.g. ``NOT_FOUND`` -> ``"NotFound"``."""
        return "".join(part.capitalize() for part in self.name.split("_"))
