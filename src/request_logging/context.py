"""RequestContext — the outcome of a single RPC call, as seen by the hook."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from google.protobuf import json_format
from google.protobuf.message import Message

from request_logging.status import StatusCode


class CallResponse(Protocol):
    """What the hook reads from a failed call's response."""

    @property
    def code(self) -> int: ...

    @property
    def message(self) -> str: ...


@dataclass(frozen=True)
class RequestContext:
    """Read-only record of one completed or failed invocation.

    Attributes:
        service_key:    Logical service name (e.g. ``"thing_service"``).
        call_signature: Method identifier (e.g. ``"get_thing"``).
        request:        Deserialized request body.
        response:       The handler result on success; on failure an object
                        exposing ``code`` and ``message``.
        success:        ``True`` if the call completed without a status error.
        execution_time: Call duration in milliseconds.
    """

    service_key: str
    call_signature: str
    request: Any = None
    response: Any = None
    success: bool = True
    execution_time: float = 0.0

    @property
    def execution_time_rounded(self) -> float:
        return round(self.execution_time, 2)

    @property
    def response_class_name(self) -> str:
        """Status type name of the response, ``"Ok"`` on success."""
        if self.success:
            return StatusCode.OK.class_name
        code = getattr(self.response, "code", StatusCode.UNKNOWN)
        try:
            return StatusCode(code).class_name
        except ValueError:
            return type(self.response).__name__


def request_to_dict(request: Any) -> Any:
    """Convert a request body into a plain nested ``dict``.

    Protobuf messages (field names as declared in the ``.proto``), pydantic
    models, dataclasses, objects exposing ``to_dict()`` and mappings are
    converted.  Anything else (``None`` included) is returned as-is.
    """
    if isinstance(request, Message):
        return json_format.MessageToDict(request, preserving_proto_field_name=True)
    if hasattr(request, "model_dump"):
        return request.model_dump()
    if dataclasses.is_dataclass(request) and not isinstance(request, type):
        return dataclasses.asdict(request)
    if callable(getattr(request, "to_dict", None)):
        return request.to_dict()
    if isinstance(request, Mapping):
        return dict(request)
    return request
