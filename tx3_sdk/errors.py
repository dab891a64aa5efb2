"""
Typed error classes for the TRP client.

Every failure of `Client.call`, `Client.resolve` and `Client.submit` is raised
as one of these, so callers can catch a specific failure mode or the base
`TrpError`:

- EncodingError     request could not be serialized; nothing was sent
- TransportError    network failure or non-2xx HTTP status
- RequestTimeout    the HTTP round trip exceeded the configured timeout
- ProtocolError     the resolver answered with a JSON-RPC error object
- DecodingError     the response envelope or its result has the wrong shape
- WitnessShapeError a witness value is neither a hex string nor a witness object

No error is retried by the SDK.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Optional

__all__ = [
    "TrpError",
    "EncodingError",
    "TransportError",
    "RequestTimeout",
    "ProtocolError",
    "DecodingError",
    "WitnessShapeError",
    "JsonRpcCode",
    "from_jsonrpc_error",
]


class TrpError(Exception):
    """Base class for all TRP client errors."""


class JsonRpcCode(IntEnum):
    # JSON-RPC 2.0 spec; names only, the client never branches on codes
    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603

    # Server errors (implementation-defined range: -32099 to -32000)
    SERVER_ERROR = -32000


@dataclass(slots=True)
class EncodingError(TrpError):
    """Raised when a request cannot be serialized to JSON."""

    message: str
    detail: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"EncodingError: {self.message}" + (f" ({self.detail})" if self.detail else "")


@dataclass(slots=True)
class TransportError(TrpError):
    """
    Raised on network failures and non-2xx HTTP responses.

    `status_code` and `body` are set when the server answered at all.
    """

    message: str
    status_code: Optional[int] = None
    body: Optional[str] = None

    def __str__(self) -> str:
        if self.status_code is None:
            return f"{type(self).__name__}: {self.message}"
        return f"{type(self).__name__}: HTTP {self.status_code}: {self.body or ''}"


@dataclass(slots=True)
class RequestTimeout(TransportError):
    """The HTTP round trip did not complete within the client timeout."""


@dataclass(slots=True)
class ProtocolError(TrpError):
    """Raised when a JSON-RPC call returns an error object."""

    code: int
    message: str
    data: Optional[Any] = None
    method: Optional[str] = None
    request_id: Optional[Any] = None
    http_status: Optional[int] = None

    def __str__(self) -> str:
        parts = [f"RPC[{self.method or '-'}] code={self.code} msg={self.message!r}"]
        if self.request_id is not None:
            parts.append(f"id={self.request_id}")
        if self.data is not None:
            parts.append(f"data={self.data!r}")
        return " ".join(parts)

    @property
    def code_enum(self) -> Optional[JsonRpcCode]:
        try:
            return JsonRpcCode(self.code)
        except ValueError:
            return None


@dataclass(slots=True)
class DecodingError(TrpError):
    """Raised when a response envelope or result does not have the expected shape."""

    message: str
    detail: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{type(self).__name__}: {self.message}" + (f" ({self.detail})" if self.detail else "")


@dataclass(slots=True)
class WitnessShapeError(DecodingError):
    """A witness value is neither a hex string nor a witness object."""

    value: Any = None


def from_jsonrpc_error(
    err_obj: Dict[str, Any],
    *,
    method: Optional[str] = None,
    request_id: Optional[Any] = None,
    http_status: Optional[int] = None,
) -> ProtocolError:
    """
    Convert a JSON-RPC error object into ProtocolError.

    `err_obj` should resemble: {"code": int, "message": str, "data": any?}
    """
    return ProtocolError(
        code=int(err_obj.get("code", JsonRpcCode.SERVER_ERROR)),
        message=str(err_obj.get("message", "Unknown JSON-RPC error")),
        data=err_obj.get("data"),
        method=method,
        request_id=request_id,
        http_status=http_status,
    )
