"""
JSON-RPC 2.0 envelopes, independent of TRP semantics.

Outbound requests always carry a fresh UUID4 string id. Inbound responses are
parsed leniently on `result` (any JSON value) and strictly on `error`
({code, message, data?}); a present error wins over a present result.
"""

from __future__ import annotations

import json
import uuid
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from ..errors import DecodingError, EncodingError, from_jsonrpc_error

JSONRPC_VERSION = "2.0"


def new_request_id() -> str:
    """128-bit random correlation id."""
    return str(uuid.uuid4())


class JsonRpcRequest(BaseModel):
    model_config = ConfigDict(frozen=True)
    jsonrpc: Literal["2.0"] = JSONRPC_VERSION
    method: str
    params: Optional[Union[list[Any], dict[str, Any]]] = None
    id: Union[int, str]

    @classmethod
    def build(cls, method: str, params: Any, id: Optional[Union[int, str]] = None) -> "JsonRpcRequest":
        # model_construct keeps params untouched; they are checked by to_json()
        return cls.model_construct(
            jsonrpc=JSONRPC_VERSION,
            method=method,
            params=params,
            id=new_request_id() if id is None else id,
        )

    def to_json(self) -> bytes:
        """Serialize to UTF-8 for the wire; raises EncodingError for non-JSON params."""
        payload = {"jsonrpc": self.jsonrpc, "method": self.method, "params": self.params, "id": self.id}
        try:
            text = json.dumps(payload, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
            return text.encode("utf-8")
        except (TypeError, ValueError) as e:
            # UnicodeEncodeError (lone surrogates) is a ValueError
            raise EncodingError(f"cannot serialize params for {self.method}", detail=str(e)) from e


class JsonRpcError(BaseModel):
    model_config = ConfigDict(frozen=True)
    code: int
    message: str
    data: Optional[Any] = None


class JsonRpcResponse(BaseModel):
    model_config = ConfigDict(frozen=True)
    jsonrpc: Literal["2.0"] = JSONRPC_VERSION
    result: Optional[Any] = None
    error: Optional[JsonRpcError] = None
    id: Optional[Union[int, str]] = None

    @classmethod
    def parse(cls, raw: Union[str, bytes]) -> "JsonRpcResponse":
        try:
            return cls.model_validate_json(raw)
        except ValidationError as e:
            raise DecodingError("malformed JSON-RPC response", detail=str(e)) from e

    def unwrap(self, *, method: Optional[str] = None, http_status: Optional[int] = None) -> Any:
        """Return `result`, or raise ProtocolError if the envelope carries an error."""
        if self.error is not None:
            raise from_jsonrpc_error(
                self.error.model_dump(),
                method=method,
                request_id=self.id,
                http_status=http_status,
            )
        return self.result


__all__ = [
    "JSONRPC_VERSION",
    "new_request_id",
    "JsonRpcRequest",
    "JsonRpcError",
    "JsonRpcResponse",
]
