"""
TRP client over HTTP JSON-RPC (sync).

- One httpx.Client per TRP Client, safe to share across threads.
- Single attempt per call: no retries, no backoff.
- Every failure is raised as a `tx3_sdk.errors.TrpError` subclass.

Example:
    from tx3_sdk import Client, ClientOptions, TirInfo

    opts = ClientOptions(endpoint="http://localhost:8164", env_args={"network": "preview"})
    with Client(opts) as trp:
        env = trp.resolve(TRANSFER_TIR, {"quantity": 100})
        print(env.hash)
"""

from __future__ import annotations

import logging
import time
from typing import Any, Iterable, Optional

import httpx
from pydantic import BaseModel, ValidationError

from ..config import ClientOptions
from ..errors import DecodingError, RequestTimeout, TransportError
from ..version import USER_AGENT
from .encoding import BytesEnvelope, WitnessInput
from .jsonrpc import JsonRpcRequest, JsonRpcResponse
from .models import ProtoTxRequest, SubmitParams, SubmitResponse, TirInfo, TxEnvelope

log = logging.getLogger(__name__)

RESOLVE_METHOD = "trp.resolve"
SUBMIT_METHOD = "trp.submit"


def _decode_result(model: type[BaseModel], result: Any, method: str) -> Any:
    try:
        return model.model_validate(result)
    except ValidationError as e:
        raise DecodingError(f"unexpected result for {method}", detail=str(e)) from e


class Client:
    """Client for a TRP resolver."""

    def __init__(self, options: ClientOptions, *, http_client: Optional[httpx.Client] = None) -> None:
        self._options = options
        self._owns_http = http_client is None
        self._http = http_client or httpx.Client(timeout=options.effective_timeout)

    @classmethod
    def from_env(cls, prefix: str = "TX3_TRP_") -> "Client":
        return cls(ClientOptions.from_env(prefix))

    @property
    def options(self) -> ClientOptions:
        return self._options

    # --- context manager -------------------------------------------------

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    # --- transport -------------------------------------------------------

    def _headers(self) -> httpx.Headers:
        headers = httpx.Headers({"Accept": "application/json", "User-Agent": USER_AGENT})
        headers.update(self._options.headers)
        # fixed; the header map cannot override it
        headers["Content-Type"] = "application/json"
        return headers

    def _read_body(self, resp: httpx.Response, deadline: float, method: str) -> bytes:
        chunks = []
        for chunk in resp.iter_bytes():
            if time.monotonic() > deadline:
                raise RequestTimeout(f"{method} timed out after {self._options.effective_timeout}s")
            chunks.append(chunk)
        return b"".join(chunks)

    def call(self, method: str, params: Any = None) -> Any:
        """
        Perform one JSON-RPC request and return its raw `result`.

        The configured timeout is a deadline for the whole exchange: connect,
        send and the complete response body.
        """
        request = JsonRpcRequest.build(method, params)
        body = request.to_json()

        log.debug("trp call method=%s id=%s", method, request.id)
        timeout = self._options.effective_timeout
        started = time.monotonic()
        deadline = started + timeout
        try:
            with self._http.stream(
                "POST",
                self._options.endpoint,
                content=body,
                headers=self._headers(),
                timeout=timeout,
            ) as resp:
                raw = self._read_body(resp, deadline, method)
        except httpx.TimeoutException as e:
            raise RequestTimeout(f"{method} timed out after {timeout}s") from e
        except httpx.HTTPError as e:
            raise TransportError(f"{method} failed: {e}") from e

        log.debug(
            "trp response method=%s id=%s status=%d elapsed_ms=%.1f",
            method,
            request.id,
            resp.status_code,
            (time.monotonic() - started) * 1000,
        )
        if not resp.is_success:
            text = raw.decode(resp.encoding or "utf-8", errors="replace")
            raise TransportError(f"{method} failed", status_code=resp.status_code, body=text)

        envelope = JsonRpcResponse.parse(raw)
        return envelope.unwrap(method=method, http_status=resp.status_code)

    # --- TRP methods -----------------------------------------------------

    def resolve(self, tir: TirInfo, args: Any) -> TxEnvelope:
        """Resolve a template plus args into a transaction envelope."""
        return self.resolve_request(ProtoTxRequest(tir=tir, args=args))

    def resolve_request(self, proto_tx: ProtoTxRequest) -> TxEnvelope:
        params = proto_tx.to_params(self._options.env_args)
        result = self.call(RESOLVE_METHOD, params)
        return _decode_result(TxEnvelope, result, RESOLVE_METHOD)

    def submit(self, tx: TxEnvelope, witnesses: Iterable[Any] = ()) -> SubmitResponse:
        """
        Submit a signed transaction.

        `tx.tx` is sent as hex. Witnesses keep their order; each may be a
        WitnessInput, a hex string, or a witness model/mapping.
        """
        params = SubmitParams(
            tx=BytesEnvelope.from_hex(tx.tx),
            witnesses=[WitnessInput.coerce(w) for w in witnesses],
        )
        result = self.call(SUBMIT_METHOD, params.model_dump(mode="json"))
        return _decode_result(SubmitResponse, result, SUBMIT_METHOD)


__all__ = ["Client", "RESOLVE_METHOD", "SUBMIT_METHOD"]
