"""
TRP domain models: the shapes of `trp.resolve` and `trp.submit` params and
results.

    trp.resolve  params {"tir": TirInfo, "args": {...}, "env": {...}?}
                 result {"tx": "<hex>", "hash": "<hex>"}
    trp.submit   params {"tx": BytesEnvelope, "witnesses": [WitnessInput, ...]}
                 result {"hash": "<hex>"}

`args` is whatever the generated per-transaction model is; it only has to
serialize to a JSON object.
"""

from __future__ import annotations

from dataclasses import dataclass, is_dataclass
from typing import Any, Dict, List, Mapping, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic_core import PydanticSerializationError, to_jsonable_python

from ..errors import EncodingError
from .encoding import BytesEnvelope, WitnessInput


class TirInfo(BaseModel):
    """
    A compiled transaction template.

    `content` is the canonical name of the template body; the older `bytecode`
    name is still accepted on input.
    """

    model_config = ConfigDict(frozen=True)
    version: str
    content: str = Field(validation_alias=AliasChoices("content", "bytecode"))
    encoding: str = "hex"


class TxEnvelope(BaseModel):
    model_config = ConfigDict(frozen=True)
    tx: str
    hash: str


class SubmitParams(BaseModel):
    model_config = ConfigDict(frozen=True)
    tx: BytesEnvelope
    witnesses: List[WitnessInput] = Field(default_factory=list)


class SubmitResponse(BaseModel):
    model_config = ConfigDict(frozen=True)
    hash: str


def serialize_args(args: Any) -> Dict[str, Any]:
    """
    Turn an argument value into a JSON object.

    Accepts mappings, pydantic models and dataclasses. Anything that does not
    end up as a JSON object raises EncodingError.
    """
    if isinstance(args, Mapping):
        args = dict(args)
    elif not isinstance(args, BaseModel) and not (is_dataclass(args) and not isinstance(args, type)):
        raise EncodingError("args must serialize to a JSON object", detail=type(args).__name__)
    try:
        out = to_jsonable_python(args, by_alias=True)
    except PydanticSerializationError as e:
        raise EncodingError("cannot serialize args", detail=str(e)) from e
    if not isinstance(out, dict):
        raise EncodingError("args must serialize to a JSON object", detail=type(out).__name__)
    return out


@dataclass(frozen=True)
class ProtoTxRequest:
    """A template paired with concrete args, ready to be resolved."""

    tir: TirInfo
    args: Any

    def to_params(self, env_args: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Build `trp.resolve` params.

        `env` is left out entirely when there are no env args; the resolver
        treats a missing key differently from an empty object.
        """
        params: Dict[str, Any] = {
            "tir": self.tir.model_dump(mode="json"),
            "args": serialize_args(self.args),
        }
        if env_args:
            try:
                params["env"] = to_jsonable_python(dict(env_args))
            except PydanticSerializationError as e:
                raise EncodingError("cannot serialize env args", detail=str(e)) from e
        return params


__all__ = [
    "TirInfo",
    "TxEnvelope",
    "SubmitParams",
    "SubmitResponse",
    "ProtoTxRequest",
    "serialize_args",
]
