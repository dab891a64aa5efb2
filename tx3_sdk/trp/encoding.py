"""
JSON representations for binary data and transaction witnesses.

- BytesEnvelope   {"content": str, "encoding": "hex" | "base64"}, always an object
- VKeyWitness     {"type": "vkey", "key": BytesEnvelope, "signature": BytesEnvelope}
- SubmitWitness   same shape as VKeyWitness, used for `trp.submit`
- WitnessInput    either a SubmitWitness object or a bare hex string

WitnessInput decoding tries the string shape first. A plain hex witness such as
"ff00" therefore never goes through object parsing, even when the string
happens to be JSON object text.
"""

from __future__ import annotations

import base64
import binascii
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel, ValidationError

from ..errors import WitnessShapeError
from ..utils.bytes import BytesLike, from_hex

Encoding = Literal["hex", "base64"]


class BytesEnvelope(BaseModel):
    """Encoded bytes that cross the wire."""

    model_config = ConfigDict(frozen=True)
    content: str
    encoding: Encoding = "hex"

    @classmethod
    def from_bytes(cls, data: BytesLike, encoding: Encoding = "hex") -> "BytesEnvelope":
        raw = bytes(data)
        if encoding == "hex":
            return cls(content=raw.hex(), encoding="hex")
        return cls(content=base64.b64encode(raw).decode("ascii"), encoding="base64")

    @classmethod
    def from_hex(cls, content: str) -> "BytesEnvelope":
        return cls(content=content, encoding="hex")

    def to_bytes(self) -> bytes:
        """Decode `content` according to `encoding`; raises ValueError on bad input."""
        if self.encoding == "hex":
            return from_hex(self.content)
        try:
            return base64.b64decode(self.content, validate=True)
        except binascii.Error as e:
            raise ValueError(f"invalid base64 content: {e}") from e


class VKeyWitness(BaseModel):
    """Verification key plus signature over the transaction body."""

    model_config = ConfigDict(frozen=True)
    type: str = "vkey"
    key: BytesEnvelope
    signature: BytesEnvelope


class SubmitWitness(VKeyWitness):
    """A witness attached to a `trp.submit` call."""


class WitnessInput(RootModel[Union[str, SubmitWitness]]):
    """
    Either a structured SubmitWitness or a raw hex string; never both.

    The union is validated left to right, so a JSON string always lands in the
    hex variant before object parsing is attempted.
    """

    model_config = ConfigDict(frozen=True)
    root: Union[str, SubmitWitness] = Field(union_mode="left_to_right")

    @classmethod
    def from_hex(cls, value: str) -> "WitnessInput":
        return cls(root=value)

    @classmethod
    def from_witness(cls, witness: VKeyWitness) -> "WitnessInput":
        if not isinstance(witness, SubmitWitness):
            witness = SubmitWitness.model_validate(witness.model_dump())
        return cls(root=witness)

    @classmethod
    def decode(cls, value: Any) -> "WitnessInput":
        """Decode a JSON value (already parsed) into a WitnessInput."""
        if isinstance(value, str):
            return cls(root=value)
        try:
            return cls(root=SubmitWitness.model_validate(value))
        except ValidationError as e:
            raise WitnessShapeError(
                "witness is neither a string nor a witness object",
                detail=str(e),
                value=value,
            ) from e

    @classmethod
    def decode_json(cls, raw: Union[str, bytes]) -> "WitnessInput":
        """Decode raw JSON text into a WitnessInput."""
        try:
            return cls.model_validate_json(raw)
        except ValidationError as e:
            raise WitnessShapeError(
                "witness is neither a string nor a witness object",
                detail=str(e),
                value=raw,
            ) from e

    @classmethod
    def coerce(cls, value: Any) -> "WitnessInput":
        """Accept a WitnessInput, hex string, witness model or witness mapping."""
        if isinstance(value, WitnessInput):
            return value
        if isinstance(value, VKeyWitness):
            return cls.from_witness(value)
        return cls.decode(value)

    @property
    def hex(self) -> Optional[str]:
        return self.root if isinstance(self.root, str) else None

    @property
    def witness(self) -> Optional[SubmitWitness]:
        return self.root if isinstance(self.root, SubmitWitness) else None

    @property
    def is_hex(self) -> bool:
        return isinstance(self.root, str)


__all__ = ["Encoding", "BytesEnvelope", "VKeyWitness", "SubmitWitness", "WitnessInput"]
