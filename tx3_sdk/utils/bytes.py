from __future__ import annotations

from typing import Annotated, Union

from pydantic import BeforeValidator, PlainSerializer

BytesLike = Union[bytes, bytearray, memoryview]


def ensure_bytes(data: Union[BytesLike, str]) -> bytes:
    """
    Ensure input is bytes.

    Accepts:
      - bytes / bytearray / memoryview  -> bytes(data)
      - str: treated as hex; optional '0x' prefix; even-length enforced

    Raises:
      ValueError on invalid hex strings.
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, str):
        return from_hex(data)
    raise TypeError(f"Unsupported type for ensure_bytes: {type(data)!r}")


def to_hex(b: BytesLike, prefix: bool = True) -> str:
    """
    Bytes -> hex string (lowercase). Prefix with '0x' by default.
    """
    s = bytes(b).hex()
    return f"0x{s}" if prefix else s


def from_hex(s: str) -> bytes:
    """
    Hex string (optionally '0x' prefixed) -> bytes.

    Enforces even length; case-insensitive.
    """
    if not isinstance(s, str):
        raise TypeError("from_hex expects a string")
    if s.startswith(("0x", "0X")):
        s = s[2:]
    if len(s) % 2 != 0:
        raise ValueError("hex string must have even length")
    try:
        return bytes.fromhex(s)
    except ValueError as e:
        raise ValueError(f"invalid hex string: {e}") from e


def _validate_hex_bytes(v: object) -> bytes:
    if not isinstance(v, (bytes, bytearray, memoryview, str)):
        raise ValueError(f"expected bytes or hex string, got {type(v).__name__}")
    return ensure_bytes(v)


# Byte strings inside generated argument models: "0x" + lowercase hex on the
# wire, bytes or hex text on input.
HexBytes = Annotated[
    bytes,
    BeforeValidator(_validate_hex_bytes),
    PlainSerializer(to_hex, return_type=str),
]

__all__ = ["BytesLike", "HexBytes", "ensure_bytes", "to_hex", "from_hex"]
