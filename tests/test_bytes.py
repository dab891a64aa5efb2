import pytest
from hypothesis import given, strategies as st
from pydantic import BaseModel, ValidationError

from tx3_sdk.utils.bytes import HexBytes, ensure_bytes, from_hex, to_hex


@given(data=st.binary(max_size=512))
def test_hex_roundtrip(data: bytes) -> None:
    encoded = to_hex(data)
    assert encoded.startswith("0x")
    assert encoded[2:] == encoded[2:].lower()
    assert from_hex(encoded) == data
    args = _TransferArgs(sender=data, quantity=0)
    assert _TransferArgs.model_validate_json(args.model_dump_json()).sender == data


def test_from_hex_accepts_unprefixed_and_uppercase() -> None:
    assert from_hex("DEADbeef") == b"\xde\xad\xbe\xef"
    assert from_hex("0XFF") == b"\xff"


def test_from_hex_rejects_bad_input() -> None:
    with pytest.raises(ValueError):
        from_hex("abc")
    with pytest.raises(ValueError):
        from_hex("zz")


def test_ensure_bytes() -> None:
    assert ensure_bytes(bytearray(b"ab")) == b"ab"
    assert ensure_bytes("0x6162") == b"ab"
    with pytest.raises(TypeError):
        ensure_bytes(12)  # type: ignore[arg-type]


class _TransferArgs(BaseModel):
    sender: HexBytes
    quantity: int


def test_hexbytes_field_serializes_as_prefixed_hex() -> None:
    args = _TransferArgs(sender=b"\xab\xcd", quantity=5)
    assert args.model_dump(mode="json") == {"sender": "0xabcd", "quantity": 5}
    assert args.model_dump_json() == '{"sender":"0xabcd","quantity":5}'


def test_hexbytes_field_accepts_hex_text() -> None:
    assert _TransferArgs(sender="0xABCD", quantity=1).sender == b"\xab\xcd"
    assert _TransferArgs.model_validate_json('{"sender":"0x0102","quantity":1}').sender == b"\x01\x02"


def test_hexbytes_field_rejects_other_types() -> None:
    with pytest.raises(ValidationError):
        _TransferArgs(sender=123, quantity=1)  # type: ignore[arg-type]
    with pytest.raises(ValidationError):
        _TransferArgs(sender="0xabc", quantity=1)
