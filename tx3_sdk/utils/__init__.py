"""Small helpers shared by the TRP models."""

from .bytes import HexBytes, ensure_bytes, from_hex, to_hex  # noqa: F401

__all__ = ["HexBytes", "ensure_bytes", "from_hex", "to_hex"]
