"""
Transaction Resolution Protocol (TRP) client.

Submodules:
- encoding  BytesEnvelope, witnesses and the WitnessInput union
- jsonrpc   JSON-RPC 2.0 envelopes
- models    TirInfo, TxEnvelope, SubmitParams, SubmitResponse, ProtoTxRequest
- client    Client (call / resolve / submit)
"""

from .client import Client  # noqa: F401
from .encoding import BytesEnvelope, SubmitWitness, VKeyWitness, WitnessInput  # noqa: F401
from .models import ProtoTxRequest, SubmitParams, SubmitResponse, TirInfo, TxEnvelope  # noqa: F401

__all__ = [
    "Client",
    "BytesEnvelope",
    "VKeyWitness",
    "SubmitWitness",
    "WitnessInput",
    "TirInfo",
    "ProtoTxRequest",
    "TxEnvelope",
    "SubmitParams",
    "SubmitResponse",
]
