"""
TX3 SDK for Python.
Convenience exports for the TRP client.
"""

from .version import __version__  # noqa: F401

# Core config & errors
from .config import ClientOptions  # noqa: F401
from .errors import (  # noqa: F401
    DecodingError,
    EncodingError,
    ProtocolError,
    RequestTimeout,
    TransportError,
    TrpError,
    WitnessShapeError,
)

# TRP
from .trp import (  # noqa: F401
    BytesEnvelope,
    Client,
    ProtoTxRequest,
    SubmitParams,
    SubmitResponse,
    SubmitWitness,
    TirInfo,
    TxEnvelope,
    VKeyWitness,
    WitnessInput,
)

# Utilities
from .utils.bytes import HexBytes, from_hex, to_hex  # noqa: F401

__all__ = [
    "__version__",
    # Core
    "ClientOptions",
    "TrpError", "EncodingError", "TransportError", "RequestTimeout",
    "ProtocolError", "DecodingError", "WitnessShapeError",
    # TRP
    "Client", "TirInfo", "ProtoTxRequest", "TxEnvelope",
    "BytesEnvelope", "VKeyWitness", "SubmitWitness", "WitnessInput",
    "SubmitParams", "SubmitResponse",
    # Utils
    "HexBytes", "to_hex", "from_hex",
]
