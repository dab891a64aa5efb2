"""
Version of the TX3 Python SDK.

The static `__version__` (PEP 440) is also sent in the default `User-Agent`
header of every TRP request.
"""

from __future__ import annotations

# Bump this when publishing
__version__ = "0.1.0"

USER_AGENT = f"tx3-sdk-python/{__version__}"

__all__ = ["__version__", "USER_AGENT"]
