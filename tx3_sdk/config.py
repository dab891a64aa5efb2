"""
TRP client configuration: endpoint, extra headers, env args and timeout.

- Options are immutable once built; mappings are copied and frozen.
- Supports loading from environment variables (TX3_TRP_*).
- There is no module-level default instance: build one ClientOptions at
  application start and pass it to `Client`.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

DEFAULT_TIMEOUT = 30.0


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name)
    return v if v is not None else default


def _ensure_scheme(url: str, allowed: tuple[str, ...]) -> str:
    lower = url.lower()
    if not any(lower.startswith(f"{sch}://") for sch in allowed):
        raise ValueError(f"URL must start with {allowed}, got: {url!r}")
    return url


def _json_object(name: str, raw: Optional[str]) -> Dict[str, Any]:
    if not raw:
        return {}
    try:
        val = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"{name} must be a JSON object: {e}") from e
    if not isinstance(val, dict):
        raise ValueError(f"{name} must be a JSON object, got {type(val).__name__}")
    return val


@dataclass(frozen=True, slots=True)
class ClientOptions:
    endpoint: str
    headers: Mapping[str, str] = field(default_factory=dict)
    env_args: Mapping[str, Any] = field(default_factory=dict)
    # seconds; None or 0 means DEFAULT_TIMEOUT
    timeout: Optional[float] = None

    def __post_init__(self) -> None:
        if not self.endpoint:
            raise ValueError("endpoint must be non-empty")
        _ensure_scheme(self.endpoint, ("http", "https"))

        seen: Dict[str, str] = {}
        for key in self.headers:
            if not isinstance(key, str) or not key:
                raise ValueError(f"header names must be non-empty strings, got {key!r}")
            prev = seen.setdefault(key.lower(), key)
            if prev != key:
                raise ValueError(f"duplicate header {key!r} (already set as {prev!r})")

        if self.timeout is not None and self.timeout < 0:
            raise ValueError("timeout must be >= 0")

        object.__setattr__(self, "headers", MappingProxyType({str(k): str(v) for k, v in self.headers.items()}))
        object.__setattr__(self, "env_args", MappingProxyType(dict(self.env_args)))

    @property
    def effective_timeout(self) -> float:
        return float(self.timeout) if self.timeout else DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, prefix: str = "TX3_TRP_") -> "ClientOptions":
        """
        Create options from environment variables:

        TX3_TRP_ENDPOINT   (http/https, required)
        TX3_TRP_TIMEOUT    (float seconds)
        TX3_TRP_HEADERS    (JSON object of header name -> value)
        TX3_TRP_ENV        (JSON object of env arg name -> value)
        """
        endpoint = _env(f"{prefix}ENDPOINT")
        if not endpoint:
            raise ValueError(f"{prefix}ENDPOINT is not set")
        timeout_raw = _env(f"{prefix}TIMEOUT")
        return cls(
            endpoint=endpoint,
            headers=_json_object(f"{prefix}HEADERS", _env(f"{prefix}HEADERS")),
            env_args=_json_object(f"{prefix}ENV", _env(f"{prefix}ENV")),
            timeout=float(timeout_raw) if timeout_raw else None,
        )

    def with_overrides(self, **overrides: Any) -> "ClientOptions":
        """
        Copy with keyword overrides. Unknown keys are ignored.
        """
        known = {f.name for f in fields(self)}
        return replace(self, **{k: v for k, v in overrides.items() if k in known})


__all__ = ["ClientOptions", "DEFAULT_TIMEOUT"]
