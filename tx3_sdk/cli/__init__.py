"""Command line interface (`tx3-trp`, entrypoint `tx3_sdk.cli.main:main`)."""

from .main import app  # noqa: F401

__all__ = ["app"]
