"""RPC provider implementations."""

from zilkit.providers.http import HTTPProvider

__all__ = ["HTTPProvider"]
