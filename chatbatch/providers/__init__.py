"""Chat provider implementations."""

from .provider import ChatProvider

__all__ = ["ChatProvider"]
