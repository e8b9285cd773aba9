"""Data providers."""

from scoreline.providers.errors import ProviderError, RequestError, TransportError

__all__ = ["ProviderError", "RequestError", "TransportError"]
