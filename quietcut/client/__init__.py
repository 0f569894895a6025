"""Client helpers for the silence service."""

from .network import ApiClient, ApiError

__all__ = ["ApiClient", "ApiError"]
