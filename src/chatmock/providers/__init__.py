"""Upstream provider records and the in-memory registry."""

from chatmock.providers.base import Provider, ProviderKind, ProviderView, normalize_provider
from chatmock.providers.registry import ProviderRegistry

__all__ = [
    "Provider",
    "ProviderKind",
    "ProviderRegistry",
    "ProviderView",
    "normalize_provider",
]
