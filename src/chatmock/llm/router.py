"""Model router — picks the upstream provider for a requested model name."""

from __future__ import annotations

import logging
from typing import NamedTuple

from chatmock.providers.base import Provider
from chatmock.providers.registry import ProviderRegistry

logger = logging.getLogger(__name__)


class RouteMatch(NamedTuple):
    provider: Provider
    model: str  # requested model rewritten for the provider


def should_proxy(provider: Provider, requested_model: str) -> bool:
    """Whether *provider* accepts *requested_model*.

    A provider without a base URL never matches. Otherwise it matches when
    it routes everything, or when the trimmed model name starts with its
    (non-empty) model prefix.
    """
    if not provider.base_url.strip():
        return False
    if provider.route_all:
        return True
    prefix = provider.model_prefix.strip()
    return bool(prefix) and requested_model.strip().startswith(prefix)


def normalize_model(provider: Provider, requested_model: str) -> str:
    """Strip *provider*'s prefix from the requested model, when present.

    >>> normalize_model(Provider(model_prefix="ollama/"), " ollama/llama3.1 ")
    'llama3.1'
    """
    model = requested_model.strip()
    prefix = provider.model_prefix.strip()
    if prefix and model.startswith(prefix):
        return model[len(prefix):]
    return model


class ModelRouter:
    """Routes requested model names to providers.

    Providers are evaluated in registration order and the first match
    wins; the order is never re-sorted.
    """

    def __init__(self, registry: ProviderRegistry) -> None:
        self.registry = registry

    def match(self, requested_model: str) -> RouteMatch | None:
        """Return the first provider accepting *requested_model*, or ``None``."""
        for provider in self.registry.snapshot():
            if should_proxy(provider, requested_model):
                model = normalize_model(provider, requested_model)
                logger.debug(
                    "Routed model=%r to provider=%s as %r",
                    requested_model,
                    provider.name,
                    model,
                )
                return RouteMatch(provider, model)
        return None
