"""Provider registry — the in-memory set of configured upstream targets.

The provider list is held as an immutable tuple snapshot. Writers build a
new tuple under ``_write_lock`` and swap it in with a single assignment;
readers take the current snapshot without locking.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from chatmock.providers.base import (
    Provider,
    ProviderView,
    normalize_provider,
    same_provider,
)

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """Ordered, normalized set of providers.

    Registration order is significant: the router evaluates providers in
    the order they were first added.

    Args:
        seed: Providers to register at construction, applied through
              :meth:`upsert` so duplicates collapse.
    """

    def __init__(self, seed: Iterable[Provider] | None = None) -> None:
        self._providers: tuple[Provider, ...] = ()
        self._write_lock = threading.Lock()
        for provider in seed or ():
            self.upsert(provider)

    # ── Writes ────────────────────────────────────────────────────────

    def upsert(self, provider: Provider) -> Provider:
        """Normalize *provider* and replace its existing entry, or append it.

        Returns:
            The normalized record that was stored.
        """
        normalized = normalize_provider(provider)
        with self._write_lock:
            current = list(self._providers)
            for i, existing in enumerate(current):
                if same_provider(existing, normalized):
                    current[i] = normalized
                    logger.info("Replaced provider %s (%s)", normalized.name, normalized.kind)
                    break
            else:
                current.append(normalized)
                logger.info("Added provider %s (%s)", normalized.name, normalized.kind)
            self._providers = tuple(current)
        return normalized

    def replace_all(self, providers: Iterable[Provider]) -> None:
        """Replace the whole provider set with normalized copies of *providers*."""
        snapshot = tuple(normalize_provider(p) for p in providers)
        with self._write_lock:
            self._providers = snapshot
        logger.info("Provider set replaced (%d providers)", len(snapshot))

    # ── Reads ─────────────────────────────────────────────────────────

    def snapshot(self) -> tuple[Provider, ...]:
        """Current providers as an immutable tuple, in registration order."""
        return self._providers

    def list(self) -> list[Provider]:
        """Current providers as a fresh list, in registration order."""
        return list(self._providers)

    def redacted_list(self) -> list[ProviderView]:
        """Current providers with credentials reduced to presence flags."""
        return [ProviderView.from_provider(p) for p in self._providers]

    def __len__(self) -> int:
        return len(self._providers)
