"""Tests for the model router."""

from __future__ import annotations

import pytest

from chatmock.llm.router import ModelRouter, normalize_model, should_proxy
from chatmock.providers.base import Provider
from chatmock.providers.registry import ProviderRegistry


def _router(*providers: Provider) -> ModelRouter:
    return ModelRouter(ProviderRegistry(providers))


class TestPrefixMatching:
    """Tests for prefix-based routing."""

    def test_prefix_match_strips_prefix(self, codex_provider):
        match = _router(codex_provider).match("codex/gpt-5")
        assert match is not None
        assert match.provider.name == "codex"
        assert match.model == "gpt-5"

    def test_other_prefix_does_not_match(self, codex_provider):
        assert _router(codex_provider).match("other/gpt-5") is None

    def test_whitespace_is_trimmed(self, codex_provider):
        match = _router(codex_provider).match("  codex/gpt-5  ")
        assert match.model == "gpt-5"

    def test_blank_base_url_never_matches(self):
        provider = Provider(name="x", kind="ollama", model_prefix="ollama/", route_all=True)
        assert _router(provider).match("ollama/llama3") is None

    def test_no_providers(self):
        assert _router().match("codex/gpt-5") is None

    def test_first_registered_wins(self):
        first = Provider(name="first", base_url="http://1", model_prefix="m/")
        second = Provider(name="second", base_url="http://2", model_prefix="m/x")
        assert _router(first, second).match("m/x-large").provider.name == "first"
        assert _router(second, first).match("m/x-large").provider.name == "second"


class TestRouteAll:
    """Tests for route_all providers."""

    @pytest.mark.parametrize(
        "requested, expected",
        [
            ("gpt-4o", "gpt-4o"),
            ("  gpt-4o ", "gpt-4o"),
            ("remote/gpt-4o", "gpt-4o"),
            ("", ""),
        ],
    )
    def test_matches_everything(self, requested, expected):
        provider = Provider(name="all", base_url="http://x", model_prefix="remote/", route_all=True)
        match = _router(provider).match(requested)
        assert match is not None
        assert match.model == expected

    def test_route_all_shadows_later_providers(self, codex_provider):
        catch_all = Provider(name="all", base_url="http://x", route_all=True)
        assert _router(catch_all, codex_provider).match("codex/gpt-5").provider.name == "all"


class TestHelpers:
    def test_should_proxy_requires_prefix(self):
        # A blank prefix is never matched literally (stored providers always
        # carry one after normalization).
        provider = Provider(base_url="http://x", model_prefix=" ")
        assert should_proxy(provider, "anything") is False

    def test_normalize_model_without_prefix_match(self):
        provider = Provider(model_prefix="ollama/")
        assert normalize_model(provider, " llama3 ") == "llama3"

    def test_normalize_model_trims_prefix(self):
        provider = Provider(model_prefix=" ollama/ ")
        assert normalize_model(provider, "ollama/llama3") == "llama3"

    def test_router_sees_registry_updates(self, codex_provider):
        registry = ProviderRegistry()
        router = ModelRouter(registry)
        assert router.match("codex/gpt-5") is None
        registry.upsert(codex_provider)
        assert router.match("codex/gpt-5") is not None
