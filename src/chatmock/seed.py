"""Startup data: seed rules and the providers configured through the env."""

from __future__ import annotations

from chatmock.config import Settings
from chatmock.providers.base import CHATGPT_BASE_URL, Provider, ProviderKind
from chatmock.rules.store import Rule

DEFAULT_RULES: list[Rule] = [
    Rule(contains="hello", reply="Hi! This is a mocked assistant response."),
    Rule(contains="weather", reply="The mock forecast: sunny with a chance of unit tests."),
]


def providers_from_settings(config: Settings) -> list[Provider]:
    """Build the initial provider list from ``CHATMOCK_*`` settings.

    Order: ollama, codex, chatgpt, then the legacy single ``remote``
    provider. A family is only included when its base URL is set; chatgpt
    is also included when only an access token is given.
    """
    providers: list[Provider] = []

    if config.chatmock_ollama_base_url.strip():
        providers.append(
            Provider(
                name="ollama",
                kind=ProviderKind.OLLAMA.value,
                base_url=config.chatmock_ollama_base_url.strip(),
                model_prefix=config.chatmock_ollama_model_prefix,
                route_all=config.chatmock_ollama_route_all,
            )
        )

    if config.chatmock_codex_base_url.strip():
        providers.append(
            Provider(
                name="codex",
                kind=ProviderKind.CODEX.value,
                base_url=config.chatmock_codex_base_url.strip(),
                api_key=config.chatmock_codex_api_key,
                model_prefix=config.chatmock_codex_model_prefix,
                route_all=config.chatmock_codex_route_all,
            )
        )

    chatgpt_url = config.chatmock_chatgpt_base_url.strip()
    if chatgpt_url or config.chatmock_chatgpt_access_token.strip():
        providers.append(
            Provider(
                name="chatgpt",
                kind=ProviderKind.CHATGPT.value,
                base_url=chatgpt_url or CHATGPT_BASE_URL,
                access_token=config.chatmock_chatgpt_access_token,
                account_id=config.chatmock_chatgpt_account_id,
                model_prefix=config.chatmock_chatgpt_model_prefix,
                route_all=config.chatmock_chatgpt_route_all,
            )
        )

    # Pre-multi-provider configuration: one OpenAI-compatible remote.
    if config.chatmock_remote_base_url.strip():
        providers.append(
            Provider(
                name="remote",
                kind=ProviderKind.OPENAI.value,
                base_url=config.chatmock_remote_base_url.strip(),
                api_key=config.chatmock_remote_api_key,
                model_prefix=config.chatmock_remote_model_prefix,
                route_all=config.chatmock_remote_route_all,
            )
        )

    return providers
