"""Provider records — the configured upstream chat backends."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

CHATGPT_BASE_URL = "https://chatgpt.com"


class ProviderKind(str, Enum):
    """Closed set of upstream families ChatMock can translate to."""

    OPENAI = "openai"
    OLLAMA = "ollama"
    CHATGPT = "chatgpt"
    CODEX = "codex"

    @classmethod
    def parse(cls, value: str | None) -> ProviderKind:
        """Map a free-form kind string onto the closed set (default: openai)."""
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.OPENAI


# Prefix used for routing when a provider is configured without one.
DEFAULT_MODEL_PREFIXES: dict[ProviderKind, str] = {
    ProviderKind.OLLAMA: "ollama/",
    ProviderKind.CODEX: "codex/",
    ProviderKind.CHATGPT: "chatgpt/",
}
FALLBACK_MODEL_PREFIX = "remote/"


class Provider(BaseModel):
    """A configured upstream target.

    Records are immutable; updates always replace the whole record.
    """

    name: str = ""
    kind: str = ProviderKind.OPENAI.value
    base_url: str = ""
    api_key: str = ""
    access_token: str = ""
    account_id: str = ""
    model_prefix: str = ""
    route_all: bool = False

    model_config = {"frozen": True}

    @property
    def provider_kind(self) -> ProviderKind:
        return ProviderKind.parse(self.kind)


class ProviderView(BaseModel):
    """Provider as shown to API callers, with secrets reduced to flags."""

    name: str
    kind: str
    base_url: str
    has_api_key: bool
    has_access_token: bool
    has_account_id: bool
    model_prefix: str
    route_all: bool

    @classmethod
    def from_provider(cls, provider: Provider) -> ProviderView:
        return cls(
            name=provider.name,
            kind=provider.kind,
            base_url=provider.base_url,
            has_api_key=bool(provider.api_key.strip()),
            has_access_token=bool(provider.access_token.strip()),
            has_account_id=bool(provider.account_id.strip()),
            model_prefix=provider.model_prefix,
            route_all=provider.route_all,
        )


def normalize_provider(provider: Provider) -> Provider:
    """Fill in the defaults that every stored provider must carry.

    - ``kind`` is folded onto :class:`ProviderKind` (unknown → ``openai``)
    - a blank ``model_prefix`` gets the per-kind default
    - a blank ``name`` is derived from the prefix (``"ollama/"`` → ``"ollama"``)
    - a blank ``base_url`` on the chatgpt kind points at chatgpt.com
    """
    kind = ProviderKind.parse(provider.kind)
    update: dict[str, object] = {"kind": kind.value}

    prefix = provider.model_prefix
    if not prefix.strip():
        prefix = DEFAULT_MODEL_PREFIXES.get(kind, FALLBACK_MODEL_PREFIX)
        update["model_prefix"] = prefix
    if not provider.name.strip():
        update["name"] = prefix.removesuffix("/")
    if not provider.base_url.strip() and kind is ProviderKind.CHATGPT:
        update["base_url"] = CHATGPT_BASE_URL

    return provider.model_copy(update=update)


def same_provider(a: Provider, b: Provider) -> bool:
    """Whether *b* should replace *a* on upsert.

    Identity is decided by name, then by model prefix, then by the
    (kind, base_url) pair — the first key both records carry wins.
    """
    if a.name.strip() and b.name.strip():
        return a.name == b.name
    if a.model_prefix.strip() and b.model_prefix.strip():
        return a.model_prefix == b.model_prefix
    return a.kind == b.kind and a.base_url == b.base_url
