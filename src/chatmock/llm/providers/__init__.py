"""Upstream protocol translators, one per provider kind.

- OpenAITranslator  — OpenAI-compatible ``/v1/chat/completions`` (openai, codex)
- OllamaTranslator  — Ollama ``/api/chat``
- ChatGPTTranslator — ChatGPT backend ``/backend-api/codex/responses``

Supporting a new upstream family means adding a translator and a
:class:`~chatmock.providers.base.ProviderKind` entry in ``TRANSLATORS``.
"""

from __future__ import annotations

from chatmock.llm.base import BaseTranslator
from chatmock.llm.providers.chatgpt import ChatGPTTranslator
from chatmock.llm.providers.ollama import OllamaTranslator
from chatmock.llm.providers.openai import OpenAITranslator
from chatmock.providers.base import ProviderKind

TRANSLATORS: dict[ProviderKind, BaseTranslator] = {
    ProviderKind.OPENAI: OpenAITranslator(),
    ProviderKind.CODEX: OpenAITranslator(),
    ProviderKind.OLLAMA: OllamaTranslator(),
    ProviderKind.CHATGPT: ChatGPTTranslator(),
}


def get_translator(kind: ProviderKind) -> BaseTranslator:
    """Return the translator for *kind*."""
    return TRANSLATORS[kind]


__all__ = [
    "ChatGPTTranslator",
    "OllamaTranslator",
    "OpenAITranslator",
    "TRANSLATORS",
    "get_translator",
]
