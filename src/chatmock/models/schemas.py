"""Pydantic schemas for the canonical chat shapes and API payloads."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from chatmock.providers.base import Provider
from chatmock.rules.store import Rule


# ── Canonical chat shapes ─────────────────────────────────────────────────────


class WireModel(BaseModel):
    """Base for shapes decoded from other servers.

    JSON ``null`` fields take the field default (``"content": null`` on
    tool-call replies, ``"usage": null`` from some OpenAI-compatible
    servers).
    """

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Message(WireModel):
    role: str = ""
    content: str = ""


class CompletionRequest(BaseModel):
    model: str = ""
    messages: list[Message] = []
    temperature: float = 0.0


class Choice(WireModel):
    index: int = 0
    finish_reason: str = ""
    message: Message = Field(default_factory=Message)


class Usage(WireModel):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class CompletionResponse(WireModel):
    """Canonical chat completion (OpenAI ``chat.completion`` shape)."""

    id: str = ""
    object: str = "chat.completion"
    created: int = 0
    model: str = ""
    choices: list[Choice] = []
    usage: Usage = Field(default_factory=Usage)

    @property
    def content(self) -> str:
        """Text of the first choice, or ``""`` when there is none."""
        if not self.choices:
            return ""
        return self.choices[0].message.content


# ── Models listing ────────────────────────────────────────────────────────────


class ModelInfo(BaseModel):
    id: str
    object: str = "model"
    created: int
    owned_by: str


class ModelsResponse(BaseModel):
    object: str = "list"
    data: list[ModelInfo]


# ── Compatibility endpoints ───────────────────────────────────────────────────


class TextCompletionRequest(BaseModel):
    model: str = ""
    prompt: str = ""


class ResponsesRequest(BaseModel):
    model: str = ""
    input: Any = None


class ResponsesResponse(BaseModel):
    id: str
    object: str = "response"
    created_at: int
    model: str
    output_text: str


class OllamaChatRequest(BaseModel):
    model: str = ""
    messages: list[Message] = []
    stream: bool = False


class OllamaShowRequest(BaseModel):
    name: str = ""


# ── Admin ─────────────────────────────────────────────────────────────────────


class RulesPayload(BaseModel):
    rules: list[Rule] = []


class ProvidersPayload(BaseModel):
    """Either a single provider to upsert or a full replacement list."""

    provider: Provider | None = None
    providers: list[Provider] = []
