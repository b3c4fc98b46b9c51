"""OpenAI-compatible translator (also used for the codex kind)."""

from __future__ import annotations

from typing import Any

from chatmock.llm.base import BaseTranslator
from chatmock.models.schemas import CompletionRequest, CompletionResponse


class OpenAITranslator(BaseTranslator):
    """Pass-through translator: the upstream already speaks the canonical shape."""

    path = "/v1/chat/completions"

    def build_payload(self, request: CompletionRequest, model: str) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "model": model,
            "messages": [m.model_dump() for m in request.messages],
        }
        if request.temperature:
            payload["temperature"] = request.temperature
        return payload

    def parse_response(self, body: bytes, model: str) -> CompletionResponse:
        return CompletionResponse.model_validate_json(body)
