"""Ollama translator — native ``/api/chat`` in whole-response mode."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from chatmock.llm.base import BaseTranslator
from chatmock.models.schemas import CompletionRequest, CompletionResponse, Message, Usage, WireModel


class OllamaChatResponse(WireModel):
    """The subset of Ollama's non-streaming chat reply that we translate."""

    model: str = ""
    message: Message = Field(default_factory=Message)
    prompt_eval_count: int = 0
    eval_count: int = 0


class OllamaTranslator(BaseTranslator):
    path = "/api/chat"

    def build_payload(self, request: CompletionRequest, model: str) -> dict[str, Any]:
        return {
            "model": model,
            "messages": [m.model_dump() for m in request.messages],
            "stream": False,
        }

    def parse_response(self, body: bytes, model: str) -> CompletionResponse:
        native = OllamaChatResponse.model_validate_json(body)
        usage = Usage(
            prompt_tokens=native.prompt_eval_count,
            completion_tokens=native.eval_count,
            total_tokens=native.prompt_eval_count + native.eval_count,
        )
        # Ollama reports the model it actually ran; keep that.
        return self.completion(
            id="chatcmpl-ollama",
            model=native.model,
            message=native.message,
            usage=usage,
        )
