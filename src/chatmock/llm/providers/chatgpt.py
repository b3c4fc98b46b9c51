"""ChatGPT backend translator (``/backend-api/codex/responses``).

The backend speaks the Responses API: the conversation goes out as
``input`` items and the reply text has to be dug out of the response body.
Token usage is not reported, so the canonical usage stays zero.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from chatmock.llm.base import BaseTranslator
from chatmock.models.schemas import CompletionRequest, CompletionResponse, Message

logger = logging.getLogger(__name__)


def extract_output_text(body: bytes) -> str:
    """Pull the assistant text out of a Responses API body.

    Tried in order:

    1. a top-level ``output_text`` string, when non-blank;
    2. every ``text`` string under ``output[*].content[*]``, in order,
       joined with newlines and trimmed.

    Returns ``""`` when neither yields anything, including for bodies that
    are not JSON objects.
    """
    try:
        data = json.loads(body)
    except ValueError:
        logger.debug("ChatGPT response is not JSON; no text extracted")
        return ""
    if not isinstance(data, dict):
        return ""

    output_text = data.get("output_text")
    # A blank output_text counts as missing and falls through to the walk.
    if isinstance(output_text, str) and output_text.strip():
        return output_text

    output = data.get("output")
    if not isinstance(output, list):
        return ""
    chunks: list[str] = []
    for item in output:
        content = item.get("content") if isinstance(item, dict) else None
        if not isinstance(content, list):
            continue
        for part in content:
            text = part.get("text") if isinstance(part, dict) else None
            if isinstance(text, str):
                chunks.append(text)
    return "\n".join(chunks).strip()


class ChatGPTTranslator(BaseTranslator):
    path = "/backend-api/codex/responses"

    def build_payload(self, request: CompletionRequest, model: str) -> dict[str, Any]:
        input_items = [
            {
                "role": m.role,
                "content": [{"type": "input_text", "text": m.content}],
            }
            for m in request.messages
        ]
        return {"model": model, "input": input_items, "stream": False}

    def parse_response(self, body: bytes, model: str) -> CompletionResponse:
        return self.completion(
            id="chatcmpl-chatgpt",
            model=model,
            message=Message(role="assistant", content=extract_output_text(body)),
        )
