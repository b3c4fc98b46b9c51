"""OpenAI-compatible completion API routes."""

from __future__ import annotations

import time
from typing import Any

from fastapi import APIRouter, Depends, Request

from chatmock.api.deps import get_orchestrator, run_until_disconnect
from chatmock.models.schemas import (
    CompletionRequest,
    CompletionResponse,
    Message,
    ResponsesRequest,
    ResponsesResponse,
    TextCompletionRequest,
)
from chatmock.orchestrator import CompletionOrchestrator

router = APIRouter()


def flatten_input(value: Any) -> str:
    """Reduce a Responses API ``input`` value to plain text.

    Strings pass through; lists are flattened item by item and joined with
    spaces; objects contribute their ``text`` string, else their flattened
    ``content``. Anything else is empty.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return " ".join(flatten_input(item) for item in value).strip()
    if isinstance(value, dict):
        text = value.get("text")
        if isinstance(text, str):
            return text
        if "content" in value:
            return flatten_input(value["content"])
    return ""


@router.post("/chat/completions", response_model=CompletionResponse)
async def chat_completions(
    data: CompletionRequest,
    request: Request,
    orchestrator: CompletionOrchestrator = Depends(get_orchestrator),
):
    """Canonical chat completion — proxied or mocked."""
    return await run_until_disconnect(request, orchestrator.run_completion(data))


@router.post("/completions")
async def completions(
    data: TextCompletionRequest,
    request: Request,
    orchestrator: CompletionOrchestrator = Depends(get_orchestrator),
):
    """Legacy text completion, answered as a single-message chat."""
    chat = CompletionRequest(
        model=data.model,
        messages=[Message(role="user", content=data.prompt)],
    )
    resp = await run_until_disconnect(request, orchestrator.run_completion(chat))
    return {
        "id": resp.id,
        "object": "text_completion",
        "created": resp.created,
        "model": resp.model,
        "choices": [{"index": 0, "text": resp.content, "finish_reason": "stop"}],
    }


@router.post("/responses", response_model=ResponsesResponse)
async def responses(
    data: ResponsesRequest,
    request: Request,
    orchestrator: CompletionOrchestrator = Depends(get_orchestrator),
):
    """Responses API, answered as a single user message built from ``input``."""
    chat = CompletionRequest(
        model=data.model,
        messages=[Message(role="user", content=flatten_input(data.input))],
    )
    resp = await run_until_disconnect(request, orchestrator.run_completion(chat))
    return ResponsesResponse(
        id="resp-mock",
        created_at=int(time.time()),
        model=resp.model,
        output_text=resp.content,
    )
