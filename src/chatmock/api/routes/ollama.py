"""Ollama-compatible API routes, so Ollama clients can point at ChatMock."""

from __future__ import annotations

import json
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from chatmock.api.deps import get_orchestrator, get_registry, run_until_disconnect
from chatmock.api.routes.models import build_models_response
from chatmock.models.schemas import CompletionRequest, OllamaChatRequest, OllamaShowRequest
from chatmock.orchestrator import CompletionOrchestrator
from chatmock.providers.registry import ProviderRegistry

router = APIRouter()

OLLAMA_VERSION = "0.1.0-chatmock"


@router.post("/chat")
async def ollama_chat(
    data: OllamaChatRequest,
    request: Request,
    orchestrator: CompletionOrchestrator = Depends(get_orchestrator),
):
    """Ollama ``/api/chat``.

    With ``stream: true`` the whole reply is sent as one NDJSON content
    line followed by the ``done`` line; there is no incremental streaming.
    """
    chat = CompletionRequest(model=data.model, messages=data.messages)
    resp = await run_until_disconnect(request, orchestrator.run_completion(chat))
    model = resp.model if resp.model.strip() else orchestrator.mock_model
    message = {"role": "assistant", "content": resp.content}

    if data.stream:
        lines = [
            {"model": model, "message": message, "done": False},
            {"model": model, "done": True},
        ]
        body = "".join(json.dumps(line) + "\n" for line in lines)
        return Response(content=body, media_type="application/x-ndjson")

    return {
        "model": model,
        "created_at": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        "message": message,
        "done": True,
    }


@router.get("/tags")
async def ollama_tags(
    registry: ProviderRegistry = Depends(get_registry),
    orchestrator: CompletionOrchestrator = Depends(get_orchestrator),
):
    listing = build_models_response(registry, orchestrator.mock_model)
    return {"models": [{"name": m.id, "model": m.id} for m in listing.data]}


@router.post("/show")
async def ollama_show(data: OllamaShowRequest | None = None):
    name = data.name if data else ""
    return {
        "modelfile": "# mock",
        "parameters": "",
        "template": "",
        "details": {"family": "chatmock"},
        "model_info": {"name": name},
    }


@router.get("/version")
async def ollama_version():
    return {"version": OLLAMA_VERSION}
